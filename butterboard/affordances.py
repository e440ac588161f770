"""Numbering and vertical stacking of the affordances listed in a place."""

from __future__ import annotations

from typing import Dict, Iterable, List, Mapping, Optional


def number_label(place_index: int, indices: Mapping[int, int], level: int) -> str:
    """Return the number shown before an affordance title.

    ``indices`` maps each nesting level to how many affordances of that level
    were already numbered in the place. The label starts with the place's own
    number, then gives the current count for each enclosing level and the next
    count for ``level`` itself, e.g. ``"1.2.1. "``.
    """
    if place_index < 0:
        raise ValueError("place index must not be negative")
    if level < 0:
        raise ValueError("nesting level must not be negative")

    parts = [str(place_index + 1)]
    for lvl in range(level + 1):
        count = indices.get(lvl, 0) + 1
        if lvl != level:
            count = max(count - 1, 0)
        parts.append(str(count))
    return ".".join(parts) + ". "


def affordance_labels(place_index: int, levels: Iterable[int], show: bool) -> List[str]:
    """Return the number labels for a place's affordances, given their nesting levels.

    Affordances are numbered in order; each level keeps its own counter, which
    is not reset when a shallower level follows. When ``show`` is false every
    label is empty.
    """
    levels = list(levels)
    if not show:
        return ["" for _ in levels]

    indices: Dict[int, int] = {}
    labels: List[str] = []
    for level in levels:
        indices.setdefault(level, 0)
        labels.append(number_label(place_index, indices, level))
        indices[level] += 1
    return labels


def stack_offsets(
    header_height: float, heights: Iterable[Optional[float]]
) -> List[Optional[float]]:
    """Return the vertical translation of each affordance stacked below a header.

    ``heights`` holds the affordances' heights in index order; ``None`` marks an
    affordance whose size is still pending. Such an affordance keeps its
    position (``None`` in the result) and takes no room in the stack.
    """
    offsets: List[Optional[float]] = []
    stacked = float(header_height)
    for height in heights:
        if height is None:
            offsets.append(None)
            continue
        offsets.append(-stacked)
        stacked += height
    return offsets