"""Structural checks and text sizing for the canvas node tree."""

from __future__ import annotations

from collections import deque
from typing import List, Tuple

from .computed_size import (
    ComputedSize,
    ComputedSizeError,
    InheritingLeafNode,
    MissingSize,
    MissingTransform,
    NodeTree,
)


def compliance_problems(tree: NodeTree, root: str) -> List[ComputedSizeError]:
    """Return every invariant violation found below ``root``.

    Each descendant must carry both a transform and a computed size, and a
    leaf node may not inherit its size. Descendants are visited breadth first.
    The root node itself is not checked.
    """
    if root not in tree:
        raise KeyError(f"canvas root {root!r} not found")

    problems: List[ComputedSizeError] = []
    queue = deque(tree.children_of(root))
    while queue:
        name = queue.popleft()
        children = tree.children_of(name)
        queue.extend(children)

        node = tree[name]
        if node.size is None:
            problems.append(MissingSize(name))
            continue
        if node.transform is None:
            problems.append(MissingTransform(name))
            continue
        if not children and node.size.is_inherit:
            problems.append(InheritingLeafNode(name))
    return problems


def text_computed_size(
    current: ComputedSize, logical_size: Tuple[float, float]
) -> ComputedSize:
    """Return the computed size of a text node after its layout changed.

    A zero logical size means "unknown", so a node that is not yet static
    keeps its current size; otherwise the layout size becomes its static size.
    """
    width, height = logical_size
    if width == 0.0 and height == 0.0 and not current.is_static:
        return current
    return ComputedSize.static(width, height)