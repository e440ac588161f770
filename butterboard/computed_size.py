"""Computed sizes of canvas nodes and the tree that resolves them."""

from __future__ import annotations

import enum
import math
from dataclasses import dataclass, field, replace
from typing import Dict, Iterable, List, Optional, Tuple

Vec2 = Tuple[float, float]
Vec3 = Tuple[float, float, float]


class _Kind(enum.Enum):
    PENDING = "pending"
    INHERIT = "inherit"
    STATIC = "static"


@dataclass(frozen=True)
class ComputedSize:
    """The size of a node: pending, inherited from its children, or static.

    In any tree of nodes, every node must carry a computed size, and a leaf
    node may not inherit its size.
    """

    kind: _Kind = _Kind.PENDING
    value: Optional[Vec2] = None

    @classmethod
    def pending(cls) -> "ComputedSize":
        """A size that will be known once other data is available."""
        return cls(_Kind.PENDING)

    @classmethod
    def inherit(cls) -> "ComputedSize":
        """A size taken from the node's children."""
        return cls(_Kind.INHERIT)

    @classmethod
    def static(cls, width: float, height: float) -> "ComputedSize":
        """A size known for the node itself."""
        return cls(_Kind.STATIC, (float(width), float(height)))

    @property
    def is_pending(self) -> bool:
        return self.kind is _Kind.PENDING

    @property
    def is_inherit(self) -> bool:
        return self.kind is _Kind.INHERIT

    @property
    def is_static(self) -> bool:
        return self.kind is _Kind.STATIC

    def size(self) -> Optional[Vec2]:
        """Return the static size, or ``None`` for pending and inherited sizes."""
        return self.value if self.is_static else None

    def transformed(self, transform: "Transform") -> "ComputedSize":
        """Return the bounding size after applying the transform's scale and rotation.

        Pending and inherited sizes are returned unchanged.
        """
        if not self.is_static:
            return self
        width, height = self.value
        sx = width * transform.scale[0]
        sy = height * transform.scale[1]
        corners = [
            (-sx / 2.0, -sy / 2.0),
            (sx / 2.0, -sy / 2.0),
            (sx / 2.0, sy / 2.0),
            (-sx / 2.0, sy / 2.0),
        ]
        cos, sin = math.cos(transform.rotation), math.sin(transform.rotation)
        rotated = [(x * cos - y * sin, x * sin + y * cos) for x, y in corners]
        xs = [x for x, _ in rotated]
        ys = [y for _, y in rotated]
        return ComputedSize.static(max(xs) - min(xs), max(ys) - min(ys))


@dataclass(frozen=True)
class Transform:
    """Local placement of a node: translation, rotation about z (radians), scale."""

    translation: Vec3 = (0.0, 0.0, 0.0)
    rotation: float = 0.0
    scale: Vec3 = (1.0, 1.0, 1.0)


@dataclass(frozen=True)
class Padding:
    """Extra space around a node, added to its static or inherited size."""

    left: float = 0.0
    right: float = 0.0
    top: float = 0.0
    bottom: float = 0.0

    def with_bottom(self, bottom: float) -> "Padding":
        """Return a copy with the bottom padding replaced."""
        return replace(self, bottom=bottom)


class ComputedSizeError(Exception):
    """Raised when a node tree violates the computed size invariants."""

    def __init__(self, node: str, message: str) -> None:
        super().__init__(message)
        self.node = node


class MissingSize(ComputedSizeError):
    def __init__(self, node: str) -> None:
        super().__init__(node, f"node expected to have computed size: {node!r}")


class InheritingLeafNode(ComputedSizeError):
    def __init__(self, node: str) -> None:
        super().__init__(node, f"leaf node expected to have static computed size: {node!r}")


class MissingChildren(ComputedSizeError):
    def __init__(self, node: str) -> None:
        super().__init__(
            node, f"inheriting non-leaf node without children to inherit from: {node!r}"
        )


class MissingTransform(ComputedSizeError):
    def __init__(self, node: str) -> None:
        super().__init__(node, f"node must have `Transform` component: {node!r}")


class ZeroWidthOrHeight(ComputedSizeError):
    def __init__(self, node: str, size: Vec2) -> None:
        super().__init__(
            node,
            f"static computed size must have non-zero width/height (was: {size!r}): {node!r}",
        )
        self.size = size


@dataclass
class Node:
    """One node of a canvas tree; ``None`` size or transform means it is missing."""

    name: str
    size: Optional[ComputedSize] = field(default_factory=ComputedSize.pending)
    parent: Optional[str] = None
    transform: Optional[Transform] = field(default_factory=Transform)
    padding: Optional[Padding] = None
    children: List[str] = field(default_factory=list)


class NodeTree:
    """A hierarchy of named nodes whose sizes and positions can be resolved."""

    def __init__(self) -> None:
        self._nodes: Dict[str, Node] = {}

    def __contains__(self, name: object) -> bool:
        return name in self._nodes

    def __iter__(self):
        return iter(self._nodes)

    def __len__(self) -> int:
        return len(self._nodes)

    def __getitem__(self, name: str) -> Node:
        return self._nodes[name]

    def add(
        self,
        name: str,
        size: Optional[ComputedSize] = ComputedSize(),
        parent: Optional[str] = None,
        transform: Optional[Transform] = Transform(),
        padding: Optional[Padding] = None,
    ) -> Node:
        """Add a node, optionally as the last child of ``parent``."""
        if name in self._nodes:
            raise ValueError(f"node {name!r} already exists")
        if parent is not None and parent not in self._nodes:
            raise ValueError(f"unknown parent node {parent!r}")
        node = Node(name, size, parent, transform, padding)
        self._nodes[name] = node
        if parent is not None:
            self._nodes[parent].children.append(name)
        return node

    def children_of(self, name: str) -> List[str]:
        """Return the names of the node's children, in insertion order."""
        return list(self._nodes[name].children)

    def parent_of(self, name: str) -> Optional[str]:
        """Return the name of the node's parent, or ``None`` for a root."""
        return self._nodes[name].parent

    def _padding(self, name: str) -> Padding:
        return self._nodes[name].padding or Padding()

    def _size(self, name: str) -> ComputedSize:
        node = self._nodes.get(name)
        if node is None or node.size is None:
            raise MissingSize(name)
        return node.size

    def _global_transform(self, name: str) -> Transform:
        node = self._nodes[name]
        local = node.transform or Transform()
        if node.parent is None:
            return local
        parent = self._global_transform(node.parent)
        px, py, pz = parent.translation
        lx, ly, lz = (a * b for a, b in zip(local.translation, parent.scale))
        cos, sin = math.cos(parent.rotation), math.sin(parent.rotation)
        return Transform(
            translation=(px + lx * cos - ly * sin, py + lx * sin + ly * cos, pz + lz),
            rotation=parent.rotation + local.rotation,
            scale=tuple(a * b for a, b in zip(parent.scale, local.scale)),
        )

    def global_position(self, name: str) -> Vec3:
        """Return the node's translation on the canvas.

        Ancestors without a transform are treated as untransformed.
        """
        node = self._nodes.get(name)
        if node is None or node.transform is None:
            raise MissingTransform(name)
        return self._global_transform(name).translation

    def size_of(self, name: str) -> Optional[Vec2]:
        """Return the node's size including padding, or ``None`` while pending."""
        padding = self._padding(name) if name in self._nodes else Padding()
        computed = self._size(name)

        if computed.is_pending:
            return None
        if computed.is_static:
            width, height = computed.value
            if width == 0.0 or height == 0.0:
                raise ZeroWidthOrHeight(name, computed.value)
            return (
                width + padding.left + padding.right,
                height + padding.top + padding.bottom,
            )

        children = self._nodes[name].children
        if not children:
            raise InheritingLeafNode(name)

        single_child = len(children) == 1
        min_x = min_y = math.inf
        max_x = max_y = -math.inf
        for child in children:
            child_size = self.size_of(child)
            if child_size is None:
                return None
            cw, ch = child_size
            if single_child:
                return (
                    cw + padding.left + padding.right,
                    ch + padding.top + padding.bottom,
                )
            transform = self._nodes[child].transform
            if transform is None:
                raise MissingTransform(child)
            tx, ty = transform.translation[0], transform.translation[1]
            min_x = min(min_x, tx - cw / 2.0)
            min_y = min(min_y, ty - ch / 2.0)
            max_x = max(max_x, tx + cw / 2.0)
            max_y = max(max_y, ty + ch / 2.0)

        min_x -= padding.left
        min_y -= padding.bottom
        max_x += padding.right
        max_y += padding.top
        return (max_x - min_x, max_y - min_y)

    def global_translation_of(self, name: str) -> Optional[Vec3]:
        """Return the centre of the node on the canvas, or ``None`` while pending."""
        computed = self._size(name)

        if computed.is_pending:
            return None
        if computed.is_static:
            x, y, z = self.global_position(name)
            padding = self._padding(name)
            return (
                x + (padding.right - padding.left) / 2.0,
                y + (padding.top - padding.bottom) / 2.0,
                z,
            )

        children = self._nodes[name].children
        if not children:
            raise MissingChildren(name)

        min_x = min_y = math.inf
        max_x = max_y = -math.inf
        for child in children:
            translation = self.global_translation_of(child)
            if translation is None:
                return None
            size = self.size_of(child)
            if size is None:
                return None
            padding = self._padding(child)
            tx, ty = translation[0], translation[1]
            min_x = min(min_x, tx - size[0] / 2.0 - padding.left)
            min_y = min(min_y, ty - size[1] / 2.0 - padding.bottom)
            max_x = max(max_x, tx + size[0] / 2.0 + padding.right)
            max_y = max(max_y, ty + size[1] / 2.0 + padding.top)

        return ((min_x + max_x) / 2.0, (min_y + max_y) / 2.0, 0.0)

    def inheriting_ancestors(self, name: str) -> List[str]:
        """Return the chain of ancestors that inherit their size, nearest first."""
        ancestors: List[str] = []
        parent = self._nodes[name].parent
        while parent is not None:
            size = self._nodes[parent].size
            if size is None or not size.is_inherit:
                break
            ancestors.append(parent)
            parent = self._nodes[parent].parent
        return ancestors


@dataclass
class SizeUpdate:
    """A change of a node's computed size and the inheriting ancestors it affects."""

    source: str
    ancestors: List[str] = field(default_factory=list)
    size: Optional[Vec2] = None
    translation: Optional[Vec3] = None

    def contains(self, name: str) -> bool:
        """Whether the node is the source of the update or one of its ancestors."""
        return self.source == name or name in self.ancestors


def size_updates(tree: NodeTree, changed: Iterable[str]) -> List[SizeUpdate]:
    """Build one update for each node whose computed size changed."""
    return [
        SizeUpdate(
            source=source,
            ancestors=tree.inheriting_ancestors(source),
            size=tree.size_of(source),
            translation=tree.global_translation_of(source),
        )
        for source in changed
    ]