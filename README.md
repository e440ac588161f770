# butterboard

Layout rules for drawing *breadboards*, the place-and-affordance sketches
used to describe how a user moves through an application. The package works
out the sizes and centre points of nested canvas nodes, checks that a node
tree is well formed, numbers nested affordances, stacks them below a place
header, and holds a few small pieces of shared application state.

It has no dependencies outside the standard library.

## Modules

### `butterboard.computed_size`

- `ComputedSize` – the size of a node, made with `ComputedSize.pending()`,
  `ComputedSize.inherit()` or `ComputedSize.static(width, height)`.
  `size()` returns the static `(width, height)` or `None`;
  `transformed(transform)` returns the bounding size after the transform's
  scale and rotation (pending and inherited sizes are returned unchanged).
- `Transform` – translation, rotation about z in radians, and scale.
- `Padding` – left, right, top and bottom padding; `with_bottom(bottom)`
  returns a copy with a new bottom value.
- `NodeTree` – a hierarchy of named `Node`s:
  - `add(name, size, parent, transform, padding)` adds a node as the last
    child of `parent` (a duplicate name or unknown parent raises `ValueError`);
  - `children_of(name)` and `parent_of(name)`;
  - `global_position(name)` – the node's translation on the canvas;
  - `size_of(name)` – the size including padding, or `None` while any node it
    depends on is pending. An inheriting node with one child takes that child's
    size; with several children it takes their combined bounding box;
  - `global_translation_of(name)` – the centre of the node on the canvas, or
    `None` while pending;
  - `inheriting_ancestors(name)` – the chain of ancestors that inherit their
    size, nearest first.
- `SizeUpdate` and `size_updates(tree, changed)` – one update per changed
  node, holding its inheriting ancestors, size and translation;
  `SizeUpdate.contains(name)` tells whether a node is affected.
- Errors, all subclasses of `ComputedSizeError`: `MissingSize`,
  `InheritingLeafNode`, `MissingChildren`, `MissingTransform` and
  `ZeroWidthOrHeight` (a static size with zero width or height).

### `butterboard.canvas`

- `compliance_problems(tree, root)` – visits every descendant of `root`
  breadth first and returns a list of the `ComputedSizeError`s found: nodes
  without a size or transform, and leaf nodes that inherit their size. An
  unknown root raises `KeyError`.
- `text_computed_size(current, logical_size)` – the size of a text node after
  its layout changed. A zero logical size means "unknown" and leaves a
  non-static size as it is.

### `butterboard.affordances`

- `number_label(place_index, indices, level)` – the label shown before an
  affordance title, such as `"1.2.1. "`.
- `affordance_labels(place_index, levels, show)` – labels for all affordances
  of a place, given their nesting levels; all empty when `show` is false.
- `stack_offsets(header_height, heights)` – the vertical translation of each
  affordance below the header. A `None` height marks a pending affordance,
  which keeps its position and takes no room.

### `butterboard.state`

- `ForceRedraw` – a one-shot flag: `set()` requests a redraw, `reset()`
  clears it and returns whether one was pending.
- `Target` – the entity the camera is focused on; `set(entity)` and `reset()`.
- `load_file(path)` – reads a UTF-8 text file into a `FileLoaded` with its
  file name and contents, or returns `None` if the path is not a readable,
  decodable file.

## Example

```python
from butterboard.affordances import affordance_labels, stack_offsets
from butterboard.computed_size import ComputedSize, NodeTree, Padding

tree = NodeTree()
tree.add("place", ComputedSize.inherit())
tree.add(
    "title",
    ComputedSize.static(120, 20),
    parent="place",
    padding=Padding().with_bottom(10),
)
print(tree.size_of("place"))              # (120.0, 30.0)

print(affordance_labels(0, [0, 1, 1, 0], show=True))
# ['1.1. ', '1.1.1. ', '1.1.2. ', '1.2. ']

print(stack_offsets(40, [20, None, 30]))  # [-40.0, None, -60.0]
```

## What the package does not do

It has no model of a breadboard's places, components and connections, does
not read the breadboard description language or any JSON form of it, and
draws nothing: there is no window, camera or interactive canvas. It supplies
the sizing, checking, numbering and stacking rules such a program would use,
working on node names and plain numbers.

## Running the tests

Install the package with its `test` extra and run `pytest` from the project
directory.