import math

import pytest

from butterboard.computed_size import (
    ComputedSize,
    ComputedSizeError,
    InheritingLeafNode,
    MissingChildren,
    MissingSize,
    MissingTransform,
    NodeTree,
    Padding,
    SizeUpdate,
    Transform,
    ZeroWidthOrHeight,
    size_updates,
)


def test_static_size_returns_dimensions():
    assert ComputedSize.static(3, 4).size() == (3.0, 4.0)


def test_pending_and_inherit_have_no_size():
    assert ComputedSize.pending().size() is None
    assert ComputedSize.inherit().size() is None
    assert ComputedSize() == ComputedSize.pending()


def test_transformed_leaves_pending_and_inherit_unchanged():
    t = Transform(rotation=1.0, scale=(2.0, 2.0, 1.0))
    assert ComputedSize.pending().transformed(t) == ComputedSize.pending()
    assert ComputedSize.inherit().transformed(t) == ComputedSize.inherit()


def test_transformed_identity_keeps_size():
    size = ComputedSize.static(30, 12)
    assert size.transformed(Transform()) == size


def test_transformed_quarter_turn_swaps_dimensions():
    w, h = 30.0, 12.0
    result = ComputedSize.static(w, h).transformed(Transform(rotation=math.pi / 2))
    assert result.size() == pytest.approx((h, w))


def test_transformed_scales_dimensions():
    w, h, sx, sy = 30.0, 12.0, 2.0, 0.5
    result = ComputedSize.static(w, h).transformed(Transform(scale=(sx, sy, 1.0)))
    assert result.size() == pytest.approx((w * sx, h * sy))


def test_padding_with_bottom_keeps_other_sides():
    padding = Padding(left=1.0, right=2.0, top=3.0)
    changed = padding.with_bottom(7.0)
    assert changed == Padding(left=1.0, right=2.0, top=3.0, bottom=7.0)
    assert padding.bottom == 0.0


def test_size_of_static_adds_padding():
    tree = NodeTree()
    pad = Padding(left=1.0, right=2.0, top=3.0, bottom=4.0)
    tree.add("a", ComputedSize.static(10, 20), padding=pad)
    assert tree.size_of("a") == (10 + 1 + 2, 20 + 3 + 4)


def test_size_of_zero_width_raises():
    tree = NodeTree()
    tree.add("a", ComputedSize.static(0, 20))
    with pytest.raises(ZeroWidthOrHeight) as info:
        tree.size_of("a")
    assert info.value.node == "a"
    assert info.value.size == (0.0, 20.0)


def test_size_of_pending_is_none():
    tree = NodeTree()
    tree.add("a")
    assert tree.size_of("a") is None
    assert tree.global_translation_of("a") is None


def test_missing_size_errors():
    tree = NodeTree()
    tree.add("a", None)
    with pytest.raises(MissingSize):
        tree.size_of("a")
    with pytest.raises(MissingSize):
        tree.size_of("unknown")


def test_inheriting_leaf_raises():
    tree = NodeTree()
    tree.add("a", ComputedSize.inherit())
    with pytest.raises(InheritingLeafNode):
        tree.size_of("a")
    with pytest.raises(MissingChildren):
        tree.global_translation_of("a")


def test_single_child_inherits_size_with_parent_padding():
    tree = NodeTree()
    tree.add("p", ComputedSize.inherit(), padding=Padding(bottom=5.0))
    tree.add("c", ComputedSize.static(10, 20), parent="p", transform=Transform((100.0, 0.0, 0.0)))
    assert tree.size_of("p") == (10.0, 20.0 + 5.0)


def test_multiple_children_bounding_box():
    tree = NodeTree()
    tree.add("p", ComputedSize.inherit())
    tree.add("a", ComputedSize.static(10, 10), parent="p", transform=Transform((-10.0, 0.0, 0.0)))
    tree.add("b", ComputedSize.static(10, 10), parent="p", transform=Transform((10.0, 0.0, 0.0)))
    width, height = tree.size_of("p")
    assert width == (10.0 + 5.0) - (-10.0 - 5.0)
    assert height == 10.0


def test_multiple_children_missing_transform():
    tree = NodeTree()
    tree.add("p", ComputedSize.inherit())
    tree.add("a", ComputedSize.static(10, 10), parent="p", transform=None)
    tree.add("b", ComputedSize.static(10, 10), parent="p")
    with pytest.raises(MissingTransform) as info:
        tree.size_of("p")
    assert info.value.node == "a"


def test_pending_child_makes_parent_pending():
    tree = NodeTree()
    tree.add("p", ComputedSize.inherit())
    tree.add("a", ComputedSize.static(10, 10), parent="p")
    tree.add("b", ComputedSize.pending(), parent="p")
    assert tree.size_of("p") is None


def test_global_position_composes_translations():
    tree = NodeTree()
    tree.add("p", ComputedSize.inherit(), transform=Transform((5.0, -3.0, 1.0)))
    tree.add("c", ComputedSize.static(1, 1), parent="p", transform=Transform((1.0, 2.0, 0.5)))
    assert tree.global_position("c") == pytest.approx((5.0 + 1.0, -3.0 + 2.0, 1.0 + 0.5))


def test_global_position_missing_transform():
    tree = NodeTree()
    tree.add("a", ComputedSize.static(1, 1), transform=None)
    with pytest.raises(MissingTransform):
        tree.global_position("a")
    with pytest.raises(MissingTransform):
        tree.global_translation_of("a")


def test_global_translation_static_shifts_by_padding():
    tree = NodeTree()
    tree.add(
        "a",
        ComputedSize.static(10, 10),
        transform=Transform((2.0, 4.0, 1.0)),
        padding=Padding(right=6.0, bottom=8.0),
    )
    assert tree.global_translation_of("a") == pytest.approx((2.0 + 6.0 / 2, 4.0 - 8.0 / 2, 1.0))


def test_global_translation_inherit_is_symmetric_center():
    tree = NodeTree()
    tree.add("p", ComputedSize.inherit(), transform=Transform((3.0, 7.0, 0.0)))
    tree.add("a", ComputedSize.static(4, 4), parent="p", transform=Transform((-5.0, 0.0, 0.0)))
    tree.add("b", ComputedSize.static(4, 4), parent="p", transform=Transform((5.0, 0.0, 0.0)))
    assert tree.global_translation_of("p") == pytest.approx((3.0, 7.0, 0.0))


def test_inheriting_ancestors_stop_at_first_non_inheriting():
    tree = NodeTree()
    tree.add("root", ComputedSize.inherit())
    tree.add("fixed", ComputedSize.static(5, 5), parent="root")
    tree.add("mid", ComputedSize.inherit(), parent="fixed")
    tree.add("top", ComputedSize.inherit(), parent="mid")
    tree.add("leaf", ComputedSize.static(1, 1), parent="top")
    assert tree.inheriting_ancestors("leaf") == ["top", "mid"]
    assert tree.inheriting_ancestors("root") == []


def test_tree_relations_and_add_errors():
    tree = NodeTree()
    tree.add("p", ComputedSize.inherit())
    tree.add("a", ComputedSize.static(1, 1), parent="p")
    tree.add("b", ComputedSize.static(1, 1), parent="p")
    assert tree.children_of("p") == ["a", "b"]
    assert tree.parent_of("a") == "p"
    assert tree.parent_of("p") is None
    with pytest.raises(ValueError):
        tree.add("a")
    with pytest.raises(ValueError):
        tree.add("z", parent="nowhere")


def test_size_updates_report_size_translation_and_ancestors():
    tree = NodeTree()
    tree.add("p", ComputedSize.inherit())
    tree.add("c", ComputedSize.static(10, 20), parent="p", transform=Transform((1.0, 2.0, 0.0)))
    (update,) = size_updates(tree, ["c"])
    assert update.source == "c"
    assert update.ancestors == ["p"]
    assert update.size == (10.0, 20.0)
    assert update.translation == pytest.approx((1.0, 2.0, 0.0))
    assert update.contains("p") and update.contains("c")
    assert not update.contains("other")


def test_size_updates_propagate_errors():
    tree = NodeTree()
    tree.add("a", ComputedSize.static(0, 0))
    with pytest.raises(ComputedSizeError):
        size_updates(tree, ["a"])


def test_size_update_contains_only_listed():
    update = SizeUpdate(source="s", ancestors=["x"])
    assert update.contains("x")
    assert not update.contains("y")


def test_error_messages_name_the_node():
    assert "leaf node expected to have static computed size" in str(InheritingLeafNode("n"))
    assert "node must have `Transform` component" in str(MissingTransform("n"))
    assert isinstance(MissingChildren("n"), ComputedSizeError)