import random

import pytest

from rbviz.binarytree import BinaryTree
from rbviz.redblack import RedBlackTree
from rbviz.settings import (
    X_PIVOT,
    Y_GAP,
    Y_PIVOT,
    DuplicateValueError,
    NodeNotFoundError,
    TreeFullError,
)


def _tree(*values):
    tree = BinaryTree()
    for value in values:
        tree.insert(value)
    return tree


def test_insert_keeps_sorted_order():
    tree = _tree(50, 20, 80, 10, 30, 70, 90)
    assert list(tree) == [10, 20, 30, 50, 70, 80, 90]
    assert len(tree) == 7


def test_contains():
    tree = _tree(5, 3, 8)
    assert 3 in tree
    assert 8 in tree
    assert 4 not in tree
    assert 1 not in BinaryTree()


def test_duplicate_raises():
    tree = _tree(5, 3)
    with pytest.raises(DuplicateValueError):
        tree.insert(3)
    assert len(tree) == 2


def test_full_raises():
    tree = BinaryTree(max_size=2)
    tree.insert(1)
    tree.insert(2)
    with pytest.raises(TreeFullError):
        tree.insert(3)
    assert list(tree) == [1, 2]


@pytest.mark.parametrize("victim", [10, 30, 20, 50, 80, 70, 90])
def test_delete_each_kind_of_node(victim):
    values = [50, 20, 80, 10, 30, 70, 90]
    tree = _tree(*values)
    tree.delete(victim)
    assert list(tree) == sorted(v for v in values if v != victim)
    assert victim not in tree
    assert len(tree) == len(values) - 1


def test_delete_root_with_one_child():
    tree = _tree(5, 9)
    tree.delete(5)
    assert list(tree) == [9]
    tree.delete(9)
    assert list(tree) == []


def test_delete_missing_raises():
    tree = _tree(5, 3)
    with pytest.raises(NodeNotFoundError):
        tree.delete(4)
    with pytest.raises(NodeNotFoundError):
        BinaryTree().delete(1)


def test_clear():
    tree = _tree(1, 2, 3)
    tree.clear()
    assert len(tree) == 0
    assert list(tree) == []
    assert tree.layout() == []


def test_random_operations_match_set():
    rng = random.Random(7)
    tree = BinaryTree()
    model = set()
    for _ in range(2000):
        value = rng.randrange(300)
        if rng.random() < 0.6:
            if value in model:
                with pytest.raises(DuplicateValueError):
                    tree.insert(value)
            else:
                tree.insert(value)
                model.add(value)
        else:
            if value in model:
                tree.delete(value)
                model.discard(value)
            else:
                with pytest.raises(NodeNotFoundError):
                    tree.delete(value)
        assert len(tree) == len(model)
    assert list(tree) == sorted(model)


def test_copy_from_keeps_shape():
    rb = RedBlackTree()
    for value in range(1, 40):
        rb.insert(value)
    tree = BinaryTree()
    tree.copy_from(rb)
    assert list(tree) == list(rb)
    rb_shape = [(n.label, n.x, n.y) for n in rb.layout() if n.label != "nil"]
    bst_shape = [(n.label, n.x, n.y) for n in tree.layout()]
    assert bst_shape == rb_shape


def test_copy_from_skips_existing_values():
    rb = RedBlackTree()
    for value in (1, 2, 3):
        rb.insert(value)
    tree = _tree(2)
    tree.copy_from(rb)
    assert list(tree) == [1, 2, 3]


def test_layout_root_and_children():
    tree = _tree(50, 20, 80)
    root, left, right = tree.layout()
    assert (root.label, root.x, root.y) == ("50", X_PIVOT, Y_PIVOT)
    assert (root.parent_x, root.parent_y) == (X_PIVOT, Y_PIVOT)
    assert left.label == "20" and right.label == "80"
    assert left.y == right.y == Y_PIVOT + Y_GAP
    assert left.x < root.x < right.x
    assert root.x - left.x == right.x - root.x
    assert (left.parent_x, left.parent_y) == (root.x, root.y)
    assert not any(n.red for n in (root, left, right))


def test_layout_padding_shifts_everything():
    tree = _tree(50, 20, 80, 10)
    plain = tree.layout()
    shifted = tree.layout(10, -5)
    assert [(n.x + 10, n.y - 5, n.parent_x + 10, n.parent_y - 5) for n in plain] == [
        (n.x, n.y, n.parent_x, n.parent_y) for n in shifted
    ]