"""A red-black tree of integers with checking and drawing layout."""

from __future__ import annotations

import enum
from collections.abc import Iterator

from .settings import (
    TREE_MAX,
    X_PIVOT,
    Y_GAP,
    Y_PIVOT,
    DoubleRedError,
    DrawnNode,
    DuplicateValueError,
    NodeNotFoundError,
    TreeFullError,
    UnbalancedError,
)


class Color(enum.IntEnum):
    BLACK = 0
    RED = 1


class _Node:
    __slots__ = ("data", "color", "parent", "left", "right")

    def __init__(self, data: int, nil: _Node | None) -> None:
        self.data = data
        self.color = Color.RED
        self.parent: _Node | None = None
        self.left = nil
        self.right = nil


class RedBlackTree:
    """Red-black tree holding distinct integers."""

    def __init__(self, max_size: int = TREE_MAX) -> None:
        self.max_size = max_size
        self._nil = _Node(0, None)
        self._nil.color = Color.BLACK
        self._root = self._nil
        self._size = 0

    # ---- modification -------------------------------------------------

    def insert(self, data: int) -> None:
        """Insert a value; raises on duplicates or when the tree is full."""
        if self._size >= self.max_size:
            raise TreeFullError(self.max_size)

        nil = self._nil
        if self._root is nil:
            self._root = _Node(data, nil)
            self._root.color = Color.BLACK
            self._size += 1
            return

        node = self._root
        while True:
            if node.data == data:
                raise DuplicateValueError(data)
            if node.data > data:
                if node.left is nil:
                    new = _Node(data, nil)
                    node.left = new
                    break
                node = node.left
            else:
                if node.right is nil:
                    new = _Node(data, nil)
                    node.right = new
                    break
                node = node.right

        new.parent = node
        self._fix_insert(new)
        self._size += 1

    def _fix_insert(self, node: _Node) -> None:
        while node.parent.color != Color.BLACK:
            parent = node.parent
            grand = parent.parent
            parent_left = parent is grand.left
            uncle = grand.right if parent_left else grand.left

            if uncle.color == Color.RED:
                parent.color = Color.BLACK
                uncle.color = Color.BLACK
                if grand is self._root:
                    break
                grand.color = Color.RED
                node = grand
                continue

            if parent_left:
                if node is parent.right:
                    self._rotate_left(parent)
                    node = node.left
                node.parent.color = Color.BLACK
                node.parent.parent.color = Color.RED
                self._rotate_right(node.parent.parent)
            else:
                if node is parent.left:
                    self._rotate_right(parent)
                    node = node.right
                node.parent.color = Color.BLACK
                node.parent.parent.color = Color.RED
                self._rotate_left(node.parent.parent)
            break

    def delete(self, data: int) -> None:
        """Remove a value; raises NodeNotFoundError if it is absent."""
        node = self._find(data)
        if node is None:
            raise NodeNotFoundError(data)

        nil = self._nil
        if node.left is nil and node.right is nil:
            if node is self._root:
                self._root = nil
            else:
                parent = node.parent
                if node is parent.left:
                    parent.left = nil
                else:
                    parent.right = nil
                if node.color == Color.BLACK:
                    self._fix_delete(nil, parent)
        elif node.left is nil or node.right is nil:
            child = node.right if node.left is nil else node.left
            if node is self._root:
                self._root = child
                child.parent = None
                child.color = Color.BLACK
            else:
                parent = node.parent
                child.parent = parent
                if node is parent.left:
                    parent.left = child
                else:
                    parent.right = child
                if node.color == Color.BLACK:
                    self._fix_delete(child, parent)
        else:
            alt = node.left
            while alt.right is not nil:
                alt = alt.right
            node.data = alt.data

            parent = alt.parent
            child = alt.left
            child.parent = parent
            if alt is parent.left:
                parent.left = child
            else:
                parent.right = child
            if alt.color == Color.BLACK:
                self._fix_delete(child, parent)

        self._size -= 1

    def _fix_delete(self, node: _Node, parent: _Node) -> None:
        while node.color != Color.RED:
            if node is parent.left:
                is_left = True
                sibling = parent.right
            else:
                is_left = False
                sibling = parent.left

            if sibling.color == Color.RED:
                sibling.color = Color.BLACK
                if is_left:
                    self._rotate_left(parent)
                else:
                    self._rotate_right(parent)
                parent.color = Color.RED
                continue

            if sibling.left.color == Color.BLACK and sibling.right.color == Color.BLACK:
                sibling.color = Color.RED
                if parent is self._root:
                    return
                node = parent
                parent = parent.parent
                continue

            if (
                is_left
                and sibling.left.color == Color.RED
                and sibling.right.color == Color.BLACK
            ):
                sibling.left.color = Color.BLACK
                sibling.color = Color.RED
                self._rotate_right(sibling)
            elif (
                not is_left
                and sibling.left.color == Color.BLACK
                and sibling.right.color == Color.RED
            ):
                sibling.right.color = Color.BLACK
                sibling.color = Color.RED
                self._rotate_left(sibling)

            if is_left and sibling.color == Color.BLACK and sibling.right.color == Color.RED:
                sibling.color = parent.color
                parent.color = Color.BLACK
                sibling.right.color = Color.BLACK
                self._rotate_left(parent)
                return
            if not is_left and sibling.color == Color.BLACK and sibling.left.color == Color.RED:
                sibling.color = parent.color
                parent.color = Color.BLACK
                sibling.left.color = Color.BLACK
                self._rotate_right(parent)
                return

        node.color = Color.BLACK

    def clear(self) -> None:
        """Remove every node."""
        self._root = self._nil
        self._size = 0

    def _rotate_left(self, node: _Node) -> None:
        pivot = node.right
        if pivot is self._nil:
            raise RuntimeError(f"Left Error: {node.data}")
        if node is self._root:
            self._root = pivot
            pivot.color = Color.BLACK
        elif node is node.parent.right:
            node.parent.right = pivot
        else:
            node.parent.left = pivot

        grandchild = pivot.left
        pivot.left = node
        pivot.parent = node.parent
        node.parent = pivot
        node.right = grandchild
        grandchild.parent = node

    def _rotate_right(self, node: _Node) -> None:
        pivot = node.left
        if pivot is self._nil:
            raise RuntimeError(f"Right Error: {node.data}")
        if node is self._root:
            self._root = pivot
            pivot.color = Color.BLACK
        elif node is node.parent.right:
            node.parent.right = pivot
        else:
            node.parent.left = pivot

        grandchild = pivot.right
        pivot.right = node
        pivot.parent = node.parent
        node.parent = pivot
        node.left = grandchild
        grandchild.parent = node

    # ---- queries ------------------------------------------------------

    def _find(self, data: int) -> _Node | None:
        node = self._root
        while node is not self._nil:
            if node.data == data:
                return node
            node = node.left if node.data > data else node.right
        return None

    def __contains__(self, data: object) -> bool:
        return self._find(data) is not None

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[int]:
        """Values in ascending order."""
        stack: list[_Node] = []
        node = self._root
        while stack or node is not self._nil:
            while node is not self._nil:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.data
            node = node.right

    def preorder(self) -> Iterator[int]:
        """Values in pre-order: node, left subtree, right subtree."""
        stack = [self._root]
        while stack:
            node = stack.pop()
            if node is self._nil:
                continue
            yield node.data
            stack.append(node.right)
            stack.append(node.left)

    def paths(self) -> list[tuple[int, int]]:
        """Black and red node counts on the path to each nil leaf, left to right."""
        result: list[tuple[int, int]] = []
        stack = [(self._root, 0, 0)]
        while stack:
            node, black, red = stack.pop()
            if node is self._nil:
                result.append((black + 1, red))
                continue
            if node.color == Color.BLACK:
                black += 1
            else:
                red += 1
            stack.append((node.right, black, red))
            stack.append((node.left, black, red))
        return result

    def format_paths(self) -> str:
        """The path counts as printed text, one line per leaf."""
        lines = "".join(
            f"Leaf {index}: black-{black}, red-{red}\n"
            for index, (black, red) in enumerate(self.paths())
        )
        return f"\n{lines}\n"

    def check(self) -> None:
        """Raise DoubleRedError or UnbalancedError if the tree breaks a rule."""
        leaf_index = 0
        expected_black = 0
        stack = [(self._root, 0, Color.BLACK)]
        while stack:
            node, black, prev_color = stack.pop()
            if node is self._nil:
                black += 1
                if expected_black and black != expected_black:
                    raise UnbalancedError(leaf_index)
                expected_black = black
                leaf_index += 1
                continue
            if node.color == Color.BLACK:
                black += 1
            elif prev_color == Color.RED:
                raise DoubleRedError(leaf_index, node.data)
            stack.append((node.right, black, node.color))
            stack.append((node.left, black, node.color))

    def layout(self, x_pad: int = 0, y_pad: int = 0) -> list[DrawnNode]:
        """Place every node, nil leaves included, for drawing."""
        drawn: list[DrawnNode] = []
        stack = [(self._root, X_PIVOT, Y_PIVOT, X_PIVOT, Y_PIVOT)]
        while stack:
            node, prev_x, prev_y, x, y = stack.pop()
            is_nil = node is self._nil
            drawn.append(
                DrawnNode(
                    label="nil" if is_nil else str(node.data),
                    x=x + x_pad,
                    y=y + y_pad,
                    parent_x=prev_x + x_pad,
                    parent_y=prev_y + y_pad,
                    red=node.color == Color.RED,
                )
            )
            if is_nil:
                continue
            gap = x if node is self._root else abs(prev_x - x)
            half = gap // 2
            stack.append((node.right, x, y, x + half, y + Y_GAP))
            stack.append((node.left, x, y, x - half, y + Y_GAP))
        return drawn