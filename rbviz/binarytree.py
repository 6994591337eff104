"""A plain, unbalanced binary search tree of integers."""

from __future__ import annotations

from collections.abc import Iterator
from typing import TYPE_CHECKING

from .settings import (
    TREE_MAX,
    X_PIVOT,
    Y_GAP,
    Y_PIVOT,
    DrawnNode,
    DuplicateValueError,
    NodeNotFoundError,
    TreeFullError,
)

if TYPE_CHECKING:
    from .redblack import RedBlackTree


class _Node:
    __slots__ = ("data", "left", "right")

    def __init__(self, data: int) -> None:
        self.data = data
        self.left: _Node | None = None
        self.right: _Node | None = None


class BinaryTree:
    """Binary search tree holding distinct integers, with no rebalancing."""

    def __init__(self, max_size: int = TREE_MAX) -> None:
        self.max_size = max_size
        self._root: _Node | None = None
        self._size = 0

    def insert(self, data: int) -> None:
        """Insert a value; raises on duplicates or when the tree is full."""
        if self._size >= self.max_size:
            raise TreeFullError(self.max_size)

        if self._root is None:
            self._root = _Node(data)
            self._size += 1
            return

        node = self._root
        while True:
            if node.data == data:
                raise DuplicateValueError(data)
            if node.data > data:
                if node.left is None:
                    node.left = _Node(data)
                    break
                node = node.left
            else:
                if node.right is None:
                    node.right = _Node(data)
                    break
                node = node.right
        self._size += 1

    def delete(self, data: int) -> None:
        """Remove a value; raises NodeNotFoundError if it is absent."""
        parent: _Node | None = None
        node = self._root
        while node is not None and node.data != data:
            parent = node
            node = node.left if node.data > data else node.right
        if node is None:
            raise NodeNotFoundError(data)

        if node.left is not None and node.right is not None:
            # Replace with the largest value of the left subtree.
            alt_parent = node
            alt = node.left
            while alt.right is not None:
                alt_parent = alt
                alt = alt.right
            node.data = alt.data
            if alt_parent is node:
                alt_parent.left = alt.left
            else:
                alt_parent.right = alt.left
        else:
            child = node.left if node.left is not None else node.right
            if parent is None:
                self._root = child
            elif parent.left is node:
                parent.left = child
            else:
                parent.right = child

        self._size -= 1

    def clear(self) -> None:
        """Remove every node."""
        self._root = None
        self._size = 0

    def __contains__(self, data: object) -> bool:
        node = self._root
        while node is not None:
            if node.data == data:
                return True
            node = node.left if node.data > data else node.right
        return False

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[int]:
        """Values in ascending order."""
        stack: list[_Node] = []
        node = self._root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.data
            node = node.right

    def copy_from(self, tree: RedBlackTree) -> None:
        """Insert every value of a red-black tree in pre-order, keeping its shape."""
        for value in tree.preorder():
            try:
                self.insert(value)
            except (DuplicateValueError, TreeFullError):
                continue

    def layout(self, x_pad: int = 0, y_pad: int = 0) -> list[DrawnNode]:
        """Place every node for drawing, in pre-order."""
        drawn: list[DrawnNode] = []
        if self._root is None:
            return drawn
        stack: list[tuple[_Node | None, int, int, int, int]] = [
            (self._root, X_PIVOT, Y_PIVOT, X_PIVOT, Y_PIVOT)
        ]
        while stack:
            node, prev_x, prev_y, x, y = stack.pop()
            if node is None:
                continue
            drawn.append(
                DrawnNode(
                    label=str(node.data),
                    x=x + x_pad,
                    y=y + y_pad,
                    parent_x=prev_x + x_pad,
                    parent_y=prev_y + y_pad,
                )
            )
            gap = x if node is self._root else abs(prev_x - x)
            half = gap // 2
            stack.append((node.right, x, y, x + half, y + Y_GAP))
            stack.append((node.left, x, y, x - half, y + Y_GAP))
        return drawn