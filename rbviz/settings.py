"""Shared limits, drawing geometry and error types for the trees."""

from __future__ import annotations

from dataclasses import dataclass

TREE_MAX = 2**31 - 1
TEXT_LEN = 8
TEXT_PAD = 8
RADIUS = 12

X_MAX = 1024
X_PIVOT = X_MAX // 2
Y_PIVOT = 50
Y_GAP = 50


class TreeFullError(Exception):
    """Raised when a tree already holds its maximum number of nodes."""

    def __init__(self, max_size: int) -> None:
        super().__init__(f"Tree is full. MAX: {max_size}")
        self.max_size = max_size


class DuplicateValueError(ValueError):
    """Raised when a value already present is inserted again."""

    def __init__(self, value: int) -> None:
        super().__init__(f"duplicate value: {value}")
        self.value = value


class NodeNotFoundError(LookupError):
    """Raised when a value to delete is not in the tree."""

    def __init__(self, value: int) -> None:
        super().__init__(f"no such value: {value}")
        self.value = value


class TreeInvariantError(Exception):
    """Raised when a red-black tree breaks one of its rules."""

    _label = "Invalid tree!"

    def __init__(self, leaf_index: int, data: int | None = None) -> None:
        message = f"{self._label} leaf idx {leaf_index}"
        if data is not None:
            message += f", data {data}"
        super().__init__(message)
        self.leaf_index = leaf_index
        self.data = data


class DoubleRedError(TreeInvariantError):
    """A red node has a red parent."""

    _label = "Double Red!"


class UnbalancedError(TreeInvariantError):
    """Two root-to-leaf paths hold different numbers of black nodes."""

    _label = "Unbalanced!"


@dataclass(frozen=True)
class DrawnNode:
    """One node placed on the canvas, with the line back to its parent."""

    label: str
    x: int
    y: int
    parent_x: int
    parent_y: int
    red: bool = False

    @property
    def bbox(self) -> tuple[int, int, int, int]:
        """Bounding box of the node's circle: left, top, right, bottom."""
        return (self.x - RADIUS, self.y - RADIUS, self.x + RADIUS, self.y + RADIUS)

    @property
    def text_origin(self) -> tuple[int, int]:
        """Where the node's label starts."""
        return (self.x - TEXT_PAD, self.y - TEXT_PAD)