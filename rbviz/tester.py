"""Interactive driver that exercises the red-black tree from console input."""

from __future__ import annotations

import re
import sys
from collections.abc import Callable
from contextlib import suppress
from typing import TextIO

from .binarytree import BinaryTree
from .profiler import Profiler
from .redblack import RedBlackTree
from .settings import (
    DrawnNode,
    DuplicateValueError,
    NodeNotFoundError,
    TreeFullError,
    TreeInvariantError,
)

INT_MAX = 2**31 - 1
INT_MIN = -(2**31)
RAND_MAX = 0x7FFF
SMALL_LIMIT = 9999
CHECKPOINT = 5_000_000
MOVE = 10
INPUT_LEN = 16

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def _atoi(text: str) -> int:
    """Leading integer of a line, 0 if there is none, clamped to 32 bits."""
    match = _LEADING_INT.match(text)
    if match is None:
        return 0
    return max(INT_MIN, min(INT_MAX, int(match.group(1))))


class CRandom:
    """Linear congruential generator matching the classic C runtime rand()."""

    def __init__(self, seed: int = 1) -> None:
        self._state = seed & 0xFFFFFFFF

    def rand(self) -> int:
        """Next value in 0..32767."""
        self._state = (self._state * 214013 + 2531011) & 0xFFFFFFFF
        return (self._state >> 16) & RAND_MAX

    def wide(self) -> int:
        """Two draws combined into a value of up to 22 bits."""
        high = self.rand()
        low = self.rand()
        return (high << 7) | low


class TreeTester:
    """Menu actions over a red-black tree, with an optional plain BST to compare."""

    def __init__(
        self,
        stdin: TextIO | None = None,
        stdout: TextIO | None = None,
        seed: int = 500,
    ) -> None:
        self._in = stdin if stdin is not None else sys.stdin
        self._out = stdout if stdout is not None else sys.stdout
        self.random = CRandom(seed)
        self.tree = RedBlackTree()
        self.bst = BinaryTree()
        self.profiler = Profiler()
        self.compare_mode = False
        self.draw_red_black = True
        self.x_pad = 0
        self.y_pad = 0
        self.report_path = "output.txt"
        self._write("This is Red Black Tree Tester!\n")
        self.menu()

    # ---- console helpers ----------------------------------------------

    def _write(self, text: str) -> None:
        self._out.write(text)

    def _ask(self, prompt: str) -> int:
        self._write(prompt)
        line = self._in.readline()
        return _atoi(line[: INPUT_LEN - 1])

    # ---- tree operations, profiled in compare mode ----------------------

    def _contains(self, value: int) -> bool:
        if not self.compare_mode:
            return value in self.tree
        with self.profiler.measure("RBT SEARCH"):
            found = value in self.tree
        with self.profiler.measure("BST SEARCH"):
            _ = value in self.bst
        return found

    def _insert(self, value: int) -> None:
        if not self.compare_mode:
            self.tree.insert(value)
            return
        error: Exception | None = None
        with self.profiler.measure("RBT INSERT"):
            try:
                self.tree.insert(value)
            except (DuplicateValueError, TreeFullError) as exc:
                error = exc
        with self.profiler.measure("BST INSERT"):
            with suppress(DuplicateValueError, TreeFullError):
                self.bst.insert(value)
        if error is not None:
            raise error

    def _delete(self, value: int) -> None:
        if not self.compare_mode:
            self.tree.delete(value)
            return
        error: Exception | None = None
        with self.profiler.measure("RBT DELETE"):
            try:
                self.tree.delete(value)
            except NodeNotFoundError as exc:
                error = exc
        with self.profiler.measure("BST DELETE"):
            with suppress(NodeNotFoundError):
                self.bst.delete(value)
        if error is not None:
            raise error

    # ---- menu actions ----------------------------------------------------

    def menu(self) -> None:
        """Print the list of actions."""
        text = (
            "\n1. Search Node\n"
            "2. Insert Node\n"
            f"3. Insert Random Node (under {SMALL_LIMIT})\n"
            f"4. Insert Random Node (under {INT_MAX})\n"
            "5. Delete Node\n"
            "6. Delete Random Node\n"
            "7. Print Node Data\n"
            "8. Print Path Data\n"
            "9. Test Tree\n"
        )
        if self.compare_mode:
            text += (
                "0. Set Compare Mode with Basic Tree [now: ON]\n"
                "Q. Print Compare Result with Basic Tree\n"
                "W. Shift Tree Drawing\n"
            )
        else:
            text += "0. Set Compare Mode with Basic Tree [now: OFF]\n"
        text += "ESC. Clear Console\n\nChoose number\n"
        self._write(text)

    def search(self) -> bool:
        """Ask for a value and report whether the tree holds it."""
        num = self._ask("Enter Number to Search\n")
        found = self._contains(num)
        if found:
            self._write(f"Success to Search {num}\n")
        else:
            self._write(f"There is no {num}\n")
        self.menu()
        return found

    def _insert_many(self, values, on_full) -> int:
        duplicates = 0
        for index, value in enumerate(values):
            try:
                self._insert(value)
            except DuplicateValueError:
                duplicates += 1
            except TreeFullError:
                cur, success, fail = on_full(index, value)
                self._write(
                    "Tree is full!\n"
                    f"Cur Data: {cur}, Success Count: {success}, Fail Count: {fail}\n"
                )
                break
        self._write(f"Duplicate Data Count: {duplicates}\n")
        self.menu()
        return duplicates

    def insert_range(self) -> int:
        """Insert every value of an entered range; returns the duplicate count."""
        start = self._ask("Enter Start Number to Insert\n")
        end = self._ask("Enter End Number to Insert\n")
        if start < 0:
            start = 0
        if end < 0:
            end = INT_MAX
        self._write(f"Requested Range: {start}~{end}\n")
        return self._insert_many(
            range(start, end + 1),
            lambda index, value: (value, value - start, end - value + 1),
        )

    def insert_random_small(self) -> int:
        """Insert an entered number of random values below 9999."""
        count = self._ask(f"Enter Node Count to Insert (MAX: {SMALL_LIMIT})\n")
        if count > SMALL_LIMIT or count < 0:
            count = SMALL_LIMIT
        self._write(f"Requested Count: {count}\n")
        values = (self.random.rand() % SMALL_LIMIT for _ in range(count))
        return self._insert_many(
            values, lambda index, value: (value, index, count - index + 1)
        )

    def insert_random(self) -> int:
        """Insert an entered number of random values of up to 22 bits."""
        count = self._ask(f"Enter Node Count to Insert (MAX: {INT_MAX})\n")
        if count < 0:
            count = INT_MAX
        self._write(f"Requested Count: {count}\n")
        values = (self.random.wide() for _ in range(count))
        return self._insert_many(
            values, lambda index, value: (value, index, count - index + 1)
        )

    def delete_range(self) -> int:
        """Delete every value of an entered range; returns the missing count."""
        start = self._ask("Enter Start Number to Delete\n")
        end = self._ask("Enter End Number to Delete\n")
        if start < 0:
            start = 0
        if end < 0:
            end = INT_MAX
        missing = 0
        for value in range(start, end + 1):
            try:
                self._delete(value)
            except NodeNotFoundError:
                missing += 1
        self._write(f"Can't Find Data Count: {missing}\n")
        success = ((end - start + 1) - missing) % 2**64
        self._write(f"Success Count: {success}\n")
        self.menu()
        return missing

    def _pick_index(self, slots: list[int | None], wide: bool) -> int:
        size = len(slots)
        while True:
            draw = self.random.wide() if wide else self.random.rand()
            index = draw % size
            if slots[index] is not None:
                return index

    def delete_random(self) -> int:
        """Delete an entered number of randomly chosen values; returns the missing count."""
        size = len(self.tree)
        count = self._ask(f"Enter Node Count to Delete (MAX: {size})\n")
        if count > size or count < 0:
            count = size
        self._write(f"Requested Count: {count}\n")

        slots: list[int | None] = list(self.tree)
        wide = count > RAND_MAX
        missing = 0
        for _ in range(count):
            index = self._pick_index(slots, wide)
            value = slots[index]
            slots[index] = None
            try:
                self._delete(value)
            except NodeNotFoundError:
                missing += 1
        self._write(f"Can't Find Data Count: {missing}\n")
        self.menu()
        return missing

    def print_nodes(self) -> None:
        """Print the size and every value in order."""
        values = list(self.tree)
        self._write(f"\ntotal size: {len(values)}\n")
        self._write("".join(f"{value} " for value in values) + "\n")
        self.menu()

    def print_paths(self) -> None:
        """Print the black and red counts of every root-to-leaf path."""
        self._write(self.tree.format_paths())
        self.menu()

    # ---- stress test ----------------------------------------------------------

    def _verify(self, expected: set[int]) -> bool:
        try:
            self.tree.check()
        except TreeInvariantError as exc:
            self._write(f"{exc}\n")
            return False
        values = list(self.tree)
        if len(values) != len(expected):
            self._write(
                f"data count is different! tree: {len(values)} "
                f"<-> test set: {len(expected)}\n"
            )
        for got, want in zip(values, sorted(expected)):
            if got != want:
                self._write(f"data is different! tree: {got} <-> test set: {want}\n")
                return False
        return True

    def _insert_for_test(self, count: int, expected: set[int]) -> None:
        for _ in range(count):
            value = self.random.wide()
            try:
                self._insert(value)
            except TreeFullError:
                break
            except DuplicateValueError:
                pass
            expected.add(value)

    def _delete_for_test(self, count: int, expected: set[int]) -> None:
        slots: list[int | None] = list(self.tree)
        count = min(count, len(slots))
        for _ in range(count):
            index = self._pick_index(slots, wide=True)
            value = slots[index]
            slots[index] = None
            with suppress(NodeNotFoundError):
                self._delete(value)
            expected.discard(value)

    def stress_test(self, should_stop: Callable[[], bool]) -> tuple[int, int, int]:
        """Insert and delete random batches, checking the tree after each.

        Runs until should_stop() is true or a check fails, and returns the
        loop count and the requested insert and delete totals.
        """
        self._write("Press Enter to Stop Test\n")
        self.tree.clear()
        expected: set[int] = set()

        loops = 0
        insert_acc = insert_cnt = 0
        delete_acc = delete_cnt = 0
        while True:
            loops += 1
            if should_stop():
                break

            batch = self.random.rand()
            self._insert_for_test(batch, expected)
            if not self._verify(expected):
                break
            insert_cnt += batch

            batch = self.random.rand()
            self._delete_for_test(batch, expected)
            if not self._verify(expected):
                break
            delete_cnt += batch

            if insert_cnt > CHECKPOINT:
                insert_cnt -= CHECKPOINT
                insert_acc += 1
                self._write(f"Insert Success: {insert_acc * CHECKPOINT + insert_cnt}\n")
            if delete_cnt > CHECKPOINT:
                delete_cnt -= CHECKPOINT
                delete_acc += 1
                self._write(f"Delete Success: {delete_acc * CHECKPOINT + delete_cnt}\n")

        inserted = insert_acc * CHECKPOINT + insert_cnt
        deleted = delete_acc * CHECKPOINT + delete_cnt
        self._write(
            "\n<Test Result>\n"
            f"Loop Count: {loops}\n"
            f"Insert Success: {inserted}\n"
            f"Delete Success: {deleted}\n\n"
        )
        self.menu()
        return loops, inserted, deleted

    # ---- compare mode ----------------------------------------------------------

    def set_compare_mode(self) -> None:
        """Ask whether to switch comparison with the plain tree on or off."""
        num = self._ask("Press 0 to Compare Mode [OFF], 1 to Compare Mode [ON]\n")
        if self.compare_mode and num == 0:
            self.compare_mode = False
            self.draw_red_black = True
            self._write("Now Compare Mode [OFF]\n")
        elif not self.compare_mode and num == 1:
            self.compare_mode = True
            self.bst.clear()
            self.bst.copy_from(self.tree)
            self._write("Now Compare Mode [ON]\n")
        elif num == 0:
            self._write("Already Compare Mode [OFF]\n")
        elif num == 1:
            self._write("Already Compare Mode [ON]\n")
        else:
            self._write("Wrong Input!\n")
        self.menu()

    def print_compare_result(self) -> None:
        """Print the timing table and save the trimmed one to report_path."""
        if not self.compare_mode:
            return
        self._write(self.profiler.report() + "\n")
        self.profiler.write(self.report_path)
        self._write("Profile Data Out Success!\n")
        self.menu()

    def shift_tree_draw(self) -> None:
        """Switch the drawing between the two trees in compare mode."""
        if not self.compare_mode:
            return
        self.draw_red_black = not self.draw_red_black

    # ---- drawing -------------------------------------------------------------

    def move_left(self) -> None:
        self.x_pad -= MOVE

    def move_right(self) -> None:
        self.x_pad += MOVE

    def move_up(self) -> None:
        self.y_pad -= MOVE

    def move_down(self) -> None:
        self.y_pad += MOVE

    def drawn_nodes(self) -> list[DrawnNode]:
        """Layout of the tree currently shown."""
        if self.draw_red_black:
            return self.tree.layout(self.x_pad, self.y_pad)
        return self.bst.layout(self.x_pad, self.y_pad)