"""Window that draws the tree and maps key presses to tester actions."""

from __future__ import annotations

import argparse
import os
import select
import subprocess
import sys
from collections.abc import Callable

from .settings import X_MAX
from .tester import TreeTester

BLACK_PEN = "#646464"
RED_PEN = "#c80000"
WINDOW_HEIGHT = 768


def _clear_console() -> None:
    """Clear the console the tester prints to."""
    try:
        if os.name == "nt":
            subprocess.run("cls", shell=True, check=False)
        else:
            subprocess.run(["clear"], check=False)
    except OSError:
        pass


def _enter_pressed() -> bool:
    """Whether Enter has been pressed on the console, without blocking."""
    if os.name == "nt":
        import msvcrt

        while msvcrt.kbhit():
            if msvcrt.getwch() in "\r\n":
                return True
        return False
    try:
        ready, _, _ = select.select([sys.stdin], [], [], 0)
    except (OSError, ValueError, TypeError):
        return False
    if ready:
        sys.stdin.readline()
        return True
    return False


def _stress(tester: TreeTester) -> None:
    tester.stress_test(_enter_pressed)


def _escape(tester: TreeTester) -> None:
    _clear_console()
    tester.menu()


# Each key maps to the action it runs and whether the drawing changes.
_ACTIONS: dict[str, tuple[Callable[[TreeTester], object], bool]] = {
    "Up": (TreeTester.move_up, True),
    "Down": (TreeTester.move_down, True),
    "Left": (TreeTester.move_left, True),
    "Right": (TreeTester.move_right, True),
    "1": (TreeTester.search, False),
    "2": (TreeTester.insert_range, True),
    "3": (TreeTester.insert_random_small, True),
    "4": (TreeTester.insert_random, True),
    "5": (TreeTester.delete_range, True),
    "6": (TreeTester.delete_random, True),
    "7": (TreeTester.print_nodes, False),
    "8": (TreeTester.print_paths, False),
    "9": (_stress, True),
    "0": (TreeTester.set_compare_mode, False),
    "q": (TreeTester.print_compare_result, False),
    "w": (TreeTester.shift_tree_draw, True),
    "Escape": (_escape, False),
}
_ACTIONS.update({f"KP_{digit}": _ACTIONS[str(digit)] for digit in range(10)})
_ACTIONS["Q"] = _ACTIONS["q"]
_ACTIONS["W"] = _ACTIONS["w"]


def handle_key(tester: TreeTester, key: str) -> bool:
    """Run the action bound to a key name; returns whether to redraw."""
    entry = _ACTIONS.get(key)
    if entry is None:
        return False
    action, redraw = entry
    action(tester)
    return redraw


class TreeApp:
    """A canvas showing the tester's current tree, driven by key presses."""

    def __init__(self, root, tester: TreeTester) -> None:
        import tkinter as tk

        self.root = root
        self.tester = tester
        self.canvas = tk.Canvas(
            root, width=X_MAX, height=WINDOW_HEIGHT, background="white"
        )
        self.canvas.pack(fill=tk.BOTH, expand=True)
        root.bind("<Key>", self._on_key)
        self.redraw()

    def _on_key(self, event) -> None:
        if handle_key(self.tester, event.keysym):
            self.redraw()

    def redraw(self) -> None:
        """Clear the canvas and draw every node of the shown tree."""
        canvas = self.canvas
        canvas.delete("all")
        for node in self.tester.drawn_nodes():
            canvas.create_line(
                node.parent_x, node.parent_y, node.x, node.y, fill=BLACK_PEN
            )
            canvas.create_oval(
                *node.bbox,
                outline=RED_PEN if node.red else BLACK_PEN,
                fill="white",
            )
            canvas.create_text(*node.text_origin, text=node.label, anchor="nw")


def main(argv: list[str] | None = None) -> int:
    """Open the tree window and run until it is closed."""
    parser = argparse.ArgumentParser(
        prog="rbviz", description="Draw and exercise a red-black tree."
    )
    parser.add_argument("--seed", type=int, default=500, help="random seed")
    parser.add_argument(
        "--report", default="output.txt", help="file for the comparison report"
    )
    args = parser.parse_args(argv)

    import tkinter as tk

    tester = TreeTester(seed=args.seed)
    tester.report_path = args.report
    root = tk.Tk()
    root.title("Red Black Tree")
    TreeApp(root, tester)
    root.mainloop()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())