# rbviz

rbviz draws a red-black tree in a window and lets you change it from the
keyboard. After any change, rbviz can check that the tree is still a valid
red-black tree. In compare mode, the same operations also go to a plain
(unbalanced) binary search tree, and a small profiler times both. You can then
see what the balancing costs and what it saves.

## Installing

```
pip install .
```

rbviz needs only the standard library. The window uses `tkinter`, which most
Python installations include.

## Running the visualiser

```
rbviz
```

A window opens with the tree drawn in it. Commands that ask for input (numbers,
counts, ranges) read it from the terminal you started rbviz from. They print
their results there too.

Options:

- `--seed N`: seed of the random number generator used for random inserts,
  deletes and the stress test. The default is 500.
- `--report PATH`: file that `Q` writes the comparison report to. The default
  is `output.txt`.

| Key          | Action                                                            |
|--------------|-------------------------------------------------------------------|
| Arrow keys   | Scroll the drawing                                                |
| `1`          | Search for a number                                               |
| `2`          | Insert every number in a range                                    |
| `3`          | Insert a given count of random numbers below 9999                 |
| `4`          | Insert a given count of random numbers (up to 22 bits)            |
| `5`          | Delete every number in a range                                    |
| `6`          | Delete a given count of randomly chosen nodes                     |
| `7`          | Print the tree size and all values in order                       |
| `8`          | Print the black and red counts on the path to every leaf          |
| `9`          | Stress test: random inserts and deletes, checked after each batch |
| `0`          | Turn compare mode on or off                                       |
| `Q`          | Compare mode only: print timings and write the report file        |
| `W`          | Compare mode only: switch the drawing between the two trees       |
| `Esc`        | Clear the console and show the menu again                         |

The number-pad keys work like the digit keys. Press Enter in the terminal to
stop the stress test. When you turn compare mode on, the plain tree is rebuilt
from the red-black tree's values in pre-order, so it starts with the same shape.

In the drawing, red nodes have a red outline, and the empty leaves of the
red-black tree appear as `nil`.

## Using the trees from Python

```python
from rbviz.redblack import RedBlackTree
from rbviz.settings import DuplicateValueError, NodeNotFoundError

tree = RedBlackTree(max_size=1000)
for value in (41, 38, 31, 12, 19, 8):
    tree.insert(value)

assert 19 in tree
assert len(tree) == 6
print(list(tree))            # values in ascending order
print(list(tree.preorder())) # values in pre-order
print(tree.paths())          # (black, red) counts for each nil leaf, left to right
print(tree.format_paths())   # the same as printed text

tree.check()                 # raises DoubleRedError or UnbalancedError if broken

try:
    tree.insert(19)
except DuplicateValueError:
    pass

tree.delete(38)
try:
    tree.delete(38)
except NodeNotFoundError:
    pass
```

`insert` raises `TreeFullError` once the tree holds `max_size` values. The
default is 2**31 - 1. `clear()` removes every value. `DoubleRedError` and
`UnbalancedError` are both `TreeInvariantError`s. All error types live in
`rbviz.settings`.

`rbviz.binarytree.BinaryTree` has the same insert, delete, search, length,
iteration and `clear` interface, but it does no balancing.
`BinaryTree.copy_from(tree)` inserts a red-black tree's values in pre-order.

Both trees have a `layout(x_pad, y_pad)` method. It returns the node positions
the window draws, as `DrawnNode` records from `rbviz.settings`. Each record holds
a label, a position, its parent's position, whether the node is red, and the
`bbox` and `text_origin` used for drawing.

`rbviz.tester.TreeTester` runs the menu actions without a window. It takes text
streams for input and output, and a seed:

```python
import io
from rbviz.tester import TreeTester

out = io.StringIO()
tester = TreeTester(stdin=io.StringIO("1\n20\n"), stdout=out, seed=500)
tester.insert_range()        # inserts 1..20, returns the duplicate count
print(list(tester.tree))
```

## Profiling

`rbviz.profiler.Profiler` keeps the call count, total, minimum and maximum time
for up to 32 named sections:

```python
from rbviz.profiler import Profiler

profiler = Profiler()
with profiler.measure("work"):
    sum(range(10_000))
print(profiler.report())
```

`begin(name)` and `end(name)` can also be called directly. Starting a 33rd
section raises `ProfilerFullError`, and ending an unknown one raises `KeyError`.
`trimmed_report()` leaves the single fastest and slowest calls out of the
average. `write(path)` saves that trimmed report to a file. `reset()` forgets
every section. The tables show times in seconds multiplied by 1000, under a
`μs` label.

## What rbviz does not do

The trees live in memory only. Nothing is saved between runs except the
comparison report that `Q` writes.

## Running the tests

```
pip install .[test]
pytest
```