"""Red-black tree visualiser and checker, with a plain binary search tree and profiler to compare against."""

__version__ = "0.1.0"

__all__ = ["__version__"]