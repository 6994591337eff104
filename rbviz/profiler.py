"""Named timing sections with call counts, averages and extremes."""

from __future__ import annotations

import math
import os
import time
from collections.abc import Callable, Iterator, Mapping
from contextlib import contextmanager
from dataclasses import dataclass
from types import MappingProxyType

PROFILE_CNT = 32
MINMAX_CNT = 2
SCALE = 1000

_RULE = "=====================================\n"
_HEADER = "\n" + _RULE + "| Name | Average | Min | Max | Call |\n" + _RULE
_TRIMMED_HEADER = "\n" + _RULE + "| Name\t| Average | Min | Max | Call |\n" + _RULE
_FOOTER = _RULE + "\n"


class ProfilerFullError(Exception):
    """Raised when a new section is started and every slot is taken."""

    def __init__(self, name: str) -> None:
        super().__init__(f"profiler is full!: {name}")
        self.name = name


@dataclass
class ProfileEntry:
    """Accumulated timings of one named section, in seconds."""

    name: str
    start: float = 0.0
    total: float = 0.0
    minimum: float = math.inf
    maximum: float = 0.0
    calls: int = 0

    def record(self, elapsed: float) -> None:
        self.total += elapsed
        self.minimum = min(self.minimum, elapsed)
        self.maximum = max(self.maximum, elapsed)
        self.calls += 1

    @property
    def average(self) -> float:
        return self.total / self.calls if self.calls else math.nan

    @property
    def trimmed_average(self) -> float:
        """Average with the single fastest and slowest calls left out."""
        count = self.calls - MINMAX_CNT
        if count == 0:
            return math.nan
        return (self.total - (self.maximum + self.minimum)) / count

    def row(self, average: float) -> str:
        return (
            f"| {self.name} | {average * SCALE:.4f}μs | {self.minimum * SCALE:.4f}μs"
            f" | {self.maximum * SCALE:.4f}μs | {self.calls} |\n"
        )


class Profiler:
    """Collects timings for up to 32 named sections."""

    def __init__(self, clock: Callable[[], float] = time.perf_counter) -> None:
        self._clock = clock
        self._entries: dict[str, ProfileEntry] = {}

    @property
    def entries(self) -> Mapping[str, ProfileEntry]:
        return MappingProxyType(self._entries)

    def begin(self, name: str) -> None:
        """Start timing a section, creating it on first use."""
        entry = self._entries.get(name)
        if entry is None:
            if len(self._entries) >= PROFILE_CNT:
                raise ProfilerFullError(name)
            entry = ProfileEntry(name)
            self._entries[name] = entry
        entry.start = self._clock()

    def end(self, name: str) -> None:
        """Stop timing a section and record the elapsed time."""
        entry = self._entries.get(name)
        if entry is None:
            raise KeyError(f"Can't find the profiler: {name}")
        entry.record(self._clock() - entry.start)

    @contextmanager
    def measure(self, name: str) -> Iterator[None]:
        """Time the body of a with-block as one call of a section."""
        self.begin(name)
        try:
            yield
        finally:
            self.end(name)

    def report(self) -> str:
        """Table of every section with its plain average."""
        rows = "".join(entry.row(entry.average) for entry in self._entries.values())
        return _HEADER + rows + _FOOTER

    def trimmed_report(self) -> str:
        """Table of every section, averages without the extreme calls."""
        rows = "".join(
            entry.row(entry.trimmed_average) for entry in self._entries.values()
        )
        return _TRIMMED_HEADER + rows + _FOOTER

    def write(self, path: str | os.PathLike[str]) -> None:
        """Write the trimmed report to a file."""
        with open(path, "wb") as handle:
            handle.write(self.trimmed_report().encode("utf-8"))

    def reset(self) -> None:
        """Forget every section."""
        self._entries.clear()