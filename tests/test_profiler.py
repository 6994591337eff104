import pytest

from rbviz.profiler import Profiler, ProfilerFullError


def _clock(*times):
    values = iter(times)
    return lambda: next(values)


def test_begin_end_records_durations():
    profiler = Profiler(_clock(0.0, 0.5, 1.0, 3.0))
    profiler.begin("a")
    profiler.end("a")
    profiler.begin("a")
    profiler.end("a")
    entry = profiler.entries["a"]
    assert entry.calls == 2
    assert entry.minimum == 0.5
    assert entry.maximum == 2.0
    assert entry.total == 2.5
    assert entry.minimum <= entry.average <= entry.maximum


def test_measure_context_manager():
    profiler = Profiler(_clock(1.0, 1.25))
    with profiler.measure("block"):
        pass
    entry = profiler.entries["block"]
    assert entry.calls == 1
    assert entry.total == 0.25


def test_measure_records_on_exception():
    profiler = Profiler(_clock(0.0, 1.0))
    with pytest.raises(RuntimeError):
        with profiler.measure("x"):
            raise RuntimeError("boom")
    assert profiler.entries["x"].calls == 1


def test_end_unknown_section_raises():
    profiler = Profiler(_clock(0.0))
    with pytest.raises(KeyError):
        profiler.end("missing")


def test_full_profiler_raises():
    profiler = Profiler(lambda: 0.0)
    for index in range(32):
        profiler.begin(f"s{index}")
    with pytest.raises(ProfilerFullError):
        profiler.begin("one more")
    profiler.begin("s0")
    assert len(profiler.entries) == 32


def test_report_layout():
    profiler = Profiler(_clock(0.0, 1.0, 1.0, 3.0))
    profiler.begin("RBT INSERT")
    profiler.end("RBT INSERT")
    profiler.begin("RBT INSERT")
    profiler.end("RBT INSERT")
    text = profiler.report()
    assert text.startswith(
        "\n=====================================\n"
        "| Name | Average | Min | Max | Call |\n"
        "=====================================\n"
    )
    assert "| RBT INSERT | 1500.0000μs | 1000.0000μs | 2000.0000μs | 2 |\n" in text
    assert text.endswith("=====================================\n\n")


def test_report_keeps_section_order():
    profiler = Profiler(lambda: 0.0)
    for name in ("b", "a", "c"):
        with profiler.measure(name):
            pass
    text = profiler.report()
    assert text.index("| b |") < text.index("| a |") < text.index("| c |")


def test_trimmed_report_drops_extremes():
    profiler = Profiler(_clock(0.0, 1.0, 0.0, 2.0, 0.0, 3.0, 0.0, 4.0))
    for _ in range(4):
        with profiler.measure("t"):
            pass
    text = profiler.trimmed_report()
    assert "| Name\t| Average | Min | Max | Call |" in text
    assert "| t | 2500.0000μs | 1000.0000μs | 4000.0000μs | 4 |\n" in text
    assert profiler.entries["t"].total == 10.0


def test_write_round_trip(tmp_path):
    profiler = Profiler(_clock(0.0, 1.0, 0.0, 2.0, 0.0, 3.0))
    for _ in range(3):
        with profiler.measure("w"):
            pass
    target = tmp_path / "output.txt"
    profiler.write(target)
    assert target.read_bytes().decode("utf-8") == profiler.trimmed_report()


def test_reset_clears_sections():
    profiler = Profiler(lambda: 0.0)
    with profiler.measure("a"):
        pass
    profiler.reset()
    assert len(profiler.entries) == 0
    assert "| a |" not in profiler.report()
    with pytest.raises(KeyError):
        profiler.end("a")