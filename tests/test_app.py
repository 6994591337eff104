import io
from unittest import mock

import pytest

from rbviz.app import handle_key
from rbviz.tester import MOVE, TreeTester


def make_tester(text=""):
    out = io.StringIO()
    tester = TreeTester(stdin=io.StringIO(text), stdout=out, seed=500)
    return tester, out


@pytest.mark.parametrize(
    "key, attr, delta",
    [
        ("Right", "x_pad", MOVE),
        ("Left", "x_pad", -MOVE),
        ("Up", "y_pad", -MOVE),
        ("Down", "y_pad", MOVE),
    ],
)
def test_arrow_keys_move_drawing(key, attr, delta):
    tester, _ = make_tester()
    assert handle_key(tester, key) is True
    assert getattr(tester, attr) == delta


@pytest.mark.parametrize("key", ["2", "KP_2"])
def test_insert_range_key(key):
    tester, _ = make_tester("1\n5\n")
    assert handle_key(tester, key) is True
    assert list(tester.tree) == [1, 2, 3, 4, 5]


def test_search_key_does_not_redraw():
    tester, out = make_tester("1\n5\n3\n")
    handle_key(tester, "2")
    assert handle_key(tester, "1") is False
    assert "Success to Search 3" in out.getvalue()


def test_delete_range_key():
    tester, _ = make_tester("1\n10\n3\n6\n")
    handle_key(tester, "2")
    assert handle_key(tester, "5") is True
    assert list(tester.tree) == [1, 2, 7, 8, 9, 10]


def test_random_insert_keeps_tree_valid():
    tester, _ = make_tester("50\n")
    assert handle_key(tester, "3") is True
    values = list(tester.tree)
    assert 0 < len(values) <= 50
    assert values == sorted(values)
    assert all(0 <= v < 9999 for v in values)
    tester.tree.check()


def test_delete_random_key_empties_tree():
    tester, _ = make_tester("1\n20\n-1\n")
    handle_key(tester, "2")
    assert handle_key(tester, "6") is True
    assert len(tester.tree) == 0


def test_print_keys_write_output():
    tester, out = make_tester("1\n3\n")
    handle_key(tester, "2")
    assert handle_key(tester, "7") is False
    assert "1 2 3 " in out.getvalue()
    assert handle_key(tester, "8") is False
    assert "Leaf 0:" in out.getvalue()


def test_compare_mode_and_shift_drawing():
    tester, _ = make_tester("1\n4\n1\n")
    handle_key(tester, "2")
    assert handle_key(tester, "0") is False
    assert tester.compare_mode is True
    assert list(tester.bst) == [1, 2, 3, 4]
    assert handle_key(tester, "W") is True
    assert tester.draw_red_black is False
    assert handle_key(tester, "w") is True
    assert tester.draw_red_black is True


def test_shift_ignored_outside_compare_mode():
    tester, _ = make_tester()
    assert handle_key(tester, "w") is True
    assert tester.draw_red_black is True


def test_compare_result_key_writes_report(tmp_path):
    tester, out = make_tester("1\n1\n3\n")
    handle_key(tester, "0")
    handle_key(tester, "2")
    path = tmp_path / "report.txt"
    tester.report_path = str(path)
    assert handle_key(tester, "q") is False
    assert "RBT INSERT" in path.read_text(encoding="utf-8")
    assert "Profile Data Out Success!" in out.getvalue()


def test_escape_clears_console_and_prints_menu():
    tester, out = make_tester()
    out.truncate(0)
    out.seek(0)
    with mock.patch("rbviz.app.subprocess.run") as run:
        assert handle_key(tester, "Escape") is False
    assert run.call_count == 1
    assert "Choose number" in out.getvalue()


def test_unknown_key_does_nothing():
    tester, out = make_tester()
    before = out.getvalue()
    assert handle_key(tester, "x") is False
    assert out.getvalue() == before
    assert (tester.x_pad, tester.y_pad) == (0, 0)