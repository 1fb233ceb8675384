import io
import random

import pytest

from structlabs.matrixcli import menu_text, statistics, main


def _run(monkeypatch, capsys, text):
    monkeypatch.setattr("sys.stdin", io.StringIO(text))
    code = main([])
    return code, capsys.readouterr().out


def _data_rows(output):
    return [line for line in output.splitlines() if line.startswith("|") and "percent" not in line]


def test_menu_lists_exit_and_last_action():
    text = menu_text()
    assert text.startswith("EXIT                      0\n")
    assert text.endswith("OUT SPARSE MATRIX         15\n")
    assert len(text.splitlines()) == 16


def test_statistics_has_twenty_rows_with_percentages():
    out = io.StringIO()
    statistics(4, 5, out, random.Random(1))
    rows = _data_rows(out.getvalue())
    percents = [int(row.split("|")[1]) for row in rows]
    assert percents == list(range(1, 101, 5))


def test_statistics_ordinary_size_constant_and_sparse_size_grows():
    out = io.StringIO()
    statistics(6, 6, out, random.Random(2))
    rows = _data_rows(out.getvalue())
    ordinary = [int(row.split("|")[4]) for row in rows]
    sparse = [int(row.split("|")[5]) for row in rows]
    assert len(set(ordinary)) == 1
    assert sparse == sorted(sparse)
    assert sparse[-1] > sparse[0]


def test_statistics_rejects_bad_dimensions():
    with pytest.raises(ValueError):
        statistics(0, 3, io.StringIO(), random.Random(0))


def test_main_exits_on_zero_action(monkeypatch, capsys):
    code, out = _run(monkeypatch, capsys, "2\n2\n0\n")
    assert code == 0
    assert "action: " in out


def test_main_rejects_bad_rows(monkeypatch, capsys):
    code, out = _run(monkeypatch, capsys, "0\n")
    assert code == 1
    assert out.endswith("error while reading\n")


def test_main_rejects_bad_columns(monkeypatch, capsys):
    code, out = _run(monkeypatch, capsys, "2\nx\n")
    assert code == 2
    assert out.endswith("error while reading\n")


def test_main_manual_fill_and_both_products(monkeypatch, capsys):
    text = "2\n2\n2\n1 2 3 4\n5\n1 1\n9\n10\n0\n"
    code, out = _run(monkeypatch, capsys, text)
    assert code == 0
    assert "4 6 \n" in out
    assert "data: \n4 6 \ncolumns: \n1 2 \n" in out


def test_main_unknown_action(monkeypatch, capsys):
    code, out = _run(monkeypatch, capsys, "2\n2\n99\n0\n")
    assert code == 0
    assert "there is no such action\n" in out


def test_main_ends_with_read_error_on_eof(monkeypatch, capsys):
    code, out = _run(monkeypatch, capsys, "2\n2\n13\n")
    assert code == 2
    assert out.endswith("errors while reading\n")