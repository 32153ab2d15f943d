from __future__ import annotations

import io
import json

from sortscope.cli import main


def test_sort_numbers_default_strategy(capsys):
    assert main(["sort", "5", "3", "1", "4", "2"]) == 0
    out = capsys.readouterr().out
    assert "Algorithm: Bubble Sort" in out
    assert "Swaps: 7" in out
    assert "Sorted: 1 2 3 4 5" in out


def test_sort_with_named_strategy_and_input_option(capsys):
    assert main(["sort", "-a", "insertion sort", "--input", "1 2 3"]) == 0
    out = capsys.readouterr().out
    assert "Algorithm: Insertion Sort" in out
    assert "Shifts: 0" in out


def test_sort_negative_numbers(capsys):
    assert main(["sort", "3", "-7", "0"]) == 0
    assert "Sorted: -7 0 3" in capsys.readouterr().out


def test_sort_reads_stdin(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("2 2 1\n"))
    assert main(["sort"]) == 0
    assert "Sorted: 1 2 2" in capsys.readouterr().out


def test_sort_invalid_input(capsys):
    assert main(["sort", "--input", "1 two 3"]) == 2
    err = capsys.readouterr().err
    assert "Invalid input. Please enter valid numbers." in err


def test_sort_unknown_strategy(capsys):
    assert main(["sort", "-a", "Bogo Sort", "1"]) == 2
    assert "No such sort strategy" in capsys.readouterr().err


def test_sort_empty_input(capsys):
    assert main(["sort", "--input", "   "]) == 0
    assert "Nothing to sort." in capsys.readouterr().out


def test_sort_random_with_json(tmp_path, capsys):
    out = tmp_path / "report.json"
    assert main(["sort", "--random", "--max-size", "30", "--seed", "5", "--json", str(out), "--quiet-result"]) == 0
    text = capsys.readouterr().out
    if "Nothing to sort." in text:
        # the random length may legitimately be zero
        assert not out.exists()
        return
    data = json.loads(out.read_text(encoding="utf-8"))
    assert data["algorithm"] == "Bubble Sort"
    assert data["result"] == sorted(data["result"])
    assert text.startswith("Input: ")
    assert "Sorted:" not in text


def test_list(capsys):
    assert main(["list"]) == 0
    assert capsys.readouterr().out.splitlines() == ["Bubble Sort", "Insertion Sort"]


def test_compare_writes_reports(tmp_path, capsys):
    html = tmp_path / "cmp.html"
    js = tmp_path / "cmp.json"
    assert main(["compare", "--ns", "10", "20", "--repeats", "2", "--html-out", str(html), "--json-out", str(js)]) == 0
    assert html.exists()
    data = json.loads(js.read_text(encoding="utf-8"))
    assert set(data["strategies"]) == {"Bubble Sort", "Insertion Sort"}
