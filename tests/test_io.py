from __future__ import annotations

import json

from sortscope import InsertionSort, compare_strategies, export_report_json, export_results_json


def test_export_results_json(tmp_path):
    res = compare_strategies(ns=[10, 20], repeats=2, html_out=None, verbose=False)
    out = tmp_path / "nested" / "results.json"
    export_results_json(res, out)
    data = json.loads(out.read_text(encoding="utf-8"))
    assert data["ns"] == [10, 20]
    bubble = data["strategies"]["Bubble Sort"]
    assert bubble["exchange_name"] == "swaps"
    assert len(bubble["comparisons_raw"]["10"]) == 2
    assert "mean_human" in bubble["time_ci"]["20"]


def test_export_report_json(tmp_path):
    strategy = InsertionSort()
    strategy.sort([3, 1, 2])
    out = tmp_path / "report.json"
    export_report_json(strategy.last_report, out)
    data = json.loads(out.read_text(encoding="utf-8"))
    assert data["algorithm"] == "Insertion Sort"
    assert data["shifts"] == 2
    assert data["result"] == [1, 2, 3]
