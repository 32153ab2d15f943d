# src/sortscope/io.py
from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from .analyze import ComparisonResult
from .strategies import SortReport
from .utils import human_time


def _ci_dict(ci) -> dict[str, Any]:
    return {
        "mean": getattr(ci, "mean", None),
        "std": getattr(ci, "std", None),
        "n": getattr(ci, "n", None),
        "lower": getattr(ci, "lower", None),
        "upper": getattr(ci, "upper", None),
        "method": getattr(ci, "method", None),
    }


def export_results_json(result: ComparisonResult, out_path: str | Path) -> None:
    """
    Write a JSON file with the raw samples and confidence intervals of a
    strategy comparison, for use by external frontends.
    """
    out_path = Path(out_path)
    data: dict[str, Any] = {
        "title": result.title,
        "html_path": result.html_path,
        "ns": result.ns,
        "strategies": {},
    }

    for label, st in result.stats.items():
        time_ci = {}
        for n, ci in st.time_ci.items():
            time_ci[n] = {**_ci_dict(ci), "mean_human": human_time(ci.mean)}
        data["strategies"][label] = {
            "label": label,
            "exchange_name": st.exchange_name,
            "comparisons_raw": st.comparisons,   # n -> [count,...]
            "exchanges_raw": st.exchanges,
            "times_raw": st.times,               # n -> [sec,...]
            "comparisons_ci": {n: _ci_dict(ci) for n, ci in st.comparisons_ci.items()},
            "exchanges_ci": {n: _ci_dict(ci) for n, ci in st.exchanges_ci.items()},
            "time_ci": time_ci,
            "scaling_summary": st.scaling_summary,
            "errors": st.errors,
        }

    out_path.parent.mkdir(parents=True, exist_ok=True)
    out_path.write_text(json.dumps(data, indent=2, default=str), encoding="utf-8")


def export_report_json(report: SortReport, out_path: str | Path) -> None:
    out_path = Path(out_path)
    out_path.parent.mkdir(parents=True, exist_ok=True)
    out_path.write_text(json.dumps(report.to_dict(), indent=2), encoding="utf-8")
