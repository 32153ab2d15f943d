#!/usr/bin/env python3
"""
Sorting Strategy Comparison
===========================

Runs bubble sort and insertion sort on the same random lists and writes an
HTML report with comparison/swap counts and runtimes.
"""

from __future__ import annotations

import os
import sys

# Add src to path for development
REPO_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
SRC_PATH = os.path.join(REPO_ROOT, "src")
if SRC_PATH not in sys.path:
    sys.path.insert(0, SRC_PATH)

from sortscope import compare_strategies, export_results_json


if __name__ == "__main__":
    os.makedirs("examples/reports", exist_ok=True)
    results = compare_strategies(
        ns=[100, 200, 400, 800, 1600],
        repeats=5,
        ci_method="t",
        html_out="examples/reports/sorting_strategies.html",
        title="Bubble Sort vs. Insertion Sort",
        notes="Both strategies sort identical random integer lists.",
    )
    export_results_json(results, "examples/reports/sorting_strategies.json")
    for label, stats in results.stats.items():
        print(f"{label}: {stats.scaling_summary}")
