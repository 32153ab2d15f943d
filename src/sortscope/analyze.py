# src/sortscope/analyze.py
from __future__ import annotations

import math
import os
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Sequence, Tuple

import numpy as np

from .inputs import MAX_VALUE, random_numbers
from .plotting import build_reference_curves, counts_figure, runtime_figure
from .report import ReportSections, build_report_html
from .selector import available_labels, get_sort_strategy_by_label
from .strategies import SortStrategy
from .utils import CIResult, confidence_interval, rank


@dataclass
class StrategyStats:
    label: str
    exchange_name: str
    comparisons: Dict[int, List[int]] = field(default_factory=dict)  # n -> per-repeat counts
    exchanges: Dict[int, List[int]] = field(default_factory=dict)
    times: Dict[int, List[float]] = field(default_factory=dict)      # n -> seconds
    comparisons_ci: Dict[int, CIResult] = field(default_factory=dict)
    exchanges_ci: Dict[int, CIResult] = field(default_factory=dict)
    time_ci: Dict[int, CIResult] = field(default_factory=dict)
    scaling_summary: str = ""
    errors: List[str] = field(default_factory=list)


@dataclass
class ComparisonResult:
    html: str
    html_path: Optional[str]
    title: str
    ns: List[int]
    stats: Dict[str, StrategyStats]

    def _repr_html_(self) -> str:  # Jupyter-friendly
        return self.html


def _empirical_slope(ns: List[int], means: List[float]) -> Optional[float]:
    arr = np.asarray(means, dtype=float)
    if arr.size < 2:
        return None
    mask = np.isfinite(arr) & (arr > 0)
    if mask.sum() < 2:
        return None
    xs = np.log(np.asarray(ns, dtype=float)[mask])
    ys = np.log(arr[mask])
    slope, _ = np.polyfit(xs, ys, 1)
    return float(slope)


def _scaling_summary(ns: List[int], mean_comparisons: List[float]) -> str:
    slope = _empirical_slope(ns, mean_comparisons)
    if slope is None:
        return "Not enough data to estimate how comparisons scale."
    if slope < 0.8:
        family = "sub-linear"
    elif slope < 1.3:
        family = "O(n), typical of nearly sorted input"
    elif slope < 1.7:
        family = "between O(n) and O(n^2)"
    else:
        family = "O(n^2)"
    return f"Comparisons grow with empirical slope ≈ {slope:.2f} on a log-log scale, which suggests {family}."


def compare_strategies(
    ns: List[int],
    labels: Optional[Sequence[str]] = None,
    repeats: int = 5,
    ci_method: str = "t",
    confidence: float = 0.95,
    max_value: int = MAX_VALUE,
    seed: Optional[int] = 42,
    reference_curves: Tuple[str, ...] = ("n", "n**2"),
    html_out: Optional[str] = "report.html",
    title: str = "Sorting Strategy Comparison",
    notes: Optional[str] = None,
    verbose: bool = True,
) -> ComparisonResult:
    """
    Run every selected strategy on the same seeded random inputs for each
    size in `ns`, collect comparison/exchange counts and timings, and render
    an HTML report when `html_out` is set.
    """
    if not isinstance(ns, list) or not ns:
        raise ValueError("ns must be a non-empty list of integers.")
    for n in ns:
        if not isinstance(n, int) or n <= 0:
            raise ValueError("All values in ns must be positive integers.")
    if not isinstance(repeats, int) or repeats < 1:
        raise ValueError("repeats must be a positive integer.")
    if ci_method not in ("t", "bootstrap"):
        raise ValueError("ci_method must be 't' or 'bootstrap'")

    # resolve up front so an unknown label fails before any work is done
    strategies: Dict[str, SortStrategy] = {}
    for requested in (labels or available_labels()):
        strategy = get_sort_strategy_by_label(requested)
        strategies.setdefault(strategy.label, strategy)
    labels = list(strategies)

    if verbose:
        print(f"Comparing {', '.join(labels)} on n = {ns} ({repeats} repeats each)...")

    stats: Dict[str, StrategyStats] = {
        s.label: StrategyStats(label=s.label, exchange_name=s.exchange_name)
        for s in strategies.values()
    }

    rng = np.random.default_rng(seed)
    for n in ns:
        inputs = [random_numbers(n, max_value=max_value, rng=rng) for _ in range(repeats)]
        for strategy in strategies.values():
            s = stats[strategy.label]
            comps: List[int] = []
            exch: List[int] = []
            times: List[float] = []
            for data in inputs:
                values = list(data)
                strategy.sort(values)
                report = strategy.last_report
                if values != sorted(data):
                    s.errors.append(f"n={n}: output is not a sorted permutation of the input")
                comps.append(report.comparisons)
                exch.append(report.exchanges)
                times.append(report.elapsed)
            s.comparisons[n] = comps
            s.exchanges[n] = exch
            s.times[n] = times
            s.comparisons_ci[n] = confidence_interval(comps, ci_method, confidence)
            s.exchanges_ci[n] = confidence_interval(exch, ci_method, confidence)
            s.time_ci[n] = confidence_interval(times, ci_method, confidence)

    def _series(attr: str) -> Tuple[Dict[str, List[float]], Dict[str, List[float]], Dict[str, List[float]]]:
        means, lowers, uppers = {}, {}, {}
        for label, s in stats.items():
            cis = getattr(s, attr)
            means[label] = [cis[n].mean for n in ns]
            lowers[label] = [cis[n].lower for n in ns]
            uppers[label] = [cis[n].upper for n in ns]
        return means, lowers, uppers

    comp_means, comp_lo, comp_hi = _series("comparisons_ci")
    exch_means, exch_lo, exch_hi = _series("exchanges_ci")
    time_means, time_lo, time_hi = _series("time_ci")

    for label, s in stats.items():
        s.scaling_summary = _scaling_summary(ns, comp_means[label])

    anchor_values = [v[-1] for v in time_means.values() if v and math.isfinite(v[-1])]
    y_anchor = float(np.mean(anchor_values)) if anchor_values else 1.0
    ref_curves = build_reference_curves(ns, reference_curves, y_anchor)

    comparisons_fig = counts_figure(ns, comp_means, comp_lo, comp_hi, title, metric="Comparisons")
    exchanges_fig = counts_figure(ns, exch_means, exch_lo, exch_hi, title, metric="Swaps / Shifts")
    runtime_fig = runtime_figure(ns, time_means, time_lo, time_hi, ref_curves, title)

    summary_table: List[Dict[str, Any]] = []
    comparison_rows: List[Dict[str, Any]] = []
    for i, n in enumerate(ns):
        row: Dict[str, Any] = {"n": n}
        for label in labels:
            row[label] = {
                "comparisons": comp_means[label][i],
                "exchanges": exch_means[label][i],
                "time": time_means[label][i],
            }
        summary_table.append(row)

        ranks = rank([time_means[label][i] for label in labels])
        comparison_rows.append({
            "n": n,
            "fastest": labels[ranks.index(1)],
            "slowest": labels[ranks.index(len(labels))],
        })

    methods_text = (
        f"- **Inputs**: {repeats} random lists per size with values in `[0, {max_value})`, "
        f"seed `{seed}`; every strategy sorts the same lists.\n"
        "- **Counts**: comparisons and swaps/shifts are tallied inside each algorithm run.\n"
        "- **Runtime** measured with `time.perf_counter()` around each sort.\n"
        f"- **Confidence Intervals**: {ci_method.upper()} at {int(round(100 * confidence))}% confidence."
    )
    sections = ReportSections(
        methods_text=methods_text,
        scaling_summaries={label: s.scaling_summary for label, s in stats.items()},
        exchange_names={label: s.exchange_name for label, s in stats.items()},
        errors={label: s.errors for label, s in stats.items() if s.errors},
    )

    html_path = os.path.abspath(html_out) if html_out else None
    html = build_report_html(
        title=title,
        notes=notes,
        ns=ns,
        summary_table=summary_table,
        comparison_rows=comparison_rows,
        comparisons_fig=comparisons_fig,
        exchanges_fig=exchanges_fig,
        runtime_fig=runtime_fig,
        sections=sections,
        html_path=html_path,
    )

    if html_out:
        with open(html_out, "w", encoding="utf-8") as f:
            f.write(html)

    if verbose:
        if html_path:
            print(f"Comparison complete. Report saved to: {html_path}")
        else:
            print("Comparison complete. (No report file saved)")

    return ComparisonResult(html=html, html_path=html_path, title=title, ns=ns, stats=stats)
