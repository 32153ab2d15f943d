# src/sortscope/utils.py
from __future__ import annotations

import math
import statistics
from dataclasses import dataclass
from typing import Iterable, List, Optional

import numpy as np

@dataclass
class CIResult:
    mean: float
    std: float
    n: int
    lower: float
    upper: float
    method: str  # "t" or "bootstrap"


def _t_critical_95(df: int) -> float:
    table = {
        1: 12.706, 2: 4.303, 3: 3.182, 4: 2.776, 5: 2.571,
        6: 2.447, 7: 2.365, 8: 2.306, 9: 2.262, 10: 2.228,
        11: 2.201, 12: 2.179, 13: 2.160, 14: 2.145, 15: 2.131,
        16: 2.120, 17: 2.110, 18: 2.101, 19: 2.093, 20: 2.086,
        21: 2.080, 22: 2.074, 23: 2.069, 24: 2.064, 25: 2.060,
        26: 2.056, 27: 2.052, 28: 2.048, 29: 2.045, 30: 2.042,
        40: 2.021, 50: 2.009, 60: 2.000,
    }
    if df <= 30:
        return table[df]
    for bound in (40, 50, 60):
        if df <= bound:
            return table[bound]
    return 1.96


def t_confidence_interval(samples: Iterable[float], confidence: float = 0.95) -> CIResult:
    xs = [float(x) for x in samples]
    n = len(xs)
    mean = statistics.fmean(xs) if n > 0 else float("nan")
    if n <= 1:
        return CIResult(mean, 0.0, n, mean, mean, "t")
    std = statistics.stdev(xs)
    if abs(confidence - 0.95) > 1e-9:
        from statistics import NormalDist
        z = NormalDist().inv_cdf(0.5 + confidence / 2.0)
        half = z * std / math.sqrt(n)
    else:
        half = _t_critical_95(n - 1) * std / math.sqrt(n)
    return CIResult(mean, std, n, mean - half, mean + half, "t")


def bootstrap_confidence_interval(
    samples: Iterable[float],
    confidence: float = 0.95,
    n_boot: int = 2000,
    seed: int = 42,
) -> CIResult:
    xs = np.asarray(list(samples), dtype=float)
    n = xs.size
    mean = float(np.mean(xs)) if n > 0 else float("nan")
    std = float(np.std(xs, ddof=1)) if n > 1 else 0.0
    if n <= 1:
        return CIResult(mean, std, n, mean, mean, "bootstrap")
    rng = np.random.default_rng(seed)
    boots = np.empty(n_boot, dtype=float)
    for i in range(n_boot):
        boots[i] = float(np.mean(xs[rng.integers(0, n, size=n)]))
    alpha = (1.0 - confidence) / 2.0
    lower = float(np.quantile(boots, alpha))
    upper = float(np.quantile(boots, 1.0 - alpha))
    return CIResult(mean, std, n, lower, upper, "bootstrap")


def confidence_interval(samples: Iterable[float], method: str = "t", confidence: float = 0.95) -> CIResult:
    if method == "t":
        return t_confidence_interval(samples, confidence)
    if method == "bootstrap":
        return bootstrap_confidence_interval(samples, confidence)
    raise ValueError("ci_method must be 't' or 'bootstrap'")


def human_time(seconds: Optional[float]) -> str:
    if seconds is None or not (isinstance(seconds, (int, float)) and math.isfinite(seconds)):
        return "—"
    if seconds < 1e-6:
        return f"{seconds*1e9:.2f} ns"
    if seconds < 1e-3:
        return f"{seconds*1e6:.2f} µs"
    if seconds < 1.0:
        return f"{seconds*1e3:.2f} ms"
    return f"{seconds:.3f} s"


def human_count(value: Optional[float]) -> str:
    if value is None or not math.isfinite(value):
        return "—"
    if float(value).is_integer():
        return f"{int(value):,}"
    return f"{value:,.1f}"


def rank(values: List[float]) -> List[int]:
    indexed = sorted(enumerate(values), key=lambda t: t[1])
    ranks = [0] * len(values)
    for r, (orig_idx, _) in enumerate(indexed, start=1):
        ranks[orig_idx] = r
    return ranks
