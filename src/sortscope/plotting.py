# src/sortscope/plotting.py
from __future__ import annotations

from typing import Dict, List, Tuple

import numpy as np
import plotly.graph_objects as go

COLORS = [
    '#4285f4',  # Blue
    '#ea4335',  # Red
    '#34a853',  # Green
    '#fbbc04',  # Yellow
    '#9c27b0',  # Purple
    '#00bcd4',  # Cyan
]
REF_COLORS = ['#64748b', '#94a3b8', '#cbd5e1', '#e2e8f0']


def _reference_funcs():
    return {
        "1": lambda n: np.ones_like(n, dtype=float),
        "n": lambda n: n.astype(float),
        "nlogn": lambda n: n.astype(float) * np.log2(np.maximum(n, 2)),
        "n**2": lambda n: n.astype(float) ** 2,
    }


def _eval_custom_curve(expr: str):
    """
    Evaluate simple expressions like 'n**3' or 'n*log2(n)' over a minimal namespace.
    """
    def f(n: np.ndarray) -> np.ndarray:
        local_ns = {"n": n.astype(float), "np": np, "log": np.log, "log2": np.log2}
        return eval(expr, {"__builtins__": {}}, local_ns)  # controlled eval
    return f


def build_reference_curves(
    ns: List[int],
    ref_specs: Tuple[str, ...],
    y_anchor: float,
    normalize_at: str = "max",
) -> Dict[str, np.ndarray]:
    """
    Returns dict: name -> np.ndarray of values scaled so that the curve passes
    through `y_anchor` at the smallest ("min") or largest ("max") n.
    """
    n_arr = np.array(ns, dtype=float)
    funcs = _reference_funcs()
    curves = {}

    if not np.isfinite(y_anchor) or y_anchor <= 0:
        y_anchor = 1.0

    idx = 0 if normalize_at == "min" else len(n_arr) - 1
    for spec in ref_specs:
        raw = funcs[spec](n_arr) if spec in funcs else _eval_custom_curve(spec)(n_arr)
        raw = np.maximum(np.asarray(raw, dtype=float), 1e-12)
        if np.isfinite(raw[idx]) and raw[idx] != 0:
            scale = y_anchor / raw[idx]
        else:
            scale = 1.0
        curves[spec] = raw * scale
    return curves


def _add_band_and_mean(fig: go.Figure, x, label: str, y_mean, y_lo, y_hi, color: str, hover: str) -> None:
    # upper band
    fig.add_trace(go.Scatter(
        x=x, y=y_hi, line=dict(width=0), hoverinfo="skip", showlegend=False,
        fillcolor=color, opacity=0.1
    ))
    # lower band with fill
    fig.add_trace(go.Scatter(
        x=x, y=y_lo, fill="tonexty", line=dict(width=0),
        name=f"{label} CI", hoverinfo="skip", showlegend=False,
        fillcolor=color, opacity=0.2
    ))
    fig.add_trace(go.Scatter(
        x=x, y=y_mean, mode="lines+markers", name=label,
        marker=dict(size=8, color=color, line=dict(width=2, color='white')),
        line=dict(width=3, dash="solid", color=color),
        hovertemplate=f"<b>{label}</b><br>Input size: %{{x}}<br>{hover}<extra></extra>",
    ))


def _style(fig: go.Figure, title: str, y_title: str, log_y: bool) -> go.Figure:
    fig.update_layout(
        title=dict(text=title, x=0.5, font=dict(size=22, color='#1e293b', family="Inter, sans-serif")),
        xaxis_title="Input Size (n)",
        yaxis_title=y_title,
        hovermode="x unified",
        template="plotly_white",
        legend=dict(orientation="h", yanchor="bottom", y=1.02, xanchor="left", x=0.01),
        margin=dict(l=80, r=40, t=100, b=80),
        height=600,
        font=dict(family="Inter, sans-serif", size=13, color='#374151'),
    )
    fig.update_xaxes(type="linear", showline=True, mirror=True, zeroline=False)
    fig.update_yaxes(type="log" if log_y else "linear", showline=True, mirror=True, zeroline=False)
    return fig


def runtime_figure(
    ns: List[int],
    means: Dict[str, List[float]],
    lowers: Dict[str, List[float]],
    uppers: Dict[str, List[float]],
    reference_curves: Dict[str, np.ndarray],
    title: str,
) -> go.Figure:
    fig = go.Figure()
    for i, (label, y_mean) in enumerate(means.items()):
        _add_band_and_mean(
            fig, ns, label, y_mean, lowers[label], uppers[label],
            COLORS[i % len(COLORS)], "Time: %{y:.6f}s",
        )

    for i, (rname, ry) in enumerate(reference_curves.items()):
        fig.add_trace(go.Scatter(
            x=ns, y=ry, mode="lines", name=f"O({rname})",
            line=dict(dash="dot", width=2, color=REF_COLORS[i % len(REF_COLORS)]),
            opacity=0.7,
        ))
    return _style(fig, title + " — Runtime", "Time (seconds)", log_y=True)


def counts_figure(
    ns: List[int],
    means: Dict[str, List[float]],
    lowers: Dict[str, List[float]],
    uppers: Dict[str, List[float]],
    title: str,
    metric: str = "Comparisons",
) -> go.Figure:
    """
    Mean operation counts (comparisons, swaps or shifts) per input size.
    """
    fig = go.Figure()
    for i, (label, y_mean) in enumerate(means.items()):
        _add_band_and_mean(
            fig, ns, label, y_mean, lowers[label], uppers[label],
            COLORS[i % len(COLORS)], metric + ": %{y:,.0f}",
        )
    return _style(fig, f"{title} — {metric}", metric, log_y=False)
