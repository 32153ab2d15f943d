from __future__ import annotations

import os

import pytest

from sortscope import compare_strategies, UnknownStrategyError


def test_basic_api(tmp_path):
    out = tmp_path / "t.html"
    res = compare_strategies(
        ns=[10, 20, 40],
        repeats=3,
        ci_method="t",
        html_out=str(out),
        title="Test Report",
        verbose=False,
    )
    assert out.exists()
    assert "Operation Counts" in res.html
    assert "Runtime Benchmarks" in res.html
    assert set(res.stats) == {"Bubble Sort", "Insertion Sort"}
    assert res.html_path == os.path.abspath(out)


def test_swaps_match_shifts_on_shared_inputs():
    res = compare_strategies(ns=[15, 30], repeats=4, html_out=None, verbose=False)
    bubble = res.stats["Bubble Sort"]
    insertion = res.stats["Insertion Sort"]
    for n in res.ns:
        # both equal the inversion count of the same input lists
        assert bubble.exchanges[n] == insertion.exchanges[n]
        assert len(bubble.comparisons[n]) == 4
    assert not bubble.errors
    assert not insertion.errors
    assert bubble.exchange_name == "swaps"
    assert insertion.exchange_name == "shifts"


def test_same_seed_gives_same_counts():
    a = compare_strategies(ns=[25], repeats=2, seed=7, html_out=None, verbose=False)
    b = compare_strategies(ns=[25], repeats=2, seed=7, html_out=None, verbose=False)
    assert a.stats["Insertion Sort"].comparisons == b.stats["Insertion Sort"].comparisons


def test_label_subset_and_case_insensitive():
    res = compare_strategies(ns=[8], labels=["insertion sort"], repeats=2, html_out=None, verbose=False)
    assert list(res.stats) == ["Insertion Sort"]


def test_bootstrap_ci():
    res = compare_strategies(ns=[12, 24], repeats=5, ci_method="bootstrap", html_out=None, verbose=False)
    ci = res.stats["Bubble Sort"].comparisons_ci[24]
    assert ci.method == "bootstrap"
    assert ci.lower <= ci.mean <= ci.upper


@pytest.mark.parametrize(
    "kwargs",
    [
        {"ns": []},
        {"ns": [0, 10]},
        {"ns": [10], "repeats": 0},
        {"ns": [10], "ci_method": "z"},
    ],
)
def test_invalid_arguments(kwargs):
    with pytest.raises(ValueError):
        compare_strategies(html_out=None, verbose=False, **kwargs)


def test_unknown_label_fails_before_running():
    with pytest.raises(UnknownStrategyError):
        compare_strategies(ns=[10], labels=["Bogo Sort"], html_out=None, verbose=False)
