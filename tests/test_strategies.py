from __future__ import annotations

import random
from collections import Counter

import pytest

from sortscope import BubbleSort, InsertionSort, SortCounters, bubble_sort, insertion_sort


def _inversions(values):
    return sum(1 for i in range(len(values)) for j in range(i + 1, len(values)) if values[i] > values[j])


@pytest.mark.parametrize("strategy_cls", [BubbleSort, InsertionSort])
def test_sort_yields_sorted_permutation(strategy_cls):
    rng = random.Random(1234)
    strategy = strategy_cls()
    for size in (0, 1, 2, 3, 7, 50, 200):
        data = [rng.randint(-50, 50) for _ in range(size)]
        values = list(data)
        out = strategy.sort(values)
        assert out is values
        assert values == sorted(data)
        assert Counter(values) == Counter(data)
        assert strategy.last_report.exchanges == _inversions(data)


def test_bubble_sort_reference_trace():
    strategy = BubbleSort()
    values = [5, 3, 1, 4, 2]
    strategy.sort(values)
    report = strategy.last_report
    assert values == [1, 2, 3, 4, 5]
    assert report.passes == 4
    assert report.comparisons == 10
    assert report.exchanges == 7
    assert report.steps == 17
    assert report.exchange_name == "swaps"


def test_bubble_sort_already_sorted_makes_one_confirming_pass():
    values = list(range(10))
    counters = SortCounters()
    bubble_sort(values, counters)
    assert counters.passes == 1
    assert counters.comparisons == 9
    assert counters.exchanges == 0


def test_insertion_sort_already_sorted_has_no_shifts():
    strategy = InsertionSort()
    values = [1, 2, 3]
    strategy.sort(values)
    report = strategy.last_report
    assert values == [1, 2, 3]
    assert report.exchanges == 0
    assert report.comparisons == 2
    assert report.exchange_name == "shifts"


def test_insertion_sort_counts_on_reversed_input():
    values = [4, 3, 2, 1]
    counters = SortCounters()
    insertion_sort(values, counters)
    assert values == [1, 2, 3, 4]
    assert counters.exchanges == 6
    assert counters.comparisons == 6
    assert counters.passes == 3


@pytest.mark.parametrize("strategy_cls", [BubbleSort, InsertionSort])
def test_duplicates_are_preserved(strategy_cls):
    values = [2, 2, 1]
    strategy_cls().sort(values)
    assert values == [1, 2, 2]


@pytest.mark.parametrize("strategy_cls", [BubbleSort, InsertionSort])
@pytest.mark.parametrize("data", [[], [42]])
def test_trivial_inputs_report_zero(strategy_cls, data):
    strategy = strategy_cls()
    values = list(data)
    strategy.sort(values)
    report = strategy.last_report
    assert values == data
    assert report.size == len(data)
    assert report.comparisons == 0
    assert report.exchanges == 0
    assert report.passes == 0


@pytest.mark.parametrize("strategy_cls", [BubbleSort, InsertionSort])
def test_sort_info_before_any_sort_is_empty(strategy_cls):
    strategy = strategy_cls()
    assert strategy.get_sort_info() == ""
    assert strategy.last_report is None


def test_sort_info_describes_last_run_only():
    strategy = InsertionSort()
    strategy.sort([3, 1, 2])
    first = strategy.last_report
    strategy.sort([1, 2])
    info = strategy.get_sort_info()
    assert "Algorithm: Insertion Sort" in info
    assert "Elements: 2" in info
    assert "Shifts: 0" in info
    assert "Sorted: 1 2" in info
    # earlier reports are not mutated by later runs
    assert first.result == (1, 2, 3)
    assert first.exchanges == 2


def test_report_text_and_dict():
    strategy = BubbleSort()
    strategy.sort([-1, -5, 0])
    report = strategy.last_report
    text = report.describe(show_result=False)
    assert "Swaps: 1" in text
    assert "Sorted:" not in text
    data = report.to_dict()
    assert data["swaps"] == 1
    assert data["result"] == [-5, -1, 0]
    assert data["steps"] == report.comparisons + 1
    with pytest.raises(AttributeError):
        report.comparisons = 0


def test_strategies_share_no_state():
    a, b = BubbleSort(), BubbleSort()
    a.sort([2, 1])
    assert b.last_report is None
