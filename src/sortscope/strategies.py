# src/sortscope/strategies.py
from __future__ import annotations

import logging
import time
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, MutableSequence, Optional, Tuple

from .utils import human_time

logger = logging.getLogger(__name__)


@dataclass
class SortCounters:
    """
    Mutable tallies threaded through a single sort run. Algorithms only ever
    increment these; `finalize` freezes them into a SortReport.
    """
    comparisons: int = 0
    exchanges: int = 0
    passes: int = 0

    def finalize(
        self,
        algorithm: str,
        exchange_name: str,
        values: MutableSequence[int],
        elapsed: float,
    ) -> "SortReport":
        return SortReport(
            algorithm=algorithm,
            size=len(values),
            comparisons=self.comparisons,
            exchanges=self.exchanges,
            exchange_name=exchange_name,
            passes=self.passes,
            elapsed=elapsed,
            result=tuple(values),
        )


@dataclass(frozen=True)
class SortReport:
    algorithm: str
    size: int
    comparisons: int
    exchanges: int
    exchange_name: str  # "swaps" or "shifts"
    passes: int
    elapsed: float
    result: Tuple[int, ...] = field(default_factory=tuple, repr=False)

    @property
    def steps(self) -> int:
        return self.comparisons + self.exchanges

    def describe(self, show_result: bool = True) -> str:
        """
        Human-readable sort info, one "Label: value" per line.
        """
        lines = [
            f"Algorithm: {self.algorithm}",
            f"Elements: {self.size}",
            f"Passes: {self.passes}",
            f"Comparisons: {self.comparisons}",
            f"{self.exchange_name.capitalize()}: {self.exchanges}",
            f"Steps: {self.steps}",
            f"Elapsed: {human_time(self.elapsed)}",
        ]
        if show_result:
            lines.append("Sorted: " + " ".join(str(v) for v in self.result))
        return "\n".join(lines)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "algorithm": self.algorithm,
            "size": self.size,
            "comparisons": self.comparisons,
            self.exchange_name: self.exchanges,
            "passes": self.passes,
            "steps": self.steps,
            "elapsed": self.elapsed,
            "result": list(self.result),
        }


# ----------------------
# Algorithms
# ----------------------
def bubble_sort(values: MutableSequence[int], counters: SortCounters) -> MutableSequence[int]:
    """
    Bubble sort in place. Each pass bubbles the largest remaining value to the
    end of the unsorted prefix; stops after the first pass without a swap.
    """
    end = len(values) - 1
    while end > 0:
        counters.passes += 1
        swapped = False
        for j in range(end):
            counters.comparisons += 1
            if values[j] > values[j + 1]:
                values[j], values[j + 1] = values[j + 1], values[j]
                counters.exchanges += 1
                swapped = True
        if not swapped:
            break
        end -= 1
    return values


def insertion_sort(values: MutableSequence[int], counters: SortCounters) -> MutableSequence[int]:
    """
    Insertion sort in place. Every element moved one slot to the right counts
    as a shift; every key-vs-prefix test counts as a comparison.
    """
    for i in range(1, len(values)):
        counters.passes += 1
        key = values[i]
        j = i - 1
        while j >= 0:
            counters.comparisons += 1
            if values[j] <= key:
                break
            values[j + 1] = values[j]
            counters.exchanges += 1
            j -= 1
        values[j + 1] = key
    return values


# ----------------------
# Strategy contract
# ----------------------
class SortStrategy(ABC):
    """
    Interchangeable sorting algorithm. `sort` orders a list of integers in
    place (and returns it); `get_sort_info` describes the most recent run.
    """

    label: str = ""
    exchange_name: str = "exchanges"

    def __init__(self) -> None:
        self._last_report: Optional[SortReport] = None

    @abstractmethod
    def _algorithm(self) -> Callable[[MutableSequence[int], SortCounters], MutableSequence[int]]:
        ...

    @property
    def last_report(self) -> Optional[SortReport]:
        return self._last_report

    def sort(self, values: MutableSequence[int]) -> MutableSequence[int]:
        counters = SortCounters()
        run = self._algorithm()
        t0 = time.perf_counter()
        run(values, counters)
        elapsed = time.perf_counter() - t0
        self._last_report = counters.finalize(self.label, self.exchange_name, values, elapsed)
        logger.debug(
            "%s: n=%d comparisons=%d %s=%d",
            self.label, len(values), counters.comparisons, self.exchange_name, counters.exchanges,
        )
        return values

    def get_sort_info(self) -> str:
        # Empty until the first sort has run.
        if self._last_report is None:
            return ""
        return self._last_report.describe()

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class BubbleSort(SortStrategy):
    label = "Bubble Sort"
    exchange_name = "swaps"

    def _algorithm(self):
        return bubble_sort


class InsertionSort(SortStrategy):
    label = "Insertion Sort"
    exchange_name = "shifts"

    def _algorithm(self):
        return insertion_sort
