# src/sortscope/__init__.py
from .strategies import (
    BubbleSort,
    InsertionSort,
    SortCounters,
    SortReport,
    SortStrategy,
    bubble_sort,
    insertion_sort,
)
from .selector import (
    STRATEGIES,
    UnknownStrategyError,
    available_labels,
    find_sort_strategy,
    get_sort_strategy_by_label,
)
from .inputs import InvalidInputError, format_numbers, generate_random_list, parse_numbers, random_numbers
from .analyze import ComparisonResult, StrategyStats, compare_strategies
from .io import export_report_json, export_results_json

__version__ = "0.1.0"

__all__ = [
    "BubbleSort",
    "InsertionSort",
    "SortCounters",
    "SortReport",
    "SortStrategy",
    "bubble_sort",
    "insertion_sort",
    "STRATEGIES",
    "UnknownStrategyError",
    "available_labels",
    "find_sort_strategy",
    "get_sort_strategy_by_label",
    "InvalidInputError",
    "format_numbers",
    "generate_random_list",
    "parse_numbers",
    "random_numbers",
    "ComparisonResult",
    "StrategyStats",
    "compare_strategies",
    "export_report_json",
    "export_results_json",
]
