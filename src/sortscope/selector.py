# src/sortscope/selector.py
from __future__ import annotations

from typing import Dict, List, Optional, Type

from .strategies import BubbleSort, InsertionSort, SortStrategy


class UnknownStrategyError(LookupError):
    """Raised when a label does not name any registered sort strategy."""

    def __init__(self, label: str) -> None:
        self.label = label
        choices = ", ".join(available_labels())
        super().__init__(f"No such sort strategy: {label!r}. Choose one of: {choices}.")


# Display order matters: the first entry is the front end's default choice.
STRATEGIES: Dict[str, Type[SortStrategy]] = {
    BubbleSort.label: BubbleSort,
    InsertionSort.label: InsertionSort,
}


def available_labels() -> List[str]:
    return list(STRATEGIES)


def _normalize(label: str) -> str:
    return " ".join(str(label).split()).casefold()


def find_sort_strategy(label: str) -> Optional[SortStrategy]:
    """
    Case-insensitive label lookup. Returns a fresh strategy instance, or None
    when nothing matches.
    """
    wanted = _normalize(label)
    for name, cls in STRATEGIES.items():
        if _normalize(name) == wanted:
            return cls()
    return None


def get_sort_strategy_by_label(label: str) -> SortStrategy:
    strategy = find_sort_strategy(label)
    if strategy is None:
        raise UnknownStrategyError(label)
    return strategy
