# src/sortscope/inputs.py
from __future__ import annotations

from typing import Iterable, List, Optional

import numpy as np

MAX_LIST_SIZE = 10000
MAX_VALUE = 10000
INVALID_INPUT_MESSAGE = "Invalid input. Please enter valid numbers."


class InvalidInputError(ValueError):
    """Raised for user-supplied number lists containing non-integer tokens."""

    def __init__(self, token: str) -> None:
        self.token = token
        super().__init__(f"{INVALID_INPUT_MESSAGE} (got {token!r})")


def parse_numbers(text: str) -> List[int]:
    """
    Parse whitespace-separated integers. Blank text gives an empty list; any
    token that is not an integer rejects the whole input.
    """
    numbers: List[int] = []
    for token in (text or "").split():
        try:
            numbers.append(int(token))
        except ValueError:
            raise InvalidInputError(token) from None
    return numbers


def format_numbers(values: Iterable[int]) -> str:
    return " ".join(str(v) for v in values)


def random_numbers(
    n: int,
    max_value: int = MAX_VALUE,
    rng: Optional[np.random.Generator] = None,
) -> List[int]:
    """Exactly `n` integers drawn uniformly from [0, max_value)."""
    if n < 0:
        raise ValueError("n must be non-negative.")
    if max_value <= 0:
        raise ValueError("max_value must be a positive integer.")
    rng = rng if rng is not None else np.random.default_rng()
    return [int(x) for x in rng.integers(0, max_value, size=n)]


def generate_random_list(
    max_size: int = MAX_LIST_SIZE,
    max_value: int = MAX_VALUE,
    seed: Optional[int] = None,
) -> List[int]:
    """
    Random list whose length is itself random in [0, max_size), with values
    in [0, max_value).
    """
    if max_size <= 0:
        raise ValueError("max_size must be a positive integer.")
    rng = np.random.default_rng(seed)
    size = int(rng.integers(0, max_size))
    return random_numbers(size, max_value=max_value, rng=rng)
