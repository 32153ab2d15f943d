#!/usr/bin/env python3
"""
Pick a strategy by label at runtime and print what it did.
"""

from __future__ import annotations

import os
import sys

REPO_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
SRC_PATH = os.path.join(REPO_ROOT, "src")
if SRC_PATH not in sys.path:
    sys.path.insert(0, SRC_PATH)

from sortscope import available_labels, generate_random_list, get_sort_strategy_by_label, parse_numbers


if __name__ == "__main__":
    typed = parse_numbers("5 3 1 4 2")
    random_list = generate_random_list(max_size=20, max_value=100, seed=1)

    for label in available_labels():
        for data in (typed, random_list):
            strategy = get_sort_strategy_by_label(label)
            strategy.sort(list(data))
            print(strategy.get_sort_info())
            print("-" * 40)
