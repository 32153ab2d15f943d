# src/sortscope/cli.py
from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

from .analyze import compare_strategies
from .inputs import MAX_LIST_SIZE, MAX_VALUE, format_numbers, generate_random_list, parse_numbers
from .io import export_report_json, export_results_json
from .logging_utils import setup_logging
from .selector import UnknownStrategyError, available_labels, get_sort_strategy_by_label

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="sortscope", description="Sort integers with interchangeable strategies")
    ap.add_argument("--log-level", default="WARNING", help="Logging level (DEBUG, INFO, WARNING, ...)")
    sub = ap.add_subparsers(dest="cmd", required=True)

    p_sort = sub.add_parser("sort", help="Sort a list of integers and print the sort information")
    p_sort.add_argument("numbers", nargs="*", help="Numbers to sort (otherwise --input, --random or stdin)")
    p_sort.add_argument("-a", "--algorithm", default=available_labels()[0], help="Strategy label, e.g. 'Insertion Sort'")
    p_sort.add_argument("--input", dest="input_text", help="Whitespace-separated numbers")
    p_sort.add_argument("--random", action="store_true", help="Sort a randomly generated list")
    p_sort.add_argument("--max-size", type=int, default=MAX_LIST_SIZE)
    p_sort.add_argument("--max-value", type=int, default=MAX_VALUE)
    p_sort.add_argument("--seed", type=int, default=None)
    p_sort.add_argument("--quiet-result", action="store_true", help="Omit the sorted values from the output")
    p_sort.add_argument("--json", dest="json_out", help="Also write the sort report as JSON to this path")

    sub.add_parser("list", help="List available sorting strategies")

    p_cmp = sub.add_parser("compare", help="Benchmark strategies on random inputs and build an HTML report")
    p_cmp.add_argument("--ns", type=int, nargs="+", default=[100, 200, 400, 800])
    p_cmp.add_argument("-a", "--algorithm", action="append", dest="algorithms", help="Repeatable; defaults to all")
    p_cmp.add_argument("--repeats", type=int, default=5)
    p_cmp.add_argument("--ci-method", choices=("t", "bootstrap"), default="t")
    p_cmp.add_argument("--seed", type=int, default=42)
    p_cmp.add_argument("--html-out", default="report.html")
    p_cmp.add_argument("--json-out", default=None)
    p_cmp.add_argument("--title", default="Sorting Strategy Comparison")
    return ap


def _read_numbers(args: argparse.Namespace) -> List[int]:
    if args.random:
        return generate_random_list(max_size=args.max_size, max_value=args.max_value, seed=args.seed)
    if args.numbers:
        return parse_numbers(" ".join(args.numbers))
    if args.input_text is not None:
        return parse_numbers(args.input_text)
    return parse_numbers(sys.stdin.read())


def _cmd_sort(args: argparse.Namespace) -> int:
    strategy = get_sort_strategy_by_label(args.algorithm)
    numbers = _read_numbers(args)
    if not numbers:
        print("Nothing to sort.")
        return 0
    if args.random:
        logger.info("generated %d random numbers", len(numbers))
        print("Input: " + format_numbers(numbers))

    strategy.sort(numbers)
    report = strategy.last_report
    print(report.describe(show_result=not args.quiet_result))
    if args.json_out:
        export_report_json(report, args.json_out)
        logger.info("sort report written to %s", args.json_out)
    return 0


def _cmd_compare(args: argparse.Namespace) -> int:
    result = compare_strategies(
        ns=args.ns,
        labels=args.algorithms,
        repeats=args.repeats,
        ci_method=args.ci_method,
        seed=args.seed,
        html_out=args.html_out,
        title=args.title,
    )
    if args.json_out:
        export_results_json(result, args.json_out)
        print(f"Results JSON saved to: {args.json_out}")
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(args.log_level)

    try:
        if args.cmd == "list":
            for label in available_labels():
                print(label)
            return 0
        if args.cmd == "sort":
            return _cmd_sort(args)
        return _cmd_compare(args)
    except (UnknownStrategyError, ValueError) as e:
        # InvalidInputError is a ValueError
        print(f"error: {e}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    sys.exit(main())
