"""Command-line entry point: ``springcount INPUT [parallel|serial]``."""

from __future__ import annotations

import argparse
import logging
import sys
import time

from . import __version__, solve_file
from ._errors import SpringcountError
from ._row import DEFAULT_REPEAT_COUNT

logger = logging.getLogger(__name__)


def _positive_int(text: str) -> int:
    try:
        value = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected an integer, got {text!r}") from None
    if value < 1:
        raise argparse.ArgumentTypeError(f"expected a positive integer, got {value}")
    return value


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="springcount",
        description="Sum spring arrangement counts for each row, as given and unfolded.",
    )
    parser.add_argument("input", help="puzzle input file, e.g. input.txt")
    parser.add_argument(
        "mode",
        nargs="?",
        choices=("parallel", "serial"),
        default="parallel",
        help="execution strategy (default: parallel)",
    )
    parser.add_argument(
        "--workers", type=_positive_int, default=None,
        help="worker processes in parallel mode (default: CPU count)",
    )
    parser.add_argument(
        "--repeat", type=_positive_int, default=DEFAULT_REPEAT_COUNT,
        help=f"unfold factor for part 2 (default: {DEFAULT_REPEAT_COUNT})",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    start = time.perf_counter()
    try:
        totals = solve_file(
            args.input,
            parallel=args.mode == "parallel",
            workers=args.workers,
            repeat_count=args.repeat,
        )
    except SpringcountError as exc:
        logger.debug("run failed", exc_info=True)
        print(f"error: {exc}", file=sys.stderr)
        return 1
    elapsed_us = int((time.perf_counter() - start) * 1_000_000)

    print(f"Part 1: {totals.primal}")
    print(f"Part 2: {totals.expanded}")
    print(f"Elapsed {elapsed_us}us")
    return 0
