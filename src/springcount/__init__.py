"""Springcount: count damaged-spring arrangements that match run-length groups."""

from __future__ import annotations

from typing import TYPE_CHECKING

from ._aggregate import solve, solve_parallel, solve_serial
from ._counter import count, count_row
from ._errors import ParseError, SpringcountError
from ._loader import load_rows, read_input
from ._row import DEFAULT_REPEAT_COUNT, expand, parse_row, parse_rows, split_lines
from ._scratch import Scratch
from ._types import Record, Row, Totals

if TYPE_CHECKING:
    from pathlib import Path

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "count",
    "count_row",
    "expand",
    "load_rows",
    "parse_row",
    "parse_rows",
    "read_input",
    "solve",
    "solve_file",
    "solve_parallel",
    "solve_serial",
    "split_lines",
    "DEFAULT_REPEAT_COUNT",
    "ParseError",
    "Record",
    "Row",
    "Scratch",
    "SpringcountError",
    "Totals",
]


def solve_file(
    path: Path | str,
    *,
    parallel: bool = True,
    workers: int | None = None,
    repeat_count: int = DEFAULT_REPEAT_COUNT,
) -> Totals:
    """Read a puzzle input file and return its (primal, expanded) totals.

    Args:
        path: Input file, one ``<symbols> <lengths>`` row per line.
        parallel: Fan rows out to worker processes.
        workers: Worker process count. Defaults to the CPU count.
        repeat_count: Unfold factor for the expanded view.
    """
    return solve(
        read_input(path),
        parallel=parallel,
        workers=workers,
        repeat_count=repeat_count,
    )
