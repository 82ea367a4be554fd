"""Aggregation of per-row counts, serially or across worker processes."""

from __future__ import annotations

import logging
import os
from concurrent.futures import ProcessPoolExecutor
from functools import partial
from typing import Sequence

from ._counter import count_row
from ._row import DEFAULT_REPEAT_COUNT, parse_rows
from ._scratch import Scratch
from ._types import Row, Totals

logger = logging.getLogger(__name__)

# Chunks handed to each worker, on average. More chunks balance uneven rows.
_CHUNKS_PER_WORKER = 4

# Per-process scratch, created by the pool initializer.
_worker_scratch: Scratch | None = None


def _init_worker() -> None:
    global _worker_scratch
    _worker_scratch = Scratch()


def _fold(rows: Sequence[Row], scratch: Scratch, repeat_count: int) -> Totals:
    primal_total = 0
    expanded_total = 0
    for row in rows:
        primal, expanded = count_row(row, scratch, repeat_count)
        primal_total += primal
        expanded_total += expanded
    return Totals(primal_total, expanded_total)


def _solve_chunk(rows: Sequence[Row], repeat_count: int) -> Totals:
    scratch = _worker_scratch if _worker_scratch is not None else Scratch()
    return _fold(rows, scratch, repeat_count)


def solve_serial(
    rows: Sequence[Row], *, repeat_count: int = DEFAULT_REPEAT_COUNT
) -> Totals:
    """Count every row in order, reusing one scratch for the whole run."""
    logger.debug("solving %d rows serially", len(rows))
    return _fold(rows, Scratch(), repeat_count)


def solve_parallel(
    rows: Sequence[Row],
    *,
    workers: int | None = None,
    chunksize: int | None = None,
    repeat_count: int = DEFAULT_REPEAT_COUNT,
) -> Totals:
    """Fan rows out to a process pool and sum the per-chunk totals.

    Each worker process owns one Scratch for its lifetime. A single row is
    never split across workers.

    Args:
        rows: Parsed rows.
        workers: Number of worker processes. Defaults to ``os.cpu_count()``.
        chunksize: Rows per task. Defaults to an even split giving each
            worker about four tasks.
        repeat_count: Unfold factor for the expanded view.
    """
    if not rows:
        return Totals()
    if workers is None:
        workers = os.cpu_count() or 1
    if workers < 1:
        raise ValueError(f"workers must be >= 1, got {workers}")
    if chunksize is None:
        chunksize = max(1, -(-len(rows) // (workers * _CHUNKS_PER_WORKER)))
    elif chunksize < 1:
        raise ValueError(f"chunksize must be >= 1, got {chunksize}")

    chunks = [rows[i:i + chunksize] for i in range(0, len(rows), chunksize)]
    logger.debug(
        "solving %d rows in %d chunks on %d workers",
        len(rows), len(chunks), workers,
    )

    totals = Totals()
    with ProcessPoolExecutor(max_workers=workers, initializer=_init_worker) as pool:
        for chunk_totals in pool.map(partial(_solve_chunk, repeat_count=repeat_count), chunks):
            totals += chunk_totals
    return totals


def solve(
    data: bytes | str,
    *,
    parallel: bool = True,
    workers: int | None = None,
    repeat_count: int = DEFAULT_REPEAT_COUNT,
) -> Totals:
    """Parse raw puzzle input and return the (primal, expanded) totals."""
    rows = parse_rows(data)
    if parallel:
        return solve_parallel(rows, workers=workers, repeat_count=repeat_count)
    return solve_serial(rows, repeat_count=repeat_count)
