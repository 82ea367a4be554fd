"""Reusable per-worker buffers for expansion and counting."""

from __future__ import annotations

from typing import TypeVar

from ._types import Record

_T = TypeVar("_T")


def grow(buf: list[_T], size: int, fill: _T) -> None:
    """Extend ``buf`` to at least ``size`` items. Never shrinks."""
    missing = size - len(buf)
    if missing > 0:
        buf.extend([fill] * missing)


def resize(buf: list[_T], size: int, fill: _T) -> None:
    """Make ``buf`` exactly ``size`` items long, padding with ``fill``."""
    if len(buf) > size:
        del buf[size:]
    else:
        grow(buf, size, fill)


class Scratch:
    """Private working storage for one worker.

    Holds the DP table, the damage-run lookahead and the expansion buffers.
    Contents are stale between calls: every consumer writes each cell it
    reads for the current dimensions before reading it. A Scratch must never
    be used by two in-flight calls at once.
    """

    __slots__ = ("dp", "lookahead", "records", "groups")

    def __init__(self) -> None:
        self.dp: list[int] = []
        self.lookahead: list[int] = []
        self.records: list[Record] = []
        self.groups: list[int] = []

    def reserve(self, n_records: int, n_groups: int) -> tuple[list[int], list[int]]:
        """Grow the DP table and lookahead to fit the given dimensions.

        Returns (dp, lookahead). The table is flat, row-major by group index,
        with ``n_records + 1`` columns per row.
        """
        grow(self.dp, (n_groups + 1) * (n_records + 1), 0)
        grow(self.lookahead, n_records + 1, 0)
        return self.dp, self.lookahead
