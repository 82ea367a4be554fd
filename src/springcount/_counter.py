"""Arrangement counter: suffix dynamic programming over records and groups."""

from __future__ import annotations

from typing import TYPE_CHECKING, Sequence

from ._row import DEFAULT_REPEAT_COUNT, expand
from ._scratch import Scratch
from ._types import Record

if TYPE_CHECKING:
    from ._types import Row

_CLEAR = Record.CLEAR
_DAMAGED = Record.DAMAGED


def count(
    records: Sequence[Record],
    groups: Sequence[int],
    scratch: Scratch | None = None,
) -> int:
    """Count the ways to resolve every UNKNOWN so the damaged runs equal ``groups``.

    Cell (g, r) of the table holds the number of arrangements of the record
    suffix starting at r that satisfy exactly the group suffix starting at g.
    Both axes are filled right to left and the answer is cell (0, 0).

    The scratch table is not cleared between calls. Every cell is written
    before it is read for the current dimensions, so stale contents from a
    previous, differently sized call are never observed.
    """
    nr = len(records)
    ng = len(groups)
    for group_len in groups:
        if group_len < 1:
            raise ValueError(f"group lengths must be >= 1, got {group_len}")
    if scratch is None:
        scratch = Scratch()

    width = nr + 1
    dp, lookahead = scratch.reserve(nr, ng)

    # Length of the run of DAMAGED/UNKNOWN records starting at each index.
    lookahead[nr] = 0
    for i in range(nr - 1, -1, -1):
        lookahead[i] = 0 if records[i] is _CLEAR else lookahead[i + 1] + 1

    # No groups left: one arrangement while no DAMAGED record remains.
    last = ng * width
    dp[last + nr] = 1
    for i in range(nr - 1, -1, -1):
        dp[last + i] = 0 if records[i] is _DAMAGED else dp[last + i + 1]

    # Groups left but no records left.
    for gi in range(ng):
        dp[gi * width + nr] = 0

    for gi in range(ng - 1, -1, -1):
        group_len = groups[gi]
        row = gi * width
        next_row = row + width
        for ri in range(nr - 1, -1, -1):
            record = records[ri]
            if record is _CLEAR:
                dp[row + ri] = dp[row + ri + 1]
                continue

            # Commit records ri..end-1 to this group. The record at `end`
            # must not be DAMAGED, and becomes the separator, unless the run
            # reaches the end of the sequence.
            end = ri + group_len
            if lookahead[ri] >= group_len and (end >= nr or records[end] is not _DAMAGED):
                arrangements = dp[next_row + (end + 1 if end < nr else nr)]
            else:
                arrangements = 0

            if record is _DAMAGED:
                dp[row + ri] = arrangements
            else:
                dp[row + ri] = arrangements + dp[row + ri + 1]

    return dp[0]


def count_row(
    row: Row,
    scratch: Scratch | None = None,
    repeat_count: int = DEFAULT_REPEAT_COUNT,
) -> tuple[int, int]:
    """Count one row as given and unfolded. Returns (primal, expanded)."""
    if scratch is None:
        scratch = Scratch()
    primal = count(row.records, row.groups, scratch)
    records, groups = expand(row.records, row.groups, repeat_count, scratch)
    return primal, count(records, groups, scratch)
