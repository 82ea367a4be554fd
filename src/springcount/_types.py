"""Data structures for springcount."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Iterator

DEFAULT_REPEAT_COUNT = 5

if TYPE_CHECKING:
    from ._scratch import Scratch


class Record(Enum):
    """Condition of a single spring."""

    CLEAR = "."
    DAMAGED = "#"
    UNKNOWN = "?"

    def __str__(self) -> str:
        return self.value


@dataclass(slots=True, frozen=True)
class Row:
    records: tuple[Record, ...]
    groups: tuple[int, ...]   # damaged run lengths, left to right, all >= 1

    def primal(self) -> tuple[tuple[Record, ...], tuple[int, ...]]:
        """Return the row's records and groups unchanged."""
        return self.records, self.groups

    def expanded(
        self, scratch: Scratch | None = None, repeat_count: int = DEFAULT_REPEAT_COUNT
    ) -> tuple[list[Record], list[int]]:
        """Return the unfolded view, written into ``scratch`` buffers.

        The returned lists belong to ``scratch`` and are overwritten by the
        next expansion that uses it.
        """
        from ._row import expand

        return expand(self.records, self.groups, repeat_count, scratch)

    def __str__(self) -> str:
        symbols = "".join(r.value for r in self.records)
        return f"{symbols} {','.join(map(str, self.groups))}"


@dataclass(slots=True, frozen=True)
class Totals:
    primal: int = 0     # sum over rows as given
    expanded: int = 0   # sum over unfolded rows

    def __add__(self, other: Totals) -> Totals:
        if not isinstance(other, Totals):
            return NotImplemented
        return Totals(self.primal + other.primal, self.expanded + other.expanded)

    def __iter__(self) -> Iterator[int]:
        yield self.primal
        yield self.expanded
