"""Row model: line splitting, row parsing and quintuple expansion."""

from __future__ import annotations

from typing import Sequence

from ._errors import ParseError
from ._scratch import Scratch, resize
from ._types import DEFAULT_REPEAT_COUNT, Record, Row

_DECODE: dict[str, Record] = {r.value: r for r in Record}


def split_lines(data: bytes | str) -> list[str]:
    """Split raw puzzle input into lines.

    The input must be newline-terminated. Empty input has no lines.
    """
    if isinstance(data, bytes):
        try:
            data = data.decode("ascii")
        except UnicodeDecodeError as exc:
            line_no = data.count(b"\n", 0, exc.start) + 1
            line = data.split(b"\n")[line_no - 1].decode("ascii", errors="replace")
            raise ParseError("non-ASCII byte in input", line, line_no) from None
    if not data:
        return []
    if not data.endswith("\n"):
        raise ParseError(
            "input must end with a newline", line_no=data.count("\n") + 1
        )
    lines = data[:-1].split("\n")
    return [line[:-1] if line.endswith("\r") else line for line in lines]


def parse_row(line: str, *, line_no: int | None = None) -> Row:
    """Parse one ``<symbols> <lengths>`` line into a Row.

    The separator is the last space on the line.
    """
    space_idx = line.rfind(" ")
    if space_idx < 0:
        raise ParseError("no space between records and group lengths", line, line_no)
    symbols = line[:space_idx]
    lengths = line[space_idx + 1:]

    if not symbols:
        raise ParseError("empty record sequence", line, line_no)
    try:
        records = tuple(_DECODE[c] for c in symbols)
    except KeyError as exc:
        raise ParseError(
            f"unknown record symbol {exc.args[0]!r}", line, line_no
        ) from None

    groups: list[int] = []
    for token in lengths.split(","):
        # str.isdigit() also accepts non-ASCII digits such as superscripts
        if not (token.isascii() and token.isdigit()):
            raise ParseError(f"invalid group length {token!r}", line, line_no)
        value = int(token)
        if value == 0:
            raise ParseError("group lengths must be positive", line, line_no)
        groups.append(value)

    return Row(records=records, groups=tuple(groups))


def parse_rows(data: bytes | str) -> list[Row]:
    """Parse every line of the input. A malformed line aborts the parse."""
    return [
        parse_row(line, line_no=i)
        for i, line in enumerate(split_lines(data), start=1)
    ]


def expand(
    records: Sequence[Record],
    groups: Sequence[int],
    repeat_count: int = DEFAULT_REPEAT_COUNT,
    scratch: Scratch | None = None,
) -> tuple[list[Record], list[int]]:
    """Unfold a row: records joined by an UNKNOWN separator, groups repeated.

    With L records and K groups the result holds ``repeat_count * (L + 1) - 1``
    records and ``repeat_count * K`` groups. Output is written into the
    scratch expansion buffers, which are fully overwritten.
    """
    if repeat_count < 1:
        raise ValueError(f"repeat_count must be >= 1, got {repeat_count}")
    if scratch is None:
        scratch = Scratch()

    # The inputs may be this scratch's own buffers from an earlier expansion.
    records = tuple(records)
    groups = tuple(groups)

    n_records = len(records)
    chunk_len = n_records + 1
    records_buf = scratch.records
    resize(records_buf, chunk_len * repeat_count - 1, Record.UNKNOWN)
    for i in range(repeat_count):
        start = chunk_len * i
        records_buf[start:start + n_records] = records
        if i != repeat_count - 1:
            records_buf[start + n_records] = Record.UNKNOWN

    n_groups = len(groups)
    groups_buf = scratch.groups
    resize(groups_buf, n_groups * repeat_count, 0)
    for i in range(repeat_count):
        groups_buf[n_groups * i:n_groups * (i + 1)] = groups

    return records_buf, groups_buf
