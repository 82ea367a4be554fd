"""Springcount error types."""

from __future__ import annotations


class SpringcountError(Exception):
    """Base error for all springcount failures."""


class ParseError(SpringcountError):
    """Malformed puzzle input."""

    def __init__(
        self,
        message: str,
        line: str | None = None,
        line_no: int | None = None,
    ) -> None:
        self.message = message
        self.line = line
        self.line_no = line_no
        where = f"line {line_no}: " if line_no is not None else ""
        text = f"{where}{message}"
        if line is not None:
            text += f" ({line!r})"
        super().__init__(text)
