"""Reading puzzle input from disk."""

from __future__ import annotations

import logging
from pathlib import Path

from ._errors import SpringcountError
from ._row import parse_rows
from ._types import Row

logger = logging.getLogger(__name__)


def read_input(path: Path | str) -> bytes:
    """Read a puzzle input file as raw bytes."""
    path = Path(path)
    if not path.is_file():
        raise SpringcountError(f"input file not found: {path}")
    with open(path, "rb") as f:
        data = f.read()
    logger.debug("read %d bytes from %s", len(data), path)
    return data


def load_rows(path: Path | str) -> list[Row]:
    """Read and parse every row of a puzzle input file."""
    return parse_rows(read_input(path))
