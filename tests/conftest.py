"""Shared fixtures for springcount tests."""

import itertools
import os
import random
from pathlib import Path

import pytest

from springcount import Record, Scratch

# (line, primal count, expanded count)
EXAMPLES = [
    ("???.### 1,1,3", 1, 1),
    (".??..??...?##. 1,1,3", 4, 16384),
    ("?#?#?#?#?#?#?#? 1,3,1,6", 1, 1),
    ("????.#...#... 4,1,1", 1, 16),
    ("????.######..#####. 1,6,5", 4, 2500),
    ("?###???????? 3,2,1", 10, 506250),
]

EXAMPLE_INPUT = "".join(line + "\n" for line, _, _ in EXAMPLES)

# Answer for the full puzzle input named by SPRINGCOUNT_INPUT.
FULL_INPUT_ANSWER = (8193, 45322533163795)


def brute_force(records, groups):
    """Enumerate every UNKNOWN assignment and count the matching ones."""
    unknown = [i for i, r in enumerate(records) if r is Record.UNKNOWN]
    target = list(groups)
    total = 0
    for choice in itertools.product((Record.CLEAR, Record.DAMAGED), repeat=len(unknown)):
        resolved = list(records)
        for i, r in zip(unknown, choice):
            resolved[i] = r
        runs = [
            len(list(run))
            for r, run in itertools.groupby(resolved)
            if r is Record.DAMAGED
        ]
        if runs == target:
            total += 1
    return total


def _random_row(rng):
    n_groups = rng.randint(1, 6)
    groups = [rng.randint(1, 3) for _ in range(n_groups)]
    symbols = []
    for i, g in enumerate(groups):
        if i:
            symbols.append(rng.choice(".?"))
        symbols.extend(rng.choice("#??") for _ in range(g))
    while len(symbols) < 20:
        symbols.insert(rng.randrange(len(symbols) + 1), rng.choice(".??"))
    return f"{''.join(symbols)} {','.join(map(str, groups))}"


def synthetic_input(n_rows, seed=2023):
    """Random puzzle-shaped rows, one per line, newline-terminated."""
    rng = random.Random(seed)
    return "".join(_random_row(rng) + "\n" for _ in range(n_rows))


@pytest.fixture
def scratch():
    return Scratch()


@pytest.fixture(scope="session")
def example_input():
    return EXAMPLE_INPUT


@pytest.fixture(scope="session")
def full_input():
    """Path to a full puzzle input, or skip when none is configured."""
    path = os.environ.get("SPRINGCOUNT_INPUT")
    if not path or not Path(path).is_file():
        pytest.skip("SPRINGCOUNT_INPUT not set to a puzzle input file")
    return Path(path)
