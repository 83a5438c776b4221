"""
Puzzle loading.

File format (one entry per line, LF or CRLF line endings):

    melon        <- solution word
    -ggy-        <- feedback of the guess just before the solution
    y--g-        <- ... earlier guesses ...
    ----y        <- feedback of the first guess

Loaded into `Puzzle.grid` as-is, so grid[0] is the solution word and grid[r]
is the feedback for the r-th guess counted back from the solution. The solver
expands rows 1..num_rows-1 and every printed path starts with the solution.

Rows that are entirely green directly after the solution describe the
solution row itself; they carry no information about an earlier guess and are
folded into grid[0].
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, List

from eldrow.engine.constraints import GREEN
from .io import read_lines


@dataclass(frozen=True)
class Puzzle:
    grid: List[str]

    @property
    def solution(self) -> str:
        return self.grid[0]

    @property
    def num_rows(self) -> int:
        return len(self.grid)

    def tiles(self, row: int) -> str:
        """Feedback tiles for `row` (row >= 1)."""
        assert 1 <= row < self.num_rows, f"row out of range: {row}"
        return self.grid[row]


def parse_puzzle(lines: Iterable[str], N: int = 5) -> Puzzle:
    """
    Build a Puzzle from raw lines. Line endings are stripped, each line is
    truncated to N characters and blank lines are skipped. No further
    validation is done.
    """
    grid: List[str] = []
    for raw in lines:
        ln = raw.rstrip("\r\n")[:N]
        if ln:
            grid.append(ln)
    if not grid:
        raise ValueError("puzzle has no solution row")

    # Drop leading all-green rows: they restate the solution
    while len(grid) > 1 and grid[1] == GREEN * len(grid[0]):
        del grid[1]

    return Puzzle(grid=grid)


def load_puzzle(path: Path | str, N: int = 5) -> Puzzle:
    """Read a puzzle file. Raises OSError if it cannot be opened or read."""
    return parse_puzzle(read_lines(path), N=N)
