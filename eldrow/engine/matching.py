"""
Candidate matching against a constraint snapshot.

A word matches when, at every position i:
  - must_be[i] is non-empty and contains word[i], or
  - must_be[i] is empty and word[i] is not in cannot_be
and no letter shared with the solution word occurs more than once in it.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from .constraints import Constraints

if TYPE_CHECKING:
    from eldrow.datasets.puzzle import Puzzle


def matches(word: str, con: Constraints, puzzle: "Puzzle", row: int) -> bool:
    """
    Return True if `word` can be the guess at `row` under `con`.

    Args:
      word   : candidate word; anything not exactly N letters long never
               matches
      con    : constraint snapshot for this row
      puzzle : the puzzle being reconstructed (its solution drives the
               single-occurrence rule)
      row    : index of the puzzle row being expanded
    """
    assert 0 <= row < puzzle.num_rows, f"row out of range: {row}"
    solution = puzzle.solution
    if len(word) != con.N:
        return False

    for i, ch in enumerate(word):
        allowed = con.must_be[i]
        if allowed:
            if ch not in allowed:
                return False
        elif ch in con.cannot_be:
            return False

        # Letters of the solution may appear at most once in a guess
        if ch in solution and word.count(ch) > 1:
            return False

    return True
