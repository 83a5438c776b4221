"""
Per-row letter constraints derived from feedback tiles.

A constraint snapshot has two parts:
  - must_be[i] : set of letters allowed at position i (empty = unconstrained,
                 fall back to cannot_be)
  - cannot_be  : letters that may not appear at any unconstrained position

Tile conventions (lowercase, as they appear in puzzle files):
  - 'g' : green  = correct letter in the correct position
  - 'y' : yellow = letter present, wrong position
  - '-' : gray   = absent (or already accounted for)

The solver derives a fresh snapshot for every row it expands, so sibling
branches never share constraint state.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Set

GREEN = "g"
YELLOW = "y"
GRAY = "-"
TILES = frozenset((GREEN, YELLOW, GRAY))


@dataclass
class Constraints:
    must_be: List[Set[str]]
    cannot_be: Set[str] = field(default_factory=set)

    @classmethod
    def empty(cls, N: int = 5) -> "Constraints":
        """All positions unconstrained, nothing forbidden."""
        return cls(must_be=[set() for _ in range(N)], cannot_be=set())

    @property
    def N(self) -> int:
        return len(self.must_be)

    def copy(self) -> "Constraints":
        """Deep copy; the snapshot shares no sets with the original."""
        return Constraints(
            must_be=[set(s) for s in self.must_be],
            cannot_be=set(self.cannot_be),
        )


def mark_green(letter: str, index: int, con: Constraints) -> None:
    """The tile at `index` is green, so that position must be `letter`."""
    assert letter.isalpha() and letter.islower(), f"bad letter: {letter!r}"
    assert 0 <= index < con.N, f"index out of range: {index}"
    con.must_be[index] = {letter}


def mark_yellow(index: int, cur_tiles: str, next_tiles: str, word: str,
                con: Constraints) -> None:
    """
    Restrict `index` to the letters that could explain a yellow tile there.

    Args:
      index      : position of the yellow tile in the current row
      cur_tiles  : tiles of the current row
      next_tiles : tiles of the row one closer to the solution. For the row
                   just before the solution this is the solution word itself,
                   which is read as an all-green row.
      word       : the word guessed in that closer row

    A letter of `word` at another position qualifies if its tile in
    `next_tiles` is yellow, or green while the current row is not already
    green there. The result replaces must_be[index] and may be empty.
    """
    N = con.N
    assert 0 <= index < N, f"index out of range: {index}"
    assert len(cur_tiles) == N and len(next_tiles) == N and len(word) == N

    if not all(t in TILES for t in next_tiles):
        next_tiles = GREEN * N

    possible: Set[str] = set()
    for i in range(N):
        if i == index:
            continue
        if next_tiles[i] == YELLOW:
            possible.add(word[i])
        if next_tiles[i] == GREEN and cur_tiles[i] != GREEN:
            possible.add(word[i])

    con.must_be[index] = possible


def mark_cannot_be(word: str, con: Constraints) -> None:
    """Forbid every letter of `word` at unconstrained positions."""
    assert len(word) <= con.N
    con.cannot_be.update(word)


def describe_constraints(con: Constraints) -> str:
    """
    Multi-line dump of a snapshot, e.g.

        cannot_be: a e l p
        must_be
        [0] b
        [1]
        ...
    """
    lines = ["cannot_be: " + " ".join(sorted(con.cannot_be)), "must_be"]
    for i, letters in enumerate(con.must_be):
        lines.append(f"[{i}] " + " ".join(sorted(letters)))
    return "\n".join(ln.rstrip() for ln in lines)
