"""
Search-tree construction for reverse Wordle.

Each node holds one guess and the constraint snapshot derived for it; its
children are every dictionary word that could have been guessed one row
further from the solution. The root carries the solution word, and a node
built at row == num_rows is a leaf, so every root-to-leaf path is one
complete reconstructed game (read from the solution back to the first guess).

Per-row expansion:
  1) start a fresh snapshot, carrying cannot_be forward from the parent and
     adding the parent's own letters
  2) apply the row's tiles: green pins the parent's letter, yellow limits the
     position to letters the closer row can explain
  3) scan the dictionary in order for matching words other than the parent's
  4) give each candidate its own copy of the snapshot with its letters
     folded into cannot_be, then recurse
"""

from __future__ import annotations

import sys
from dataclasses import dataclass, field
from typing import List, Optional, Sequence

from tqdm import tqdm

from eldrow.config import SolverConfig
from eldrow.datasets.puzzle import Puzzle
from eldrow.engine import (
    Constraints,
    describe_constraints,
    mark_cannot_be,
    mark_green,
    mark_yellow,
    matches,
)
from eldrow.engine.constraints import GREEN, YELLOW
from eldrow.logging_utils import get_logger

logger = get_logger("solvers")


@dataclass
class SolverNode:
    word: str
    con: Optional[Constraints]
    children: List["SolverNode"] = field(default_factory=list)

    @property
    def is_leaf(self) -> bool:
        return self.con is None and not self.children


def _row_constraints(row: int, puzzle: Puzzle, parent: SolverNode) -> Constraints:
    """Steps 1–2: the snapshot every candidate at `row` must satisfy."""
    con = Constraints.empty(len(parent.word))
    con.cannot_be = set(parent.con.cannot_be)
    mark_cannot_be(parent.word, con)

    tiles = puzzle.tiles(row)
    for i, tile in enumerate(tiles):
        if tile == GREEN:
            mark_green(parent.word[i], i, con)
        elif tile == YELLOW:
            mark_yellow(i, tiles, puzzle.grid[row - 1], parent.word, con)
    return con


def _candidates(row: int, puzzle: Puzzle, dictionary: Sequence[str],
                con: Constraints, exclude: str) -> List[str]:
    """Step 3: matching dictionary words, in dictionary order."""
    return [
        w for w in dictionary
        if w != exclude and matches(w, con, puzzle, row)
    ]


def solve_subtree(row: int, puzzle: Puzzle, dictionary: Sequence[str],
                  parent: SolverNode, *, config: SolverConfig = SolverConfig()) -> None:
    """
    Grow the subtree under `parent`, whose word is the guess for row - 1.

    Rows with no matching words leave `parent` without children; those
    branches simply contribute no complete paths.
    """
    if config.verbose:
        logger.info("Running solve_subtree: %d, %s", row, parent.word)

    if row == puzzle.num_rows:
        parent.children = []
        parent.con = None
        return

    con = _row_constraints(row, puzzle, parent)
    if config.verbose:
        logger.debug("constraints for row %d:\n%s", row, describe_constraints(con))

    for word in _candidates(row, puzzle, dictionary, con, parent.word):
        child = SolverNode(word=word, con=con.copy())
        mark_cannot_be(word, child.con)
        parent.children.append(child)

    children = parent.children
    if config.progress and row == 1:
        children = tqdm(children, ncols=80, desc="Expanding", unit="word",
                        file=sys.stderr)
    for child in children:
        solve_subtree(row + 1, puzzle, dictionary, child, config=config)


def build_tree(puzzle: Puzzle, dictionary: Sequence[str],
               config: SolverConfig = SolverConfig()) -> SolverNode:
    """Root the tree at the solution word and expand from row 1."""
    root = SolverNode(word=puzzle.solution, con=Constraints.empty(len(puzzle.solution)))
    solve_subtree(1, puzzle, dictionary, root, config=config)
    return root


def count_leaves(node: SolverNode, num_rows: int, level: int = 1) -> int:
    """Number of complete paths (leaves at depth num_rows) under `node`."""
    if level == num_rows:
        return 1
    return sum(count_leaves(c, num_rows, level + 1) for c in node.children)
