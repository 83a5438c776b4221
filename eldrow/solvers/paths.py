"""
Depth-first enumeration of complete paths in a solver tree.

A path is complete when it reaches depth num_rows; shorter branches (rows
that had no candidates) are skipped. Siblings are visited in stored order.
"""

from __future__ import annotations

import sys
from typing import Iterator, List, TextIO, Tuple

from .tree import SolverNode


def iter_paths(root: SolverNode, num_rows: int) -> Iterator[Tuple[str, ...]]:
    """Yield each root-to-leaf path as a tuple of num_rows words."""
    path: List[str] = [""] * num_rows

    def _walk(node: SolverNode, level: int) -> Iterator[Tuple[str, ...]]:
        path[level - 1] = node.word
        if level == num_rows:
            yield tuple(path)
            return
        for child in node.children:
            yield from _walk(child, level + 1)

    yield from _walk(root, 1)


def print_paths(root: SolverNode, num_rows: int, out: TextIO | None = None) -> int:
    """Write one space-separated line per path; returns the number of lines."""
    if out is None:
        out = sys.stdout
    n = 0
    for p in iter_paths(root, num_rows):
        out.write(" ".join(p) + "\n")
        n += 1
    return n
