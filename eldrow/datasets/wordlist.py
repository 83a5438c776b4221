"""
Dictionary loading.

The dictionary is a plain list kept in file order; the solver scans it front
to back, so this order is the order in which sibling paths are printed.
Lines longer than N are truncated to N characters rather than rejected.
"""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Iterable, List, TextIO

from .io import read_lines


def load_dictionary(path: Path | str, N: int = 5) -> List[str]:
    """
    Read one word per non-empty line, truncated to N characters.

    Raises OSError (FileNotFoundError for a missing path) if the file cannot
    be opened or read.
    """
    return [ln[:N] for ln in read_lines(path) if ln]


def print_dictionary(words: Iterable[str], out: TextIO | None = None) -> int:
    """Write the words one per line; returns the number written."""
    if out is None:
        out = sys.stdout
    n = 0
    for w in words:
        out.write(w + "\n")
        n += 1
    return n
