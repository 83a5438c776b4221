"""
Run harness: load inputs, build the tree, print every path.

run_puzzle is UI-agnostic; the CLI adds argument parsing, validation output
and the manifest on top of it.
"""

from __future__ import annotations

import time
from pathlib import Path
from typing import Dict, TextIO

from eldrow.config import SolverConfig
from eldrow.datasets import load_dictionary, load_puzzle
from eldrow.logging_utils import get_logger
from eldrow.solvers import build_tree, print_paths

logger = get_logger("harness")


def run_puzzle(
        dictionary_path: Path | str,
        puzzle_path: Path | str,
        *,
        config: SolverConfig = SolverConfig(),
        out: TextIO | None = None,
) -> Dict:
    """
    Reconstruct every guess sequence for one puzzle and write them to `out`
    (stdout by default).

    Raises OSError if either file cannot be opened or read.

    Returns:
        dict with keys:
            solution (str), num_rows (int), dictionary_size (int),
            paths (int), time_ms (float)
    """
    dictionary = load_dictionary(dictionary_path, N=config.N)
    puzzle = load_puzzle(puzzle_path, N=config.N)
    logger.debug("loaded %d words, %d puzzle rows (solution=%s)",
                 len(dictionary), puzzle.num_rows, puzzle.solution)

    t0 = time.perf_counter_ns()
    root = build_tree(puzzle, dictionary, config)
    n = print_paths(root, puzzle.num_rows, out)
    dt = (time.perf_counter_ns() - t0) / 1_000_000.0
    logger.debug("printed %d path(s) in %.1f ms", n, dt)

    return {
        "solution": puzzle.solution,
        "num_rows": puzzle.num_rows,
        "dictionary_size": len(dictionary),
        "paths": n,
        "time_ms": dt,
    }
