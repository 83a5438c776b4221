"""
Run configuration threaded through the solver.

Built by the CLI from its arguments; library callers construct it directly.
"""

from __future__ import annotations

from dataclasses import dataclass

DEFAULT_N = 5


@dataclass(frozen=True)
class SolverConfig:
    N: int = DEFAULT_N        # word length
    verbose: bool = False     # trace every subtree expansion
    progress: bool = False    # tqdm bar over the first row's candidates

    def __post_init__(self):
        if self.N <= 0:
            raise ValueError(f"word length must be positive; got {self.N}")
