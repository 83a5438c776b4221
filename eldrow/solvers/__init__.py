from .tree import SolverNode, solve_subtree, build_tree, count_leaves
from .paths import iter_paths, print_paths

__all__ = [
    "SolverNode",
    "solve_subtree",
    "build_tree",
    "count_leaves",
    "iter_paths",
    "print_paths",
]
