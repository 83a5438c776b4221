from .constraints import (
    Constraints,
    mark_green,
    mark_yellow,
    mark_cannot_be,
    describe_constraints,
)
from .matching import matches

__all__ = [
    "Constraints",
    "mark_green",
    "mark_yellow",
    "mark_cannot_be",
    "describe_constraints",
    "matches",
]
