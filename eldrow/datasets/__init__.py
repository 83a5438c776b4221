from .validator import validate_inputs, pretty_summary
from .io import read_lines
from .wordlist import load_dictionary, print_dictionary
from .puzzle import Puzzle, parse_puzzle, load_puzzle

__all__ = [
    "validate_inputs",
    "pretty_summary",
    "read_lines",
    "load_dictionary",
    "print_dictionary",
    "Puzzle",
    "parse_puzzle",
    "load_puzzle",
]
