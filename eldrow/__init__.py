"""eldrow: reconstruct the guesses behind a finished Wordle grid."""

__version__ = "1.0.0"
