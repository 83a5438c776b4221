# apps/cli/run.py
"""
CLI entry point for eldrow.

This script:
  1) Optionally validates the inputs and prints a one-liner summary (--check).
  2) Loads the dictionary and puzzle, builds the solver tree and prints every
     reconstructed guess sequence to stdout, one per line.
  3) Optionally writes a JSON manifest with config, input hashes and counts.

Usage:
    python -m apps.cli.run words.txt puzzle.txt --verbose --manifest out/run.json
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import List

from eldrow.config import DEFAULT_N, SolverConfig
from eldrow.datasets import load_dictionary, print_dictionary, pretty_summary, validate_inputs
from eldrow.harness import run_puzzle, timestamp_id, write_manifest
from eldrow.logging_utils import setup_logging


def _build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="eldrow",
        description="eldrow — list every guess sequence behind a finished Wordle grid",
    )
    ap.add_argument("dictionary", help="word list, one word per line")
    ap.add_argument("puzzle", nargs="?",
                    help="solution word followed by feedback rows (-, y, g); "
                         "not needed with --print-dictionary")
    ap.add_argument("--N", type=int, default=DEFAULT_N, help="word length (default 5)")
    ap.add_argument("-v", "--verbose", action="store_true",
                    help="trace every subtree expansion on stderr")
    ap.add_argument(
        "--progress",
        choices=["auto", "bar", "off"],
        default="off",
        help="progress bar over first-row candidates (auto=bar only on a terminal)",
    )
    ap.add_argument("--check", action="store_true",
                    help="print an input validation summary to stderr before solving")
    ap.add_argument("--manifest", help="write a JSON run manifest to this path")
    ap.add_argument("--print-dictionary", action="store_true",
                    help="print the loaded dictionary and exit")
    return ap


def main(argv: List[str] | None = None) -> int:
    """
    Parse CLI args, run the puzzle, and return the process exit status.
    """
    ap = _build_parser()
    args = ap.parse_args(argv)
    if args.puzzle is None and not args.print_dictionary:
        ap.error("the following arguments are required: puzzle")
    logger = setup_logging(verbose=args.verbose)

    progress = args.progress == "bar" or (args.progress == "auto" and sys.stderr.isatty())
    try:
        config = SolverConfig(N=args.N, verbose=args.verbose, progress=progress)
    except ValueError as e:
        logger.error("%s", e)
        return 2

    try:
        if args.print_dictionary:
            print_dictionary(load_dictionary(args.dictionary, N=config.N))
            return 0

        rep = None
        if args.check or args.manifest:
            rep = validate_inputs(config.N, args.dictionary, args.puzzle)
            if args.check:
                sys.stderr.write(pretty_summary(rep) + "\n")
                for issue in rep["issues"]:
                    logger.warning("%s", issue)

        result = run_puzzle(args.dictionary, args.puzzle, config=config)
    except OSError as e:
        logger.error("%s: %s", e.filename or "input", e.strerror or e)
        return 1
    except ValueError as e:
        logger.error("%s: %s", args.puzzle, e)
        return 1

    sys.stdout.flush()

    if args.manifest:
        manifest = {
            "run_id": timestamp_id(),
            "config": vars(args),
            "inputs": rep,
            "result": result,
        }
        path = write_manifest(manifest, str(Path(args.manifest)))
        logger.info("Wrote: %s", path)

    return 0


if __name__ == "__main__":
    sys.exit(main())
