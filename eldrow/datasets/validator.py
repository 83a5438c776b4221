"""
Input validator for eldrow.

What this module does:
- Check a dictionary file against the word rules (lowercase, a–z only,
  exact length N, one per line) and count duplicates and invalid lines.
- Check a puzzle file: a well-formed solution word followed by rows over
  {-, y, g} of length N.
- Compute SHA-256 of the raw files and report whether the solution word is in
  the dictionary.
- Return a machine-readable dict (for manifests) and a pretty one-line summary.

The solver itself never rejects input; this is a diagnostic pass for `--check`
and the run manifest.

Typical use:
    from eldrow.datasets import validate_inputs, pretty_summary
    rep = validate_inputs(5, "words.txt", "puzzle.txt")
    print(pretty_summary(rep))
"""

from __future__ import annotations

from dataclasses import dataclass, asdict
from pathlib import Path
from typing import Dict, List, Tuple
import hashlib

from eldrow.engine.constraints import TILES
from .io import read_lines


# -----------------------------
# Dataclasses for structured reports
# -----------------------------

@dataclass
class FileReport:
    """Per-file diagnostics and metadata."""
    path: str            # file path (as given)
    exists: bool         # did the file exist on disk?
    count: int           # number of VALID lines
    sha256: str          # SHA-256 of raw file bytes (empty string if missing)
    unique_count: int    # unique valid lines
    invalid_lines: int   # number of invalid lines encountered


@dataclass
class ValidationReport:
    """Top-level validation result for the (dictionary, puzzle) pair."""
    N: int
    dictionary: FileReport
    puzzle: FileReport
    solution: str
    solution_in_dictionary: bool
    passed: bool
    issues: List[str]    # human-friendly list of problems (if any)


# -----------------------------
# Helpers
# -----------------------------

def _sha256_file(path: Path) -> str:
    """Compute SHA-256 of a file's raw bytes."""
    h = hashlib.sha256()
    with path.open("rb") as f:
        for chunk in iter(lambda: f.read(8192), b""):
            h.update(chunk)
    return h.hexdigest()


def _is_word(w: str, N: int) -> bool:
    return len(w) == N and w.isalpha() and w == w.lower()


def _is_row(r: str, N: int) -> bool:
    return len(r) == N and all(t in TILES for t in r)


def _check_dictionary(path: Path, N: int) -> Tuple[List[str], int]:
    """
    Returns (valid_words, invalid_count). Blank lines are ignored, matching
    the loader.
    """
    valid: List[str] = []
    invalid = 0
    for w in read_lines(path):
        if not w:
            continue
        if _is_word(w, N):
            valid.append(w)
        else:
            invalid += 1
    return valid, invalid


def _check_puzzle(path: Path, N: int) -> Tuple[str, List[str], int]:
    """Returns (solution, valid_rows, invalid_count)."""
    lines = [ln for ln in read_lines(path) if ln]
    if not lines:
        return "", [], 0

    solution, rows = lines[0], lines[1:]
    invalid = 0 if _is_word(solution, N) else 1
    valid_rows = [r for r in rows if _is_row(r, N)]
    invalid += len(rows) - len(valid_rows)
    return solution, valid_rows, invalid


def _missing(path: str) -> FileReport:
    return FileReport(path, False, 0, "", 0, 0)


# -----------------------------
# Public API
# -----------------------------

def validate_inputs(N: int, dictionary_path: str, puzzle_path: str) -> Dict:
    """
    Validate the dictionary and puzzle files for word length N.

    Returns
    -------
    Dict
        A JSON-serializable dictionary (see ValidationReport schema) with:
          - counts, SHA-256, duplicate/invalid counts per file
          - whether the solution word appears in the dictionary
          - `passed` boolean (strict: non-empty dictionary, no invalid lines,
            a solution word)
          - `issues` (list of strings) to surface any problems
    """
    issues: List[str] = []

    dict_p = Path(dictionary_path)
    puz_p = Path(puzzle_path)

    if not dict_p.exists() or not puz_p.exists():
        if not dict_p.exists():
            issues.append(f"dictionary file not found: {dictionary_path}")
        if not puz_p.exists():
            issues.append(f"puzzle file not found: {puzzle_path}")
        rep = ValidationReport(
            N=N,
            dictionary=_missing(dictionary_path) if not dict_p.exists() else
            FileReport(dictionary_path, True, 0, _sha256_file(dict_p), 0, 0),
            puzzle=_missing(puzzle_path) if not puz_p.exists() else
            FileReport(puzzle_path, True, 0, _sha256_file(puz_p), 0, 0),
            solution="",
            solution_in_dictionary=False,
            passed=False,
            issues=issues,
        )
        return asdict(rep)

    words, dict_invalid = _check_dictionary(dict_p, N)
    solution, rows, puz_invalid = _check_puzzle(puz_p, N)
    word_set = set(words)

    dict_report = FileReport(
        path=str(dict_p),
        exists=True,
        count=len(words),
        sha256=_sha256_file(dict_p),
        unique_count=len(word_set),
        invalid_lines=dict_invalid,
    )
    puz_report = FileReport(
        path=str(puz_p),
        exists=True,
        count=len(rows),
        sha256=_sha256_file(puz_p),
        unique_count=len(set(rows)),
        invalid_lines=puz_invalid,
    )

    if dict_report.count == 0:
        issues.append("dictionary contains 0 valid words")
    if dict_invalid:
        issues.append(f"dictionary has {dict_invalid} invalid line(s)")
    if dict_report.count != dict_report.unique_count:
        issues.append("dictionary contains duplicate lines")
    if not solution:
        issues.append("puzzle has no solution row")
    if puz_invalid:
        issues.append(f"puzzle has {puz_invalid} invalid line(s)")

    in_dict = solution in word_set
    if solution and not in_dict:
        # Not fatal: the solution is the tree root, never a dictionary pick
        issues.append(f"solution {solution!r} not in dictionary")

    passed = (
            dict_report.count > 0
            and dict_invalid == 0
            and puz_invalid == 0
            and bool(solution)
    )

    rep = ValidationReport(
        N=N,
        dictionary=dict_report,
        puzzle=puz_report,
        solution=solution,
        solution_in_dictionary=in_dict,
        passed=passed,
        issues=issues,
    )
    return asdict(rep)


def pretty_summary(report: Dict) -> str:
    """
    Produce a compact, human-friendly one-liner for console/docs.

    Example:
        N=5 | dictionary=2315 (uniq=2315, sha=abc123...) | puzzle rows=4 (sha=def456...) | solution=melon in-dict=True | OK
    """
    N = report["N"]
    a = report["dictionary"]
    b = report["puzzle"]
    status = "OK" if report["passed"] else "FAIL"
    a_sha = (a.get("sha256") or "")[:12]
    b_sha = (b.get("sha256") or "")[:12]
    return (
        f"N={N} | dictionary={a['count']} (uniq={a['unique_count']}, sha={a_sha}) "
        f"| puzzle rows={b['count']} (sha={b_sha}) "
        f"| solution={report['solution'] or '?'} in-dict={report['solution_in_dictionary']} "
        f"| {status}"
    )
