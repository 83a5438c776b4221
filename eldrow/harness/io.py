"""
I/O utilities for runs.

Responsibilities:
- write_manifest: dump a JSON manifest with config, input hashes and results.
- timestamp_id:   stable UTC run ID string.
"""

from __future__ import annotations

from pathlib import Path
from typing import Dict
import json
import datetime as dt


def write_manifest(manifest: Dict, path: str) -> str:
    """
    Write a JSON manifest describing one run.

    Typical keys:
      - run_id
      - config: CLI args (dictionary, puzzle, N, verbose, ...)
      - inputs: output of datasets.validate_inputs(...)
      - result: output of harness.run_puzzle(...)
    """
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    with p.open("w", encoding="utf-8") as f:
        json.dump(manifest, f, indent=2)
    return str(p)


def timestamp_id() -> str:
    """
    Return a compact UTC timestamp suitable for filenames, e.g. 20250820T024121Z.
    """
    return dt.datetime.now(dt.timezone.utc).strftime("%Y%m%dT%H%M%SZ")
