from .core import run_puzzle
from .io import write_manifest, timestamp_id

__all__ = ["run_puzzle", "write_manifest", "timestamp_id"]
