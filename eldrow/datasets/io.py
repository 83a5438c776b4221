from __future__ import annotations
import errno
from pathlib import Path
from typing import List


def read_lines(p: Path | str) -> List[str]:
    """
    Read a UTF-8 text file into a list of lines, stripping trailing CR/LF.
    Raises FileNotFoundError if the path doesn't exist, and any other OSError
    the read itself raises (permissions, directories, I/O failures). Bytes
    that don't decode as UTF-8 are reported as an OSError naming the file.
    """
    p = Path(p)
    if not p.exists():
        raise FileNotFoundError(errno.ENOENT, "No such file or directory", str(p))
    try:
        text = p.read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        raise OSError(errno.EILSEQ, f"not valid UTF-8 ({e.reason} at byte {e.start})",
                      str(p)) from e
    return [ln.rstrip("\r\n") for ln in text.splitlines()]
