# src/flattendir/utils/paths.py
import os
from typing import Optional


def to_posix(path: str, sep: Optional[str] = None) -> str:
    """Converts host separators to '/'. Other characters, backslashes included on POSIX, are kept."""
    sep = sep or os.sep
    if sep != "/":
        path = path.replace(sep, "/")
    return path
