# src/flattendir/core/walker.py
import os
from pathlib import Path
from typing import List

from flattendir.errors import RootUnreadableError


def _walk(root: Path, rel: str, results: List[str]) -> None:
    with os.scandir(root / rel if rel else root) as entries:
        for entry in entries:
            child_rel = f"{rel}/{entry.name}" if rel else entry.name
            if entry.is_dir():
                _walk(root, child_rel, results)
            elif entry.is_file():
                results.append(child_rel)


def walk_files(root: Path) -> List[str]:
    """
    Returns every regular file under root as a root-relative posix path.

    Ignore rules are not consulted here. Symlinks are followed the way
    os.DirEntry follows them by default, so a link cycle recurses until the
    OS refuses.
    """
    results: List[str] = []
    try:
        _walk(root, "", results)
    except OSError as e:
        raise RootUnreadableError(f"Failed to read directory: {root}\n{e}") from e
    return results
