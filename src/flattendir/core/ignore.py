# src/flattendir/core/ignore.py
import posixpath
from typing import Iterable, List, Optional

from flattendir.config import DEFAULT_IGNORE_TOKENS
from flattendir.utils.paths import to_posix


def parse_ignore_tokens(raw: str) -> List[str]:
    """Splits a comma-separated --ignore value into clean tokens."""
    return [t.strip() for t in raw.split(",") if t.strip()]


def build_ignore_list(user_tokens: Iterable[str], output_rel: Optional[str] = None) -> List[str]:
    """
    Merges the default tokens, the user's tokens and (when writing to a file)
    the output path relative to root. Order is kept, duplicates and empty
    tokens are dropped.
    """
    merged = list(DEFAULT_IGNORE_TOKENS) + list(user_tokens)
    if output_rel:
        merged.append(to_posix(output_rel))
    return [t for t in dict.fromkeys(merged) if t]


def is_path_ignored(rel_path: str, ignore_list: Iterable[str]) -> bool:
    """
    Loose segment/substring match, not globbing: a token hits the whole path,
    a leading or trailing run of segments, any inner run of segments, or the
    basename.
    """
    rel = to_posix(rel_path)
    basename = posixpath.basename(rel)

    for token in ignore_list:
        t = to_posix(token).rstrip("/")
        if not t:
            continue

        if rel == t:
            return True
        if rel.startswith(t + "/"):
            return True
        if f"/{t}/" in rel:
            return True
        if rel.endswith("/" + t):
            return True
        if basename == t:
            return True

    return False
