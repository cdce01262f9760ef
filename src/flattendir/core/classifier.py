# src/flattendir/core/classifier.py
from pathlib import Path

from flattendir.config import BINARY_RATIO_THRESHOLD, PROBE_BYTES

_TEXT_CONTROL_BYTES = frozenset((9, 10, 13))  # \t \n \r


def _is_text_byte(b: int) -> bool:
    # Bytes >= 128 may belong to a multi-byte UTF-8 sequence; not verified here
    return b in _TEXT_CONTROL_BYTES or 32 <= b <= 126 or b >= 128


def read_probe(path: Path, size: int) -> bytes:
    """Reads up to PROBE_BYTES leading bytes of a file of the given size."""
    with path.open("rb") as f:
        return f.read(min(size, PROBE_BYTES))


def is_probably_binary(sample: bytes) -> bool:
    """
    Best-effort text/binary verdict for a file's leading bytes.

    A zero byte means binary. Otherwise the sample is binary when more than
    BINARY_RATIO_THRESHOLD of its bytes are control characters other than
    tab, newline and carriage return. An empty sample is text.
    """
    if not sample:
        return False

    sample = sample[:PROBE_BYTES]
    if b"\0" in sample:
        return True

    weird = sum(1 for b in sample if not _is_text_byte(b))
    return weird / len(sample) > BINARY_RATIO_THRESHOLD
