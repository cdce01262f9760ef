# src/flattendir/models.py
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Tuple

from flattendir.config import DEFAULT_MAX_FILE_BYTES


@dataclass(frozen=True)
class RunConfig:
    """Immutable settings for one invocation."""
    root: Path
    output: Optional[Path] = None
    ignore: Tuple[str, ...] = ()
    max_file_bytes: int = DEFAULT_MAX_FILE_BYTES
    count_tokens: bool = False
    verbose: bool = False


@dataclass(frozen=True)
class RenderBlock:
    """One accepted file and its decoded content."""
    rel_path: str
    content: str


@dataclass
class RunStats:
    total: int = 0
    ignored: int = 0
    binary: int = 0
    too_large: int = 0
    unreadable: int = 0
    included: int = 0
    tokens: Optional[int] = None


@dataclass
class FlattenResult:
    """Blocks in output order plus the counters gathered while building them."""
    blocks: List[RenderBlock] = field(default_factory=list)
    stats: RunStats = field(default_factory=RunStats)
