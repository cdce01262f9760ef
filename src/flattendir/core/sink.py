# src/flattendir/core/sink.py
import sys
from pathlib import Path
from typing import Optional

from flattendir.core.render import render_blocks
from flattendir.errors import OutputWriteError
from flattendir.models import FlattenResult, RunStats


def write_result(result: FlattenResult, output: Optional[Path] = None) -> None:
    """
    Writes the flattened text as UTF-8 with '\\n' line endings to output
    (overwriting it), or to stdout. The console's own encoding and newline
    translation are bypassed so both destinations get the same bytes.
    """
    text = render_blocks(result.blocks)
    if output is None:
        sys.stdout.flush()
        sys.stdout.buffer.write(text.encode("utf-8"))
        sys.stdout.buffer.flush()
        return

    try:
        with open(output, "w", encoding="utf-8", newline="\n") as f:
            f.write(text)
    except OSError as e:
        raise OutputWriteError(f"Error writing file: {output}\n{e}") from e
    print(f"Successfully flattened directory to {output}")


def format_stats(stats: RunStats) -> str:
    line = (
        f"[stats] files={stats.total} ignored={stats.ignored} "
        f"binary={stats.binary} too_large={stats.too_large} "
        f"included={stats.included}"
    )
    if stats.unreadable:
        line += f" unreadable={stats.unreadable}"
    if stats.tokens is not None:
        line += f" tokens={stats.tokens}"
    return line


def report_stats(stats: RunStats) -> None:
    """Statistics go to stderr so a piped payload stays clean."""
    print(f"\n{format_stats(stats)}\n", file=sys.stderr)
