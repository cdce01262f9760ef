# src/flattendir/core/render.py
from pathlib import Path
from typing import Iterable

from flattendir.models import RenderBlock
from flattendir.utils.paths import to_posix


def render_block(rel_path: str, content: str) -> str:
    """
    Wraps a file's content in a path-tagged block:

        <file path=rel/path>
        ...content...
        </file>

    The path always uses forward slashes. Neither path nor content is escaped.
    """
    parts = [f"<file path={to_posix(rel_path)}>\n", content]
    if not content.endswith("\n"):
        parts.append("\n")
    parts.append("</file>\n\n")
    return "".join(parts)


def render_blocks(blocks: Iterable[RenderBlock]) -> str:
    return "".join(render_block(block.rel_path, block.content) for block in blocks)


def read_text(path: Path) -> str:
    """Reads the whole file as strict UTF-8, keeping line endings as they are."""
    return path.read_bytes().decode("utf-8")
