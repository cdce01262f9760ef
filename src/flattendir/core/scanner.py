# src/flattendir/core/scanner.py
import logging
import os
from typing import List, Optional

from flattendir.core.classifier import is_probably_binary, read_probe
from flattendir.core.ignore import build_ignore_list, is_path_ignored
from flattendir.core.render import read_text, render_blocks
from flattendir.core.walker import walk_files
from flattendir.models import FlattenResult, RenderBlock, RunConfig, RunStats
from flattendir.utils.tokenizer import Tokenizer

logger = logging.getLogger(__name__)


class ProjectScanner:
    def __init__(self, config: RunConfig):
        self.config = config
        self.root_dir = config.root

        output_rel = None
        if config.output is not None:
            output_rel = os.path.relpath(config.output, self.root_dir)
        self.ignore_list: List[str] = build_ignore_list(config.ignore, output_rel)

    def scan(self) -> FlattenResult:
        """
        Walks the root, then runs every file through ignore, size, binary and
        decode checks in sorted path order. Rejected files only show up in the
        returned statistics.
        """
        file_list = sorted(walk_files(self.root_dir))
        result = FlattenResult(stats=RunStats(total=len(file_list)))

        for rel_path in file_list:
            block = self._process(rel_path, result.stats)
            if block is not None:
                result.blocks.append(block)

        result.stats.included = len(result.blocks)
        if self.config.count_tokens:
            result.stats.tokens = Tokenizer.count(render_blocks(result.blocks))
        return result

    def _process(self, rel_path: str, stats: RunStats) -> Optional[RenderBlock]:
        # A. Ignore check
        if is_path_ignored(rel_path, self.ignore_list):
            logger.debug("ignored: %s", rel_path)
            stats.ignored += 1
            return None

        abs_path = self.root_dir / rel_path
        try:
            # B. Size check
            size = abs_path.stat().st_size
            if size > self.config.max_file_bytes:
                logger.debug("too large (%d bytes): %s", size, rel_path)
                stats.too_large += 1
                return None

            # C. Binary probe
            if is_probably_binary(read_probe(abs_path, size)):
                logger.debug("binary: %s", rel_path)
                stats.binary += 1
                return None

            content = read_text(abs_path)
        except UnicodeDecodeError:
            # Passed the heuristic but is not UTF-8 after all
            logger.debug("not valid UTF-8, treated as binary: %s", rel_path)
            stats.binary += 1
            return None
        except OSError as e:
            logger.warning("Skipping %s (read error: %s)", rel_path, e)
            stats.unreadable += 1
            return None

        return RenderBlock(rel_path=rel_path, content=content)
