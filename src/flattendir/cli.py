# src/flattendir/cli.py
import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

# Module imports
from flattendir.config import DEFAULT_MAX_FILE_BYTES
from flattendir.core.ignore import parse_ignore_tokens
from flattendir.core.scanner import ProjectScanner
from flattendir.core.sink import report_stats, write_result
from flattendir.errors import FlattenError, UsageError
from flattendir.models import RunConfig

logger = logging.getLogger(__name__)


class _ArgumentParser(argparse.ArgumentParser):
    """Surfaces parse failures as UsageError instead of exiting with status 2."""

    def error(self, message):
        raise UsageError(message)


def _positive_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected an integer byte count, got '{value}'")
    if number <= 0:
        raise argparse.ArgumentTypeError(f"must be a positive byte count, got {number}")
    return number


def create_arg_parser() -> argparse.ArgumentParser:
    parser = _ArgumentParser(
        prog="flattendir",
        allow_abbrev=False,
        description="Concatenate the text files of a directory into one path-tagged, LLM-friendly blob.",
    )
    parser.add_argument("root", nargs="*", help="Directory to flatten (extra positionals are ignored)")
    parser.add_argument(
        "-o", "--output",
        type=str,
        default=None,
        help="Write the result to this file instead of stdout",
    )
    parser.add_argument(
        "-i", "--ignore",
        action="append",
        default=[],
        help="Comma-separated extra ignore tokens (repeatable, added to the defaults)",
    )
    parser.add_argument(
        "--max-file-bytes",
        type=_positive_int,
        default=DEFAULT_MAX_FILE_BYTES,
        help=f"Skip files larger than this many bytes (default: {DEFAULT_MAX_FILE_BYTES})",
    )
    parser.add_argument("--tokens", action="store_true", help="Estimate the output's token count in the stats")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log every skipped file")
    return parser


def parse_config(argv: Optional[List[str]] = None) -> RunConfig:
    """Turns the argument list into a RunConfig. Unknown flags are ignored."""
    parser = create_arg_parser()
    args, unknown = parser.parse_known_args(argv)

    # A root given after the options can end up among the leftovers
    positional = args.root + [a for a in unknown if not a.startswith("-")]
    if not positional:
        raise UsageError("Missing root directory. Example: flattendir ./my_project")

    ignore: List[str] = []
    for raw in args.ignore:
        ignore.extend(parse_ignore_tokens(raw))

    return RunConfig(
        root=Path(positional[0]).resolve(),
        output=Path(args.output).resolve() if args.output else None,
        ignore=tuple(ignore),
        max_file_bytes=args.max_file_bytes,
        count_tokens=args.tokens,
        verbose=args.verbose,
    )


def _setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s | %(message)s",
        stream=sys.stderr,
    )


def main(argv: Optional[List[str]] = None) -> int:
    try:
        # 1. Setup
        config = parse_config(argv)
        _setup_logging(config.verbose)
        logger.debug("Scanning %s", config.root)

        # 2. Scan, filter, render
        result = ProjectScanner(config).scan()

        # 3. Output
        write_result(result, config.output)
        report_stats(result.stats)
        return 0

    except FlattenError as e:
        print(str(e), file=sys.stderr)
        return 1

    except KeyboardInterrupt:
        print("\nCancelled.", file=sys.stderr)
        return 1

    except Exception as e:
        print(f"An unexpected error occurred: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
