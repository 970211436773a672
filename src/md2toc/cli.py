"""Command-line entry point: print the outline or canonical form of Markdown files."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Sequence, TextIO

from md2toc.config import MD2TOC_ENCODING, MD2TOC_LOG_LEVEL, MD2TOC_MAX_OUTLINE_DEPTH
from md2toc.exceptions import Md2tocError
from md2toc.pipeline import process_file
from md2toc.utils.logging_config import configure_logging, get_logger

logger = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="md2toc",
        description="Print the table of contents (or canonical form) of Markdown files.",
    )
    parser.add_argument("files", nargs="+", type=Path, metavar="FILE", help="Markdown files to process")
    parser.add_argument(
        "--format",
        dest="mode",
        action="store_const",
        const="format",
        default="toc",
        help="Print the canonical re-rendering instead of the table of contents",
    )
    parser.add_argument(
        "--keep-going",
        action="store_true",
        help="Continue with the remaining files after a failure",
    )
    parser.add_argument(
        "--max-depth",
        type=int,
        default=MD2TOC_MAX_OUTLINE_DEPTH,
        help="Deepest outline nesting to print (default: %(default)s)",
    )
    parser.add_argument(
        "--encoding",
        default=MD2TOC_ENCODING,
        help="Input file encoding (default: %(default)s)",
    )
    parser.add_argument(
        "--log-level",
        default=MD2TOC_LOG_LEVEL,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        type=str.upper,
        help="Logging level (default: %(default)s)",
    )
    return parser


def main(
    argv: Sequence[str] | None = None,
    *,
    stdout: TextIO | None = None,
    stderr: TextIO | None = None,
) -> int:
    """Run the CLI and return the process exit code."""
    stdout = stdout or sys.stdout
    stderr = stderr or sys.stderr
    args = build_parser().parse_args(argv)
    configure_logging(args.log_level)

    show_headers = len(args.files) > 1
    failed = 0
    for path in args.files:
        if show_headers:
            stdout.write(f"### {path}\n")
        try:
            output = process_file(
                path,
                mode=args.mode,
                encoding=args.encoding,
                max_depth=args.max_depth,
            )
        except Md2tocError as exc:
            failed += 1
            logger.error("Failed to process %s: %s", path, exc)
            stderr.write(f"{path}: {exc}\n")
            if not args.keep_going:
                return 1
            continue
        stdout.write(output)

    if failed:
        logger.info("%d of %d files failed", failed, len(args.files))
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
