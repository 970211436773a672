"""End-to-end helpers: Markdown text or files in, outline or canonical text out."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Literal

from md2toc.config import MD2TOC_ENCODING
from md2toc.document import walk
from md2toc.exceptions import SourceReadError
from md2toc.outline import OutlineBuilder, print_outline
from md2toc.parser import parse_markdown
from md2toc.renderer import render_markdown
from md2toc.schemas import FormatResult, TocResult

logger = logging.getLogger(__name__)

Mode = Literal["toc", "format"]


def generate_toc(text: str, *, max_depth: int | None = None) -> TocResult:
    """Parse Markdown and produce its table of contents.

    Args:
        text: Markdown source.
        max_depth: Deepest outline indentation allowed when printing.

    Returns:
        The printed outline, the outline tree, and any non-fatal label reports.

    Raises:
        HeadingLevelSkipError: If a heading skips a level.
        MissingHeadingTextError: If a heading has no text.
        OutlineDepthExceededError: If the outline nests too deeply.
    """
    document = parse_markdown(text)
    builder = OutlineBuilder()
    walk(document, builder)
    toc = print_outline(builder.root, max_depth=max_depth)
    return TocResult(
        toc=toc,
        outline=builder.root,
        warnings=[str(error) for error in builder.errors],
    )


def format_markdown(text: str) -> FormatResult:
    """Parse Markdown and re-render it in canonical form.

    Raises:
        UnsupportedNodeError: If the document uses an unsupported element.
    """
    return FormatResult(content=render_markdown(parse_markdown(text)))


def read_source(path: Path, *, encoding: str = MD2TOC_ENCODING) -> str:
    """Read a Markdown file.

    Raises:
        SourceReadError: If the file cannot be read or decoded, or the encoding
            is unknown.
    """
    try:
        return path.read_text(encoding=encoding)
    except (OSError, UnicodeDecodeError, LookupError) as exc:
        raise SourceReadError(f"Cannot read {path}: {exc}") from exc


def process_file(
    path: Path,
    *,
    mode: Mode = "toc",
    encoding: str = MD2TOC_ENCODING,
    max_depth: int | None = None,
) -> str:
    """Read one file and return its outline (``toc``) or canonical form (``format``)."""
    text = read_source(path, encoding=encoding)
    logger.debug("processing %s (%d chars, mode=%s)", path, len(text), mode)
    if mode == "format":
        return format_markdown(text).content
    return generate_toc(text, max_depth=max_depth).toc
