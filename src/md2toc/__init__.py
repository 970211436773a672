"""md2toc: canonical Markdown rendering and heading outlines."""

from md2toc.document import Node, NodeKind, WalkStatus, walk
from md2toc.exceptions import (
    HeadingLevelSkipError,
    Md2tocError,
    MissingHeadingTextError,
    NonTextHeadingLabelError,
    OutlineDepthExceededError,
    OutlineError,
    ParseError,
    RenderError,
    SourceReadError,
    UnsupportedNodeError,
)
from md2toc.outline import OutlineBuilder, build_outline, print_outline
from md2toc.parser import parse_markdown
from md2toc.pipeline import format_markdown, generate_toc, process_file
from md2toc.renderer import CanonicalRenderer, render_markdown
from md2toc.schemas import FormatResult, OutlineNode, TocResult

__all__ = [
    "CanonicalRenderer",
    "FormatResult",
    "HeadingLevelSkipError",
    "Md2tocError",
    "MissingHeadingTextError",
    "Node",
    "NodeKind",
    "NonTextHeadingLabelError",
    "OutlineBuilder",
    "OutlineDepthExceededError",
    "OutlineError",
    "OutlineNode",
    "ParseError",
    "RenderError",
    "SourceReadError",
    "TocResult",
    "UnsupportedNodeError",
    "WalkStatus",
    "build_outline",
    "format_markdown",
    "generate_toc",
    "parse_markdown",
    "print_outline",
    "process_file",
    "render_markdown",
    "walk",
]
