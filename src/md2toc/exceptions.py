"""Custom exceptions for md2toc."""

from __future__ import annotations


class Md2tocError(Exception):
    """Base exception for md2toc operations."""


class SourceReadError(Md2tocError):
    """Error while reading an input document."""


class ParseError(Md2tocError):
    """Error while building the document tree."""


class RenderError(Md2tocError):
    """Error during canonical rendering."""


class UnsupportedNodeError(RenderError):
    """The document contains a node kind the renderer does not implement."""

    def __init__(self, kind: str, line: int | None = None) -> None:
        self.kind = kind
        self.line = line
        where = f" at line {line}" if line else ""
        super().__init__(f"Unsupported node '{kind}'{where}")


class OutlineError(Md2tocError):
    """Error during outline construction or printing."""


class HeadingLevelSkipError(OutlineError):
    """A heading descends more than one level below its parent."""


class MissingHeadingTextError(OutlineError):
    """A heading has no children to supply its label."""


class NonTextHeadingLabelError(OutlineError):
    """A heading label does not start with plain text (reported, not raised)."""


class OutlineDepthExceededError(OutlineError):
    """The outline nests deeper than the printer supports."""
