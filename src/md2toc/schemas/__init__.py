"""Shared schemas for md2toc."""

from md2toc.schemas.outline import OutlineNode
from md2toc.schemas.results import FormatResult, TocResult

__all__ = ["FormatResult", "OutlineNode", "TocResult"]
