"""Result models returned by the pipeline helpers."""

from __future__ import annotations

from pydantic import BaseModel, Field

from md2toc.schemas.outline import OutlineNode


class TocResult(BaseModel):
    """Generated table of contents."""

    toc: str
    outline: OutlineNode
    warnings: list[str] = Field(default_factory=list)


class FormatResult(BaseModel):
    """Canonical re-rendering of a document."""

    content: str
