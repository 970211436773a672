"""Outline tree models."""

from __future__ import annotations

from pydantic import BaseModel, Field


class OutlineNode(BaseModel):
    """One entry of the generated table of contents.

    The root node carries no bullet or label; its children are the top-level
    entries.
    """

    bullet_char: str = ""
    literal: str = ""
    level: int = Field(1, ge=1, le=6)
    children: list["OutlineNode"] = Field(default_factory=list)
