"""Build and print the heading outline (table of contents) of a document."""

from __future__ import annotations

import logging

from md2toc.config import MD2TOC_MAX_OUTLINE_DEPTH
from md2toc.document import Node, NodeKind, WalkStatus, walk
from md2toc.exceptions import (
    HeadingLevelSkipError,
    MissingHeadingTextError,
    NonTextHeadingLabelError,
    OutlineDepthExceededError,
)
from md2toc.schemas import OutlineNode

logger = logging.getLogger(__name__)

TOP_LEVEL = 2
MAX_HEADING_LEVEL = 6


class OutlineStack:
    """Bounded stack of ancestor outline entries."""

    def __init__(self, capacity: int) -> None:
        self.capacity = capacity
        self._items: list[OutlineNode] = []

    def __len__(self) -> int:
        return len(self._items)

    def push(self, node: OutlineNode) -> None:
        if len(self._items) >= self.capacity:
            raise OverflowError(f"outline stack is full ({self.capacity} entries)")
        self._items.append(node)

    def pop(self) -> OutlineNode:
        if not self._items:
            raise IndexError("pop from an empty outline stack")
        return self._items.pop()


class OutlineBuilder:
    """Visitor that turns level >= 2 headings into a nested outline.

    Headings must descend one level at a time; a jump such as ``##`` straight
    to ``####`` is rejected rather than normalized. A heading whose label does
    not start with plain text is recorded in :attr:`errors` and still gets an
    entry built from whatever text it contains.
    """

    def __init__(self) -> None:
        self.root = OutlineNode()
        self.errors: list[NonTextHeadingLabelError] = []
        self._parent_level = TOP_LEVEL
        self._parent = self.root
        self._last: OutlineNode | None = None
        self._stack = OutlineStack(MAX_HEADING_LEVEL - TOP_LEVEL)

    def visit(self, node: Node, entering: bool) -> WalkStatus:
        if entering and node.kind is NodeKind.HEADING and node.level >= TOP_LEVEL:
            self._add_heading(node)
        return WalkStatus.GO_TO_NEXT

    def _add_heading(self, heading: Node) -> None:
        level = heading.level
        if level > self._parent_level:
            if level - self._parent_level > 1:
                raise HeadingLevelSkipError(
                    f"Heading level {level} at line {heading.source_line} skips "
                    f"level {self._parent_level + 1}"
                )
            if self._last is None:
                raise HeadingLevelSkipError(
                    f"Heading level {level} at line {heading.source_line} has no "
                    f"level {TOP_LEVEL} heading to nest under"
                )
            self._stack.push(self._parent)
            self._parent = self._last
            self._parent_level = level
        elif level < self._parent_level:
            for _ in range(self._parent_level - level):
                self._parent = self._stack.pop()
            self._parent_level = level

        entry = OutlineNode(
            bullet_char="-" if level == TOP_LEVEL else "*",
            literal=f"[{self._label(heading)}](#{heading.heading_id})",
            level=level,
        )
        self._parent.children.append(entry)
        self._last = entry

    def _label(self, heading: Node) -> str:
        if not heading.children:
            raise MissingHeadingTextError(
                f"Heading at line {heading.source_line} has no text"
            )
        first = heading.children[0]
        if first.kind is NodeKind.TEXT:
            return first.literal
        error = NonTextHeadingLabelError(
            f"Heading at line {heading.source_line} starts with a "
            f"{first.kind.value} node instead of text"
        )
        logger.warning("%s", error)
        self.errors.append(error)
        return heading.plain_text()


def build_outline(document: Node) -> OutlineNode:
    """Build the outline of ``document`` and return its root."""
    builder = OutlineBuilder()
    walk(document, builder)
    return builder.root


def print_outline(root: OutlineNode, *, max_depth: int | None = None) -> str:
    """Render an outline as two-space indented bullet lines.

    Args:
        root: Outline root; its children are printed at depth 0.
        max_depth: Deepest indentation allowed. Defaults to
            ``MD2TOC_MAX_OUTLINE_DEPTH``.

    Raises:
        OutlineDepthExceededError: If entries nest beyond ``max_depth``.
    """
    if max_depth is None:
        max_depth = MD2TOC_MAX_OUTLINE_DEPTH
    lines: list[str] = []
    _print_children(root, lines, 0, max_depth)
    return "".join(lines)


def _print_children(node: OutlineNode, lines: list[str], depth: int, max_depth: int) -> None:
    if not node.children:
        return
    if depth > max_depth:
        raise OutlineDepthExceededError(
            f"Outline nesting exceeds the supported depth of {max_depth}"
        )
    for child in node.children:
        lines.append(f"{'  ' * depth}{child.bullet_char} {child.literal}\n")
        _print_children(child, lines, depth + 1, max_depth)
