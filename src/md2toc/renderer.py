"""Re-serialize a document tree into canonical Markdown."""

from __future__ import annotations

import io
import logging
from typing import Callable, TextIO

from md2toc.document import UNSUPPORTED_KINDS, Node, NodeKind, WalkStatus, walk
from md2toc.exceptions import UnsupportedNodeError

logger = logging.getLogger(__name__)

_BLANK_LINE = "\n"


class OutputState:
    """Output sink plus the trailing line used for section-boundary decisions.

    ``trailing_line`` is the last completed line (with its newline) when the
    output ends with a newline, otherwise the text written since the last
    newline. It is empty only before anything has been written.
    """

    def __init__(self, sink: TextIO) -> None:
        self.sink = sink
        self.trailing_line = ""

    @property
    def at_blank_line(self) -> bool:
        return self.trailing_line == _BLANK_LINE

    def write(self, text: str) -> None:
        if not text:
            return
        self.sink.write(text)
        if self.trailing_line.endswith("\n"):
            pending = text
        else:
            pending = self.trailing_line + text
        # Only "\n" ends a line; form feeds and other separators stay inline.
        start = pending.rfind("\n", 0, len(pending) - 1) + 1
        self.trailing_line = pending[start:]


class CanonicalRenderer:
    """Visitor that writes the canonical form of one document.

    Every block element ends up separated from its neighbours by exactly one
    blank line, however many blank lines surrounded it in the source. Create
    a fresh instance per document.
    """

    def __init__(self, sink: TextIO) -> None:
        self.out = OutputState(sink)
        self.at_document_start = False
        self._handlers: dict[NodeKind, Callable[[Node, bool], None]] = {
            NodeKind.DOCUMENT: self._document,
            NodeKind.HEADING: self._heading,
            NodeKind.PARAGRAPH: self._paragraph,
            NodeKind.LIST: self._list,
            NodeKind.LIST_ITEM: self._list_item,
            NodeKind.CODE_BLOCK: self._code_block,
            NodeKind.TEXT: self._text,
            NodeKind.LINK: self._link,
            NodeKind.HARD_BREAK: self._hard_break,
        }

    def visit(self, node: Node, entering: bool) -> WalkStatus:
        logger.debug("%s (%s) line=%s", node.kind.value, entering, node.line)
        handler = self._handlers.get(node.kind)
        if handler is None:
            raise UnsupportedNodeError(node.kind.value, node.source_line)
        handler(node, entering)
        return WalkStatus.GO_TO_NEXT

    def open_section(self) -> None:
        if not self.at_document_start and not self.out.at_blank_line:
            self.out.write("\n")
        self.at_document_start = False

    def close_section(self) -> None:
        if not self.out.at_blank_line:
            self.out.write("\n")

    def _document(self, node: Node, entering: bool) -> None:
        self.at_document_start = entering

    def _heading(self, node: Node, entering: bool) -> None:
        if entering:
            self.open_section()
            self.out.write("#" * node.level + " ")
        else:
            self.close_section()

    def _paragraph(self, node: Node, entering: bool) -> None:
        if _is_in_list_item(node):
            return
        if entering:
            self.open_section()
        else:
            self.close_section()

    def _list(self, node: Node, entering: bool) -> None:
        # Items close themselves.
        if entering:
            self.open_section()

    def _list_item(self, node: Node, entering: bool) -> None:
        if entering:
            self.out.write(_item_indent(node) + node.bullet_char + " ")
        else:
            self.close_section()

    def _code_block(self, node: Node, entering: bool) -> None:
        if not entering:
            return
        self.open_section()
        # Inside a list item every line, fences included, sits under the item text.
        indent = _item_indent(node)
        self.out.write(f"{indent}```{node.info}\n")
        self.out.write(
            "\n".join(indent + line if line else line for line in node.literal.split("\n"))
        )
        self.out.write(indent + "```\n")

    def _text(self, node: Node, entering: bool) -> None:
        if entering:
            self.out.write(node.literal if node.markup is None else node.markup)

    def _link(self, node: Node, entering: bool) -> None:
        if entering:
            self.out.write("[")
        else:
            self.out.write(f"]({node.destination})")

    def _hard_break(self, node: Node, entering: bool) -> None:
        if entering:
            self.out.write("\n")


def _is_in_list_item(node: Node) -> bool:
    parent = node.parent
    return parent is not None and parent.kind is NodeKind.LIST_ITEM


def _item_indent(item: Node) -> str:
    """Indentation that keeps a nested item under its enclosing item's text."""
    width = 0
    ancestor = item.parent
    while ancestor is not None:
        if ancestor.kind is NodeKind.LIST_ITEM:
            width += len(ancestor.bullet_char) + 1
        ancestor = ancestor.parent
    return " " * width


def unhandled_kinds() -> set[NodeKind]:
    """Node kinds that are neither rendered nor declared unsupported."""
    handled = set(CanonicalRenderer(io.StringIO())._handlers)
    return set(NodeKind) - handled - UNSUPPORTED_KINDS


def render_markdown(document: Node) -> str:
    """Render ``document`` in canonical form.

    Raises:
        UnsupportedNodeError: If the tree contains a kind the renderer does not
            implement. No partial output is returned.
    """
    buffer = io.StringIO()
    walk(document, CanonicalRenderer(buffer))
    return buffer.getvalue()
