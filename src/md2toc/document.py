"""Document tree consumed by the renderer and the outline builder."""

from __future__ import annotations

import enum
import weakref
from dataclasses import dataclass, field
from typing import Iterator, Protocol


class NodeKind(str, enum.Enum):
    """Closed set of node kinds the parser adapter can produce."""

    DOCUMENT = "document"
    HEADING = "heading"
    PARAGRAPH = "paragraph"
    LIST = "list"
    LIST_ITEM = "list_item"
    CODE_BLOCK = "code_block"
    TEXT = "text"
    LINK = "link"
    HARD_BREAK = "hard_break"

    # Recognized by the parser but intentionally not rendered.
    SOFT_BREAK = "soft_break"
    EMPHASIS = "emphasis"
    STRONG = "strong"
    STRIKETHROUGH = "strikethrough"
    BLOCK_QUOTE = "block_quote"
    CODE_SPAN = "code_span"
    IMAGE = "image"
    HTML_SPAN = "html_span"
    HTML_BLOCK = "html_block"
    HORIZONTAL_RULE = "horizontal_rule"
    TABLE = "table"
    TABLE_HEAD = "table_head"
    TABLE_BODY = "table_body"
    TABLE_ROW = "table_row"
    TABLE_CELL = "table_cell"


UNSUPPORTED_KINDS: frozenset[NodeKind] = frozenset(
    {
        NodeKind.SOFT_BREAK,
        NodeKind.EMPHASIS,
        NodeKind.STRONG,
        NodeKind.STRIKETHROUGH,
        NodeKind.BLOCK_QUOTE,
        NodeKind.CODE_SPAN,
        NodeKind.IMAGE,
        NodeKind.HTML_SPAN,
        NodeKind.HTML_BLOCK,
        NodeKind.HORIZONTAL_RULE,
        NodeKind.TABLE,
        NodeKind.TABLE_HEAD,
        NodeKind.TABLE_BODY,
        NodeKind.TABLE_ROW,
        NodeKind.TABLE_CELL,
    }
)


class WalkStatus(enum.Enum):
    """Continuation signal returned by a visitor."""

    GO_TO_NEXT = "go_to_next"
    SKIP_CHILDREN = "skip_children"
    TERMINATE = "terminate"


@dataclass(eq=False)
class Node:
    """A typed node in the parsed document tree.

    Attributes:
        kind: Node type discriminant.
        literal: Text payload of text and code-block nodes, with escapes and
            entities decoded.
        markup: Source spelling of a text node (escapes and entities kept),
            or None when the node was built without one.
        level: Heading depth (1 is the document title); 0 for other kinds.
        heading_id: Anchor slug assigned to headings by the parser adapter.
        bullet_char: List item marker (``-``, ``*``, ``+`` or ``1.`` style).
        info: Code block language tag.
        destination: Link target.
        line: 1-based source line of the block this node came from.
        children: Ordered child nodes.
    """

    kind: NodeKind
    literal: str = ""
    markup: str | None = None
    level: int = 0
    heading_id: str = ""
    bullet_char: str = ""
    info: str = ""
    destination: str = ""
    line: int | None = None
    children: list["Node"] = field(default_factory=list)
    _parent: "weakref.ReferenceType[Node] | None" = field(
        default=None, init=False, repr=False
    )

    @property
    def parent(self) -> "Node | None":
        """The enclosing node, or None for the root."""
        if self._parent is None:
            return None
        return self._parent()

    @property
    def source_line(self) -> int | None:
        """Line of this node, falling back to the nearest ancestor with one."""
        node: Node | None = self
        while node is not None:
            if node.line is not None:
                return node.line
            node = node.parent
        return None

    def append_child(self, child: "Node") -> "Node":
        child._parent = weakref.ref(self)
        self.children.append(child)
        return child

    def iter_text(self) -> Iterator[str]:
        """Yield literal text of this node and its descendants in order."""
        if self.kind in {NodeKind.TEXT, NodeKind.CODE_SPAN}:
            yield self.literal
        for child in self.children:
            yield from child.iter_text()

    def plain_text(self) -> str:
        return "".join(self.iter_text())


class NodeVisitor(Protocol):
    """Callback invoked for every node, once entering and once exiting."""

    def visit(self, node: Node, entering: bool) -> WalkStatus: ...


def walk(node: Node, visitor: NodeVisitor) -> WalkStatus:
    """Traverse ``node`` depth-first in document order.

    ``visitor.visit`` is called with ``entering=True`` before the children and
    ``entering=False`` after them. ``SKIP_CHILDREN`` on entry skips the subtree
    (the exit event is still delivered); ``TERMINATE`` stops the whole walk.
    """
    status = visitor.visit(node, True)
    if status is WalkStatus.TERMINATE:
        return status
    if status is not WalkStatus.SKIP_CHILDREN:
        for child in node.children:
            if walk(child, visitor) is WalkStatus.TERMINATE:
                return WalkStatus.TERMINATE
    if visitor.visit(node, False) is WalkStatus.TERMINATE:
        return WalkStatus.TERMINATE
    return WalkStatus.GO_TO_NEXT
