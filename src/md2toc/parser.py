"""Build the md2toc document tree from Markdown source with markdown-it-py."""

from __future__ import annotations

import logging

from markdown_it import MarkdownIt
from markdown_it.tree import SyntaxTreeNode

from md2toc.document import Node, NodeKind
from md2toc.exceptions import ParseError
from md2toc.slugs import SlugRegistry

logger = logging.getLogger(__name__)

# markdown-it syntax tree types that map one-to-one onto a node kind.
_KIND_BY_TYPE: dict[str, NodeKind] = {
    "heading": NodeKind.HEADING,
    "paragraph": NodeKind.PARAGRAPH,
    "bullet_list": NodeKind.LIST,
    "ordered_list": NodeKind.LIST,
    "list_item": NodeKind.LIST_ITEM,
    "fence": NodeKind.CODE_BLOCK,
    "code_block": NodeKind.CODE_BLOCK,
    "text": NodeKind.TEXT,
    "text_special": NodeKind.TEXT,
    "link": NodeKind.LINK,
    "hardbreak": NodeKind.HARD_BREAK,
    "softbreak": NodeKind.SOFT_BREAK,
    "em": NodeKind.EMPHASIS,
    "strong": NodeKind.STRONG,
    "s": NodeKind.STRIKETHROUGH,
    "blockquote": NodeKind.BLOCK_QUOTE,
    "code_inline": NodeKind.CODE_SPAN,
    "image": NodeKind.IMAGE,
    "html_inline": NodeKind.HTML_SPAN,
    "html_block": NodeKind.HTML_BLOCK,
    "hr": NodeKind.HORIZONTAL_RULE,
    "table": NodeKind.TABLE,
    "thead": NodeKind.TABLE_HEAD,
    "tbody": NodeKind.TABLE_BODY,
    "tr": NodeKind.TABLE_ROW,
    "th": NodeKind.TABLE_CELL,
    "td": NodeKind.TABLE_CELL,
}


def create_markdown_parser() -> MarkdownIt:
    """CommonMark parser that also recognizes tables and strikethrough.

    The extra rules make those constructs show up as explicit nodes, so the
    renderer can reject them instead of echoing them back as paragraph text.
    ``text_join`` is off so escapes and entities keep their source markup.
    """
    return (
        MarkdownIt("commonmark")
        .enable(["table", "strikethrough"])
        .disable("text_join")
    )


def parse_markdown(text: str, *, md: MarkdownIt | None = None) -> Node:
    """Parse Markdown source into a document tree with heading IDs assigned.

    Args:
        text: Markdown source.
        md: Optional preconfigured parser; defaults to
            :func:`create_markdown_parser`.

    Returns:
        The ``DOCUMENT`` root node.

    Raises:
        ParseError: If the parser produces a node type with no mapping.
    """
    md = md or create_markdown_parser()
    syntax_tree = SyntaxTreeNode(md.parse(text))
    document = Node(NodeKind.DOCUMENT, line=1)
    builder = _TreeBuilder()
    for child in syntax_tree.children:
        builder.add(document, child)
    return document


class _TreeBuilder:
    """Convert a markdown-it syntax tree into ``Node`` objects."""

    def __init__(self) -> None:
        self._slugs = SlugRegistry()

    def add(self, parent: Node, source: SyntaxTreeNode) -> None:
        if source.type == "inline":
            # Inline content hangs directly off its block.
            for child in source.children:
                self.add(parent, child)
            return

        kind = _KIND_BY_TYPE.get(source.type)
        if kind is None:
            raise ParseError(
                f"Unrecognized Markdown element '{source.type}'"
                + (f" at line {source.map[0] + 1}" if source.map else "")
            )

        if kind is NodeKind.SOFT_BREAK:
            self._add_text(parent, "\n", "\n")
            return
        if kind is NodeKind.TEXT:
            # Escapes and entities decode into literal; markup keeps the source.
            markup = source.markup if source.type == "text_special" else source.content
            self._add_text(parent, source.content, markup)
            return

        node = parent.append_child(
            Node(kind, line=source.map[0] + 1 if source.map else None)
        )
        if kind is NodeKind.CODE_BLOCK:
            node.literal = source.content
            node.info = source.info.strip()
        elif kind is NodeKind.CODE_SPAN:
            node.literal = source.content
        elif kind is NodeKind.LINK:
            node.destination = str(source.attrs.get("href", ""))
        elif kind is NodeKind.LIST_ITEM:
            node.bullet_char = _bullet_for(source)
        elif kind is NodeKind.IMAGE:
            # Alt text children are irrelevant; the renderer rejects images.
            return

        for child in source.children:
            self.add(node, child)

        if kind is NodeKind.HEADING:
            node.level = int(source.tag[1:])
            node.heading_id = self._slugs.unique(node.plain_text())
            logger.debug("heading h%d -> #%s", node.level, node.heading_id)

    @staticmethod
    def _add_text(parent: Node, literal: str, markup: str) -> None:
        # Soft breaks stay inside the text literal; adjacent runs merge.
        if parent.children and parent.children[-1].kind is NodeKind.TEXT:
            previous = parent.children[-1]
            previous.literal += literal
            previous.markup = (previous.markup or "") + markup
            return
        parent.append_child(Node(NodeKind.TEXT, literal=literal, markup=markup))


def _bullet_for(item: SyntaxTreeNode) -> str:
    if item.parent is not None and item.parent.type == "ordered_list":
        return f"{item.info}{item.markup}"
    return item.markup
