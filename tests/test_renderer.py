"""Tests for the canonical renderer."""

from __future__ import annotations

import io
from pathlib import Path

import pytest

from md2toc.document import Node, NodeKind, walk
from md2toc.exceptions import UnsupportedNodeError
from md2toc.parser import parse_markdown
from md2toc.renderer import CanonicalRenderer, OutputState, render_markdown, unhandled_kinds


def _render(text: str) -> str:
    return render_markdown(parse_markdown(text))


class TestOutputState:
    """Tests for trailing-line bookkeeping."""

    @pytest.mark.parametrize(
        ("writes", "trailing"),
        [
            ([], ""),
            (["abc"], "abc"),
            (["ab", "c"], "abc"),
            (["abc\n"], "abc\n"),
            (["abc\n", "\n"], "\n"),
            (["abc\nde"], "de"),
            (["abc\n", "x"], "x"),
            (["a\n\n"], "\n"),
            (["ab", "c\n"], "abc\n"),
            (["one\x0c", "\n"], "one\x0c\n"),
            (["a\x1cb\u2028c"], "a\x1cb\u2028c"),
            (["x\r\n", "y"], "y"),
        ],
    )
    def test_trailing_line(self, writes: list[str], trailing: str) -> None:
        sink = io.StringIO()
        state = OutputState(sink)

        for text in writes:
            state.write(text)

        assert state.trailing_line == trailing
        assert sink.getvalue() == "".join(writes)

    def test_at_blank_line(self) -> None:
        state = OutputState(io.StringIO())
        state.write("line\n")
        assert not state.at_blank_line
        state.write("\n")
        assert state.at_blank_line


class TestCanonicalRenderer:
    """Tests for rendering supported node kinds."""

    def test_sample_document(self, sample_markdown: str) -> None:
        assert _render(sample_markdown) == sample_markdown

    @pytest.mark.parametrize("newlines", [1, 2, 3, 5])
    def test_exactly_one_blank_line_between_blocks(self, newlines: int) -> None:
        source = "# Heading" + "\n" * newlines + "Body text\n" + "\n" * newlines + "## Next\n"

        assert _render(source) == "# Heading\n\nBody text\n\n## Next\n"

    def test_leading_blank_lines_are_dropped(self) -> None:
        assert _render("\n\n\nParagraph\n") == "Paragraph\n"

    def test_empty_document(self) -> None:
        assert _render("") == ""

    def test_heading_markers_follow_level(self) -> None:
        source = "# One\n## Two\n### Three\n#### Four\n##### Five\n###### Six\n"

        assert _render(source) == (
            "# One\n\n## Two\n\n### Three\n\n#### Four\n\n##### Five\n\n###### Six\n"
        )

    def test_list_items_and_following_block(self) -> None:
        source = "- one\n- two\n\n\n\nAfter\n"

        assert _render(source) == "- one\n- two\n\nAfter\n"

    def test_bullet_style_is_preserved(self) -> None:
        assert _render("+ plus\n+ again\n") == "+ plus\n+ again\n"

    def test_nested_list_is_indented(self) -> None:
        source = "- a\n  - b\n- c\n"

        assert _render(source) == "- a\n  - b\n\n- c\n"

    def test_code_block_is_fenced(self) -> None:
        source = "Intro\n```python\nprint(1)\n```\nAfter\n"

        assert _render(source) == "Intro\n\n```python\nprint(1)\n```\n\nAfter\n"

    def test_code_block_literal_is_verbatim(self) -> None:
        source = "```\n\n  keep   spacing\n\n```\n"

        assert _render(source) == "```\n\n  keep   spacing\n\n```\n"

    def test_link(self) -> None:
        source = "See [docs](https://example.com/docs) now.\n"

        assert _render(source) == source

    def test_hard_break(self) -> None:
        assert _render("line one  \nline two\n") == "line one\nline two\n"

    @pytest.mark.parametrize(
        "source",
        [
            "\\# not a heading\n",
            "1\\. not a list\n",
            "\\- not a bullet\n",
            "a &lt;b&gt; c\n",
            "Fish &amp; chips \\*today\\*\n",
        ],
    )
    def test_escapes_and_entities_keep_source_form(self, source: str) -> None:
        assert _render(source) == source

    def test_code_block_in_list_item_is_indented(self) -> None:
        source = "- item\n\n  ```\n  code\n\n  more\n  ```\n"

        assert _render(source) == "- item\n  ```\n  code\n\n  more\n  ```\n\n"

    def test_line_separators_inside_text_are_not_line_ends(self) -> None:
        document = Node(NodeKind.DOCUMENT)
        for literal in ("one\x0c", "two"):
            paragraph = document.append_child(Node(NodeKind.PARAGRAPH))
            paragraph.append_child(Node(NodeKind.TEXT, literal=literal))

        assert render_markdown(document) == "one\x0c\n\ntwo\n"

    def test_renders_hand_built_tree(self) -> None:
        document = Node(NodeKind.DOCUMENT)
        heading = document.append_child(Node(NodeKind.HEADING, level=2))
        heading.append_child(Node(NodeKind.TEXT, literal="Hand made"))
        listing = document.append_child(Node(NodeKind.LIST))
        item = listing.append_child(Node(NodeKind.LIST_ITEM, bullet_char="*"))
        item.append_child(Node(NodeKind.TEXT, literal="entry"))

        assert render_markdown(document) == "## Hand made\n\n* entry\n"

    def test_writes_to_provided_sink(self) -> None:
        sink = io.StringIO()

        walk(parse_markdown("# Title\n"), CanonicalRenderer(sink))

        assert sink.getvalue() == "# Title\n"


class TestUnsupportedNodes:
    """Unsupported kinds fail the whole render."""

    @pytest.mark.parametrize(
        ("source", "kind"),
        [
            ("| a | b |\n| - | - |\n| 1 | 2 |\n", "table"),
            ("![diagram](diagram.png)\n", "image"),
            ("Some *emphasis* here\n", "emphasis"),
            ("Some **strong** here\n", "strong"),
            ("> quoted\n", "block_quote"),
            ("Use `md2toc`\n", "code_span"),
            ("Before\n\n***\n", "horizontal_rule"),
            ("<div>\nraw\n</div>\n", "html_block"),
        ],
    )
    def test_raises_unsupported_node_error(self, source: str, kind: str) -> None:
        with pytest.raises(UnsupportedNodeError) as exc_info:
            _render(source)

        assert exc_info.value.kind == kind

    def test_error_reports_source_line(self) -> None:
        with pytest.raises(UnsupportedNodeError, match="at line 3"):
            _render("# Title\n\nSome *emphasis*\n")

    def test_soft_break_node_is_rejected(self) -> None:
        document = Node(NodeKind.DOCUMENT)
        paragraph = document.append_child(Node(NodeKind.PARAGRAPH))
        paragraph.append_child(Node(NodeKind.SOFT_BREAK))

        with pytest.raises(UnsupportedNodeError, match="soft_break"):
            render_markdown(document)

    def test_every_kind_is_handled_or_declared_unsupported(self) -> None:
        assert unhandled_kinds() == set()


class TestIdempotence:
    """Canonical form is a fixed point of parse + render."""

    @pytest.mark.parametrize(
        "source",
        [
            "# Title\n\n\n\nPara one\ncontinued\n## Section\n- a\n- b\nTail\n",
            "Setext\n===\nText  \nbroken\n\n    code\n\n1. x\n2. y\n",
            "- a\n  - b\n    - c\n- d\n\n```js\nlet x = 1;\n```\n",
            "[link](https://example.com/a%20b) and more\n\n## End\n",
            "\\# not a heading\n\n1\\. x\n\n\\- x\n\na &lt;b&gt; c\n",
            "- item\n\n  ```\n  code\n  ```\n",
            "1. one\n   - nested\n\n     ```py\n     x = 1\n     ```\n",
        ],
    )
    def test_render_is_a_fixed_point(self, source: str) -> None:
        once = _render(source)

        assert _render(once) == once


class TestGoldenFiles:
    """Render every testdata/input file and compare with testdata/expected."""

    def test_golden(self, testdata_dir: Path) -> None:
        inputs = sorted((testdata_dir / "input").glob("*.md"))
        assert inputs

        for input_path in inputs:
            expected_path = testdata_dir / "expected" / input_path.name
            got = _render(input_path.read_text(encoding="utf-8"))
            assert got == expected_path.read_text(encoding="utf-8"), input_path.name
