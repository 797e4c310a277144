#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Unit tests for the BBCode renderer.

Tests cover:
- Inline markup
- Headlines and relative levels
- Lists (ordered, unordered, descriptive, nested)
- Tables
- Code, example and fixed-width blocks
- Links
- Footnotes
- Unsupported constructs
- File output
- Determinism and pass isolation

"""

from io import BytesIO, StringIO
from pathlib import Path

import pytest

from org2bb.ast import builder as b
from org2bb.ast.nodes import Node, NodeKind
from org2bb.ast.visitors import NodeVisitor
from org2bb.exceptions import InvalidOptionsError, RenderingError, UnsupportedConstructError
from org2bb.options.base import BaseRendererOptions
from org2bb.options.bbcode import BBCodeRendererOptions
from org2bb.renderers.bbcode import BBCodeRenderer

UNSUPPORTED_KINDS = [
    NodeKind.CENTER_BLOCK,
    NodeKind.CLOCK,
    NodeKind.DRAWER,
    NodeKind.DYNAMIC_BLOCK,
    NodeKind.EXPORT_BLOCK,
    NodeKind.EXPORT_SNIPPET,
    NodeKind.INLINE_SRC_BLOCK,
    NodeKind.INLINETASK,
    NodeKind.KEYWORD,
    NodeKind.LATEX_ENVIRONMENT,
    NodeKind.LATEX_FRAGMENT,
    NodeKind.NODE_PROPERTY,
    NodeKind.PLANNING,
    NodeKind.PROPERTY_DRAWER,
    NodeKind.RADIO_TARGET,
    NodeKind.SPECIAL_BLOCK,
    NodeKind.STATISTICS_COOKIE,
    NodeKind.SUBSCRIPT,
    NodeKind.SUPERSCRIPT,
    NodeKind.TARGET,
    NodeKind.TIMESTAMP,
    NodeKind.VERSE_BLOCK,
]


def render(node: Node, **options: object) -> str:
    return BBCodeRenderer(BBCodeRendererOptions(**options)).render_to_string(node)  # type: ignore[arg-type]


@pytest.mark.unit
class TestBBCodeRendererSetup:
    """Tests for renderer construction."""

    def test_default_options(self) -> None:
        """Test the renderer falls back to default options."""
        renderer = BBCodeRenderer()
        assert isinstance(renderer.options, BBCodeRendererOptions)

    def test_wrong_options_type(self) -> None:
        """Test options of another class are rejected."""
        with pytest.raises(InvalidOptionsError):
            BBCodeRenderer(BaseRendererOptions())  # type: ignore[arg-type]

    def test_every_kind_has_a_rule(self) -> None:
        """Test the renderer defines a visit method for every node kind."""
        for kind in NodeKind:
            assert callable(getattr(BBCodeRenderer, kind.visit_method_name))

    def test_every_rule_is_documented(self) -> None:
        """Test each visit method states what it renders."""
        undocumented = [
            kind.value for kind in NodeKind if not getattr(BBCodeRenderer, kind.visit_method_name).__doc__
        ]
        assert undocumented == []

    def test_incomplete_visitor_cannot_be_instantiated(self) -> None:
        """Test a visitor missing a node kind fails at construction."""

        class BoldOnly(NodeVisitor):
            def visit_bold(self, node: Node) -> str:
                return "bold"

        with pytest.raises(TypeError):
            BoldOnly()  # type: ignore[abstract]

    def test_context_outside_pass(self) -> None:
        """Test the pass context is only available while rendering."""
        with pytest.raises(RenderingError):
            _ = BBCodeRenderer().context


@pytest.mark.unit
class TestBBCodeInlineMarkup:
    """Tests for inline markup."""

    def test_bold(self) -> None:
        """Test the bold scenario."""
        assert render(b.bold(b.text("hello"))) == "[b]hello[/b]"

    @pytest.mark.parametrize(
        "factory,tag",
        [(b.italic, "i"), (b.underline, "u"), (b.strike_through, "s")],
    )
    def test_simple_wrappers(self, factory, tag: str) -> None:
        """Test italic, underline and strike-through tags."""
        assert render(factory(b.text("x"))) == f"[{tag}]x[/{tag}]"

    def test_nested_markup(self) -> None:
        """Test nested markup wraps inside out."""
        assert render(b.bold(b.italic(b.text("x")))) == "[b][i]x[/i][/b]"

    @pytest.mark.parametrize("factory", [b.code, b.verbatim])
    def test_code_and_verbatim(self, factory) -> None:
        """Test inline code and verbatim render as monospace font."""
        assert render(factory("x = [1]")) == "[font=monospace]x = [1][/font]"

    def test_plain_text_passthrough(self) -> None:
        """Test text is not escaped."""
        assert render(b.text("[b]not bold[/b] & <html>")) == "[b]not bold[/b] & <html>"

    def test_entity(self) -> None:
        """Test entities render as their UTF-8 character."""
        assert render(b.entity("alpha", "α")) == "α"

    def test_line_break(self) -> None:
        """Test hard line breaks use a non-empty br tag."""
        assert render(b.line_break()) == "[br]_[/br]\n"

    def test_line_break_placeholder_option(self) -> None:
        """Test the br placeholder is configurable."""
        assert render(b.line_break(), line_break_placeholder="") == "[br][/br]\n"

    def test_horizontal_rule(self) -> None:
        """Test horizontal rules."""
        assert render(b.horizontal_rule()) == "[hr][/hr]"

    def test_paragraph(self) -> None:
        """Test paragraphs concatenate their contents."""
        assert render(b.paragraph(b.text("a "), b.bold(b.text("b")), b.text("\n"))) == "a [b]b[/b]\n"

    def test_object_post_blank_adds_spaces(self) -> None:
        """Test trailing blanks of inline objects become spaces."""
        node = b.paragraph(b.bold(b.text("a")), b.text("b"))
        node.children[0].properties["post_blank"] = 2
        assert render(node) == "[b]a[/b]  b"

    def test_element_post_blank_adds_newlines(self) -> None:
        """Test blank lines after elements are kept."""
        first = b.paragraph(b.text("a\n"))
        first.properties["post_blank"] = 1
        assert render(b.section(first, b.paragraph(b.text("b\n")))) == "a\n\nb\n"


@pytest.mark.unit
class TestBBCodeHeadlines:
    """Tests for headline rendering."""

    def test_headline_scenario(self) -> None:
        """Test a level 1 headline without body."""
        assert render(b.document(b.headline("Intro", level=1))) == "[b][u]# Intro[/u][/b]\n\n"

    def test_headline_with_section(self) -> None:
        """Test the section follows the headline."""
        doc = b.document(b.headline("Intro", b.section(b.paragraph(b.text("Body\n")))))
        assert render(doc) == "[b][u]# Intro[/u][/b]\n\nBody\n"

    def test_title_with_markup(self) -> None:
        """Test titles are transcoded like other inline content."""
        doc = b.document(b.headline([b.text("A "), b.bold(b.text("B"))]))
        assert render(doc) == "[b][u]# A [b]B[/b][/u][/b]\n\n"

    def test_levels_are_relative(self) -> None:
        """Test the top headline level of the document renders as level 1."""
        doc = b.document(b.headline("Top", b.headline("Sub", level=4), level=3))
        assert render(doc) == "[b][u]# Top[/u][/b]\n\n[b][u]== Sub[/u][/b]\n\n"

    def test_all_levels(self) -> None:
        """Test levels 1 to 5 render with their prefixes."""
        inner = b.headline("5", level=5)
        for level in range(4, 0, -1):
            inner = b.headline(str(level), inner, level=level)
        output = render(b.document(inner))

        for prefix, title in [("# ", "1"), ("== ", "2"), ("+++ ", "3"), (":::: ", "4"), ("----- ", "5")]:
            assert f"[b][u]{prefix}{title}[/u][/b]\n\n" in output

    def test_sixth_level_fails(self) -> None:
        """Test a sixth nested level aborts the pass."""
        inner = b.headline("6", level=6)
        for level in range(5, 0, -1):
            inner = b.headline(str(level), inner, level=level)

        with pytest.raises(UnsupportedConstructError) as exc_info:
            render(b.document(inner))

        assert exc_info.value.construct == "6"

    def test_invalid_level_property_fails(self) -> None:
        """Test a non-integer level is rejected."""
        node = b.headline("Bad")
        node.properties["level"] = "one"
        with pytest.raises(UnsupportedConstructError):
            render(b.document(node))

    def test_footnote_section_headline_suppressed(self) -> None:
        """Test the document's own footnote headline is dropped."""
        doc = b.document(
            b.headline("Footnotes", b.section(b.paragraph(b.text("hidden\n"))), footnote_section=True),
        )
        assert render(doc) == ""


@pytest.mark.unit
class TestBBCodeLists:
    """Tests for list rendering."""

    def test_ordered_list_scenario(self) -> None:
        """Test an ordered list of two items."""
        doc = b.plain_list(
            "ordered",
            b.item(b.paragraph(b.text("a\n"))),
            b.item(b.paragraph(b.text("b\n"))),
        )
        assert render(doc) == "[list=1]\n[*]a\n[*]b\n[/list]"

    def test_unordered_list(self) -> None:
        """Test unordered lists use a plain list tag."""
        doc = b.plain_list("unordered", b.item(b.paragraph(b.text("a\n"))))
        assert render(doc) == "[list]\n[*]a\n[/list]"

    def test_descriptive_list(self) -> None:
        """Test descriptive items start with the italic term."""
        doc = b.plain_list(
            "descriptive",
            b.item(b.paragraph(b.text("a fruit\n")), tag="apple"),
            b.item(b.paragraph(b.text("a color\n")), tag=[b.bold(b.text("red"))]),
        )
        assert render(doc) == "[list]\n[*][i]apple[/i]: a fruit\n[*][i][b]red[/b][/i]: a color\n[/list]"

    def test_tag_ignored_outside_descriptive_lists(self) -> None:
        """Test only descriptive lists render item terms."""
        doc = b.plain_list("unordered", b.item(b.paragraph(b.text("x\n")), tag="term"))
        assert render(doc) == "[list]\n[*]x\n[/list]"

    def test_item_content_trimmed(self) -> None:
        """Test surrounding blank lines of items are trimmed."""
        doc = b.plain_list("unordered", b.item(b.paragraph(b.text("\n  a  \n\n"))))
        assert render(doc) == "[list]\n[*]a\n[/list]"

    def test_nested_list(self) -> None:
        """Test nested lists render inside their item."""
        inner = b.plain_list("ordered", b.item(b.paragraph(b.text("x\n"))))
        doc = b.plain_list("unordered", b.item(b.paragraph(b.text("a\n")), inner))
        assert render(doc) == "[list]\n[*]a\n[list=1]\n[*]x\n[/list]\n[/list]"

    def test_unknown_list_type_fails(self) -> None:
        """Test list types outside the supported set are rejected."""
        with pytest.raises(UnsupportedConstructError) as exc_info:
            render(b.plain_list("checkbox", b.item(b.paragraph(b.text("a\n")))))

        assert exc_info.value.construct == "checkbox"
        assert exc_info.value.construct_type == "list"

    def test_stray_item(self) -> None:
        """Test an item rendered on its own uses the bullet."""
        assert render(b.item(b.paragraph(b.text("a\n")))) == "[*]a\n"


@pytest.mark.unit
class TestBBCodeTables:
    """Tests for table rendering."""

    def test_table(self) -> None:
        """Test rows and cells are wrapped."""
        doc = b.table(
            b.table_row(b.table_cell(b.text("a")), b.table_cell(b.text("b"))),
            b.table_row(b.table_cell(b.text("1")), b.table_cell(b.text("2"))),
        )
        assert render(doc) == "[table][tr][td]a[/td][td]b[/td][/tr][tr][td]1[/td][td]2[/td][/tr][/table]"

    def test_rule_rows_dropped(self) -> None:
        """Test rows without content vanish instead of leaving empty tags."""
        doc = b.table(b.table_row(b.table_cell(b.text("a"))), b.table_row(rule=True))
        assert render(doc) == "[table][tr][td]a[/td][/tr][/table]"

    def test_empty_cell_kept(self) -> None:
        """Test an empty cell still renders its tags."""
        assert render(b.table_row(b.table_cell())) == "[tr][td][/td][/tr]"


@pytest.mark.unit
class TestBBCodeBlocks:
    """Tests for code, example, fixed-width and quote blocks."""

    def test_src_block(self) -> None:
        """Test source blocks become code blocks."""
        assert render(b.src_block("x = 1\n", "python")) == "\n[code]\nx = 1\n[/code]\n"

    def test_src_block_language_attribute(self) -> None:
        """Test the optional lang attribute."""
        output = render(b.src_block("x = 1", "python"), code_language_attribute=True)
        assert output == '\n[code lang="python"]\nx = 1\n[/code]\n'

    def test_src_block_without_language(self) -> None:
        """Test no attribute is emitted without a language."""
        output = render(b.src_block("x\n"), code_language_attribute=True)
        assert output == "\n[code]\nx\n[/code]\n"

    def test_example_block(self) -> None:
        """Test example blocks become code blocks."""
        assert render(b.example_block("output")) == "\n[code]\noutput\n[/code]\n"

    def test_fixed_width_dedented(self) -> None:
        """Test common indentation of fixed-width areas is removed."""
        assert render(b.fixed_width("  a\n    b\n")) == "\n[code]\na\n  b\n[/code]\n"

    def test_quote_block(self) -> None:
        """Test quote blocks trim their contents."""
        doc = b.quote_block(b.paragraph(b.text("quoted\n")))
        assert render(doc) == "[quote]\nquoted\n[/quote]"


@pytest.mark.unit
class TestBBCodeLinks:
    """Tests for link rendering."""

    def test_link_scenario(self) -> None:
        """Test an https link without description."""
        assert render(b.link("https://example.com")) == "[url=https://example.com]https://example.com[/url]"

    def test_link_with_description(self) -> None:
        """Test descriptions are transcoded."""
        output = render(b.link("http://example.com", b.italic(b.text("site"))))
        assert output == "[url=http://example.com][i]site[/i][/url]"

    def test_anchor_link(self) -> None:
        """Test about: anchors lose the parser's extra slash."""
        node = b.node(NodeKind.LINK, b.text("top"), type="fuzzy", path="about:/#top", raw_link="about:/#top")
        assert render(node) == "[url=about:#top]top[/url]"

    def test_unsupported_scheme(self) -> None:
        """Test file links abort the pass."""
        with pytest.raises(UnsupportedConstructError) as exc_info:
            render(b.paragraph(b.link("file:notes.org")))

        assert exc_info.value.construct == "file"

    def test_missing_raw_link(self) -> None:
        """Test the raw link is rebuilt from type and path when absent."""
        node = b.node(NodeKind.LINK, type="https", path="//example.com")
        assert render(node) == "[url=https://example.com]https://example.com[/url]"


@pytest.mark.unit
class TestBBCodeFootnotes:
    """Tests for footnote references and the footnote section."""

    def _document(self, *labels: str) -> Node:
        refs = [b.footnote_reference(label) for label in labels]
        return b.document(
            b.section(b.paragraph(*refs)),
            b.headline(
                "Footnotes",
                b.section(
                    b.footnote_definition("d1", b.paragraph(b.text("First note.\n"))),
                    b.footnote_definition("d2", b.paragraph(b.text("Second note.\n"))),
                ),
                footnote_section=True,
            ),
        )

    def test_numbering_scenario(self) -> None:
        """Test references D1, D2, D1 number as 1, 2, 1."""
        output = render(self._document("d1", "d2", "d1"))
        assert output == ("^1 ^2 ^1 [b][u]Footnotes[/u][/b]\n\n^1: First note.\n^2: Second note.")

    def test_numbers_follow_reference_order(self) -> None:
        """Test definition order does not matter."""
        output = render(self._document("d2", "d1"))
        assert output.endswith("^1: Second note.\n^2: First note.")

    def test_unreferenced_definitions_omitted(self) -> None:
        """Test only referenced footnotes are listed."""
        output = render(self._document("d2"))
        assert "First note" not in output
        assert output.endswith("^1: Second note.")

    def test_no_references_no_section(self) -> None:
        """Test the section is omitted when nothing is referenced."""
        assert render(self._document()) == ""

    def test_section_title_option(self) -> None:
        """Test the footnote section title is configurable."""
        output = render(self._document("d1"), footnote_section_title="Notes")
        assert "[b][u]Notes[/u][/b]\n\n^1: First note." in output

    def test_nested_reference_in_definition(self) -> None:
        """Test a reference inside a definition gets the next number."""
        doc = b.document(
            b.paragraph(b.footnote_reference("a")),
            b.footnote_definition("a", b.paragraph(b.text("A"), b.footnote_reference("b"))),
            b.footnote_definition("b", b.paragraph(b.text("B"))),
        )
        assert render(doc) == "^1 [b][u]Footnotes[/u][/b]\n\n^1: A^2\n^2: B"

    def test_inline_footnote_fails(self) -> None:
        """Test inline footnotes abort the pass."""
        doc = b.paragraph(b.footnote_reference("x", "inline", b.text("inline text")))
        with pytest.raises(UnsupportedConstructError) as exc_info:
            render(doc)

        assert exc_info.value.construct_type == "footnote"

    def test_undefined_reference_fails(self) -> None:
        """Test a reference to a missing definition aborts the pass."""
        with pytest.raises(UnsupportedConstructError):
            render(b.paragraph(b.footnote_reference("nowhere")))


@pytest.mark.unit
class TestBBCodeUnsupported:
    """Tests for constructs the dialect cannot express."""

    @pytest.mark.parametrize("kind", UNSUPPORTED_KINDS, ids=lambda kind: kind.value)
    def test_unsupported_kind(self, kind: NodeKind) -> None:
        """Test every unsupported kind raises naming itself."""
        with pytest.raises(UnsupportedConstructError) as exc_info:
            render(b.node(kind))

        assert exc_info.value.construct == kind.value
        assert exc_info.value.construct_type == "node"
        assert kind.value in str(exc_info.value)

    def test_radio_target_deep_in_tree_aborts(self, sample_document: Node) -> None:
        """Test an unsupported node anywhere aborts the whole pass."""
        sample_document.children[0].children[0].children.append(b.node(NodeKind.RADIO_TARGET, b.text("x")))
        renderer = BBCodeRenderer()

        with pytest.raises(UnsupportedConstructError) as exc_info:
            renderer.render_to_string(sample_document)

        assert exc_info.value.construct == "radio-target"

    def test_no_output_written_on_failure(self, tmp_path: Path) -> None:
        """Test nothing is written when the pass fails."""
        target = tmp_path / "out.bbcode"
        with pytest.raises(UnsupportedConstructError):
            BBCodeRenderer().render(b.paragraph(b.node(NodeKind.TIMESTAMP)), target)

        assert not target.exists()


@pytest.mark.unit
class TestBBCodeDocument:
    """Tests for whole documents."""

    def test_sample_document(self, sample_document: Node) -> None:
        """Test a document using most constructs."""
        expected = (
            "Preamble.\n"
            "[b][u]# Intro[/u][/b]\n\n"
            "Some [b]bold[/b] text^1 and [url=https://example.com]a link[/url].\n"
            "[list]\n[*]one\n[*]two\n[/list]"
            "[b][u]== Details[/u][/b]\n\n"
            "[table][tr][td]a[/td][td]b[/td][/tr][tr][td]1[/td][td]2[/td][/tr][/table]"
            "[b][u]Footnotes[/u][/b]\n\n"
            "^1: The note."
        )
        assert BBCodeRenderer().render_to_string(sample_document) == expected

    def test_deterministic(self, sample_document: Node) -> None:
        """Test rendering twice gives identical output."""
        renderer = BBCodeRenderer()
        assert renderer.render_to_string(sample_document) == renderer.render_to_string(sample_document)

    def test_passes_do_not_share_footnotes(self) -> None:
        """Test footnote numbering restarts with each pass."""
        doc = b.document(b.paragraph(b.footnote_reference("n")), b.footnote_definition("n", b.paragraph(b.text("N"))))
        renderer = BBCodeRenderer()
        renderer.render_to_string(doc)
        assert renderer.render_to_string(doc).startswith("^1 ")

    def test_empty_document(self) -> None:
        """Test an empty document renders to an empty string."""
        assert render(b.document()) == ""

    def test_render_to_string_io(self) -> None:
        """Test writing to a text stream."""
        buffer = StringIO()
        BBCodeRenderer().render(b.bold(b.text("x")), buffer)
        assert buffer.getvalue() == "[b]x[/b]"

    def test_render_to_bytes_io(self) -> None:
        """Test writing UTF-8 to a binary stream."""
        buffer = BytesIO()
        BBCodeRenderer().render(b.text("é"), buffer)
        assert buffer.getvalue() == "é".encode("utf-8")

    def test_render_to_file(self, tmp_path: Path) -> None:
        """Test writing to a file path."""
        target = tmp_path / "out.bbcode"
        BBCodeRenderer().render(b.italic(b.text("x")), target)
        assert target.read_text(encoding="utf-8") == "[i]x[/i]"
