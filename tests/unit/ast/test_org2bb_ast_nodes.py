#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/ast/test_org2bb_ast_nodes.py
"""Unit tests for document tree nodes, the visitor base class and the builder."""

import pytest

from org2bb.ast import builder as b
from org2bb.ast.nodes import OBJECT_KINDS, Node, NodeKind, iter_nodes
from org2bb.ast.visitors import NodeVisitor


# Visitor returning the kind of every node it is handed
KindRecorder = type(
    "KindRecorder",
    (NodeVisitor,),
    {kind.visit_method_name: (lambda self, node: node.kind.value) for kind in NodeKind},
)


@pytest.mark.unit
class TestNodeKind:
    """Tests for the NodeKind enumeration."""

    def test_kind_count(self) -> None:
        """Test the closed set of node variants."""
        assert len(NodeKind) == 48

    @pytest.mark.parametrize(
        "kind,method",
        [
            (NodeKind.ORG_DATA, "visit_org_data"),
            (NodeKind.PLAIN_LIST, "visit_plain_list"),
            (NodeKind.INLINETASK, "visit_inlinetask"),
            (NodeKind.STATISTICS_COOKIE, "visit_statistics_cookie"),
        ],
    )
    def test_visit_method_name(self, kind: NodeKind, method: str) -> None:
        """Test dashes in kind names become underscores."""
        assert kind.visit_method_name == method

    def test_objects_and_elements(self) -> None:
        """Test the object/element split."""
        assert NodeKind.BOLD.is_object
        assert NodeKind.PLAIN_TEXT.is_object
        assert not NodeKind.PARAGRAPH.is_object
        assert not NodeKind.HEADLINE.is_object
        assert OBJECT_KINDS < set(NodeKind)

    def test_lookup_by_value(self) -> None:
        """Test kinds are found by their Org name."""
        assert NodeKind("src-block") is NodeKind.SRC_BLOCK
        with pytest.raises(ValueError):
            NodeKind("no-such-kind")


@pytest.mark.unit
class TestNode:
    """Tests for the Node dataclass."""

    def test_defaults(self) -> None:
        """Test properties and children default to empty containers."""
        node = Node(NodeKind.SECTION)
        assert node.properties == {}
        assert node.children == []

    def test_defaults_not_shared(self) -> None:
        """Test each node gets its own containers."""
        first, second = Node(NodeKind.SECTION), Node(NodeKind.SECTION)
        first.children.append(Node(NodeKind.PARAGRAPH))
        assert second.children == []

    def test_kind_coerced_from_string(self) -> None:
        """Test string kinds are converted to NodeKind."""
        assert Node("bold").kind is NodeKind.BOLD  # type: ignore[arg-type]

    def test_get(self) -> None:
        """Test property lookup with defaults."""
        node = b.src_block("x", "python")
        assert node.get("language") == "python"
        assert node.get("missing") is None
        assert node.get("missing", "fallback") == "fallback"

    @pytest.mark.parametrize("value,expected", [(None, 0), (0, 0), (2, 2), ("3", 3)])
    def test_post_blank(self, value: object, expected: int) -> None:
        """Test post_blank normalizes missing and textual values."""
        node = b.paragraph()
        if value is not None:
            node.properties["post_blank"] = value
        assert node.post_blank == expected

    def test_accept_dispatches_by_kind(self) -> None:
        """Test accept calls the visit method named after the kind."""
        assert b.plain_list("ordered").accept(KindRecorder()) == "plain-list"
        assert KindRecorder().visit(b.bold()) == "bold"


@pytest.mark.unit
class TestIterNodes:
    """Tests for iter_nodes()."""

    def test_document_order(self) -> None:
        """Test nodes are yielded depth first, left to right."""
        doc = b.document(b.paragraph(b.text("a"), b.bold(b.text("b"))), b.paragraph(b.text("c")))
        values = [node.get("value") for node in iter_nodes(doc) if node.kind is NodeKind.PLAIN_TEXT]
        assert values == ["a", "b", "c"]

    def test_includes_titles_and_tags(self) -> None:
        """Test nodes inside headline titles and item tags are visited."""
        doc = b.document(
            b.headline([b.footnote_reference("t")]),
            b.plain_list("descriptive", b.item(tag=[b.footnote_reference("g")])),
        )
        labels = [node.get("label") for node in iter_nodes(doc) if node.kind is NodeKind.FOOTNOTE_REFERENCE]
        assert labels == ["t", "g"]

    def test_string_title_ignored(self) -> None:
        """Test literal titles are not traversed."""
        assert len(list(iter_nodes(b.headline("Plain")))) == 1


@pytest.mark.unit
class TestBuilder:
    """Tests for the tree builder helpers."""

    @pytest.mark.parametrize(
        "raw,link_type,path",
        [
            ("https://example.com", "https", "//example.com"),
            ("file:notes.org", "file", "notes.org"),
            ("about:#top", "about", "#top"),
            ("Some heading", "fuzzy", "Some heading"),
        ],
    )
    def test_link_split(self, raw: str, link_type: str, path: str) -> None:
        """Test the scheme is split off the raw link."""
        node = b.link(raw)
        assert (node.get("type"), node.get("path"), node.get("raw_link")) == (link_type, path, raw)

    def test_headline(self) -> None:
        """Test headline properties."""
        node = b.headline("Title", b.section(), level=2, footnote_section=True)
        assert node.get("title") == "Title"
        assert node.get("level") == 2
        assert node.get("footnote_section_p") is True
        assert [child.kind for child in node.children] == [NodeKind.SECTION]

    def test_rule_row(self) -> None:
        """Test rule rows are typed and empty."""
        row = b.table_row(rule=True)
        assert row.get("type") == "rule"
        assert row.children == []

    def test_text_post_blank(self) -> None:
        """Test text nodes only carry post_blank when set."""
        assert "post_blank" not in b.text("a").properties
        assert b.text("a", post_blank=1).post_blank == 1
