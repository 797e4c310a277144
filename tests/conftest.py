"""Pytest configuration and shared fixtures for the org2bb test suite."""

import pytest

from org2bb.ast import builder as b
from org2bb.ast.nodes import Node
from org2bb.renderers.bbcode import BBCodeRenderer


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests - fast, isolated component tests")
    config.addinivalue_line("markers", "integration: Integration tests - component interaction tests")
    config.addinivalue_line("markers", "cli: Tests related to command-line interface")


@pytest.fixture
def renderer() -> BBCodeRenderer:
    """Provide a renderer with default options."""
    return BBCodeRenderer()


@pytest.fixture
def sample_document() -> Node:
    """Provide a document exercising most supported constructs.

    Returns
    -------
    Node
        ``org-data`` root with headlines, lists, a table, links and footnotes.

    """
    return b.document(
        b.section(b.paragraph(b.text("Preamble.\n"))),
        b.headline(
            "Intro",
            b.section(
                b.paragraph(
                    b.text("Some "),
                    b.bold(b.text("bold")),
                    b.text(" text"),
                    b.footnote_reference("1"),
                    b.text("and "),
                    b.link("https://example.com", b.text("a link")),
                    b.text(".\n"),
                ),
                b.plain_list(
                    "unordered",
                    b.item(b.paragraph(b.text("one\n"))),
                    b.item(b.paragraph(b.text("two\n"))),
                ),
            ),
            b.headline(
                "Details",
                b.section(
                    b.table(
                        b.table_row(b.table_cell(b.text("a")), b.table_cell(b.text("b"))),
                        b.table_row(rule=True),
                        b.table_row(b.table_cell(b.text("1")), b.table_cell(b.text("2"))),
                    ),
                ),
                level=2,
            ),
            level=1,
        ),
        b.headline(
            "Footnotes",
            b.section(b.footnote_definition("1", b.paragraph(b.text("The note.\n")))),
            level=1,
            footnote_section=True,
        ),
    )
