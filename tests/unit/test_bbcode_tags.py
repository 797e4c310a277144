"""Unit tests for the BBCode tag wrapping primitives."""

import pytest

from org2bb.utils.tags import as_block, wrap, wrap_with_value


@pytest.mark.unit
class TestWrap:
    """Tests for wrap()."""

    def test_wrap_simple(self) -> None:
        """Test wrapping contents in a plain tag."""
        assert wrap("b", "hello") == "[b]hello[/b]"

    def test_wrap_empty_contents(self) -> None:
        """Test that empty contents still produce a tag pair."""
        assert wrap("hr", "") == "[hr][/hr]"

    def test_wrap_with_attributes_in_order(self) -> None:
        """Test attributes are rendered as key="value" pairs in the given order."""
        result = wrap("code", "x", {"lang": "python", "title": "demo"})
        assert result == '[code lang="python" title="demo"]x[/code]'

    def test_wrap_empty_attributes_omitted(self) -> None:
        """Test an empty attribute mapping adds nothing to the opening tag."""
        assert wrap("code", "x", {}) == "[code]x[/code]"

    @pytest.mark.parametrize("contents", ["", "plain", "[b]nested[/b]", "a\nb\n", "<html> & [brackets]"])
    def test_wrap_is_balanced_and_keeps_contents(self, contents: str) -> None:
        """Test the tag balance property and byte-for-byte contents."""
        result = wrap("quote", contents)
        assert result.startswith("[quote")
        assert result.endswith("[/quote]")
        assert result[len("[quote]") : -len("[/quote]")] == contents


@pytest.mark.unit
class TestWrapWithValue:
    """Tests for wrap_with_value()."""

    def test_url_tag(self) -> None:
        """Test the value form used by url and font tags."""
        assert wrap_with_value("url", "home", "https://example.com") == "[url=https://example.com]home[/url]"

    def test_list_tag(self) -> None:
        """Test the ordered list opener."""
        assert wrap_with_value("list", "\n[*]a\n", "1") == "[list=1]\n[*]a\n[/list]"


@pytest.mark.unit
def test_as_block() -> None:
    """Test as_block adds exactly one newline on each side."""
    assert as_block("x") == "\nx\n"
