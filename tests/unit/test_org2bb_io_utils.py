"""Unit tests for output helpers."""

from io import BytesIO, StringIO
from pathlib import Path

import pytest

from org2bb.exceptions import OutputWriteError
from org2bb.utils.io_utils import write_content


@pytest.mark.unit
class TestWriteContent:
    """Tests for write_content()."""

    def test_none_returns_stringio(self) -> None:
        """Test content is returned as a stream when there is no destination."""
        result = write_content("[b]x[/b]", None)
        assert isinstance(result, StringIO)
        assert result.read() == "[b]x[/b]"

    def test_path_and_string_path(self, tmp_path: Path) -> None:
        """Test writing UTF-8 text to files."""
        write_content("ü", tmp_path / "a.txt")
        write_content("ü", str(tmp_path / "b.txt"))
        assert (tmp_path / "a.txt").read_bytes() == "ü".encode("utf-8")
        assert (tmp_path / "b.txt").read_text(encoding="utf-8") == "ü"

    def test_binary_file_handle(self, tmp_path: Path) -> None:
        """Test binary file handles receive encoded bytes."""
        path = tmp_path / "out.bin"
        with open(path, "wb") as handle:
            write_content("é", handle)
        assert path.read_bytes() == "é".encode("utf-8")

    def test_text_streams(self) -> None:
        """Test text and binary in-memory streams."""
        text, binary = StringIO(), BytesIO()
        write_content("x", text)
        write_content("x", binary)
        assert text.getvalue() == "x"
        assert binary.getvalue() == b"x"

    def test_unwritable_path(self, tmp_path: Path) -> None:
        """Test OS errors are wrapped."""
        target = tmp_path / "missing" / "out.txt"
        with pytest.raises(OutputWriteError) as exc_info:
            write_content("x", target)

        assert exc_info.value.output_path == str(target)
        assert isinstance(exc_info.value.original_error, OSError)

    def test_unsupported_output(self) -> None:
        """Test other destinations are rejected."""
        with pytest.raises(TypeError):
            write_content("x", 42)  # type: ignore[arg-type]
