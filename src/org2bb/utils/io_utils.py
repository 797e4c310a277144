#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/org2bb/utils/io_utils.py
"""Output helpers shared by the renderers, API and CLI."""

from __future__ import annotations

import io
from io import BytesIO, StringIO
from pathlib import Path
from typing import IO, Union, cast

from org2bb.exceptions import OutputWriteError


def write_content(content: str, output: Union[str, Path, IO[bytes], IO[str], None]) -> Union[StringIO, None]:
    """Write text content to an output destination or return it as a file-like object.

    Parameters
    ----------
    content : str
        Text to write
    output : str, Path, IO[bytes], IO[str], or None
        Output destination. Can be:
        - None: Returns content as StringIO
        - str or Path: Writes UTF-8 text to the file at that path
        - IO[bytes]: Writes UTF-8 encoded content to a binary stream
        - IO[str]: Writes content to a text stream

    Returns
    -------
    StringIO or None
        StringIO when ``output`` is None, otherwise None after writing

    Raises
    ------
    OutputWriteError
        If the file cannot be written
    TypeError
        If the output type is not supported

    Examples
    --------
        >>> write_content("[b]hi[/b]", None).read()
        '[b]hi[/b]'

    """
    if output is None:
        return StringIO(content)

    if isinstance(output, (str, Path)):
        output_path = Path(output)
        try:
            output_path.write_text(content, encoding="utf-8")
        except OSError as e:
            raise OutputWriteError(
                f"Could not write output to {output_path}: {e}", output_path=str(output_path), original_error=e
            ) from e
        return None

    if hasattr(output, "write"):
        # Detect binary or text mode
        if isinstance(output, BytesIO):
            is_binary_mode = True
        elif isinstance(output, StringIO):
            is_binary_mode = False
        elif isinstance(output, io.TextIOBase):
            is_binary_mode = False
        elif isinstance(output, (io.BufferedIOBase, io.RawIOBase)):
            is_binary_mode = True
        elif hasattr(output, "mode"):
            mode = getattr(output, "mode", "")
            is_binary_mode = isinstance(mode, str) and "b" in mode
        else:
            is_binary_mode = False

        if is_binary_mode:
            cast(IO[bytes], output).write(content.encode("utf-8"))
        else:
            cast(IO[str], output).write(content)
        return None

    raise TypeError(f"Unsupported output type: {type(output)}")
