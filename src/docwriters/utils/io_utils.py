#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/docwriters/utils/io_utils.py
"""I/O utilities for handling output destinations.

This module provides the single place where rendered text leaves the
library, either to a file path or to a file-like object.

"""

from __future__ import annotations

import io
from io import BytesIO, StringIO
from pathlib import Path
from typing import IO, Union, cast

from docwriters.exceptions import OutputWriteError


def write_content(content: str, output: Union[str, Path, IO[bytes], IO[str]]) -> None:
    """Write rendered text to a path or file-like object.

    Parameters
    ----------
    content : str
        Text to write
    output : str, Path, IO[bytes] or IO[str]
        Output destination. Paths are written as UTF-8; binary streams receive
        UTF-8 encoded bytes and text streams receive the string unchanged.

    Raises
    ------
    OutputWriteError
        If the destination cannot be written
    TypeError
        If the output type is not supported

    """
    if isinstance(output, (str, Path)):
        try:
            Path(output).write_text(content, encoding="utf-8")
        except OSError as e:
            raise OutputWriteError(str(output), original_error=e) from e
        return

    if not hasattr(output, "write"):
        raise TypeError(f"Unsupported output type: {type(output)}")

    if isinstance(output, BytesIO):
        is_binary_mode = True
    elif isinstance(output, StringIO):
        is_binary_mode = False
    elif isinstance(output, io.TextIOBase):
        is_binary_mode = False
    elif isinstance(output, (io.BufferedIOBase, io.RawIOBase)):
        is_binary_mode = True
    else:
        mode = getattr(output, "mode", "")
        is_binary_mode = isinstance(mode, str) and "b" in mode

    try:
        if is_binary_mode:
            cast(IO[bytes], output).write(content.encode("utf-8"))
        else:
            cast(IO[str], output).write(content)
    except OSError as e:
        raise OutputWriteError(repr(output), original_error=e) from e


__all__ = ["write_content"]
