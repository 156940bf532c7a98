#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/notemark/utils/io_utils.py
"""I/O utilities for note input sources and output destinations.

Notes arrive as already-decoded mappings, raw JSON bytes, file paths or open
streams. Rendered output goes to a path, a stream, or back to the caller.

"""

from __future__ import annotations

import io
import json
from io import StringIO
from pathlib import Path
from typing import IO, Any, Mapping, Union, cast

NoteSource = Union[Mapping[str, Any], str, Path, bytes, IO[str], IO[bytes], None]


def load_note_json(source: NoteSource) -> Any:
    """Load the editor JSON tree from any supported source.

    Parameters
    ----------
    source : Mapping, str, Path, bytes, IO or None
        - Mapping or None: returned unchanged
        - bytes: decoded as UTF-8 JSON
        - str or Path: path of a JSON file
        - IO: stream whose full contents are JSON

    Returns
    -------
    Any
        Decoded JSON value. Callers decide whether the shape is usable.

    Raises
    ------
    json.JSONDecodeError
        If the content is not valid JSON
    OSError
        If a file path cannot be read
    TypeError
        If the source type is not supported

    """
    if source is None or isinstance(source, Mapping):
        return source

    if isinstance(source, bytes):
        return json.loads(source.decode("utf-8"))

    if isinstance(source, (str, Path)):
        return json.loads(Path(source).read_text(encoding="utf-8"))

    if hasattr(source, "read"):
        data = source.read()
        if isinstance(data, bytes):
            data = data.decode("utf-8")
        return json.loads(data)

    raise TypeError(f"Unsupported input type: {type(source)}")


def write_content(content: str, output: Union[str, Path, IO[bytes], IO[str], None]) -> Union[StringIO, None]:
    """Write rendered text to an output destination or return it as a stream.

    Parameters
    ----------
    content : str
        Rendered text
    output : str, Path, IO[bytes], IO[str], or None
        Output destination. Can be:
        - None: Returns content as StringIO
        - str or Path: Writes content to file at that path (UTF-8)
        - IO[bytes]: Writes UTF-8 encoded content
        - IO[str]: Writes content unchanged

    Returns
    -------
    StringIO or None
        StringIO if output is None, otherwise None after writing

    Raises
    ------
    TypeError
        If output type is not supported

    Examples
    --------
        >>> result = write_content("Hello, world!", None)
        >>> result.read()
        'Hello, world!'

    """
    if output is None:
        return StringIO(content)

    if isinstance(output, (str, Path)):
        Path(output).write_text(content, encoding="utf-8")
        return None

    if hasattr(output, "write"):
        if isinstance(output, StringIO) or isinstance(output, io.TextIOBase):
            is_binary_mode = False
        elif isinstance(output, (io.BufferedIOBase, io.RawIOBase)):
            is_binary_mode = True
        else:
            mode = getattr(output, "mode", "")
            is_binary_mode = isinstance(mode, str) and "b" in mode

        if is_binary_mode:
            cast(IO[bytes], output).write(content.encode("utf-8"))
        else:
            cast(IO[str], output).write(content)
        return None

    raise TypeError(f"Unsupported output type: {type(output)}")


__all__ = ["NoteSource", "load_note_json", "write_content"]
