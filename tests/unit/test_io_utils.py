#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/test_io_utils.py
"""Unit tests for input loading, output writing and logging setup."""

import io
import json
import logging

import pytest

from notemark.ast import Document, Paragraph, Text
from notemark.exceptions import OutputWriteError
from notemark.logging_utils import configure_logging, resolve_log_level
from notemark.renderers.base import BaseRenderer
from notemark.renderers.markdown import MarkdownRenderer
from notemark.utils.io_utils import load_note_json, write_content


@pytest.mark.unit
class TestLoadNoteJson:
    """Tests for load_note_json."""

    def test_mapping_returned_unchanged(self):
        """Test that mappings are passed through."""
        tree = {"type": "doc"}
        assert load_note_json(tree) is tree

    def test_none(self):
        """Test that None is passed through."""
        assert load_note_json(None) is None

    def test_bytes(self):
        """Test decoding JSON bytes."""
        assert load_note_json(b'{"type": "doc"}') == {"type": "doc"}

    def test_path(self, tmp_path):
        """Test reading a JSON file."""
        note_file = tmp_path / "n.json"
        note_file.write_text(json.dumps({"type": "doc", "content": []}), encoding="utf-8")
        assert load_note_json(note_file) == {"type": "doc", "content": []}

    def test_stream(self):
        """Test reading a binary stream."""
        assert load_note_json(io.BytesIO(b"[1]")) == [1]

    def test_unsupported(self):
        """Test that unsupported types raise TypeError."""
        with pytest.raises(TypeError):
            load_note_json(3.14)  # type: ignore[arg-type]


@pytest.mark.unit
class TestWriteContent:
    """Tests for write_content and renderer output."""

    def test_none_returns_stream(self):
        """Test that None returns a StringIO."""
        assert write_content("hi", None).read() == "hi"

    def test_path(self, tmp_path):
        """Test writing to a path."""
        target = tmp_path / "out.md"
        write_content("é", target)
        assert target.read_text(encoding="utf-8") == "é"

    def test_text_and_binary_streams(self):
        """Test writing to text and binary streams."""
        text_stream, binary_stream = io.StringIO(), io.BytesIO()
        write_content("é", text_stream)
        write_content("é", binary_stream)
        assert text_stream.getvalue() == "é"
        assert binary_stream.getvalue() == "é".encode("utf-8")

    def test_unsupported(self):
        """Test that unsupported outputs raise TypeError."""
        with pytest.raises(TypeError):
            write_content("x", 42)  # type: ignore[arg-type]

    def test_renderer_render_to_path(self, tmp_path):
        """Test BaseRenderer.render writing a file."""
        target = tmp_path / "note.md"
        MarkdownRenderer().render(Document(children=[Paragraph(content=[Text(content="x")])]), target)
        assert target.read_text(encoding="utf-8") == "x"

    def test_renderer_write_error(self, tmp_path):
        """Test that write failures are wrapped."""
        with pytest.raises(OutputWriteError):
            BaseRenderer.write_text_output("x", tmp_path / "missing-dir" / "note.md")


@pytest.mark.unit
class TestLogging:
    """Tests for CLI logging setup."""

    @pytest.mark.parametrize(
        "level,expected", [("debug", logging.DEBUG), ("WARNING", logging.WARNING), (10, 10), ("nope", logging.INFO)]
    )
    def test_resolve_log_level(self, level, expected):
        """Test level name resolution."""
        assert resolve_log_level(level) == expected

    def test_configure_replaces_handlers(self):
        """Test that repeated configuration does not stack handlers."""
        configure_logging("INFO")
        package_logger = configure_logging(logging.DEBUG)
        assert package_logger.name == "notemark"
        assert package_logger.level == logging.DEBUG
        assert len(package_logger.handlers) == 1

    def test_log_file(self, tmp_path):
        """Test teeing log output to a file."""
        log_file = tmp_path / "notemark.log"
        package_logger = configure_logging("INFO", log_file=str(log_file))
        package_logger.info("hello from test")
        for handler in package_logger.handlers:
            handler.flush()
        assert "hello from test" in log_file.read_text(encoding="utf-8")

    def test_trace_format(self):
        """Test that trace mode includes logger names."""
        package_logger = configure_logging("DEBUG", trace_mode=True)
        assert "%(name)s" in package_logger.handlers[0].formatter._fmt
