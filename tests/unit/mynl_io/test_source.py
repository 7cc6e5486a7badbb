# tests/unit/mynl_io/test_source.py
# Unit tests for input sources & line reading

import io
import sys

import pytest

from mynl.core.exceptions import FileReadError
from mynl.mynl_io.source import open_source, read_lines, to_output_bytes


class TestReadLines:

    # * Terminators are removed, content is kept
    def test_strips_newlines(self):
        stream = io.StringIO("one\ntwo\n\nthree")
        assert list(read_lines(stream)) == ["one", "two", "", "three"]

    # * Trailing whitespace & tabs survive
    def test_keeps_inner_whitespace(self):
        stream = io.StringIO("\tx  \n")
        assert list(read_lines(stream)) == ["\tx  "]

    def test_empty_stream(self):
        assert list(read_lines(io.StringIO(""))) == []

    # * A read failure ends input instead of raising
    def test_read_failure_ends_input(self):
        class Failing:
            def __iter__(self):
                yield "first\n"
                raise OSError("device gone")

        assert list(read_lines(Failing())) == ["first"]


class TestOpenSource:

    # * Named files are opened & closed by the context manager
    def test_opens_file(self, tmp_path):
        path = tmp_path / "snippet.py"
        path.write_text("a\nb\n", encoding="utf-8")

        with open_source(path) as stream:
            assert list(read_lines(stream)) == ["a", "b"]
        assert stream.closed

    # * None means standard input, which is left open
    def test_stdin_default(self, monkeypatch):
        fake = io.StringIO("from stdin\n")
        monkeypatch.setattr(sys, "stdin", fake)

        with open_source(None) as stream:
            assert list(read_lines(stream)) == ["from stdin"]
        assert not fake.closed

    # * Missing files raise FileReadError w/ the path
    def test_missing_file(self, tmp_path):
        missing = tmp_path / "missing.txt"
        with pytest.raises(FileReadError) as exc_info:
            with open_source(missing):
                pass
        assert exc_info.value.path == missing
        assert "could not be opened" in str(exc_info.value)

    # * Undecodable bytes are kept instead of ending input
    def test_non_utf8_file(self, tmp_path):
        path = tmp_path / "latin1.c"
        path.write_bytes(b"int a;\n/* caf\xe9 */\nint b;\n")

        with open_source(path) as stream:
            lines = list(read_lines(stream))
        assert len(lines) == 3
        assert to_output_bytes(lines[1]) == b"/* caf\xe9 */"

    # * Only "\n" ends a line; lone & trailing "\r" stay in the text
    def test_splits_on_newline_only(self, tmp_path):
        path = tmp_path / "mixed.txt"
        path.write_bytes(b"a\rb\nc\r\nd\n")

        with open_source(path) as stream:
            assert list(read_lines(stream)) == ["a\rb", "c\r", "d"]

    # * Byte-backed stdin is decoded leniently & left open afterwards
    def test_stdin_bytes(self, monkeypatch):
        fake = io.TextIOWrapper(io.BytesIO(b"a\rb\n\xff\n"), encoding="utf-8")
        monkeypatch.setattr(sys, "stdin", fake)

        with open_source(None) as stream:
            lines = list(read_lines(stream))
        assert lines == ["a\rb", "\udcff"]
        assert not fake.closed
        assert not fake.buffer.closed


# * Surrogate-escaped text encodes back to the original bytes
def test_to_output_bytes_round_trip():
    raw = b"x = '\xe9\xff'"
    text = raw.decode("utf-8", "surrogateescape")
    assert to_output_bytes(text) == raw
