"""Unit tests for line sources."""

import gzip
import io
from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest

from tabchart.core.errors import InputReadError
from tabchart.infra.line_source import LineSource, open_line_source


class TestLineSource:
    """Tests for LineSource."""

    def test_strips_terminators(self) -> None:
        """Test LF and CRLF endings are removed."""
        source = LineSource.from_text("a\tb\r\nc\n\nlast")
        assert list(source) == ["a\tb", "c", "", "last"]
        assert source.lines_read == 4

    def test_next_line_until_end(self) -> None:
        """Test the end-of-stream marker."""
        source = LineSource.from_text("x\n")
        assert source.next_line() == "x"
        assert source.next_line() is None
        assert source.next_line() is None

    def test_empty_stream(self) -> None:
        """Test a stream without lines."""
        assert list(LineSource.from_text("")) == []

    def test_keeps_inner_whitespace(self) -> None:
        """Test that only the terminator is removed."""
        assert list(LineSource.from_text("  12 a b \n")) == ["  12 a b "]

    def test_read_failure(self) -> None:
        """Test stream errors become InputReadError."""
        stream = MagicMock()
        stream.readline.side_effect = UnicodeDecodeError("utf-8", b"\xff", 0, 1, "invalid start byte")
        source = LineSource(stream, name="broken.tsv")

        with pytest.raises(InputReadError, match="Cannot read from broken.tsv"):
            source.next_line()

    def test_context_manager_closes_owned_stream(self) -> None:
        """Test close on exit."""
        stream = io.StringIO("a\n")
        with LineSource(stream) as source:
            assert source.next_line() == "a"
        assert stream.closed

    def test_unowned_stream_left_open(self) -> None:
        """Test that borrowed streams are not closed."""
        stream = io.StringIO("a\n")
        LineSource(stream, owned=False).close()
        assert not stream.closed


class TestOpenLineSource:
    """Tests for open_line_source."""

    def test_plain_file(self, tmp_path: Path) -> None:
        """Test reading a text file."""
        path = tmp_path / "input.tsv"
        path.write_text("A\t1\nB\t2\n", encoding="utf-8")
        with open_line_source(path) as source:
            assert list(source) == ["A\t1", "B\t2"]
            assert source.name == str(path)

    def test_gzip_file(self, tmp_path: Path) -> None:
        """Test transparent decompression."""
        path = tmp_path / "input.tsv.gz"
        with gzip.open(path, "wt", encoding="utf-8") as stream:
            stream.write("chr1\t10\t20\t3\n")
        with open_line_source(path) as source:
            assert list(source) == ["chr1\t10\t20\t3"]

    def test_undecodable_bytes_replaced(self, tmp_path: Path) -> None:
        """Test that a bad byte spoils only its own line."""
        path = tmp_path / "input.tsv"
        path.write_bytes(b"a\t1\nb\xff\t2\nc\t3\n")
        with open_line_source(path) as source:
            assert list(source) == ["a\t1", "b\ufffd\t2", "c\t3"]

    def test_undecodable_bytes_in_gzip(self, tmp_path: Path) -> None:
        """Test the same tolerance for compressed input."""
        path = tmp_path / "input.tsv.gz"
        with gzip.open(path, "wb") as stream:
            stream.write(b"\xfe\xff\t1\nok\t2\n")
        with open_line_source(path) as source:
            assert list(source)[1] == "ok\t2"

    def test_missing_file(self, tmp_path: Path) -> None:
        """Test that an unopenable file is reported."""
        with pytest.raises(InputReadError, match="Cannot open input") as exc_info:
            open_line_source(tmp_path / "missing.tsv")
        assert "missing.tsv" in exc_info.value.hint

    @pytest.mark.parametrize("path", [None, "-"])
    def test_stdin(self, path: str | None) -> None:
        """Test standard input selection."""
        fake_stdin = io.StringIO("from\nstdin\n")
        with patch("sys.stdin", fake_stdin):
            source = open_line_source(path)
            assert list(source) == ["from", "stdin"]
            source.close()
        assert not fake_stdin.closed

    def test_stdin_undecodable_bytes(self) -> None:
        """Test that binary stdin is decoded with replacement."""
        fake_stdin = io.TextIOWrapper(io.BytesIO(b"x\t1\n\xff\t2\ny\t3\n"), encoding="utf-8")
        with patch("sys.stdin", fake_stdin):
            source = open_line_source("-")
            assert list(source) == ["x\t1", "\ufffd\t2", "y\t3"]
