"""Line-oriented input streams read from a file or standard input."""

from __future__ import annotations

import gzip
import io
import sys
from collections.abc import Iterator
from pathlib import Path
from types import TracebackType
from typing import TextIO

from tabchart.core.errors import InputReadError
from tabchart.infra.logging import get_logger

logger = get_logger(__name__)

STDIN_NAME = "-"
# undecodable bytes are read as U+FFFD
DECODE_ERRORS = "replace"


class LineSource:
    """Supplies lines, without their terminators, until the stream ends."""

    def __init__(self, stream: TextIO, name: str = "<stream>", owned: bool = True) -> None:
        """Wrap a text stream.

        Args:
            stream: Open text stream.
            name: Display name used in logs and errors.
            owned: Whether `close` should close the underlying stream.
        """
        self._stream = stream
        self.name = name
        self._owned = owned
        self.lines_read = 0

    @classmethod
    def from_text(cls, text: str, name: str = "<text>") -> LineSource:
        """Build a source over an in-memory string."""
        return cls(io.StringIO(text), name=name)

    def next_line(self) -> str | None:
        """Return the next line, or None at end of stream.

        Raises:
            InputReadError: If the underlying stream fails.
        """
        try:
            line = self._stream.readline()
        except (OSError, UnicodeDecodeError) as e:
            msg = f"Cannot read from {self.name}: {e}"
            raise InputReadError(msg, source=self.name) from e
        if not line:
            return None
        self.lines_read += 1
        if line.endswith("\n"):
            line = line[:-1]
            if line.endswith("\r"):
                line = line[:-1]
        return line

    def __iter__(self) -> Iterator[str]:
        while (line := self.next_line()) is not None:
            yield line

    def close(self) -> None:
        if self._owned:
            self._stream.close()

    def __enter__(self) -> LineSource:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()


def open_line_source(path: Path | str | None = None) -> LineSource:
    """Open a file, a gzipped file or stdin as a LineSource.

    Args:
        path: Input path; None or "-" selects standard input.

    Returns:
        LineSource over UTF-8 text.

    Raises:
        InputReadError: If the file cannot be opened.
    """
    if path is None or str(path) == STDIN_NAME:
        logger.debug("Reading from standard input")
        stdin = sys.stdin
        if isinstance(stdin, io.TextIOWrapper):
            stdin.reconfigure(encoding="utf-8", errors=DECODE_ERRORS)
        return LineSource(stdin, name="<stdin>", owned=False)

    path = Path(path)
    try:
        if path.suffix == ".gz":
            stream: TextIO = gzip.open(path, "rt", encoding="utf-8", errors=DECODE_ERRORS)
        else:
            stream = path.open(encoding="utf-8", errors=DECODE_ERRORS)
    except OSError as e:
        msg = f"Cannot open input {path}: {e}"
        raise InputReadError(msg, source=str(path)) from e

    logger.debug("Reading input file", path=str(path))
    return LineSource(stream, name=str(path))
