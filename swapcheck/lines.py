"""Buffered reading of newline-terminated lines from a stream."""

from __future__ import annotations

import codecs
from typing import IO, Iterator, List, Optional

BUFFER_SIZE = 42


class LineReader:
    """Read a stream ``buffer_size`` characters at a time and hand out whole lines.

    Only lines closed by a newline are returned. Whatever follows the last
    newline is kept in :attr:`tail` once the stream is exhausted.
    """

    def __init__(self, stream: IO, buffer_size: int = BUFFER_SIZE) -> None:
        if buffer_size < 1:
            raise ValueError("buffer_size must be at least 1")
        self._stream = stream
        self._size = buffer_size
        self._pending = ""
        self._eof = False
        self._decoder: Optional[codecs.IncrementalDecoder] = None
        self.tail: Optional[str] = None

    def _read_chunk(self) -> Optional[str]:
        chunk = self._stream.read(self._size)
        if isinstance(chunk, (bytes, bytearray)):
            if self._decoder is None:
                self._decoder = codecs.getincrementaldecoder("utf-8")()
            if not chunk:
                self._decoder.decode(b"", final=True)
                return None
            return self._decoder.decode(bytes(chunk))
        return chunk or None

    def next_line(self) -> Optional[str]:
        """The next line without its newline, or None when no whole line is left."""
        while True:
            newline = self._pending.find("\n")
            if newline >= 0:
                line = self._pending[:newline]
                self._pending = self._pending[newline + 1:]
                return line
            if self._eof:
                return None
            text = self._read_chunk()
            if text is None:
                self._eof = True
                self.tail = self._pending
                self._pending = ""
                return None
            self._pending += text

    def __iter__(self) -> Iterator[str]:
        while (line := self.next_line()) is not None:
            yield line


def read_lines(stream: IO, buffer_size: int = BUFFER_SIZE) -> List[str]:
    """Every newline-terminated line of ``stream``, newlines removed."""
    return list(LineReader(stream, buffer_size))