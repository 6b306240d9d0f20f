"""Line-by-line reading from a stream, a fixed number of units at a time."""

from __future__ import annotations

from collections.abc import Iterator
from typing import IO, AnyStr, Generic


def _newline_index(stash: AnyStr) -> int:
    """Return the position of the first newline in stash, or -1."""
    if isinstance(stash, bytes):
        return stash.find(b"\n")
    return stash.find("\n")


class LineReader(Generic[AnyStr]):
    """Read lines, newline included, from a text or binary stream."""

    def __init__(self, stream: IO[AnyStr], chunk_size: int = 1) -> None:
        if chunk_size <= 0:
            raise ValueError("chunk_size must be positive")
        self._stream = stream
        self._chunk_size = chunk_size
        self._stash: AnyStr | None = None

    def _has_line(self) -> bool:
        return self._stash is not None and _newline_index(self._stash) >= 0

    def read_line(self) -> AnyStr | None:
        """Return the next line, the unterminated remainder, or None at the end."""
        while not self._has_line():
            try:
                chunk = self._stream.read(self._chunk_size)
            except OSError:
                self._stash = None
                raise
            if not chunk:
                break
            self._stash = chunk if self._stash is None else self._stash + chunk
        return self._take_line()

    def _take_line(self) -> AnyStr | None:
        stash = self._stash
        if not stash:
            self._stash = None
            return None
        index = _newline_index(stash)
        if index < 0:
            self._stash = None
            return stash
        self._stash = stash[index + 1:] or None
        return stash[:index + 1]

    def __iter__(self) -> Iterator[AnyStr]:
        while (line := self.read_line()) is not None:
            yield line