"""Line-by-line reading from raw file descriptors."""

from __future__ import annotations

import os
from collections.abc import Iterator
from typing import Optional

DEFAULT_BUFFER_SIZE = 42
_NEWLINE = b"\n"


def _check_buffer_size(buffer_size: int) -> None:
    if buffer_size <= 0:
        raise ValueError(f"buffer size must be positive, got {buffer_size}")


def _check_fd(fd: int) -> None:
    if fd < 0:
        raise ValueError(f"file descriptor must not be negative, got {fd}")


def _fill(fd: int, stash: bytes, buffer_size: int) -> bytes:
    """Read chunks from fd into stash until it holds a newline or input ends."""
    while _NEWLINE not in stash:
        chunk = os.read(fd, buffer_size)
        if not chunk:
            break
        stash += chunk
    return stash


def _cut(stash: bytes) -> tuple[Optional[bytes], bytes]:
    """Split stash into its first line (newline included) and the remainder."""
    if not stash:
        return None, b""
    line, newline, rest = stash.partition(_NEWLINE)
    return line + newline, rest


class LineReader:
    """Read lines, newline included, from one file descriptor.

    The descriptor is read in chunks of ``buffer_size`` bytes; text read past
    the end of a line is kept for the next call.
    """

    def __init__(self, fd: int, buffer_size: int = DEFAULT_BUFFER_SIZE) -> None:
        _check_fd(fd)
        _check_buffer_size(buffer_size)
        self.fd = fd
        self.buffer_size = buffer_size
        self._stash = b""

    def read_line(self) -> Optional[bytes]:
        """Return the next line, or None once the input is exhausted.

        A read error discards any buffered text and is re-raised.
        """
        try:
            stash = _fill(self.fd, self._stash, self.buffer_size)
        except OSError:
            self._stash = b""
            raise
        line, self._stash = _cut(stash)
        return line

    def __iter__(self) -> Iterator[bytes]:
        while (line := self.read_line()) is not None:
            yield line


class MultiLineReader:
    """Read lines from several file descriptors, each with its own buffer."""

    def __init__(self, buffer_size: int = DEFAULT_BUFFER_SIZE) -> None:
        _check_buffer_size(buffer_size)
        self.buffer_size = buffer_size
        self._stashes: dict[int, bytes] = {}

    def read_line(self, fd: int) -> Optional[bytes]:
        """Return the next line from fd, or None once its input is exhausted.

        A read error discards the text buffered for fd and is re-raised.
        """
        _check_fd(fd)
        try:
            stash = _fill(fd, self._stashes.pop(fd, b""), self.buffer_size)
        except OSError:
            raise
        line, rest = _cut(stash)
        if rest:
            self._stashes[fd] = rest
        return line