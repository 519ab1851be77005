"""A string whose contents come from a byte range of a file."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import BinaryIO


def plus(lhs: str, rhs: str) -> str:
    """Return the concatenation of *lhs* and *rhs*."""
    return lhs + rhs


def file_size(f: BinaryIO) -> int:
    """Return the length of *f* plus one, room for a terminator; leaves *f* at its end."""
    f.seek(0, os.SEEK_END)
    return f.tell() + 1


@dataclass
class FileSlice:
    """Bytes read from ``filename`` between ``start`` and ``stop``.

    A bound of ``-1`` means the start or the end of the file and is replaced
    by the actual offset when the file is read.
    """

    filename: str | os.PathLike[str]
    start: int = -1
    stop: int = -1
    from_file: bool = True
    buffer: bytes = b""
    length: int = 0
    file_length: int = 0
    source_active: bool = False

    def read(self) -> bytes:
        """Fill the buffer from the file when the slice is file-backed; return the buffer."""
        if self.from_file:
            return self.read_file()
        return self.buffer

    def read_file(self) -> bytes:
        """Read the configured range of the file into the buffer and return it."""
        try:
            handle = open(self.filename, "rb")
        except OSError as exc:
            raise FileNotFoundError(f"File Not Found!: {self.filename}") from exc
        with handle:
            self.file_length = file_size(handle)
            if self.start == -1:
                self.start = 0
            if self.stop == -1:
                self.stop = self.file_length
            self.length = self.stop - self.start
            if self.length < 0:
                raise ValueError(
                    f"slice stop {self.stop} lies before start {self.start}"
                )
            self.source_active = True
            handle.seek(self.start)
            self.buffer = handle.read(self.length)
        return self.buffer