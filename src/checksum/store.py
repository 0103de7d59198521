"""
Directory-backed store for footer-checksummed files.
"""

from __future__ import annotations

import os
import struct
from abc import ABC, abstractmethod
from pathlib import Path
from typing import List, Optional

from .footer import crc32, retrieve_checksum, write_with_footer

_INT = struct.Struct(">I")
_LONG = struct.Struct(">Q")
SKIP_BUFFER_SIZE = 8192


class _Input(ABC):
    """Shared decoding helpers for file readers."""

    name: str

    @abstractmethod
    def read_bytes(self, count: int) -> bytes:
        """Return exactly count bytes or raise EOFError."""

    def read_int(self) -> int:
        return _INT.unpack(self.read_bytes(_INT.size))[0]

    def read_long(self) -> int:
        return _LONG.unpack(self.read_bytes(_LONG.size))[0]

    @abstractmethod
    def close(self) -> None:
        """Release the underlying file handle."""

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()


class FileInput(_Input):
    """Random-access reader over a single file."""

    def __init__(self, path: Path) -> None:
        self.path = path
        self.name = path.name
        self._handle = path.open("rb")
        self._length = os.fstat(self._handle.fileno()).st_size

    @property
    def length(self) -> int:
        return self._length

    @property
    def file_pointer(self) -> int:
        return self._handle.tell()

    def seek(self, position: int) -> None:
        if position < 0 or position > self._length:
            raise EOFError(f"seek past EOF: pos={position} length={self._length}: {self.name}")
        self._handle.seek(position)

    def read_bytes(self, count: int) -> bytes:
        data = self._handle.read(count)
        if len(data) != count:
            raise EOFError(f"read past EOF: wanted {count} bytes, got {len(data)}: {self.name}")
        return data

    def close(self) -> None:
        self._handle.close()


class ChecksumInput(_Input):
    """Sequential reader that keeps a running CRC-32 of every byte consumed.

    Seeking is forward-only: the skipped bytes are read so the running
    checksum always covers the file from offset 0 to the current pointer.
    """

    def __init__(self, delegate: FileInput) -> None:
        self._delegate = delegate
        self.name = delegate.name
        self._crc = 0

    @property
    def length(self) -> int:
        return self._delegate.length

    @property
    def file_pointer(self) -> int:
        return self._delegate.file_pointer

    @property
    def checksum(self) -> int:
        return self._crc

    def read_bytes(self, count: int) -> bytes:
        data = self._delegate.read_bytes(count)
        self._crc = crc32(data, self._crc)
        return data

    def seek(self, position: int) -> None:
        skip = position - self.file_pointer
        if skip < 0:
            raise ValueError(
                f"ChecksumInput cannot seek backwards (pos={position} "
                f"getFilePointer()={self.file_pointer}): {self.name}"
            )
        while skip > 0:
            step = min(skip, SKIP_BUFFER_SIZE)
            self.read_bytes(step)
            skip -= step

    def close(self) -> None:
        self._delegate.close()


class ChecksumDirectory:
    """Open, write and inspect footer-checksummed files inside one directory."""

    def __init__(self, path: Path) -> None:
        self.path = Path(path)
        if not self.path.is_dir():
            raise NotADirectoryError(f"Not a directory: {self.path}")
        self._closed = False

    def __enter__(self) -> "ChecksumDirectory":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def close(self) -> None:
        self._closed = True

    def _resolve(self, name: str) -> Path:
        if self._closed:
            raise ValueError(f"Directory is already closed: {self.path}")
        return self.path / name

    def open_input(self, name: str) -> FileInput:
        return FileInput(self._resolve(name))

    def open_checksum_input(self, name: str) -> ChecksumInput:
        return ChecksumInput(FileInput(self._resolve(name)))

    def file_length(self, name: str) -> int:
        return self._resolve(name).stat().st_size

    def retrieve_checksum(self, name: str) -> int:
        """Return the checksum recorded by the writer of name."""
        with self.open_input(name) as source:
            return retrieve_checksum(source)

    def write_file(self, name: str, content: bytes) -> int:
        """Write content plus footer to name and return the stored checksum."""
        with self._resolve(name).open("wb") as handle:
            return write_with_footer(handle, content)

    def list_files(self, suffix: Optional[str] = None) -> List[str]:
        names = [entry.name for entry in self._resolve("").iterdir() if entry.is_file()]
        if suffix is not None:
            names = [name for name in names if name.endswith(suffix)]
        return sorted(names)
