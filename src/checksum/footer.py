"""
Checksum footer encoding and validation.

Every file written through the store ends with a 16 byte footer::

    magic (4 bytes) | algorithm id (4 bytes) | checksum (8 bytes)

All fields are big-endian. The checksum is a CRC-32 held in the low 32 bits
of the final long and covers every byte before it, footer magic and
algorithm id included.
"""

from __future__ import annotations

import struct
import zlib
from typing import BinaryIO

FOOTER_MAGIC = 0xC02893E8
ALGORITHM_CRC32 = 0
CHECKSUM_LENGTH = 8
FOOTER_LENGTH = 16

_HEADER = struct.Struct(">II")
_CHECKSUM = struct.Struct(">Q")


class CorruptIndexError(OSError):
    """Raised when a footer is malformed or a checksum does not match."""

    def __init__(self, message: str, resource: str) -> None:
        super().__init__(f"{message} (resource={resource})")
        self.resource = resource


def crc32(data: bytes, value: int = 0) -> int:
    """Continue a CRC-32 over data and return it as an unsigned value."""
    return zlib.crc32(data, value) & 0xFFFFFFFF


def encode_footer(content: bytes) -> bytes:
    """Return the footer that seals content."""
    head = _HEADER.pack(FOOTER_MAGIC, ALGORITHM_CRC32)
    value = crc32(head, crc32(content))
    return head + _CHECKSUM.pack(value)


def write_with_footer(handle: BinaryIO, content: bytes) -> int:
    """Write content followed by its footer and return the stored checksum."""
    footer = encode_footer(content)
    handle.write(content)
    handle.write(footer)
    return _CHECKSUM.unpack(footer[-CHECKSUM_LENGTH:])[0]


def retrieve_checksum(source) -> int:
    """Read the checksum recorded in the footer without verifying the content."""
    if source.length < FOOTER_LENGTH:
        raise CorruptIndexError(
            f"misplaced codec footer (file truncated?): length={source.length} "
            f"but footer length={FOOTER_LENGTH}",
            source.name,
        )
    source.seek(source.length - FOOTER_LENGTH)
    _validate_footer(source)
    return _read_crc(source)


def checksum_entire_file(source) -> int:
    """Stream the whole file through a checksum input and verify its footer."""
    if source.length < FOOTER_LENGTH:
        raise CorruptIndexError(
            f"misplaced codec footer (file truncated?): length={source.length} "
            f"but footer length={FOOTER_LENGTH}",
            source.name,
        )
    source.seek(source.length - FOOTER_LENGTH)
    _validate_footer(source)
    actual = source.checksum
    expected = _read_crc(source)
    if expected != actual:
        raise CorruptIndexError(
            f"checksum failed (hardware problem?) : expected={expected:x} actual={actual:x}",
            source.name,
        )
    return actual


def _validate_footer(source) -> None:
    remaining = source.length - source.file_pointer
    if remaining != FOOTER_LENGTH:
        raise CorruptIndexError(
            f"misplaced codec footer (file extended?): remaining={remaining}, "
            f"expected={FOOTER_LENGTH}",
            source.name,
        )
    magic = source.read_int()
    if magic != FOOTER_MAGIC:
        raise CorruptIndexError(
            f"codec footer mismatch (file truncated?): actual footer={magic:#x} "
            f"vs expected footer={FOOTER_MAGIC:#x}",
            source.name,
        )
    algorithm = source.read_int()
    if algorithm != ALGORITHM_CRC32:
        raise CorruptIndexError(f"codec footer mismatch: unknown algorithmID: {algorithm}", source.name)


def _read_crc(source) -> int:
    value = source.read_long()
    if value & 0xFFFFFFFF00000000:
        raise CorruptIndexError(f"Illegal CRC-32 checksum: {value}", source.name)
    return value
