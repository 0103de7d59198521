"""
Checksum-verified file storage.
"""

from .footer import (
    ALGORITHM_CRC32,
    CHECKSUM_LENGTH,
    FOOTER_LENGTH,
    FOOTER_MAGIC,
    CorruptIndexError,
    checksum_entire_file,
    crc32,
    encode_footer,
    retrieve_checksum,
    write_with_footer,
)
from .store import ChecksumDirectory, ChecksumInput, FileInput

__all__ = [
    "ALGORITHM_CRC32",
    "CHECKSUM_LENGTH",
    "ChecksumDirectory",
    "ChecksumInput",
    "CorruptIndexError",
    "FOOTER_LENGTH",
    "FOOTER_MAGIC",
    "FileInput",
    "checksum_entire_file",
    "crc32",
    "encode_footer",
    "retrieve_checksum",
    "write_with_footer",
]
