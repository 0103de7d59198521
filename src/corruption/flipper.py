"""
In-place single byte corruption.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import BinaryIO, Optional

from utils import get_logger

from .models import CorruptionRecord


def corrupt_at(
    path: Path,
    handle: BinaryIO,
    position: int,
    logger: Optional[logging.Logger] = None,
) -> CorruptionRecord:
    """Increment the byte at position by one, wrapping 0xff to 0x00.

    handle must be open for reading and writing. I/O errors propagate.
    """
    logger = logger or get_logger()
    handle.seek(position)
    data = handle.read(1)
    if len(data) != 1:
        raise EOFError(f"no byte at position {position} in {path.name}")
    old_value = data[0]
    new_value = (old_value + 1) & 0xFF

    handle.seek(position)
    handle.write(bytes([new_value]))
    handle.flush()
    logger.info(
        "Corrupting file -- flipping at position %d from %s to %s file: %s",
        position,
        format(old_value, "x"),
        format(new_value, "x"),
        path.name,
    )
    return CorruptionRecord(position=position, old_value=old_value, new_value=new_value)
