"""
Offset selection with per-format exclusion margins.

Compound files (``.cfs``) end with the usual 8 byte checksum, but their
reader never validates the low 4 bytes holding the CRC-32 value. A byte
flipped there would not be noticed, so those bytes are kept out of range.
"""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from pathlib import PurePath
from typing import Dict, Mapping, Optional

from config import AppConfig

from .errors import InvalidInputError

COMPOUND_FILE_SUFFIX = ".cfs"
CFS_UNVERIFIED_TAIL_BYTES = 4
DEFAULT_EXCLUSION_MARGINS: Dict[str, int] = {COMPOUND_FILE_SUFFIX: CFS_UNVERIFIED_TAIL_BYTES}


def _normalize_suffix(suffix: str) -> str:
    suffix = suffix.strip().lower()
    return suffix if suffix.startswith(".") else f".{suffix}"


@dataclass(frozen=True)
class ExclusionPolicy:
    """Map file suffixes to a number of trailing bytes that must stay intact."""

    margins: Mapping[str, int] = field(default_factory=lambda: dict(DEFAULT_EXCLUSION_MARGINS))

    def __post_init__(self) -> None:
        normalized = {}
        for suffix, margin in self.margins.items():
            margin = int(margin)
            if margin < 0:
                raise ValueError(f"Exclusion margin for {suffix} must be >= 0, got {margin}")
            normalized[_normalize_suffix(suffix)] = margin
        object.__setattr__(self, "margins", normalized)

    @classmethod
    def from_config(cls, config: AppConfig) -> "ExclusionPolicy":
        margins = config.get("corruption", "exclusion_margins")
        if margins is None:
            return cls()
        if not isinstance(margins, dict):
            raise ValueError("corruption.exclusion_margins must be a mapping of suffix to bytes")
        return cls(margins=margins)

    def margin_for(self, file_name: str, file_size: int) -> int:
        """Return how many trailing bytes of file_name are off limits."""
        name = PurePath(file_name).name.lower()
        matches = [suffix for suffix in self.margins if name.endswith(suffix)]
        if not matches:
            return 0
        # longest suffix wins, so ".tar.gz" beats ".gz"
        margin = self.margins[max(matches, key=len)]
        if margin and file_size > margin:
            return margin
        return 0


def pick_position(
    rng: random.Random,
    file_size: int,
    file_name: str,
    policy: Optional[ExclusionPolicy] = None,
) -> int:
    """Draw a byte offset in [0, file_size - margin)."""
    policy = policy or ExclusionPolicy()
    max_position = file_size - policy.margin_for(file_name, file_size)
    if max_position <= 0:
        raise InvalidInputError(f"cannot corrupt {file_name}: file is empty")
    return rng.randrange(max_position)
