"""
Result types shared by the corruption pipeline.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from checksum import ChecksumDirectory


class CorruptionOutcome(str, Enum):
    """How a corruption attempt ended, short of a hard failure."""

    DETECTED = "detected"
    INCONCLUSIVE = "inconclusive"


@dataclass(frozen=True)
class CorruptionTarget:
    """The file picked for corruption and the store opened on its directory."""

    path: Path
    directory: ChecksumDirectory

    @property
    def name(self) -> str:
        return self.path.name


@dataclass(frozen=True)
class CorruptionRecord:
    """A single byte rewritten in place."""

    position: int
    old_value: int
    new_value: int


@dataclass(frozen=True)
class CorruptionReport:
    """Everything observed while corrupting and re-checking one file."""

    path: Path
    record: CorruptionRecord
    checksum_before: int
    checksum_after: int
    stored_checksum_after: int
    file_length: int
    outcome: CorruptionOutcome

    @property
    def detected(self) -> bool:
        return self.outcome is CorruptionOutcome.DETECTED

    @property
    def message(self) -> str:
        return (
            f"before: [{self.checksum_before}] after: [{self.checksum_after}] "
            f"checksum value after corruption: [{self.stored_checksum_after}] "
            f"file: {self.path.name} length: {self.file_length}"
        )
