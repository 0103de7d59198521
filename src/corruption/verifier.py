"""
Re-check a corrupted file and decide whether the damage is detectable.
"""

from __future__ import annotations

from dataclasses import dataclass

from checksum import CHECKSUM_LENGTH

from .errors import OracleContractError
from .models import CorruptionOutcome


@dataclass(frozen=True)
class Verification:
    """Checksums observed after corruption."""

    checksum_after: int
    stored_checksum_after: int
    file_length: int
    outcome: CorruptionOutcome


def classify(checksum_before: int, checksum_after: int, stored_checksum_after: int) -> CorruptionOutcome:
    """Inconclusive only when both the computed and stored checksums still match."""
    if checksum_after == checksum_before and stored_checksum_after == checksum_before:
        return CorruptionOutcome.INCONCLUSIVE
    return CorruptionOutcome.DETECTED


def verify_corruption(directory, name: str, checksum_before: int) -> Verification:
    """Stream name up to its stored checksum and compare against checksum_before."""
    with directory.open_checksum_input(name) as source:
        if source.file_pointer != 0:
            raise OracleContractError(
                f"checksum input for {name} starts at {source.file_pointer}, expected 0"
            )
        if source.length < CHECKSUM_LENGTH:
            raise OracleContractError(
                f"{name} is {source.length} bytes, too short for a {CHECKSUM_LENGTH} byte checksum"
            )
        source.seek(source.length - CHECKSUM_LENGTH)
        checksum_after = source.checksum
        stored_checksum_after = source.read_long()

    return Verification(
        checksum_after=checksum_after,
        stored_checksum_after=stored_checksum_after,
        file_length=directory.file_length(name),
        outcome=classify(checksum_before, checksum_after, stored_checksum_after),
    )
