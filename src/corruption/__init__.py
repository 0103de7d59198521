"""
Single byte corruption of checksummed files.
"""

from .corruptor import FileCorruptor, corrupt_file
from .errors import CorruptionError, InvalidInputError, OracleContractError
from .flipper import corrupt_at
from .models import CorruptionOutcome, CorruptionRecord, CorruptionReport, CorruptionTarget
from .position import (
    CFS_UNVERIFIED_TAIL_BYTES,
    COMPOUND_FILE_SUFFIX,
    ExclusionPolicy,
    pick_position,
)
from .selector import select_target
from .verifier import Verification, classify, verify_corruption

__all__ = [
    "CFS_UNVERIFIED_TAIL_BYTES",
    "COMPOUND_FILE_SUFFIX",
    "CorruptionError",
    "CorruptionOutcome",
    "CorruptionRecord",
    "CorruptionReport",
    "CorruptionTarget",
    "ExclusionPolicy",
    "FileCorruptor",
    "InvalidInputError",
    "OracleContractError",
    "Verification",
    "classify",
    "corrupt_at",
    "corrupt_file",
    "pick_position",
    "select_target",
    "verify_corruption",
]
