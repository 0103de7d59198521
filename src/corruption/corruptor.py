"""
Corrupt one byte of one file and prove the checksum store notices.
"""

from __future__ import annotations

import logging
import os
import random
from pathlib import Path
from typing import Callable, Optional

from checksum import ChecksumDirectory
from config import AppConfig
from utils import get_logger

from .flipper import corrupt_at
from .models import CorruptionReport, CorruptionTarget
from .position import ExclusionPolicy, pick_position
from .selector import PathLike, select_target
from .verifier import verify_corruption

DirectoryFactory = Callable[[Path], ChecksumDirectory]


class FileCorruptor:
    """Run select, flip and verify against files of a checksum store."""

    def __init__(
        self,
        policy: Optional[ExclusionPolicy] = None,
        logger: Optional[logging.Logger] = None,
        directory_factory: DirectoryFactory = ChecksumDirectory,
    ) -> None:
        self.policy = policy or ExclusionPolicy()
        self.logger = logger or get_logger()
        self.directory_factory = directory_factory

    @classmethod
    def from_config(cls, config: AppConfig, logger: Optional[logging.Logger] = None) -> "FileCorruptor":
        return cls(policy=ExclusionPolicy.from_config(config), logger=logger)

    def corrupt(self, rng: random.Random, *files: PathLike) -> CorruptionReport:
        """Corrupt a random file at a random position and report the outcome."""
        path = select_target(rng, files)
        with self.directory_factory(path.absolute().parent) as directory:
            target = CorruptionTarget(path=path, directory=directory)
            checksum_before = directory.retrieve_checksum(target.name)

            with path.open("r+b") as handle:
                file_size = handle.seek(0, os.SEEK_END)
                position = pick_position(rng, file_size, target.name, self.policy)
                record = corrupt_at(path, handle, position, self.logger)

            verification = verify_corruption(directory, target.name, checksum_before)

        report = CorruptionReport(
            path=path,
            record=record,
            checksum_before=checksum_before,
            checksum_after=verification.checksum_after,
            stored_checksum_after=verification.stored_checksum_after,
            file_length=verification.file_length,
            outcome=verification.outcome,
        )
        self.logger.info("Checksum %s", report.message)
        return report


def corrupt_file(
    rng: random.Random,
    *files: PathLike,
    policy: Optional[ExclusionPolicy] = None,
    logger: Optional[logging.Logger] = None,
    directory_factory: DirectoryFactory = ChecksumDirectory,
) -> CorruptionReport:
    """Corrupt a random file among files using a one-off FileCorruptor."""
    corruptor = FileCorruptor(policy=policy, logger=logger, directory_factory=directory_factory)
    return corruptor.corrupt(rng, *files)
