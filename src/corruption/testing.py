"""
pytest helpers for suites that corrupt files on purpose.

Imports pytest at module load; install the ``testing`` extra to use it.
"""

from __future__ import annotations

import random

import pytest

from .corruptor import corrupt_file
from .models import CorruptionOutcome, CorruptionReport
from .selector import PathLike


def assert_detectable(report: CorruptionReport) -> None:
    """Skip the calling test on a checksum collision, otherwise require detection."""
    if report.outcome is CorruptionOutcome.INCONCLUSIVE:
        pytest.skip(f"Checksum collision - {report.message}")
    assert report.outcome is CorruptionOutcome.DETECTED, f"no file corrupted: {report.message}"


def corrupt_file_or_skip(rng: random.Random, *files: PathLike, **kwargs) -> CorruptionReport:
    report = corrupt_file(rng, *files, **kwargs)
    assert_detectable(report)
    return report
