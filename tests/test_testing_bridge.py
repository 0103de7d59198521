import random
from pathlib import Path

import pytest

from checksum import ChecksumDirectory
from corruption import CorruptionOutcome, CorruptionRecord, CorruptionReport
from corruption.testing import assert_detectable, corrupt_file_or_skip


def _report(outcome: CorruptionOutcome) -> CorruptionReport:
    return CorruptionReport(
        path=Path("_0.cfs"),
        record=CorruptionRecord(position=3, old_value=0x01, new_value=0x02),
        checksum_before=10,
        checksum_after=10,
        stored_checksum_after=10,
        file_length=50,
        outcome=outcome,
    )


def test_inconclusive_report_skips() -> None:
    with pytest.raises(pytest.skip.Exception, match="Checksum collision - before: \\[10\\]"):
        assert_detectable(_report(CorruptionOutcome.INCONCLUSIVE))


def test_detected_report_passes() -> None:
    assert_detectable(_report(CorruptionOutcome.DETECTED))


def test_corrupt_file_or_skip_returns_report(tmp_path: Path) -> None:
    with ChecksumDirectory(tmp_path) as directory:
        directory.write_file("_0.si", b"segment info" * 4)

    report = corrupt_file_or_skip(random.Random(11), tmp_path / "_0.si")

    assert report.detected


class CollidingInput:
    """Checksum input whose computed and stored values never change."""

    def __init__(self, length: int, value: int) -> None:
        self.length = length
        self.checksum = value
        self.value = value
        self.file_pointer = 0

    def seek(self, position: int) -> None:
        self.file_pointer = position

    def read_long(self) -> int:
        self.file_pointer += 8
        return self.value

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        pass


class CollidingDirectory:
    def __init__(self, path: Path, value: int = 4242) -> None:
        self.path = path
        self.value = value
        self.closed = False

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.closed = True

    def retrieve_checksum(self, name: str) -> int:
        return self.value

    def open_checksum_input(self, name: str) -> CollidingInput:
        return CollidingInput(self.file_length(name), self.value)

    def file_length(self, name: str) -> int:
        return (self.path / name).stat().st_size


def test_collision_skips_end_to_end(tmp_path: Path) -> None:
    path = tmp_path / "_0.cfs"
    path.write_bytes(bytes(range(48)))
    opened = []

    def factory(directory_path: Path) -> CollidingDirectory:
        directory = CollidingDirectory(directory_path)
        opened.append(directory)
        return directory

    with pytest.raises(pytest.skip.Exception, match="Checksum collision - before: \\[4242\\] after: \\[4242\\]"):
        corrupt_file_or_skip(random.Random(3), path, directory_factory=factory)

    assert len(opened) == 1
    assert opened[0].closed
    assert path.read_bytes() != bytes(range(48))
