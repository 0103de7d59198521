"""
Exceptions raised by the corruption harness.
"""


class CorruptionError(Exception):
    """Base class for harness failures."""


class InvalidInputError(CorruptionError, ValueError):
    """The caller supplied candidates that cannot be corrupted."""


class OracleContractError(CorruptionError):
    """The checksum store behaved differently from what the verifier requires."""
