"""
Pick the file to corrupt.
"""

from __future__ import annotations

import random
from pathlib import Path
from typing import Sequence, Union

from .errors import InvalidInputError

PathLike = Union[str, Path]


def select_target(rng: random.Random, files: Sequence[PathLike]) -> Path:
    """Choose one candidate uniformly at random and check it is a regular file."""
    if len(files) == 0:
        raise InvalidInputError("files must be non-empty")
    chosen = Path(rng.choice(list(files)))
    if not chosen.is_file():
        raise InvalidInputError(f"{chosen} is not a file")
    return chosen
