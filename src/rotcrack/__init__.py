"""Ciphertext-only cracking of rotation (Caesar) ciphers by frequency entropy."""

from rotcrack.classical import decipher, encipher
from rotcrack.core import (
    Candidate,
    InvalidArgumentError,
    InvalidRotationError,
    RankOptions,
    RotcrackError,
    best_candidate,
    rank,
    rank_many,
)

__version__ = "0.1.0"

__all__ = [
    "decipher",
    "encipher",
    "rank",
    "rank_many",
    "best_candidate",
    "Candidate",
    "RankOptions",
    "RotcrackError",
    "InvalidArgumentError",
    "InvalidRotationError",
]
