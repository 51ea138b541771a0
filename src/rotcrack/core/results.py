from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class Candidate:
    plaintext: str
    # The message as the caller gave it (before any whitespace stripping)
    ciphertext: str
    rotation: int

    # Lower is better
    entropy: float

    def to_dict(self) -> dict[str, Any]:
        return {
            "Plaintext": self.plaintext,
            "Ciphertext": self.ciphertext,
            "Rotation": self.rotation,
            "Entropy": self.entropy,
        }
