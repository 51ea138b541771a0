from __future__ import annotations

from rotcrack.classical.common import shift_text
from rotcrack.errors import InvalidRotationError

MIN_ROTATION = 1
MAX_ROTATION = 25
ROTATIONS = range(MIN_ROTATION, MAX_ROTATION + 1)


def validate_rotation(rotation: int) -> int:
    # bool is an int subclass; True would silently mean "rotate by 1"
    if isinstance(rotation, bool) or not isinstance(rotation, int):
        raise InvalidRotationError(f"Rotation must be an integer {MIN_ROTATION}..{MAX_ROTATION}, got {rotation!r}.")
    if not MIN_ROTATION <= rotation <= MAX_ROTATION:
        raise InvalidRotationError(f"Rotation must be in {MIN_ROTATION}..{MAX_ROTATION}, got {rotation}.")
    return rotation


def decipher(text: str, rotation: int) -> str:
    """
    Undo a rotation: every A-Z/a-z letter moves back `rotation` places,
    wrapping around the alphabet. Case is kept; anything else passes through.
    """
    k = validate_rotation(rotation)
    return shift_text(text, -k)


def encipher(text: str, rotation: int) -> str:
    """Apply a rotation (forward shift). Inverse of decipher() for the same rotation."""
    k = validate_rotation(rotation)
    return shift_text(text, k)
