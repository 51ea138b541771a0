from .rotation import MAX_ROTATION, MIN_ROTATION, ROTATIONS, decipher, encipher, validate_rotation

__all__ = ["decipher", "encipher", "validate_rotation", "MIN_ROTATION", "MAX_ROTATION", "ROTATIONS"]
