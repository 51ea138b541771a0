from __future__ import annotations


class RotcrackError(Exception):
    """Base class for every error raised by rotcrack."""


class InvalidArgumentError(RotcrackError, ValueError):
    """A caller-supplied value is outside its accepted domain."""


class InvalidRotationError(InvalidArgumentError):
    pass


class FrequencyTableError(RotcrackError):
    """Reference frequency data is missing or unreadable."""
