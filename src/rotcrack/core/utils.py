from __future__ import annotations

import re

_AZ_ONLY_RE = re.compile(r"[^A-Za-z]+")
_WHITESPACE_RE = re.compile(r"\s+")


def normalize_az(s: str) -> str:
    """Keep only A-Z, uppercase."""
    # filter before upper(): "ß".upper() is "SS"
    return _AZ_ONLY_RE.sub("", s).upper()


def strip_whitespace(s: str) -> str:
    """Remove every whitespace character (spaces, tabs, newlines)."""
    return _WHITESPACE_RE.sub("", s)


def letter_pairs(s: str) -> list[str]:
    """
    Adjacent letter pairs of the A-Z projection of s.
    "Hi, Bob" -> ["HI", "IB", "BO", "OB"]
    """
    az = normalize_az(s)
    return [az[i:i + 2] for i in range(len(az) - 1)]
