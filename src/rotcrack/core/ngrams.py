from __future__ import annotations

import logging
from dataclasses import dataclass
from importlib import resources
from types import MappingProxyType
from typing import Mapping

from rotcrack.errors import FrequencyTableError

logger = logging.getLogger(__name__)

ENGLISH_LETTER_FREQ = {
    "E": 0.1270, "T": 0.0906, "A": 0.0817, "O": 0.0751, "I": 0.0697, "N": 0.0675,
    "S": 0.0633, "H": 0.0609, "R": 0.0599, "D": 0.0425, "L": 0.0403, "C": 0.0278,
    "U": 0.0276, "M": 0.0241, "W": 0.0236, "F": 0.0223, "G": 0.0202, "Y": 0.0197,
    "P": 0.0193, "B": 0.0149, "V": 0.0098, "K": 0.0077, "J": 0.0015, "X": 0.0015,
    "Q": 0.0010, "Z": 0.0007,
}

# Unlisted symbols get this fraction of the rarest listed probability.
FLOOR_SCALE = 0.01


@dataclass(frozen=True)
class FrequencyTable:
    """
    Expected relative frequency of each symbol (a letter, or a letter pair).
    Probabilities sum to 1.0 over the listed symbols; anything not listed is
    scored at `floor`, the largest penalty the table can hand out.
    """

    probs: Mapping[str, float]
    floor: float
    order: int

    @classmethod
    def from_values(cls, vals: Mapping[str, float], order: int) -> "FrequencyTable":
        """Build from counts, percentages or probabilities; all are normalized."""
        positive = {g.upper(): float(v) for g, v in vals.items() if v > 0}
        if not positive:
            raise FrequencyTableError("Frequency table has no positive entries.")
        for g in positive:
            if len(g) != order or not g.isalpha():
                raise FrequencyTableError(f"Bad symbol {g!r} for an order-{order} table.")

        total = sum(positive.values())
        probs = {g: v / total for g, v in positive.items()}
        floor = min(probs.values()) * FLOOR_SCALE
        return cls(probs=MappingProxyType(probs), floor=floor, order=order)

    @classmethod
    def from_package_data(cls, filename: str, order: int = 2) -> "FrequencyTable":
        pkg = "rotcrack.data"
        try:
            text = resources.files(pkg).joinpath(filename).read_text(encoding="utf-8")
        except (FileNotFoundError, ModuleNotFoundError) as e:
            raise FrequencyTableError(f"Cannot read {pkg}/{filename}: {e}") from e

        # Collect (gram -> numeric value) from any "GRAM <number>" style line.
        vals: dict[str, float] = {}
        for raw in text.splitlines():
            line = raw.strip()
            if not line or line.startswith("#"):
                continue

            # allow separators like comma or equals
            line = line.replace("=", " ").replace(",", " ")
            parts = line.split()
            if len(parts) < 2:
                continue

            gram = parts[0].strip().upper()
            if len(gram) != order or not gram.isalpha():
                continue

            try:
                v = float(parts[1])
            except ValueError:
                continue

            vals[gram] = v

        if not vals:
            raise FrequencyTableError(f"No valid lines in {filename}. Expected lines like 'TH 3.56'.")

        table = cls.from_values(vals, order=order)
        logger.debug("loaded %d order-%d grams from %s (floor=%.3g)", len(table.probs), order, filename, table.floor)
        return table

    def probability(self, symbol: str) -> float:
        return self.probs.get(symbol, self.floor)

    def __len__(self) -> int:
        return len(self.probs)
