from __future__ import annotations

import math
import threading
from collections import Counter
from typing import Callable

from rotcrack.errors import InvalidArgumentError
from rotcrack.core.ngrams import ENGLISH_LETTER_FREQ, FrequencyTable
from .utils import letter_pairs, normalize_az

Scorer = Callable[[str], float]

BIGRAM_DATA_FILE = "english_bigrams.txt"

# ----------------------------
# Reference tables (cached)
# ----------------------------

_LETTER_TABLE = FrequencyTable.from_values(ENGLISH_LETTER_FREQ, order=1)
_BIGRAM_TABLE: FrequencyTable | None = None
_BIGRAM_LOCK = threading.Lock()


def get_letter_table() -> FrequencyTable:
    return _LETTER_TABLE


def get_bigram_table() -> FrequencyTable:
    """Load cached bigram table from rotcrack.data/english_bigrams.txt."""
    global _BIGRAM_TABLE
    if _BIGRAM_TABLE is not None:
        return _BIGRAM_TABLE

    with _BIGRAM_LOCK:
        if _BIGRAM_TABLE is None:
            _BIGRAM_TABLE = FrequencyTable.from_package_data(BIGRAM_DATA_FILE, order=2)
    return _BIGRAM_TABLE


# ----------------------------
# Entropy scores
# ----------------------------

def relative_entropy(counts: Counter, table: FrequencyTable) -> float:
    """
    Kullback-Leibler divergence D(q || p) in bits, where q is the observed
    distribution given by `counts` and p is `table`. Lower is closer to the
    reference; 0.0 means identical. Returns inf when nothing was counted.
    """
    n = sum(counts.values())
    if n == 0:
        return math.inf

    total = 0.0
    # Sorted so equal multisets sum in the same order and give the same float.
    for sym in sorted(counts):
        q = counts[sym] / n
        total += q * math.log2(q / table.probability(sym))
    return total


def unigram_entropy(text: str) -> float:
    """Lower is better. Case-insensitive; non-letters are ignored."""
    return relative_entropy(Counter(normalize_az(text)), get_letter_table())


def bigram_entropy(text: str) -> float:
    """
    Lower is better. Pairs come from the letters-only projection, so
    "of the" contributes OF, FT, TH, HE.
    """
    return relative_entropy(Counter(letter_pairs(text)), get_bigram_table())


# ----------------------------
# Scorer lookup
# ----------------------------

_SCORERS: dict[str, Scorer] = {
    "unigram": unigram_entropy,
    "bigram": bigram_entropy,
}


def list_scorers() -> list[str]:
    return sorted(_SCORERS.keys())


def get_scorer(name: str) -> Scorer:
    key = name.lower().strip()
    if key not in _SCORERS:
        raise InvalidArgumentError(f"Unknown scorer '{name}'. Available: {', '.join(list_scorers())}")
    return _SCORERS[key]


def select_scorer(use_bigrams: bool) -> Scorer:
    return get_scorer("bigram" if use_bigrams else "unigram")
