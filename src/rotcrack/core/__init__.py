from .config import RankOptions, validate_return_count, validate_workers
from rotcrack.errors import FrequencyTableError, InvalidArgumentError, InvalidRotationError, RotcrackError
from .ranking import best_candidate, rank, rank_many
from .results import Candidate
from .scoring import bigram_entropy, get_scorer, list_scorers, unigram_entropy

__all__ = [
    "Candidate",
    "RankOptions",
    "validate_return_count",
    "validate_workers",
    "rank",
    "rank_many",
    "best_candidate",
    "unigram_entropy",
    "bigram_entropy",
    "get_scorer",
    "list_scorers",
    "RotcrackError",
    "InvalidArgumentError",
    "InvalidRotationError",
    "FrequencyTableError",
]
