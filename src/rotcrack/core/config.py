from __future__ import annotations

from dataclasses import dataclass

from rotcrack.classical.rotation import MAX_ROTATION, MIN_ROTATION
from rotcrack.errors import InvalidArgumentError


@dataclass(frozen=True)
class RankOptions:
    """
    Knobs for one cracking run:
      - return_count: candidates kept per message (1..25)
      - strip_whitespace: drop all whitespace before rotating
      - use_bigrams: score with letter pairs instead of single letters
      - workers: >1 ranks messages on a thread pool
    """

    return_count: int = 1
    strip_whitespace: bool = False
    use_bigrams: bool = False
    workers: int = 1

    def validate(self) -> "RankOptions":
        validate_return_count(self.return_count)
        validate_workers(self.workers)
        return self


def validate_return_count(return_count: int) -> int:
    if isinstance(return_count, bool) or not isinstance(return_count, int):
        raise InvalidArgumentError(f"Return count must be an integer, got {return_count!r}.")
    if not MIN_ROTATION <= return_count <= MAX_ROTATION:
        raise InvalidArgumentError(
            f"Return count must be between {MIN_ROTATION} and {MAX_ROTATION} "
            f"(there are only {MAX_ROTATION} rotations), got {return_count}."
        )
    return return_count


def validate_workers(workers: int) -> int:
    if isinstance(workers, bool) or not isinstance(workers, int) or workers < 1:
        raise InvalidArgumentError(f"workers must be a positive integer, got {workers!r}.")
    return workers
