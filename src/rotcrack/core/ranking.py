from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Iterable

from rotcrack.classical.rotation import MAX_ROTATION, MIN_ROTATION, ROTATIONS, decipher
from .config import RankOptions
from .results import Candidate
from .scoring import select_scorer
from .utils import strip_whitespace as _strip_whitespace

logger = logging.getLogger(__name__)


def _clamp_count(return_count: int) -> int:
    # Callers validate at the boundary; this only keeps an oversized request from failing.
    clamped = max(MIN_ROTATION, min(MAX_ROTATION, return_count))
    if clamped != return_count:
        logger.debug("return_count %d clamped to %d", return_count, clamped)
    return clamped


def rank(
    ciphertext: str,
    return_count: int = 1,
    *,
    use_bigrams: bool = False,
    strip_whitespace: bool = False,
    rotations: Iterable[int] = ROTATIONS,
) -> list[Candidate]:
    """
    Try every rotation of one message and return the most English-like
    candidates, lowest entropy first.

    Ties keep rotation order (1 before 2 ...), so output is deterministic.
    Very short messages carry little statistical signal and the right
    rotation may not come first; that is a limit of frequency scoring.
    """
    score = select_scorer(use_bigrams)
    text = _strip_whitespace(ciphertext) if strip_whitespace else ciphertext

    candidates: list[Candidate] = []
    for k in sorted(rotations):
        pt = decipher(text, k)
        candidates.append(
            Candidate(
                plaintext=pt,
                ciphertext=ciphertext,
                rotation=k,
                entropy=score(pt),
            )
        )

    # list.sort is stable: equal entropies stay in rotation order
    candidates.sort(key=lambda c: c.entropy)
    top = candidates[:_clamp_count(return_count)]

    if top:
        logger.debug(
            "ranked %d rotations of %r; best rotation=%d entropy=%.4f",
            len(candidates),
            ciphertext[:40],
            top[0].rotation,
            top[0].entropy,
        )
    return top


def rank_many(messages: Iterable[str], options: RankOptions | None = None) -> list[Candidate]:
    """
    Rank each message on its own and concatenate the results in input order.
    Options are validated before anything is deciphered.
    """
    opts = (options or RankOptions()).validate()
    messages = list(messages)

    def one(msg: str) -> list[Candidate]:
        return rank(
            msg,
            opts.return_count,
            use_bigrams=opts.use_bigrams,
            strip_whitespace=opts.strip_whitespace,
        )

    if opts.workers > 1 and len(messages) > 1:
        with ThreadPoolExecutor(max_workers=opts.workers) as exe:
            # map() yields in submission order
            per_message = list(exe.map(one, messages))
    else:
        per_message = [one(m) for m in messages]

    out: list[Candidate] = []
    for result_set in per_message:
        out.extend(result_set)
    return out


def best_candidate(ciphertext: str, **kwargs) -> Candidate:
    """Single most plausible rotation of one message."""
    return rank(ciphertext, 1, **kwargs)[0]
