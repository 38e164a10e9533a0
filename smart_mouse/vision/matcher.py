"""Query matching over synthesized candidates."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Optional

from loguru import logger

from .models import Candidate, CandidateKind

SUBSTRING_SCORE = 0.9
BUTTON_BOOST = 1.2
MATCH_THRESHOLD = 0.3


def text_similarity(text: str, query: str) -> float:
    """Crude character-overlap similarity in [0, 1].

    Substring containment in either direction scores 0.9. Otherwise the score
    is the number of query characters (with repetition) that occur anywhere in
    *text*, divided by the longer of the two lengths. This is deliberately not
    an edit distance; winner selection depends on its exact shape.
    """
    a = text.lower()
    b = query.lower()

    if a and b and (b in a or a in b):
        return SUBSTRING_SCORE

    longest = max(len(a), len(b))
    if longest == 0:
        return 0.0

    matches = sum(1 for ch in b if ch in a)
    return matches / longest


def score_candidate(candidate: Candidate, query: str) -> float:
    """Similarity, boosted for buttons, weighted by confidence / 100."""
    score = text_similarity(candidate.text, query)
    if candidate.kind is CandidateKind.BUTTON:
        score *= BUTTON_BOOST
    score *= candidate.confidence / 100.0
    return score


def find_best_match(
    candidates: Sequence[Candidate],
    query: str,
    threshold: float = MATCH_THRESHOLD,
) -> Optional[Candidate]:
    """Return the highest scoring candidate, or ``None`` at or below *threshold*.

    Ties keep the earliest candidate.
    """
    best: Optional[Candidate] = None
    best_score = 0.0

    for candidate in candidates:
        score = score_candidate(candidate, query)
        if score > best_score:
            best_score = score
            best = candidate

    if best is None or best_score <= threshold:
        logger.debug(f"No candidate for {query!r} (best score {best_score:.3f})")
        return None

    logger.debug(f"Best match for {query!r}: {best.text!r} ({best.kind.value}, score {best_score:.3f})")
    return best
