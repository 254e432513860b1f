"""
levtrace.fuzzy — Fuzzy-match classification from an edit distance.

A pair of sequences is a fuzzy match when its normalized distance

    normalized = distance / max(len(a), len(b))

is at most the threshold.  Equality counts as a match.  Two empty
sequences always match with 100% similarity.

The threshold is compared as given: values above 1 accept every pair,
negative values accept only a pair of empty sequences.
"""

import logging
import math
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from typing import Optional

from .core import DistanceEngine, compute_distance


logger = logging.getLogger(__name__)

DEFAULT_THRESHOLD = 0.3


@dataclass(frozen=True, slots=True)
class FuzzyMatchResult:
    """Similarity verdict derived from a distance and two lengths."""
    distance: int
    max_length: int
    normalized_distance: float
    similarity_percent: int
    is_match: bool
    threshold: float

    def __repr__(self) -> str:
        verdict = "match" if self.is_match else "no match"
        return (f"FuzzyMatchResult({verdict}, distance={self.distance}, "
                f"similarity={self.similarity_percent}%)")


def _round_half_up(x: float) -> int:
    return int(math.floor(x + 0.5))


class FuzzyMatchEvaluator:
    """Turns a raw distance into a similarity percentage and a verdict."""

    __slots__ = ("threshold",)

    def __init__(self, threshold: float = DEFAULT_THRESHOLD):
        self.threshold = threshold

    def __repr__(self) -> str:
        return f"FuzzyMatchEvaluator(threshold={self.threshold})"

    def evaluate(self, distance: int, len_a: int, len_b: int,
                 threshold: Optional[float] = None) -> FuzzyMatchResult:
        """
        Classify a pair from its distance and lengths.

        ``threshold`` overrides the evaluator's own for this call.
        """
        t = self.threshold if threshold is None else threshold
        max_length = max(len_a, len_b)

        if max_length == 0:
            return FuzzyMatchResult(distance, 0, 0.0, 100, True, t)

        normalized = distance / max_length
        return FuzzyMatchResult(
            distance=distance,
            max_length=max_length,
            normalized_distance=normalized,
            similarity_percent=_round_half_up((1 - normalized) * 100),
            is_match=normalized <= t,
            threshold=t,
        )


def evaluate_fuzzy_match(distance: int, len_a: int, len_b: int,
                         threshold: float = DEFAULT_THRESHOLD) -> FuzzyMatchResult:
    """Functional form of :meth:`FuzzyMatchEvaluator.evaluate`."""
    return FuzzyMatchEvaluator(threshold).evaluate(distance, len_a, len_b)


def fuzzy_match(a: Sequence, b: Sequence, threshold: float = DEFAULT_THRESHOLD,
                fold_case: bool = True) -> FuzzyMatchResult:
    """
    Compute the distance between ``a`` and ``b`` and classify the pair.

    Lengths are those of the inputs as given, before case folding.
    """
    matrix = DistanceEngine(fold_case=fold_case).compute(a, b)
    return evaluate_fuzzy_match(matrix.distance, len(matrix.a), len(matrix.b),
                                threshold)


def rank_candidates(
    query: Sequence,
    candidates: Iterable[Sequence],
    threshold: float = DEFAULT_THRESHOLD,
    fold_case: bool = True,
    limit: Optional[int] = None,
) -> list[tuple[Sequence, FuzzyMatchResult]]:
    """
    Candidates that fuzzy-match ``query``, closest first.

    Ordering is by normalized distance; candidates at the same distance
    keep their input order.  ``limit`` caps the number returned.
    """
    evaluator = FuzzyMatchEvaluator(threshold)
    hits: list[tuple[Sequence, FuzzyMatchResult]] = []
    checked = 0
    for candidate in candidates:
        checked += 1
        d = compute_distance(query, candidate, fold_case=fold_case)
        result = evaluator.evaluate(d, len(query), len(candidate))
        if result.is_match:
            hits.append((candidate, result))

    hits.sort(key=lambda hit: hit[1].normalized_distance)
    logger.debug("rank_candidates: %d of %d candidates within %.3f",
                 len(hits), checked, threshold)
    if limit is not None:
        hits = hits[:limit]
    return hits
