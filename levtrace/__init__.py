"""
Levenshtein Trace (levtrace)
============================

Edit distance with the full dynamic-programming trace behind it.

    compute_distance("kitten", "sitting")            → 3
    m = DistanceEngine().compute("kitten", "sitting")
    reconstruct_path(m)                              → [PathStep(0, 0, INIT), ...]
    evaluate_fuzzy_match(3, 6, 7, threshold=0.5)     → 57% similar, match

The engine keeps every cell of the cost grid together with the operation
that produced it and the single predecessor it came from.  That record
is enough to:
  • report the distance
  • replay the fill, cell by cell, with all three candidate costs
  • walk back one optimal alignment path
  • classify the pair as a fuzzy match under a normalized threshold
"""

from levtrace.core import (
    # Types
    Operation,
    Cell,
    Matrix,
    CalculationStep,
    PathStep,
    AlignedPair,
    DistanceTrace,
    # Engine and path
    DistanceEngine,
    PathReconstructor,
    # Functional API
    compute_distance,
    compute_distance_with_trace,
    reconstruct_path,
    align,
)
from levtrace.fuzzy import (
    DEFAULT_THRESHOLD,
    FuzzyMatchEvaluator,
    FuzzyMatchResult,
    evaluate_fuzzy_match,
    fuzzy_match,
    rank_candidates,
)
from levtrace.formats import to_python, to_json, trace_to_python, trace_to_json

__version__ = "0.1.0"
__all__ = [
    "Operation", "Cell", "Matrix", "CalculationStep", "PathStep",
    "AlignedPair", "DistanceTrace",
    "DistanceEngine", "PathReconstructor",
    "compute_distance", "compute_distance_with_trace", "reconstruct_path", "align",
    "DEFAULT_THRESHOLD", "FuzzyMatchEvaluator", "FuzzyMatchResult",
    "evaluate_fuzzy_match", "fuzzy_match", "rank_candidates",
    "to_python", "to_json", "trace_to_python", "trace_to_json",
]
