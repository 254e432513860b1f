"""
levtrace.formats — Export traces as plain Python objects and JSON.

Supported conversions:
    • Matrix            → dict (distance, cost grid, operation grid, path, steps)
    • CalculationStep   → dict
    • list[PathStep]    → list of dicts
    • FuzzyMatchResult  → dict

Operations are written as their lowercase labels ("match", "insertion",
...), so the output is JSON-compatible as long as the symbols are.
"""

import json
from typing import Any

from .core import CalculationStep, Matrix, Operation, PathStep, reconstruct_path
from .fuzzy import FuzzyMatchResult


# ═══════════════════════════════════════════════════════════════════
#  SINGLE RECORDS
# ═══════════════════════════════════════════════════════════════════

def step_to_python(step: CalculationStep) -> dict[str, Any]:
    """Convert one calculation step to a dict."""
    return {
        "row": step.row,
        "col": step.col,
        "symbol_a": step.symbol_a,
        "symbol_b": step.symbol_b,
        "match": step.is_match,
        "substitution_cost": step.substitution_cost,
        "insertion_cost": step.insertion_cost,
        "deletion_cost": step.deletion_cost,
        "operation": step.operation.value,
        "value": step.value,
    }


def path_to_python(path: list[PathStep]) -> list[dict[str, Any]]:
    """Convert a reconstructed path to a list of {row, col, operation}."""
    return [
        {"row": p.row, "col": p.col, "operation": p.operation.value}
        for p in path
    ]


def result_to_python(result: FuzzyMatchResult) -> dict[str, Any]:
    """Convert a fuzzy-match verdict to a dict."""
    return {
        "distance": result.distance,
        "max_length": result.max_length,
        "normalized_distance": result.normalized_distance,
        "similarity_percent": result.similarity_percent,
        "is_match": result.is_match,
        "threshold": result.threshold,
    }


# ═══════════════════════════════════════════════════════════════════
#  WHOLE TRACES
# ═══════════════════════════════════════════════════════════════════

def trace_to_python(matrix: Matrix) -> dict[str, Any]:
    """
    Convert a matrix to a plain dict for explanatory rendering.

    The optimal path is reconstructed (and marked on the matrix) as part
    of the export.
    """
    if not isinstance(matrix, Matrix):
        raise TypeError(f"Unknown trace type: {type(matrix)}")

    path = reconstruct_path(matrix)
    return {
        "a": list(matrix.a),
        "b": list(matrix.b),
        "fold_case": matrix.fold_case,
        "distance": matrix.distance,
        "matrix": matrix.values(),
        "operations": [[op.value for op in row] for row in matrix.operations()],
        "path": path_to_python(path),
        "steps": [step_to_python(s) for s in matrix.steps],
    }


def to_python(obj: Any) -> Any:
    """Dispatch to the converter for ``obj``'s type."""
    if isinstance(obj, Matrix):
        return trace_to_python(obj)
    if isinstance(obj, CalculationStep):
        return step_to_python(obj)
    if isinstance(obj, FuzzyMatchResult):
        return result_to_python(obj)
    if isinstance(obj, PathStep):
        return path_to_python([obj])[0]
    if isinstance(obj, Operation):
        return obj.value
    if isinstance(obj, list):
        return [to_python(item) for item in obj]
    raise TypeError(f"Unknown trace type: {type(obj)}")


def trace_to_json(matrix: Matrix, **kwargs) -> str:
    """Convert a matrix to a JSON string."""
    return json.dumps(trace_to_python(matrix), **kwargs)


def to_json(obj: Any, **kwargs) -> str:
    """Convert any exportable object to a JSON string."""
    return json.dumps(to_python(obj), **kwargs)
