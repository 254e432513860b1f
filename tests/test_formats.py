"""
Tests for levtrace.formats — plain-Python and JSON export.
"""

import json
import os
import sys

import pytest

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from levtrace.core import DistanceEngine, Operation, reconstruct_path
from levtrace.formats import (
    path_to_python, result_to_python, step_to_python,
    to_json, to_python, trace_to_json, trace_to_python,
)
from levtrace.fuzzy import evaluate_fuzzy_match


class TestTraceExport:

    def test_kitten_sitting(self):
        data = trace_to_python(DistanceEngine().compute("kitten", "sitting"))
        assert data["distance"] == 3
        assert data["a"] == list("kitten")
        assert data["b"] == list("sitting")
        assert data["fold_case"] is True
        assert len(data["matrix"]) == 8
        assert data["operations"][0][:2] == ["init", "insertion"]
        assert data["operations"][1][0] == "deletion"
        assert len(data["steps"]) == 42
        assert data["path"][0] == {"row": 0, "col": 0, "operation": "init"}
        assert data["path"][-1]["row"] == 7 and data["path"][-1]["col"] == 6

    def test_export_marks_path(self):
        m = DistanceEngine().compute("gato", "pato")
        trace_to_python(m)
        assert m.terminal.on_optimal_path is True

    def test_json(self):
        text = trace_to_json(DistanceEngine().compute("casa", "caso"), sort_keys=True)
        data = json.loads(text)
        assert data["distance"] == 1
        assert data["matrix"][4][4] == 1
        assert data["steps"][-1]["operation"] == "substitution"

    def test_empty(self):
        data = trace_to_python(DistanceEngine().compute("", ""))
        assert data["matrix"] == [[0]]
        assert data["operations"] == [["init"]]
        assert data["steps"] == []
        assert data["path"] == [{"row": 0, "col": 0, "operation": "init"}]

    def test_rejects_unknown(self):
        with pytest.raises(TypeError):
            trace_to_python({"distance": 1})


class TestRecordExport:

    def test_step(self):
        step = DistanceEngine().compute("gato", "pato").steps[0]
        assert step_to_python(step) == {
            "row": 1, "col": 1,
            "symbol_a": "g", "symbol_b": "p",
            "match": False,
            "substitution_cost": 1,
            "insertion_cost": 2,
            "deletion_cost": 2,
            "operation": "substitution",
            "value": 1,
        }

    def test_path(self):
        path = reconstruct_path(DistanceEngine().compute("a", "b"))
        assert path_to_python(path) == [
            {"row": 0, "col": 0, "operation": "init"},
            {"row": 1, "col": 1, "operation": "substitution"},
        ]

    def test_result(self):
        data = result_to_python(evaluate_fuzzy_match(1, 4, 4, threshold=0.25))
        assert data == {
            "distance": 1,
            "max_length": 4,
            "normalized_distance": 0.25,
            "similarity_percent": 75,
            "is_match": True,
            "threshold": 0.25,
        }

    def test_dispatch(self):
        m = DistanceEngine().compute("ab", "b")
        path = reconstruct_path(m)
        assert to_python(path) == path_to_python(path)
        assert to_python(Operation.MATCH) == "match"
        assert to_python(m)["distance"] == 1
        assert json.loads(to_json(m.steps[0]))["row"] == 1

    def test_dispatch_unknown(self):
        with pytest.raises(TypeError):
            to_python(object())
