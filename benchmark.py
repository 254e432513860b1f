"""
Benchmark: levtrace against the scalar DP and existing Levenshtein libraries.

This benchmark compares:
    1. DistanceEngine.compute — full matrix, operation record, step log
    2. compute_distance — two-row scalar DP
    3. rapidfuzz / python-Levenshtein — C implementations, if installed

The point is NOT "we're faster" — the full trace costs memory and time.
The point is what the trace buys: every cell, every candidate cost and
one optimal alignment path, checked against the fast libraries.
"""

import sys
import os
import random
import time

sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from levtrace.core import DistanceEngine, align, compute_distance, reconstruct_path
from levtrace.fuzzy import fuzzy_match, rank_candidates


# ═══════════════════════════════════════════════════════════════════
#  TEST DATA
# ═══════════════════════════════════════════════════════════════════

STRING_PAIRS = [
    ("kitten", "sitting"),
    ("saturday", "sunday"),
    ("gato", "pato"),
    ("casa", "caso"),
    ("hello", "hola"),
    ("intention", "execution"),
    ("the quick brown fox jumps over the lazy dog",
     "the quick brown cat jumps over the lazy dog"),
    ("pneumonoultramicroscopicsilicovolcanoconiosis",
     "pseudopseudohypoparathyroidism"),
    ("abcdefghijklmnopqrstuvwxyz", "zyxwvutsrqponmlkjihgfedcba"),
]

VOCABULARY = [
    "levenshtein", "distance", "alignment", "substitution", "insertion",
    "deletion", "matrix", "optimal", "threshold", "similarity",
    "sequence", "symbol", "dynamic", "programming", "reconstruction",
]


def _try_import(name):
    """Safely attempt to import an optional dependency by name."""
    import importlib
    try:
        return importlib.import_module(name)
    except ImportError:
        return None


# ═══════════════════════════════════════════════════════════════════
#  BENCHMARKS
# ═══════════════════════════════════════════════════════════════════

def benchmark_known_pairs():
    """Full trace vs scalar DP on classic pairs."""
    print("=" * 70)
    print("  §1  KNOWN PAIRS (full trace vs scalar)")
    print("=" * 70)
    print()

    engine = DistanceEngine(fold_case=False)
    all_pass = True
    for s1, s2 in STRING_PAIRS:
        t0 = time.perf_counter()
        m = engine.compute(s1, s2)
        path = reconstruct_path(m)
        dt_trace = time.perf_counter() - t0

        t0 = time.perf_counter()
        scalar = compute_distance(s1, s2)
        dt_scalar = time.perf_counter() - t0

        ok = "✓" if m.distance == scalar else "✗"
        if m.distance != scalar:
            all_pass = False

        print(f"  {ok} d(\"{s1[:20]}\", \"{s2[:20]}\") = {m.distance:<3} "
              f"path={len(path):<3} trace={dt_trace*1000:.2f}ms  "
              f"scalar={dt_scalar*1000:.2f}ms")

    print()
    if all_pass:
        print("  RESULT: full trace and scalar DP agree on all pairs.")
    else:
        print("  RESULT: MISMATCH between full trace and scalar DP!")
    print()


def benchmark_alignment():
    """Show one optimal alignment."""
    print("=" * 70)
    print("  §2  ALIGNMENT")
    print("=" * 70)
    print()

    m = DistanceEngine().compute("intention", "execution")
    pairs = align(m)
    top = " ".join(p.symbol_a or "-" for p in pairs)
    bottom = " ".join(p.symbol_b or "-" for p in pairs)
    ops = " ".join(p.operation.value[0].upper() for p in pairs)
    print(f"    {top}")
    print(f"    {bottom}")
    print(f"    {ops}")
    print(f"  distance = {m.distance}")
    print()


def benchmark_vs_libraries():
    """Compare with rapidfuzz and python-Levenshtein (if available)."""
    print("=" * 70)
    print("  §3  COMPARISON WITH EXISTING LIBRARIES")
    print("=" * 70)
    print()

    rapidfuzz_lev = _try_import("rapidfuzz.distance.Levenshtein")
    python_lev = _try_import("Levenshtein")

    random.seed(7)
    pairs = [("".join(random.choice("abcd") for _ in range(40)),
              "".join(random.choice("abcd") for _ in range(40)))
             for _ in range(200)]

    t0 = time.perf_counter()
    ours = [compute_distance(a, b) for a, b in pairs]
    our_time = time.perf_counter() - t0
    print(f"  levtrace (scalar):    {our_time*1000:>8.2f}ms for {len(pairs)} pairs")

    for label, lib in (("rapidfuzz", rapidfuzz_lev), ("python-Levenshtein", python_lev)):
        if lib is None:
            print(f"  {label + ':':<22}NOT INSTALLED")
            continue
        t0 = time.perf_counter()
        theirs = [lib.distance(a, b) for a, b in pairs]
        their_time = time.perf_counter() - t0
        agree = "agree" if theirs == ours else "DISAGREE"
        print(f"  {label + ':':<22}{their_time*1000:>8.2f}ms  ({agree})")
    print()


def benchmark_fuzzy():
    """Fuzzy matching and ranking."""
    print("=" * 70)
    print("  §4  FUZZY MATCHING")
    print("=" * 70)
    print()

    for s1, s2 in STRING_PAIRS[:5]:
        r = fuzzy_match(s1, s2)
        verdict = "match" if r.is_match else "-"
        print(f"  {s1:>10} / {s2:<10} similarity={r.similarity_percent:>3}%  "
              f"normalized={r.normalized_distance:.3f}  {verdict}")
    print()

    for query in ("distnace", "alignmnt", "Similarty"):
        t0 = time.perf_counter()
        hits = rank_candidates(query, VOCABULARY, threshold=0.4, limit=3)
        dt = time.perf_counter() - t0
        shown = ", ".join(f"{c} ({r.similarity_percent}%)" for c, r in hits)
        print(f"  {query:>10} → {shown or '(none)'}  [{dt*1000:.2f}ms]")
    print()


def benchmark_scaling():
    """Test how the full trace scales with input length."""
    print("=" * 70)
    print("  §5  SCALING")
    print("=" * 70)
    print()

    random.seed(11)
    engine = DistanceEngine(fold_case=False)
    for n in [10, 50, 100, 200, 400]:
        a = "".join(random.choice("acgt") for _ in range(n))
        b = "".join(random.choice("acgt") for _ in range(n))

        t0 = time.perf_counter()
        m = engine.compute(a, b)
        dt_trace = time.perf_counter() - t0

        t0 = time.perf_counter()
        compute_distance(a, b)
        dt_scalar = time.perf_counter() - t0

        print(f"  Length {n:>4}: d={m.distance:>4}  cells={(n + 1) ** 2:>7}  "
              f"trace={dt_trace*1000:>8.2f}ms  scalar={dt_scalar*1000:>8.2f}ms")
    print()


def main():
    print()
    print("╔══════════════════════════════════════════════════════════════════════╗")
    print("║          LEVENSHTEIN TRACE — BENCHMARK SUITE                        ║")
    print("║          levtrace v0.1.0                                            ║")
    print("╚══════════════════════════════════════════════════════════════════════╝")
    print()

    benchmark_known_pairs()
    benchmark_alignment()
    benchmark_vs_libraries()
    benchmark_fuzzy()
    benchmark_scaling()


if __name__ == "__main__":
    main()
