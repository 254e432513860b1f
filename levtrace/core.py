"""
levtrace.core — Levenshtein distance with a full dynamic-programming trace
===========================================================================

§1  THE RECURRENCE
──────────────────

For sequences A (length m) and B (length n) the engine fills a grid M of
(n + 1) rows by (m + 1) columns.  Row i is indexed by B, column j by A,
and M[i][j] is the minimal number of unit-cost edits between the prefix
A[:j] and the prefix B[:i]:

    M[0][0] = 0
    M[i][0] = i                       (DELETION,  from (i-1, 0))
    M[0][j] = j                       (INSERTION, from (0, j-1))
    M[i][j] = min(
        M[i-1][j-1] + (0 if A[j-1] == B[i-1] else 1),   # match / substitution
        M[i][j-1]   + 1,                                # insertion
        M[i-1][j]   + 1,                                # deletion
    )

The distance is M[n][m].

§2  OPERATION LABELS
────────────────────

Labels are read as edits turning B into A:

    INSERTION     (i, j-1) → (i, j)      insert A[j-1]
    DELETION      (i-1, j) → (i, j)      delete B[i-1]
    SUBSTITUTION  (i-1, j-1) → (i, j)    replace B[i-1] with A[j-1]
    MATCH         (i-1, j-1) → (i, j)    A[j-1] == B[i-1], no edit
    INIT          the origin (0, 0) only

§3  TIE-BREAK
─────────────

When several candidates reach the minimum, the diagonal wins first,
then insertion, then deletion.  Each cell keeps exactly one predecessor
chosen by this order, so the reconstructed alignment is deterministic:
it is ONE optimal path, not the set of all of them.

§4  CASE FOLDING
────────────────

Comparison is case-insensitive when ``fold_case`` is set: every ``str``
symbol is lowercased before comparison.  Non-string symbols compare
as-is.  The Matrix keeps the original, unfolded inputs so alignments
report the caller's symbols.

§5  COMPLEXITY
──────────────

compute():           O(m·n) time, O(m·n) space (the full grid is kept
                     for path reconstruction).
compute_distance():  O(m·n) time, O(min(m, n)) space (two rows).

License: MIT
"""

import logging
from collections.abc import Sequence
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Hashable, Iterator, Optional


logger = logging.getLogger(__name__)


# ═══════════════════════════════════════════════════════════════════
#  DATA MODEL
# ═══════════════════════════════════════════════════════════════════

class Operation(str, Enum):
    """Edit operation recorded for a matrix cell."""
    MATCH = "match"
    SUBSTITUTION = "substitution"
    INSERTION = "insertion"
    DELETION = "deletion"
    INIT = "init"

    @property
    def is_edit(self) -> bool:
        """True for operations that cost one unit."""
        return self not in (Operation.MATCH, Operation.INIT)


Coord = tuple[int, int]


@dataclass(slots=True)
class Cell:
    """
    One entry of the cost grid.

    ``predecessor`` is the (row, col) of the cell this value was derived
    from.  It is ``None`` only at the origin.
    """
    row: int
    col: int
    value: int
    operation: Operation
    predecessor: Optional[Coord] = None
    on_optimal_path: bool = False

    def __repr__(self) -> str:
        mark = "*" if self.on_optimal_path else ""
        return f"Cell({self.row},{self.col}={self.value} {self.operation.value}{mark})"


@dataclass(frozen=True, slots=True)
class CalculationStep:
    """Log entry for one interior cell, in row-major fill order."""
    row: int
    col: int
    symbol_a: Hashable
    symbol_b: Hashable
    is_match: bool
    substitution_cost: int
    insertion_cost: int
    deletion_cost: int
    operation: Operation
    value: int


@dataclass(frozen=True, slots=True)
class PathStep:
    """A single position on a reconstructed alignment path."""
    row: int
    col: int
    operation: Operation


@dataclass(frozen=True, slots=True)
class AlignedPair:
    """
    One column of an alignment.

    ``symbol_a`` / ``symbol_b`` are the original symbols consumed by this
    step, or ``None`` for a gap.
    """
    operation: Operation
    symbol_a: Optional[Hashable]
    symbol_b: Optional[Hashable]

    def __repr__(self) -> str:
        return f"{self.operation.value}({self.symbol_a!r}, {self.symbol_b!r})"


@dataclass
class Matrix:
    """
    Fully populated cost grid of (len(b) + 1) rows by (len(a) + 1) columns.

    A Matrix exclusively owns its cells; cells refer to one another only
    by coordinate.
    """
    a: tuple
    b: tuple
    cells: list[list[Cell]]
    steps: list[CalculationStep] = field(default_factory=list)
    fold_case: bool = True

    @property
    def shape(self) -> Coord:
        return len(self.cells), len(self.cells[0])

    @property
    def distance(self) -> int:
        """Edit distance between ``a`` and ``b`` (the terminal cell)."""
        return self.terminal.value

    @property
    def terminal(self) -> Cell:
        return self.cells[-1][-1]

    @property
    def origin(self) -> Cell:
        return self.cells[0][0]

    def cell(self, row: int, col: int) -> Cell:
        return self.cells[row][col]

    def values(self) -> list[list[int]]:
        """Cost grid as plain integers, borders included."""
        return [[c.value for c in row] for row in self.cells]

    def operations(self) -> list[list[Operation]]:
        """Operation label of every cell, borders included."""
        return [[c.operation for c in row] for row in self.cells]

    def optimal_path(self) -> list[Cell]:
        """Cells currently flagged as on the optimal path, in fill order."""
        return [c for row in self.cells for c in row if c.on_optimal_path]

    def __iter__(self) -> Iterator[list[Cell]]:
        return iter(self.cells)

    def __repr__(self) -> str:
        rows, cols = self.shape
        return f"Matrix({rows}x{cols}, distance={self.distance})"


@dataclass(frozen=True, slots=True)
class DistanceTrace:
    """Distance plus the bare cost and operation grids."""
    distance: int
    matrix: list[list[int]]
    operations: list[list[Operation]]


# ═══════════════════════════════════════════════════════════════════
#  INPUT NORMALIZATION
# ═══════════════════════════════════════════════════════════════════

def _as_symbols(seq: Any, name: str) -> tuple:
    # str, bytes, list, tuple, range; not sets or mappings
    if isinstance(seq, Sequence):
        return tuple(seq)
    raise TypeError(
        f"{name} must be a str or an ordered sequence of symbols, "
        f"not {type(seq).__name__}"
    )


def fold_symbols(symbols: tuple, fold_case: bool) -> tuple:
    """Lowercase ``str`` symbols when ``fold_case`` is set."""
    if not fold_case:
        return symbols
    return tuple(s.lower() if isinstance(s, str) else s for s in symbols)


# ═══════════════════════════════════════════════════════════════════
#  DISTANCE ENGINE
# ═══════════════════════════════════════════════════════════════════

class DistanceEngine:
    """
    Builds the cost grid, the per-cell operation/predecessor record and
    the calculation-step log for a pair of sequences.

    The engine holds no state between calls; each ``compute`` returns a
    new Matrix.
    """

    __slots__ = ("fold_case",)

    def __init__(self, fold_case: bool = True):
        self.fold_case = fold_case

    def __repr__(self) -> str:
        return f"DistanceEngine(fold_case={self.fold_case})"

    def compute(self, a: Sequence, b: Sequence) -> Matrix:
        """
        Fill the (len(b) + 1) x (len(a) + 1) matrix for ``a`` and ``b``.

        Empty sequences are valid: distance("", s) == len(s).
        """
        raw_a = _as_symbols(a, "a")
        raw_b = _as_symbols(b, "b")
        sa = fold_symbols(raw_a, self.fold_case)
        sb = fold_symbols(raw_b, self.fold_case)
        m, n = len(sa), len(sb)

        cells: list[list[Cell]] = [[None] * (m + 1) for _ in range(n + 1)]  # type: ignore[list-item]

        # Borders
        cells[0][0] = Cell(0, 0, 0, Operation.INIT)
        for i in range(1, n + 1):
            cells[i][0] = Cell(i, 0, i, Operation.DELETION, (i - 1, 0))
        for j in range(1, m + 1):
            cells[0][j] = Cell(0, j, j, Operation.INSERTION, (0, j - 1))

        steps: list[CalculationStep] = []
        for i in range(1, n + 1):
            above = cells[i - 1]
            current = cells[i]
            sym_b = sb[i - 1]
            for j in range(1, m + 1):
                sym_a = sa[j - 1]
                is_match = sym_a == sym_b

                sub_cost = above[j - 1].value + (0 if is_match else 1)
                ins_cost = current[j - 1].value + 1
                del_cost = above[j].value + 1
                best = min(sub_cost, ins_cost, del_cost)

                # Tie-break: diagonal, then insertion, then deletion
                if best == sub_cost:
                    op = Operation.MATCH if is_match else Operation.SUBSTITUTION
                    pred = (i - 1, j - 1)
                elif best == ins_cost:
                    op = Operation.INSERTION
                    pred = (i, j - 1)
                else:
                    op = Operation.DELETION
                    pred = (i - 1, j)

                current[j] = Cell(i, j, best, op, pred)
                steps.append(CalculationStep(
                    row=i, col=j,
                    symbol_a=sym_a, symbol_b=sym_b,
                    is_match=is_match,
                    substitution_cost=sub_cost,
                    insertion_cost=ins_cost,
                    deletion_cost=del_cost,
                    operation=op,
                    value=best,
                ))

        matrix = Matrix(raw_a, raw_b, cells, steps, self.fold_case)
        logger.debug("computed %dx%d matrix, distance=%d",
                     n + 1, m + 1, matrix.distance)
        return matrix


# ═══════════════════════════════════════════════════════════════════
#  PATH RECONSTRUCTION
# ═══════════════════════════════════════════════════════════════════

def _require_matrix(matrix: Any) -> Matrix:
    if not isinstance(matrix, Matrix):
        raise TypeError(f"expected a Matrix, not {type(matrix).__name__}")
    return matrix


class PathReconstructor:
    """Walks predecessor links from the terminal cell back to the origin."""

    __slots__ = ()

    def mark_optimal_path(self, matrix: Matrix) -> list[Cell]:
        """
        Flag every cell of the optimal path and return them, terminal first.

        Flags left over from an earlier call are cleared first, so marking
        the same matrix twice yields the same result.
        """
        _require_matrix(matrix)
        for row in matrix.cells:
            for c in row:
                c.on_optimal_path = False

        path: list[Cell] = []
        current: Optional[Cell] = matrix.terminal
        while current is not None:
            current.on_optimal_path = True
            path.append(current)
            if current.predecessor is None:
                break
            current = matrix.cell(*current.predecessor)

        # The walk always ends at the origin; flag it for the 1x1 case too.
        matrix.origin.on_optimal_path = True
        logger.debug("optimal path has %d cells", len(path))
        return path

    def reconstruct(self, matrix: Matrix) -> list[PathStep]:
        """Optimal path as (row, col, operation) from origin to terminal."""
        cells = self.mark_optimal_path(matrix)
        return [PathStep(c.row, c.col, c.operation) for c in reversed(cells)]


# ═══════════════════════════════════════════════════════════════════
#  FUNCTIONAL API
# ═══════════════════════════════════════════════════════════════════

def compute_distance(a: Sequence, b: Sequence, fold_case: bool = False) -> int:
    """
    Edit distance between ``a`` and ``b`` without keeping the grid.

    Case-sensitive unless ``fold_case`` is set.  Uses two rows of the
    grid, sized by the shorter input.
    """
    s = fold_symbols(_as_symbols(a, "a"), fold_case)
    t = fold_symbols(_as_symbols(b, "b"), fold_case)
    if len(s) < len(t):
        s, t = t, s
    m, n = len(s), len(t)
    if n == 0:
        return m

    prev = list(range(n + 1))
    curr = [0] * (n + 1)

    for i in range(1, m + 1):
        curr[0] = i
        for j in range(1, n + 1):
            cost = 0 if s[i - 1] == t[j - 1] else 1
            curr[j] = min(
                prev[j - 1] + cost,  # substitution
                curr[j - 1] + 1,     # insertion
                prev[j] + 1,         # deletion
            )
        prev, curr = curr, prev

    return prev[n]


def compute_distance_with_trace(
    a: Sequence, b: Sequence, fold_case: bool = False
) -> DistanceTrace:
    """Distance with the full cost grid and operation labels, borders included."""
    matrix = DistanceEngine(fold_case=fold_case).compute(a, b)
    return DistanceTrace(matrix.distance, matrix.values(), matrix.operations())


def reconstruct_path(matrix: Matrix) -> list[PathStep]:
    """One optimal alignment path, origin first."""
    return PathReconstructor().reconstruct(matrix)


def align(matrix: Matrix) -> list[AlignedPair]:
    """
    Render the optimal path as aligned symbol pairs.

    The origin step is omitted, so the result has one entry per column of
    the alignment.  Gaps are ``None``.
    """
    _require_matrix(matrix)
    pairs: list[AlignedPair] = []
    for step in reconstruct_path(matrix):
        op = step.operation
        if op is Operation.INIT:
            continue
        sym_a = matrix.a[step.col - 1] if op is not Operation.DELETION else None
        sym_b = matrix.b[step.row - 1] if op is not Operation.INSERTION else None
        pairs.append(AlignedPair(op, sym_a, sym_b))
    return pairs
