"""Generic LU-style Gaussian elimination with recorded row operations."""

import logging
from dataclasses import dataclass, field
from typing import Callable

from core.matrix import Matrix
from linalg.pivots import first_nonzero
from linalg.rowops import AddMultiple, RowOp, Scale, Transposition

_logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SolverConfig:
    """Elimination settings.

    normalise_pivot: scale each pivot to one (needs division). When False the
        pivot row is negated instead, so every pivot step records exactly one
        Scale operation and U differs from the normalised form only by sign.
    pivot_selector: strategy from linalg.pivots.
    """
    normalise_pivot: bool = False
    pivot_selector: Callable = first_nonzero


@dataclass
class LUResult:
    """Outcome of lu_decomposition.

    Applying row_ops in order to the original matrix yields triangular.
    transpositions is the subsequence of row_ops that swaps rows.
    """
    triangular: Matrix
    row_ops: list[RowOp] = field(default_factory=list)
    transpositions: list[Transposition] = field(default_factory=list)
    rank: int = 0
    step_columns: list[int] = field(default_factory=list)
    other_columns: list[int] = field(default_factory=list)


def lu_decomposition(matrix: Matrix, normalise_pivot: bool | None = None,
                     pivot_selector: Callable | None = None,
                     config: SolverConfig | None = None) -> LUResult:
    """Reduce `matrix` to row echelon form.

    Columns are swept left to right. For each column the selector chooses a
    pivot at or below the current row; a column without one becomes a free
    column. Entries below each pivot are cleared with one AddMultiple per
    nonzero entry, using the multiple -entry/pivot.

    Settings come either from `config` or from the normalise_pivot and
    pivot_selector keywords (defaults: no normalisation, first_nonzero).
    Giving both raises ValueError.
    """
    if config is None:
        config = SolverConfig(normalise_pivot=bool(normalise_pivot),
                              pivot_selector=pivot_selector or first_nonzero)
    elif normalise_pivot is not None or pivot_selector is not None:
        raise ValueError("Pass either config or normalise_pivot/pivot_selector, not both")
    normalise_pivot = config.normalise_pivot
    pivot_selector = config.pivot_selector

    u = matrix.copy()
    result = LUResult(triangular=u)
    nrows, ncols = u.dimensions()
    current_row = 0

    def record(op):
        op.apply(u)
        result.row_ops.append(op)

    for j in range(ncols):
        if current_row >= nrows:
            result.other_columns.append(j)
            continue
        offset = pivot_selector(u.sub_column(j, current_row))
        if offset is None:
            result.other_columns.append(j)
            continue
        pivot_row = current_row + offset
        if pivot_row != current_row:
            t = Transposition(current_row, pivot_row)
            result.transpositions.append(t)
            record(t)
        pivot = u[current_row, j]
        if normalise_pivot:
            record(Scale(current_row, 1 / pivot))
        else:
            record(Scale(current_row, -1))
        pivot = u[current_row, j]
        for i in range(current_row + 1, nrows):
            entry = u[i, j]
            if not entry:
                continue
            record(AddMultiple(i, current_row, -entry / pivot))
        _logger.debug("column %d: pivot row %d -> %d", j, pivot_row, current_row)
        result.step_columns.append(j)
        current_row += 1

    result.rank = current_row
    return result


def _product(ops, n: int, one) -> Matrix:
    m = Matrix.identity(n, one)
    for op in ops:
        op.apply(m)
    return m


def compute_l_inverse(result: LUResult, one=1) -> Matrix:
    """The matrix E = E_k ... E_1 of all row operations, so E @ A == U."""
    return _product(result.row_ops, result.triangular.nrows, one)


def compute_l(result: LUResult, one=1) -> Matrix:
    """Inverse of compute_l_inverse, so A == L @ U.

    Replays the inverse operations in reverse order; L is lower triangular
    only when no transpositions occurred.
    """
    return _product([op.inverse() for op in reversed(result.row_ops)],
                    result.triangular.nrows, one)


def compute_l_p(result: LUResult, one=1) -> tuple[Matrix, Matrix]:
    """(L, P) with P a permutation matrix, L lower triangular and L @ U == P @ A.

    Every transposition is moved in front of the other operations. A later
    swap of rows i and j relabels the rows touched by earlier Scale and
    AddMultiple operations, which keeps L lower triangular.
    """
    n = result.triangular.nrows
    moved: list = []
    for op in result.row_ops:
        if isinstance(op, Transposition):
            moved = [_relabel(m, op.i, op.j) for m in moved]
        else:
            moved.append(op)
    p = _product(result.transpositions, n, one)
    l = _product([op.inverse() for op in reversed(moved)], n, one)
    return l, p


def _relabel(op, i: int, j: int):
    swap = {i: j, j: i}
    if isinstance(op, Scale):
        return Scale(swap.get(op.row, op.row), op.factor)
    return AddMultiple(swap.get(op.target, op.target),
                       swap.get(op.source, op.source), op.factor)
