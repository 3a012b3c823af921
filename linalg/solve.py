"""Back-substitution and nullspace extraction on top of lu_decomposition."""

import logging
from typing import Callable

from core.matrix import Matrix
from linalg.lu import lu_decomposition
from linalg.pivots import first_nonzero

_logger = logging.getLogger(__name__)


def solve_upper_triangular(triangular: Matrix, vector: list,
                           step_columns: list[int]) -> list:
    """Solve U' x = vector, where U' is `triangular` restricted to step_columns.

    Row i of U' has its pivot in column step_columns[i], so U' is square upper
    triangular with nonzero diagonal. x[i] is the value of the unknown
    belonging to column step_columns[i].
    """
    r = len(step_columns)
    if len(vector) != r:
        raise ValueError(f"Expected right-hand side of length {r}, got {len(vector)}")
    x = [None] * r
    for i in range(r - 1, -1, -1):
        acc = vector[i]
        for k in range(i + 1, r):
            acc = acc - triangular[i, step_columns[k]] * x[k]
        x[i] = acc / triangular[i, step_columns[i]]
    return x


def nullspace(matrix: Matrix, pivot_selector: Callable = first_nonzero,
              one=None) -> tuple[list[list], int]:
    """Basis of {v : matrix @ v == 0} and the rank of `matrix`.

    There is one basis vector per free column f: it has a one at index f,
    zeros at the other free columns, and the pivot-column entries solved
    from the echelon form. The vectors are therefore linearly independent
    and there are ncols - rank of them.
    """
    nrows, ncols = matrix.dimensions()
    if one is None:
        one = matrix[0, 0] ** 0 if nrows and ncols else 1
    zero = one - one

    lu = lu_decomposition(matrix, normalise_pivot=True, pivot_selector=pivot_selector)
    u, rank = lu.triangular, lu.rank
    if not u.drop_rows_before(rank).is_zero():
        raise RuntimeError(f"Rows below rank {rank} not eliminated")
    top = u.take_rows(rank)

    basis = []
    for f in lu.other_columns:
        rhs = [-top[i, f] for i in range(rank)]
        solved = solve_upper_triangular(top, rhs, lu.step_columns)
        v = [zero] * ncols
        v[f] = one
        for col, value in zip(lu.step_columns, solved):
            v[col] = value
        basis.append(v)
    _logger.debug("nullspace of %dx%d matrix: rank %d, dimension %d",
                  nrows, ncols, rank, len(basis))
    return basis, rank
