"""Generic Gaussian elimination: LU decomposition, nullspace, back-substitution."""

import logging

from linalg.rowops import AddMultiple, RowOp, Scale, Transposition
from linalg.pivots import (MinPadicOrder, first_nonzero, height, max_abs,
                           max_height, padic_order)
from linalg.lu import (LUResult, SolverConfig, compute_l, compute_l_inverse,
                       compute_l_p, lu_decomposition)
from linalg.solve import nullspace, solve_upper_triangular

logging.getLogger(__name__).addHandler(logging.NullHandler())
