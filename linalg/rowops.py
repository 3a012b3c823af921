"""Elementary row operations recorded during Gaussian elimination.

Each operation can be applied to a matrix in place, inverted without looking
at the matrix again, and materialized as the n x n elementary matrix E with
E @ A == op applied to A.
"""

from dataclasses import dataclass

from core.matrix import Matrix


@dataclass(frozen=True)
class Transposition:
    """Swap rows i and j."""
    i: int
    j: int

    def apply(self, m: Matrix):
        m.swap_rows(self.i, self.j)

    def inverse(self) -> 'Transposition':
        return self

    def as_matrix(self, n: int, one=1) -> Matrix:
        e = Matrix.identity(n, one)
        e.swap_rows(self.i, self.j)
        return e


@dataclass(frozen=True)
class Scale:
    """Multiply row `row` by a unit `factor`."""
    row: int
    factor: object

    def apply(self, m: Matrix):
        m.rows[self.row] = [self.factor * x for x in m.rows[self.row]]

    def inverse(self) -> 'Scale':
        if self.factor == -1 or self.factor == 1:
            return self
        return Scale(self.row, 1 / self.factor)

    def as_matrix(self, n: int, one=1) -> Matrix:
        e = Matrix.identity(n, one)
        e[self.row, self.row] = self.factor * one
        return e


@dataclass(frozen=True)
class AddMultiple:
    """Add `factor` times row `source` to row `target`."""
    target: int
    source: int
    factor: object

    def apply(self, m: Matrix):
        src = m.rows[self.source]
        m.rows[self.target] = [t + self.factor * s
                               for t, s in zip(m.rows[self.target], src)]

    def inverse(self) -> 'AddMultiple':
        return AddMultiple(self.target, self.source, -self.factor)

    def as_matrix(self, n: int, one=1) -> Matrix:
        e = Matrix.identity(n, one)
        e[self.target, self.source] = self.factor * one
        return e


RowOp = Transposition | Scale | AddMultiple
