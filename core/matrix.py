"""Dense matrices over an arbitrary ring. Vectors are plain lists."""


class Matrix:
    """Rectangular array of ring elements, stored row-major.

    m[i, j] reads and writes a single entry; all other operations return
    new matrices.
    """

    def __init__(self, rows: list[list]):
        self.rows = [list(r) for r in rows]
        self.nrows = len(self.rows)
        self.ncols = len(self.rows[0]) if self.rows else 0
        for r in self.rows:
            if len(r) != self.ncols:
                raise ValueError("All rows must have the same length")

    @staticmethod
    def zeros(nrows: int, ncols: int, zero=0) -> 'Matrix':
        m = Matrix([])
        m.rows = [[zero] * ncols for _ in range(nrows)]
        m.nrows, m.ncols = nrows, ncols
        return m

    @staticmethod
    def identity(n: int, one=1) -> 'Matrix':
        zero = one - one
        return Matrix([[one if i == j else zero for j in range(n)] for i in range(n)])

    def dimensions(self) -> tuple[int, int]:
        return self.nrows, self.ncols

    def __getitem__(self, idx):
        i, j = idx
        return self.rows[i][j]

    def __setitem__(self, idx, value):
        i, j = idx
        self.rows[i][j] = value

    def row(self, i: int) -> list:
        return list(self.rows[i])

    def column(self, j: int) -> list:
        return [r[j] for r in self.rows]

    def sub_column(self, j: int, start: int = 0) -> list:
        """Entries of column j from row `start` downwards."""
        return [r[j] for r in self.rows[start:]]

    def drop_rows_before(self, k: int) -> 'Matrix':
        """Keep rows k, k+1, ...; the number of columns is preserved."""
        m = Matrix(self.rows[k:])
        m.ncols = self.ncols
        return m

    def take_rows(self, k: int) -> 'Matrix':
        """Keep rows 0..k-1."""
        m = Matrix(self.rows[:k])
        m.ncols = self.ncols
        return m

    def transpose(self) -> 'Matrix':
        if not self.nrows:
            return Matrix.zeros(self.ncols, 0)
        return Matrix([list(col) for col in zip(*self.rows)])

    def copy(self) -> 'Matrix':
        return Matrix(self.rows) if self.rows else Matrix.zeros(0, self.ncols)

    def swap_rows(self, i: int, j: int):
        self.rows[i], self.rows[j] = self.rows[j], self.rows[i]

    def is_zero(self) -> bool:
        return all(not x for r in self.rows for x in r)

    def __add__(self, other: 'Matrix') -> 'Matrix':
        self._check_same_shape(other)
        return Matrix([[a + b for a, b in zip(r, s)]
                       for r, s in zip(self.rows, other.rows)])

    def __sub__(self, other: 'Matrix') -> 'Matrix':
        self._check_same_shape(other)
        return Matrix([[a - b for a, b in zip(r, s)]
                       for r, s in zip(self.rows, other.rows)])

    def __matmul__(self, other):
        if isinstance(other, Matrix):
            if self.ncols != other.nrows:
                raise ValueError(f"Cannot multiply {self.dimensions()} by {other.dimensions()}")
            cols = [other.column(j) for j in range(other.ncols)]
            return Matrix([[_dot(r, c) for c in cols] for r in self.rows])
        if len(other) != self.ncols:
            raise ValueError(f"Cannot multiply {self.dimensions()} by vector of length {len(other)}")
        return [_dot(r, other) for r in self.rows]

    def __eq__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.dimensions() == other.dimensions() and self.rows == other.rows

    def __repr__(self):
        return f"Matrix({self.rows!r})"

    def _check_same_shape(self, other):
        if self.dimensions() != other.dimensions():
            raise ValueError(f"Shape mismatch: {self.dimensions()} vs {other.dimensions()}")


def _dot(a: list, b: list):
    if not a:
        return 0
    total = a[0] * b[0]
    for x, y in zip(a[1:], b[1:]):
        total = total + x * y
    return total
