"""Univariate polynomials over a field."""

from core.field import FieldElement


def _trim(coeffs: list) -> list:
    coeffs = list(coeffs)
    while coeffs and not coeffs[-1]:
        coeffs.pop()
    return coeffs


def _value(c):
    return c.value if isinstance(c, FieldElement) else c


class Polynomial:
    """Polynomial over a field. coeffs[0] = constant term.

    Trailing zero coefficients are dropped, so the zero polynomial has an
    empty coefficient list and degree -1.
    """

    def __init__(self, coeffs: list, variable: str = 'x'):
        self.coeffs = _trim(coeffs)
        self.variable = variable

    @classmethod
    def from_coefficients(cls, coeffs, variable: str = 'x') -> 'Polynomial':
        """Build from coefficients listed leading term first."""
        return cls(list(reversed(list(coeffs))), variable)

    @classmethod
    def monomial(cls, k: int, coeff, variable: str = 'x') -> 'Polynomial':
        """coeff * x^k."""
        zero = coeff - coeff
        return cls([zero] * k + [coeff], variable)

    def coefficients(self) -> list:
        """Coefficients listed leading term first."""
        return list(reversed(self.coeffs))

    @property
    def degree(self) -> int:
        return len(self.coeffs) - 1

    def leading_coefficient(self):
        if not self.coeffs:
            raise ZeroDivisionError("The zero polynomial has no leading coefficient")
        return self.coeffs[-1]

    def is_zero(self) -> bool:
        return not self.coeffs

    def is_constant(self) -> bool:
        return self.degree <= 0

    def is_monic(self) -> bool:
        return bool(self.coeffs) and self.coeffs[-1] == 1

    def monic(self) -> 'Polynomial':
        """Divide through by the leading coefficient."""
        inv = 1 / self.leading_coefficient()
        return Polynomial([c * inv for c in self.coeffs], self.variable)

    def derivative(self) -> 'Polynomial':
        return Polynomial([i * c for i, c in enumerate(self.coeffs)][1:], self.variable)

    def evaluate(self, x):
        """Evaluate polynomial at x using Horner's method."""
        result = 0
        for coeff in reversed(self.coeffs):
            result = result * x + coeff
        return result

    def _wrap(self, other):
        if isinstance(other, Polynomial):
            return other
        return Polynomial([other], self.variable)

    def __add__(self, other):
        other = self._wrap(other)
        a, b = self.coeffs, other.coeffs
        if len(a) < len(b):
            a, b = b, a
        out = list(a)
        for i, c in enumerate(b):
            out[i] = out[i] + c
        return Polynomial(out, self.variable)

    __radd__ = __add__

    def __neg__(self):
        return Polynomial([-c for c in self.coeffs], self.variable)

    def __sub__(self, other):
        return self + (-self._wrap(other))

    def __rsub__(self, other):
        return self._wrap(other) - self

    def __mul__(self, other):
        other = self._wrap(other)
        if self.is_zero() or other.is_zero():
            return Polynomial([], self.variable)
        a, b = self.coeffs, other.coeffs
        zero = a[0] - a[0]
        out = [zero] * (len(a) + len(b) - 1)
        for i, x in enumerate(a):
            if not x:
                continue
            for j, y in enumerate(b):
                out[i + j] = out[i + j] + x * y
        return Polynomial(out, self.variable)

    __rmul__ = __mul__

    def __divmod__(self, other):
        other = self._wrap(other)
        lc = other.leading_coefficient()
        inv = 1 / lc
        db = other.degree
        if self.degree < db:
            return Polynomial([], self.variable), self
        rem = list(self.coeffs)
        zero = lc - lc
        quot = [zero] * (self.degree - db + 1)
        for i in range(self.degree - db, -1, -1):
            c = rem[i + db] * inv
            quot[i] = c
            if not c:
                continue
            for j, bj in enumerate(other.coeffs):
                rem[i + j] = rem[i + j] - c * bj
        return Polynomial(quot, self.variable), Polynomial(rem[:db], self.variable)

    def __floordiv__(self, other):
        return divmod(self, other)[0]

    def __mod__(self, other):
        return divmod(self, other)[1]

    def __pow__(self, n: int):
        if n < 0:
            raise ValueError("Negative powers of polynomials are not defined")
        if n == 0:
            if self.is_zero():
                raise ValueError("0^0 is undefined")
            lc = self.leading_coefficient()
            return Polynomial([lc / lc], self.variable)
        result, base = None, self
        while n:
            if n & 1:
                result = base if result is None else result * base
            n >>= 1
            if n:
                base = base * base
        return result

    def powmod(self, n: int, modulus: 'Polynomial') -> 'Polynomial':
        """self^n mod modulus by square and multiply."""
        lc = modulus.leading_coefficient()
        result = Polynomial([lc / lc], self.variable)
        base = self % modulus
        while n:
            if n & 1:
                result = (result * base) % modulus
            n >>= 1
            if n:
                base = (base * base) % modulus
        return result

    @staticmethod
    def gcd(a: 'Polynomial', b: 'Polynomial') -> 'Polynomial':
        """Monic greatest common divisor (Euclid). gcd(0, 0) = 0."""
        while not b.is_zero():
            a, b = b, a % b
        if a.is_zero():
            return a
        return a.monic()

    def __eq__(self, other):
        if isinstance(other, Polynomial):
            return self.variable == other.variable and self.coeffs == other.coeffs
        if isinstance(other, (int, FieldElement)):
            return self.coeffs == _trim([other])
        return NotImplemented

    def __hash__(self):
        return hash((tuple(self.coeffs), self.variable))

    def __str__(self):
        if self.is_zero():
            return "0"
        terms = []
        for k in range(self.degree, -1, -1):
            c = self.coeffs[k]
            if not c:
                continue
            v = _value(c)
            if k == 0:
                terms.append(str(v))
            else:
                mono = self.variable if k == 1 else f"{self.variable}^{k}"
                terms.append(mono if v == 1 else f"{v}*{mono}")
        return " + ".join(terms)

    def __repr__(self):
        return f"Polynomial({self})"

    @staticmethod
    def random(degree: int, modulus: int, monic: bool = False,
               variable: str = 'x') -> 'Polynomial':
        """Random polynomial of exactly the given degree over F_modulus."""
        coeffs = [FieldElement.random(modulus) for _ in range(degree)]
        lead = FieldElement.one(modulus) if monic else FieldElement.random_nonzero(modulus)
        return Polynomial(coeffs + [lead], variable)
