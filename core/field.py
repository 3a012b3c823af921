"""Finite field arithmetic over F_p for an arbitrary modulus p."""

from core import rng
from core.errors import InconsistentModulus

# Witnesses making Miller-Rabin exact for n < 3.3 * 10^24.
_MR_WITNESSES = (2, 3, 5, 7, 11, 13, 17, 19, 23, 29, 31, 37, 41)


def is_probable_prime(n: int) -> bool:
    """Miller-Rabin primality test.

    Deterministic below 3.3 * 10^24, probabilistic (with the same fixed
    witnesses) above that.
    """
    if n < 2:
        return False
    for q in _MR_WITNESSES:
        if n % q == 0:
            return n == q
    d, s = n - 1, 0
    while d % 2 == 0:
        d //= 2
        s += 1
    for a in _MR_WITNESSES:
        x = pow(a, d, n)
        if x == 1 or x == n - 1:
            continue
        for _ in range(s - 1):
            x = x * x % n
            if x == n - 1:
                break
        else:
            return False
    return True


class FieldElement:
    """Element of Z/pZ. Arithmetic is only meaningful as a field when p is prime."""

    __slots__ = ('value', 'modulus')

    def __init__(self, value: int, modulus: int):
        if modulus < 2:
            raise ValueError(f"Modulus must be at least 2, got {modulus}")
        self.modulus = modulus
        self.value = value % modulus

    def _coerce(self, other):
        if isinstance(other, int):
            return FieldElement(other, self.modulus)
        if isinstance(other, FieldElement):
            if other.modulus != self.modulus:
                raise InconsistentModulus((self, other), {self.modulus, other.modulus})
            return other
        return None

    def __add__(self, other):
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return FieldElement(self.value + other.value, self.modulus)

    def __radd__(self, other):
        if isinstance(other, int):
            return FieldElement(other + self.value, self.modulus)
        return NotImplemented

    def __sub__(self, other):
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return FieldElement(self.value - other.value, self.modulus)

    def __rsub__(self, other):
        if isinstance(other, int):
            return FieldElement(other - self.value, self.modulus)
        return NotImplemented

    def __mul__(self, other):
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return FieldElement(self.value * other.value, self.modulus)

    def __rmul__(self, other):
        if isinstance(other, int):
            return FieldElement(other * self.value, self.modulus)
        return NotImplemented

    def __truediv__(self, other):
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return self * other.inverse()

    def __rtruediv__(self, other):
        if isinstance(other, int):
            return FieldElement(other, self.modulus) * self.inverse()
        return NotImplemented

    def __neg__(self):
        return FieldElement(-self.value, self.modulus)

    def __pow__(self, exp):
        if isinstance(exp, FieldElement):
            exp = exp.value
        if exp < 0:
            return self.inverse() ** (-exp)
        return FieldElement(pow(self.value, exp, self.modulus), self.modulus)

    def __eq__(self, other):
        if isinstance(other, int):
            return self.value == (other % self.modulus)
        if isinstance(other, FieldElement):
            return self.modulus == other.modulus and self.value == other.value
        return NotImplemented

    def __hash__(self):
        return hash((self.value, self.modulus))

    def __repr__(self):
        return f"F{self.modulus}({self.value})"

    def __bool__(self):
        return self.value != 0

    def inverse(self):
        """Multiplicative inverse; raises ZeroDivisionError for zero or a non-unit."""
        if self.value == 0:
            raise ZeroDivisionError("Cannot invert zero")
        try:
            return FieldElement(pow(self.value, -1, self.modulus), self.modulus)
        except ValueError:
            raise ZeroDivisionError(
                f"{self.value} is not invertible modulo {self.modulus}") from None

    def gcd(self, other):
        """Every nonzero element of a field is a unit, so the gcd is trivial."""
        other = self._coerce(other)
        if not self and not other:
            return self.zero(self.modulus)
        return self.one(self.modulus)

    def is_zero(self) -> bool:
        return self.value == 0

    def is_one(self) -> bool:
        return self.value == 1

    def to_int(self):
        return self.value

    @staticmethod
    def random(modulus: int):
        """Return a random field element (may be zero)."""
        return FieldElement(rng.randbelow(modulus), modulus)

    @staticmethod
    def random_nonzero(modulus: int):
        return FieldElement(rng.randbelow(modulus - 1) + 1, modulus)

    @staticmethod
    def zero(modulus: int):
        return FieldElement(0, modulus)

    @staticmethod
    def one(modulus: int):
        return FieldElement(1, modulus)


def element_of(value: int, modulus: int) -> FieldElement:
    return FieldElement(value, modulus)
