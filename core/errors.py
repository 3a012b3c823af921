"""Error types raised by the algebra and factorization code."""


class AlgebraError(ValueError):
    """Base class for malformed algebraic input."""


class InconsistentModulus(AlgebraError):
    """Coefficients or operands do not share a single modulus."""

    def __init__(self, obj, moduli=None):
        self.obj = obj
        self.moduli = sorted(moduli) if moduli else []
        detail = f" (moduli {self.moduli})" if self.moduli else ""
        super().__init__(f"Inconsistent modulus in {obj!r}{detail}")


class LengthError(AlgebraError):
    """A sequence is longer than the length it must be padded to."""

    def __init__(self, length: int, required: int):
        self.length = length
        self.required = required
        super().__init__(
            f"Cannot pad sequence of length {length} to shorter length {required}")


class NonPrimeModulus(AlgebraError):
    """Z/nZ with composite n is not a field."""

    def __init__(self, modulus: int):
        self.modulus = modulus
        super().__init__(f"Modulus {modulus} is not prime")


class NotFrobeniusImage(AlgebraError):
    """Polynomial is not of the form g(x^p)."""

    def __init__(self, polynomial, p: int):
        self.polynomial = polynomial
        self.p = p
        super().__init__(
            f"{polynomial!r} has a nonzero coefficient at an exponent not divisible by {p}")


class ZeroPolynomialError(AlgebraError):
    """The zero polynomial has no factorization."""

    def __init__(self):
        super().__init__("Cannot factorise the zero polynomial")
