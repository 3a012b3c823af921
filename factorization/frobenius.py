"""Modulus introspection and the Frobenius substitution x -> x^p."""

from core.errors import InconsistentModulus, NonPrimeModulus, NotFrobeniusImage
from core.field import FieldElement, is_probable_prime
from core.polynomial import Polynomial


def get_prime(polynomial: Polynomial, check_prime: bool = True) -> int:
    """The common modulus p of all coefficients.

    Raises InconsistentModulus if the coefficients are not all elements of
    one Z/pZ, and NonPrimeModulus if p fails the primality test.
    """
    moduli = set()
    for c in polynomial.coeffs:
        if not isinstance(c, FieldElement):
            raise InconsistentModulus(polynomial)
        moduli.add(c.modulus)
    if len(moduli) != 1:
        raise InconsistentModulus(polynomial, moduli)
    p = moduli.pop()
    if check_prime and not is_probable_prime(p):
        raise NonPrimeModulus(p)
    return p


def poly_x_to_xp(polynomial: Polynomial, p: int) -> Polynomial:
    """g(x) -> g(x^p): p - 1 zero coefficients between consecutive ones."""
    if polynomial.is_zero():
        return polynomial
    zero = polynomial.coeffs[0] - polynomial.coeffs[0]
    out = [zero] * (polynomial.degree * p + 1)
    for i, c in enumerate(polynomial.coeffs):
        out[i * p] = c
    return Polynomial(out, polynomial.variable)


def poly_xp_to_x(polynomial: Polynomial, p: int) -> Polynomial:
    """g(x^p) -> g(x).

    Raises NotFrobeniusImage when a nonzero coefficient sits at an exponent
    that is not a multiple of p.
    """
    for i, c in enumerate(polynomial.coeffs):
        if i % p and c:
            raise NotFrobeniusImage(polynomial, p)
    return Polynomial(polynomial.coeffs[::p], polynomial.variable)
