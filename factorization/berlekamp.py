"""Berlekamp's algorithm for square-free polynomials over GF(p).

For square-free monic u of degree n, the polynomials g with
g^p = g (mod u) form a vector space whose dimension is the number of
irreducible factors of u. They are found as the nullspace of Q^T - I,
where Q is the matrix of the Frobenius map on GF(p)[x]/(u). Each such g
splits u via u = prod_s gcd(g - s, u).
"""

import logging

from core.errors import LengthError
from core.field import FieldElement
from core.matrix import Matrix
from core.polynomial import Polynomial
from factorization.frobenius import get_prime
from linalg.solve import nullspace

_logger = logging.getLogger(__name__)


def pad_coefficients(coeffs: list, length: int, fill) -> list:
    """Left-pad a leading-first coefficient list with `fill` up to `length`."""
    if len(coeffs) > length:
        raise LengthError(len(coeffs), length)
    return [fill] * (length - len(coeffs)) + list(coeffs)


def berlekamp_matrix(u: Polynomial, p: int | None = None) -> Matrix:
    """n x n matrix whose row i holds x^(p*k) mod u for k = n - 1 - i.

    Rows are leading-first coefficient vectors, left-padded to length n.
    """
    if p is None:
        p = get_prime(u)
    n = u.degree
    one = FieldElement.one(p)
    zero = FieldElement.zero(p)
    x = Polynomial.monomial(1, one, u.variable)
    xp = x.powmod(p, u)

    powers = [Polynomial([one], u.variable)]
    for _ in range(1, n):
        powers.append((powers[-1] * xp) % u)

    rows = [pad_coefficients(powers[k].coefficients(), n, zero)
            for k in range(n - 1, -1, -1)]
    return Matrix(rows)


def _fixed_space(u: Polynomial, p: int) -> list[list]:
    """Basis of {g : g^p = g mod u} as leading-first coefficient vectors."""
    one = FieldElement.one(p)
    q = berlekamp_matrix(u, p)
    basis, _ = nullspace(q.transpose() - Matrix.identity(u.degree, one), one=one)
    return basis


def splitting_helper(p: int, coeff_vector: list, poly_to_split: Polynomial) -> list[Polynomial]:
    """Split poly_to_split into gcd(g - s, poly_to_split) for s in GF(p).

    g is the polynomial with leading-first coefficients coeff_vector. Only
    non-constant gcds are kept. If g does not separate any factors the input
    is returned unchanged as a one-element list.
    """
    g = Polynomial.from_coefficients(coeff_vector, poly_to_split.variable)
    pieces = []
    found = 0
    for s in range(p):
        d = Polynomial.gcd(g - s, poly_to_split)
        if d.is_constant():
            continue
        pieces.append(d)
        found += d.degree
        if found == poly_to_split.degree:
            break
    if len(pieces) < 2:
        return [poly_to_split]
    return pieces


def factorise_squarefree(u: Polynomial, p: int | None = None) -> list[Polynomial]:
    """Monic irreducible factors of a square-free polynomial u of degree >= 1.

    p is the modulus of the coefficients; it is looked up (and checked for
    primality) with get_prime when not given.
    """
    if p is None:
        p = get_prime(u)
    n = u.degree
    basis = _fixed_space(u, p)
    count = len(basis)
    _logger.debug("Berlekamp: degree %d over GF(%d), %d irreducible factor(s)",
                  n, p, count)
    if count == 1:
        return [u]

    factors = [u]
    for v in basis:
        refined = []
        for w in factors:
            if w.degree <= 1:
                refined.append(w)
            else:
                refined.extend(splitting_helper(p, v, w))
        factors = refined
        if len(factors) == count:
            break
    return [f.monic() for f in factors]


def is_irreducible(u: Polynomial) -> bool:
    """True when u is non-constant, square-free and has a single Berlekamp factor."""
    if u.is_constant():
        return False
    u = u.monic()
    if not Polynomial.gcd(u, u.derivative()).is_constant():
        return False
    return len(_fixed_space(u, get_prime(u))) == 1
