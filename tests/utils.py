"""Test utilities: polynomial and matrix builders, reference checks."""

from fractions import Fraction

from core import rng
from core.field import FieldElement
from core.matrix import Matrix
from core.polynomial import Polynomial
from factorization import is_irreducible, multiply_factors


def poly(p, *coeffs):
    """Polynomial over GF(p), integer coefficients leading term first."""
    return Polynomial.from_coefficients([FieldElement(c, p) for c in coeffs])


def gf_matrix(p, rows):
    return Matrix([[FieldElement(x, p) for x in r] for r in rows])


def fraction_matrix(rows):
    return Matrix([[Fraction(x) for x in r] for r in rows])


def random_gf_matrix(p, nrows, ncols):
    return Matrix([[FieldElement.random(p) for _ in range(ncols)]
                   for _ in range(nrows)])


def random_product(p, degrees, seed):
    """Product of random monic polynomials of the given degrees over GF(p)."""
    rng.set_seed(seed)
    result = Polynomial([FieldElement.one(p)])
    for d in degrees:
        result = result * Polynomial.random(d, p, monic=True)
    return result


def is_zero_vector(v):
    return all(not x for x in v)


def assert_valid_factorisation(f, factors):
    """Factors are monic, irreducible and multiply back to monic f."""
    p = f.coeffs[0].modulus
    for factor, mult in factors:
        assert mult > 0
        assert factor.is_monic(), f"{factor} is not monic"
        assert is_irreducible(factor), f"{factor} is reducible"
    assert multiply_factors(factors, one=FieldElement.one(p)) == f.monic()
