"""End-to-end tests for factorise and the factor list utilities."""

import pytest

from core.errors import InconsistentModulus, NonPrimeModulus, ZeroPolynomialError
from core.field import FieldElement
from core.polynomial import Polynomial
from factorization import (FactorConfig, FactorList, FactorizationCase, classify,
                           factorise, factorise_squarefree, merge_factors,
                           multiply_factors)
from tests.utils import assert_valid_factorisation, poly, random_product


def test_x2_plus_x_over_gf2():
    f = poly(2, 1, 1, 0)
    factors = factorise(f)
    assert factors.as_dict() == {poly(2, 1, 0): 1, poly(2, 1, 1): 1}
    assert multiply_factors(factors) == f

def test_x4_plus_1_over_gf2():
    f = poly(2, 1, 0, 0, 0, 1)
    factors = factorise(f)
    assert factors.as_dict() == {poly(2, 1, 1): 4}
    assert multiply_factors(factors) == f

def test_fermat_over_gf5():
    f = poly(5, 1, 0, 0, 0, -1, 0)
    factors = factorise(f)
    assert factors.as_dict() == {poly(5, 1, -s): 1 for s in range(5)}
    assert multiply_factors(factors) == f

def test_repeated_factors():
    # (x + 1)^3 (x^2 + x + 2)^2 over GF(3)
    f = poly(3, 1, 1) ** 3 * poly(3, 1, 1, 2) ** 2
    factors = factorise(f)
    assert factors.as_dict() == {poly(3, 1, 1): 3, poly(3, 1, 1, 2): 2}

def test_multiplicity_divisible_by_p():
    # (x^2 + 1)^5 (x + 3) over GF(5) mixes an inseparable part with a separable one
    f = poly(5, 1, 0, 1) ** 5 * poly(5, 1, 3)
    factors = factorise(f)
    assert factors.as_dict() == {poly(5, 1, 2): 5, poly(5, 1, 3): 6}
    assert_valid_factorisation(f, factors)

def test_non_monic_input():
    f = poly(7, 3, 0, -3)        # 3(x - 1)(x + 1)
    factors = factorise(f)
    assert factors.as_dict() == {poly(7, 1, -1): 1, poly(7, 1, 1): 1}
    assert multiply_factors(factors) == f.monic()

def test_constant_has_no_factors():
    assert len(factorise(poly(11, 4))) == 0
    assert multiply_factors(factorise(poly(11, 4)), one=FieldElement.one(11)) == poly(11, 1)

def test_zero_polynomial():
    with pytest.raises(ZeroPolynomialError):
        factorise(Polynomial([]))

def test_mixed_moduli():
    with pytest.raises(InconsistentModulus):
        factorise(Polynomial([FieldElement(1, 3), FieldElement(1, 5)]))

def test_composite_modulus():
    with pytest.raises(NonPrimeModulus):
        factorise(poly(4, 1, 1, 1))

def test_composite_modulus_allowed_without_prime_check():
    f = poly(9, 1, 1)
    factors = factorise(f, FactorConfig(check_prime=False))
    assert factors.as_dict() == {f: 1}
    assert factorise_squarefree(f, 9) == [f]
    with pytest.raises(NonPrimeModulus):
        factorise_squarefree(f)

def test_verify_option():
    f = poly(3, 1, 0, 0, 0, 1)
    assert factorise(f, FactorConfig(verify=True)) == factorise(f)

def test_classify():
    assert classify(poly(5, 1))[0] is FactorizationCase.CONSTANT
    assert classify(poly(2, 1, 0, 1))[0] is FactorizationCase.INSEPARABLE
    case, d = classify(poly(3, 1, 1) ** 2 * poly(3, 1, 0))
    assert case is FactorizationCase.HAS_COMMON_FACTOR
    assert d == poly(3, 1, 1)
    assert classify(poly(3, 1, 0, 1)) == (FactorizationCase.SQUARE_FREE, None)

@pytest.mark.parametrize("p,degrees,seed", [
    (2, [1, 1, 2, 3], 1),
    (2, [4, 4, 1], 2),
    (3, [2, 2, 1, 1], 3),
    (3, [3, 3, 3], 4),
    (5, [1, 2, 3], 5),
    (7, [2, 2, 2, 1], 6),
    (7, [5, 1], 7),
    (13, [3, 2, 1], 8),
])
def test_random_products_round_trip(p, degrees, seed):
    f = random_product(p, degrees, seed)
    factors = factorise(f)
    assert_valid_factorisation(f, factors)
    assert factors.degree() == f.degree

def test_factors_are_irreducible_under_berlekamp():
    f = random_product(2, [3, 3, 2, 2, 1], 11)
    for factor, _ in factorise(f):
        assert factorise_squarefree(factor) == [factor]


def test_factor_list_merges_duplicates():
    fl = FactorList([(poly(2, 1, 1), 2), (poly(2, 1, 0), 1), (poly(2, 1, 1), 3)])
    assert len(fl) == 2
    assert fl.multiplicity(poly(2, 1, 1)) == 5
    assert poly(2, 1, 0) in fl
    assert fl.multiplicity(poly(2, 1, 0, 1)) == 0

def test_factor_list_rejects_non_positive():
    with pytest.raises(ValueError):
        FactorList([(poly(2, 1, 1), 0)])

def test_factor_list_order_insensitive():
    a = FactorList([(poly(2, 1, 1), 1), (poly(2, 1, 0), 2)])
    b = FactorList([(poly(2, 1, 0), 2), (poly(2, 1, 1), 1)])
    assert a == b

def test_merge_factors_is_pure():
    a = FactorList([(poly(3, 1, 1), 1), (poly(3, 1, 0), 2)])
    b = FactorList([(poly(3, 1, 1), 4), (poly(3, 1, 2), 1)])
    merged = merge_factors(a, b)
    assert merged.as_dict() == {poly(3, 1, 1): 5, poly(3, 1, 0): 2, poly(3, 1, 2): 1}
    assert a.as_dict() == {poly(3, 1, 1): 1, poly(3, 1, 0): 2}
    assert b.as_dict() == {poly(3, 1, 1): 4, poly(3, 1, 2): 1}

def test_multiply_factors():
    fl = FactorList([(poly(2, 1, 1), 2), (poly(2, 1, 0), 1)])
    assert multiply_factors(fl) == poly(2, 1, 0, 1, 0)
    assert multiply_factors(FactorList(), one=FieldElement.one(2)) == poly(2, 1)

def test_multiply_empty_factors_needs_one():
    with pytest.raises(ValueError):
        multiply_factors(FactorList())
    product = multiply_factors(FactorList(), one=FieldElement.one(5), variable='t')
    assert product == Polynomial([FieldElement.one(5)], 't')
    assert product.variable == 't'
