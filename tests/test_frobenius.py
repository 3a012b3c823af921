"""Tests for modulus checks and the x -> x^p substitution."""

import pytest

from core import rng
from core.errors import InconsistentModulus, NonPrimeModulus, NotFrobeniusImage
from core.field import FieldElement
from core.polynomial import Polynomial
from factorization import get_prime, poly_x_to_xp, poly_xp_to_x
from tests.utils import poly


def test_get_prime():
    assert get_prime(poly(7, 1, 2, 3)) == 7

def test_get_prime_mixed_moduli():
    f = Polynomial([FieldElement(1, 5), FieldElement(1, 7)])
    with pytest.raises(InconsistentModulus) as exc:
        get_prime(f)
    assert exc.value.obj is f
    assert exc.value.moduli == [5, 7]

def test_get_prime_integer_coefficients():
    with pytest.raises(InconsistentModulus):
        get_prime(Polynomial([1, 2, 3]))

def test_get_prime_composite():
    with pytest.raises(NonPrimeModulus):
        get_prime(poly(9, 1, 1))
    assert get_prime(poly(9, 1, 1), check_prime=False) == 9

def test_x_to_xp():
    # x^2 + 2x -> x^6 + 2x^3 over GF(3)
    assert poly_x_to_xp(poly(3, 1, 2, 0), 3) == poly(3, 1, 0, 0, 2, 0, 0, 0)
    assert poly_x_to_xp(poly(5, 1, 1, 1), 5) == poly(5, 1, 0, 0, 0, 0, 1, 0, 0, 0, 0, 1)

def test_x_to_xp_constant_and_zero():
    assert poly_x_to_xp(poly(5, 3), 5) == poly(5, 3)
    assert poly_x_to_xp(Polynomial([]), 5).is_zero()

def test_x_to_xp_is_pth_power():
    # over the prime field g(x^p) = g(x)^p
    g = poly(3, 1, 2, 1, 1)
    assert poly_x_to_xp(g, 3) == g ** 3

def test_xp_to_x():
    assert poly_xp_to_x(poly(2, 1, 0, 0, 0, 1), 2) == poly(2, 1, 0, 1)

def test_xp_to_x_rejects_non_image():
    with pytest.raises(NotFrobeniusImage):
        poly_xp_to_x(poly(2, 1, 0, 1, 1), 2)

@pytest.mark.parametrize("p", [2, 3, 5, 7])
def test_round_trip(p):
    rng.set_seed(p)
    for degree in range(0, 6):
        g = Polynomial.random(degree, p)
        assert poly_xp_to_x(poly_x_to_xp(g, p), p) == g
