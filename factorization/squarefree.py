"""Square-free splitting and the top-level factorise dispatcher.

factorise(f) classifies the monic f once and then takes exactly one branch:

    CONSTANT           no factors
    INSEPARABLE        f' = 0, so f = g(x^p) = g(x)^p; factor g
    HAS_COMMON_FACTOR  d = gcd(f, f') non-constant; factor d and f/d
    SQUARE_FREE        Berlekamp
"""

import logging
from dataclasses import dataclass
from enum import Enum

from core.errors import ZeroPolynomialError
from core.field import FieldElement
from core.polynomial import Polynomial
from factorization.berlekamp import factorise_squarefree
from factorization.factors import FactorList, merge_factors, multiply_factors
from factorization.frobenius import get_prime, poly_xp_to_x

_logger = logging.getLogger(__name__)


class FactorizationCase(Enum):
    CONSTANT = "constant"
    INSEPARABLE = "inseparable"
    HAS_COMMON_FACTOR = "has_common_factor"
    SQUARE_FREE = "square_free"


@dataclass(frozen=True)
class FactorConfig:
    """Checks performed by factorise.

    check_prime: reject composite moduli with NonPrimeModulus.
    verify: multiply the factors back together and compare with the input.
    """
    check_prime: bool = True
    verify: bool = False


def classify(f: Polynomial) -> tuple[FactorizationCase, Polynomial | None]:
    """Which branch of factorise applies to the monic f.

    The second element is gcd(f, f') for HAS_COMMON_FACTOR and None otherwise.
    """
    if f.is_constant():
        return FactorizationCase.CONSTANT, None
    df = f.derivative()
    if df.is_zero():
        return FactorizationCase.INSEPARABLE, None
    d = Polynomial.gcd(f, df)
    if not d.is_constant():
        return FactorizationCase.HAS_COMMON_FACTOR, d
    return FactorizationCase.SQUARE_FREE, None


def factorise(polynomial: Polynomial, config: FactorConfig | None = None) -> FactorList:
    """Monic irreducible factors of `polynomial` over GF(p) with multiplicities.

    The leading coefficient is discarded: multiply_factors of the result is
    polynomial.monic().
    """
    config = config or FactorConfig()
    if polynomial.is_zero():
        raise ZeroPolynomialError()
    p = get_prime(polynomial, check_prime=config.check_prime)
    result = _factorise(polynomial.monic(), p)

    if config.verify:
        product = multiply_factors(result, one=FieldElement.one(p))
        if product != polynomial.monic():
            raise RuntimeError(f"Factorization of {polynomial} does not multiply back: {result}")
    return result


def _factorise(f: Polynomial, p: int) -> FactorList:
    case, d = classify(f)
    _logger.debug("factorise degree %d: %s", f.degree, case.value)

    if case is FactorizationCase.CONSTANT:
        return FactorList()
    if case is FactorizationCase.INSEPARABLE:
        # h(x^p) = h(x)^p over the prime field
        inner = _factorise(poly_xp_to_x(f, p), p)
        return FactorList((h, m * p) for h, m in inner)
    if case is FactorizationCase.HAS_COMMON_FACTOR:
        return merge_factors(_factorise(d, p), _factorise(f // d, p))
    return FactorList((h, 1) for h in factorise_squarefree(f, p))
