"""Core primitives: field arithmetic, polynomials, matrices, deterministic RNG."""

from core.errors import (AlgebraError, InconsistentModulus, LengthError,
                         NonPrimeModulus, NotFrobeniusImage, ZeroPolynomialError)
from core.field import FieldElement, element_of, is_probable_prime
from core.polynomial import Polynomial
from core.matrix import Matrix
from core import rng
