"""Factorization of univariate polynomials over prime fields."""

import logging

from factorization.factors import FactorList, merge_factors, multiply_factors
from factorization.frobenius import get_prime, poly_x_to_xp, poly_xp_to_x
from factorization.berlekamp import (berlekamp_matrix, factorise_squarefree,
                                     is_irreducible, pad_coefficients,
                                     splitting_helper)
from factorization.squarefree import (FactorConfig, FactorizationCase, classify,
                                      factorise)

logging.getLogger(__name__).addHandler(logging.NullHandler())
