"""Polynomial factorization over GF(p) — Entry Point.

Usage:
    python main.py                  run the demonstration scenarios
    python main.py P C_n ... C_0    factor C_n x^n + ... + C_0 over GF(P)
    add -v for debug logging of the recursion and the linear algebra
"""

import logging
import sys
import time

from core.errors import AlgebraError
from core.field import FieldElement
from core.polynomial import Polynomial
from factorization import FactorConfig, factorise, is_irreducible, multiply_factors


def make_polynomial(p: int, coeffs: list[int]) -> Polynomial:
    """Polynomial over GF(p) from integer coefficients, leading term first."""
    return Polynomial.from_coefficients([FieldElement(c, p) for c in coeffs])


def run_factorisation(p: int, coeffs: list[int]):
    """Factor one polynomial and print the factors and a round-trip check."""
    poly = make_polynomial(p, coeffs)
    print(f"=== Factor over GF({p}) ===")
    print(f"f = {poly}")
    print()

    start = time.time()
    factors = factorise(poly, FactorConfig(verify=True))
    elapsed = time.time() - start

    print("--- Factors ---")
    if not len(factors):
        print("  (constant: no factors)")
    for factor, mult in sorted(factors, key=lambda fm: (fm[0].degree, str(fm[0]))):
        status = "irreducible" if is_irreducible(factor) else "REDUCIBLE"
        print(f"  ({factor})^{mult}    [{status}]")

    product = multiply_factors(factors, one=FieldElement.one(p))
    print(f"\n  Product: {product}")
    print(f"  Matches monic input: {product == poly.monic()}")
    print(f"  Time: {elapsed:.3f}s")
    print()
    return factors


def main(argv: list[str]) -> int:
    verbose = "-v" in argv
    args = [a for a in argv if a != "-v"]
    logging.basicConfig(level=logging.DEBUG if verbose else logging.WARNING,
                        format="%(name)s: %(message)s")

    if args:
        try:
            p, *coeffs = [int(a) for a in args]
        except ValueError:
            print(__doc__)
            return 2
        if not coeffs:
            print(__doc__)
            return 2
        try:
            run_factorisation(p, coeffs)
        except AlgebraError as exc:
            print(f"error: {exc}")
            return 1
        return 0

    print("=" * 50)
    print("SCENARIO 1: x^2 + x over GF(2)")
    print("=" * 50)
    run_factorisation(2, [1, 1, 0])

    print("=" * 50)
    print("SCENARIO 2: x^4 + 1 over GF(2) (inseparable)")
    print("=" * 50)
    run_factorisation(2, [1, 0, 0, 0, 1])

    print("=" * 50)
    print("SCENARIO 3: x^5 - x over GF(5)")
    print("=" * 50)
    run_factorisation(5, [1, 0, 0, 0, -1, 0])

    print("=" * 50)
    print("SCENARIO 4: x^8 + x^6 + x^4 + x^3 + 1 over GF(13)")
    print("=" * 50)
    run_factorisation(13, [1, 0, 1, 0, 1, 1, 0, 0, 1])
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))
