"""Module-wide random source for FieldElement.random and Polynomial.random.

Tests call set_seed so that random polynomials and matrices are the same
on every run. Until a seed is set, draws come from os.urandom.
"""

import os
import random as _random


class DeterministicRNG:
    """Draws integers from a seeded random.Random, or from os.urandom when unseeded."""

    def __init__(self, seed=None):
        self._seed = seed
        self._rng = _random.Random(seed) if seed is not None else None

    def randbelow(self, n: int) -> int:
        """Uniform integer in [0, n)."""
        if self._rng is None:
            return int.from_bytes(os.urandom(16), 'big') % n
        return self._rng.randrange(n)


_global_rng = DeterministicRNG(seed=None)


def set_seed(seed: int | None):
    """Reseed the shared source; None switches back to os.urandom."""
    global _global_rng
    _global_rng = DeterministicRNG(seed=seed)


def randbelow(n: int) -> int:
    return _global_rng.randbelow(n)
