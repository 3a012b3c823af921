"""Pivot selection strategies.

A strategy receives the entries of the current column at and below the
current row and returns the offset of the chosen pivot within that slice,
or None when every entry is zero (the column is then a free column).
"""

from fractions import Fraction


def first_nonzero(entries: list):
    """First nonzero entry. Default for rings without a natural ordering."""
    for k, x in enumerate(entries):
        if x:
            return k
    return None


def _argmax(entries: list, key):
    best, best_key = None, None
    for k, x in enumerate(entries):
        if not x:
            continue
        kx = key(x)
        if best is None or kx > best_key:
            best, best_key = k, kx
    return best


def max_abs(entries: list):
    """Largest absolute value (partial pivoting for floating point)."""
    return _argmax(entries, abs)


def height(x) -> int:
    """max(|numerator|, |denominator|) of a rational."""
    x = Fraction(x)
    return max(abs(x.numerator), abs(x.denominator))


def max_height(entries: list):
    """Largest height, to bound coefficient growth over the rationals."""
    return _argmax(entries, height)


def padic_order(x, p: int) -> int:
    """p-adic valuation of a nonzero integer or rational."""
    x = Fraction(x)
    if not x:
        raise ValueError("Zero has infinite p-adic order")
    num, den = x.numerator, x.denominator
    v = 0
    while num % p == 0:
        num //= p
        v += 1
    while den % p == 0:
        den //= p
        v -= 1
    return v


class MinPadicOrder:
    """Smallest p-adic order: the pivot that is most nearly a p-adic unit."""

    def __init__(self, p: int):
        self.p = p

    def __call__(self, entries: list):
        return _argmax(entries, lambda x: -padic_order(x, self.p))

    def __repr__(self):
        return f"MinPadicOrder({self.p})"
