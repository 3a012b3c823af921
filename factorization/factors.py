"""Factor lists: irreducible factors paired with their multiplicities."""

from core.polynomial import Polynomial


class FactorList:
    """Immutable collection of (factor, multiplicity) pairs.

    Factors are distinct under polynomial equality and every multiplicity
    is positive. Order carries no meaning: two lists are equal when they
    hold the same pairs.
    """

    __slots__ = ('_pairs',)

    def __init__(self, pairs=()):
        merged: dict[Polynomial, int] = {}
        for factor, mult in pairs:
            if mult <= 0:
                raise ValueError(f"Multiplicity must be positive, got {mult} for {factor}")
            merged[factor] = merged.get(factor, 0) + mult
        self._pairs = tuple(merged.items())

    def __iter__(self):
        return iter(self._pairs)

    def __len__(self):
        return len(self._pairs)

    def __contains__(self, factor):
        return any(f == factor for f, _ in self._pairs)

    def multiplicity(self, factor) -> int:
        for f, m in self._pairs:
            if f == factor:
                return m
        return 0

    def factors(self) -> list[Polynomial]:
        return [f for f, _ in self._pairs]

    def as_dict(self) -> dict[Polynomial, int]:
        return dict(self._pairs)

    def degree(self) -> int:
        """Degree of the product of all factors."""
        return sum(f.degree * m for f, m in self._pairs)

    def map_factors(self, fn) -> 'FactorList':
        """Apply fn to every factor, keeping multiplicities."""
        return FactorList((fn(f), m) for f, m in self._pairs)

    def __eq__(self, other):
        if not isinstance(other, FactorList):
            return NotImplemented
        return self.as_dict() == other.as_dict()

    def __hash__(self):
        return hash(frozenset(self._pairs))

    def __repr__(self):
        inner = ", ".join(f"({f}): {m}" for f, m in self._pairs)
        return f"FactorList({{{inner}}})"


def merge_factors(a: FactorList, b: FactorList) -> FactorList:
    """Union of two factor lists; multiplicities of shared factors are summed.

    Neither argument is modified.
    """
    return FactorList(list(a) + list(b))


def multiply_factors(factors: FactorList, one=None, variable: str = 'x') -> Polynomial:
    """Product of factor^multiplicity over the list.

    Inverse of factorise up to the leading coefficient. The empty list
    multiplies to the constant polynomial `one` in `variable`; it carries no
    field of its own, so `one` (e.g. FieldElement.one(p)) is required then.
    """
    result = None
    for factor, mult in factors:
        term = factor ** mult
        result = term if result is None else result * term
    if result is None:
        if one is None:
            raise ValueError("multiply_factors of an empty list needs the field's one")
        return Polynomial([one], variable)
    return result
