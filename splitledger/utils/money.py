"""Integer-cent helpers shared by the calculator, ledger and recorder."""
from decimal import Decimal
from fractions import Fraction
from typing import List, Sequence

from splitledger.core.errors import InvalidInput


def require_positive_cents(value, field: str = "amount_cents") -> int:
    """
    Validate a money amount.

    Rules:
    - must be an int (bool is rejected, floats are never money)
    - must be strictly positive
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidInput(f"{field} must be an integer number of cents", {field: value})
    if value <= 0:
        raise InvalidInput(f"{field} must be positive", {field: value})
    return value


def is_zero(cents: int, tolerance_cents: int) -> bool:
    """A balance below the tolerance counts as settled."""
    return abs(cents) < tolerance_cents


def format_cents(cents: int) -> str:
    """Format integer cents as a signed decimal string, e.g. -1234 -> '-12.34'."""
    sign = "-" if cents < 0 else ""
    whole, frac = divmod(abs(cents), 100)
    return f"{sign}{whole}.{frac:02d}"


def allocate_largest_remainder(amount_cents: int, weights: Sequence[Decimal]) -> List[int]:
    """
    Split amount_cents proportionally to weights.

    Each slot gets floor(amount * w / total); the leftover cents (fewer than
    len(weights)) go one each to the slots with the largest fractional
    remainders, ties broken by position. Arithmetic is exact rational, so
    the result sums to amount_cents for any amount.
    """
    exact_weights = [Fraction(weight) for weight in weights]
    total = sum(exact_weights, Fraction(0))
    floors: List[int] = []
    remainders: List[Fraction] = []
    for weight in exact_weights:
        exact = amount_cents * weight / total
        floor = exact.numerator // exact.denominator
        floors.append(floor)
        remainders.append(exact - floor)

    leftover = amount_cents - sum(floors)
    order = sorted(range(len(weights)), key=lambda i: (-remainders[i], i))
    for i in order[:leftover]:
        floors[i] += 1
    return floors
