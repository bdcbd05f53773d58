# ----- interpolator.py -----
from fractions import Fraction
from typing import NamedTuple
from recovery.config import Config
from recovery.errors import EmptyInput, DuplicateCoordinate, InexactDivision
from recovery.reporting import log, warn


class LagrangeTerm(NamedTuple):
    x: int
    y: int
    numerator: int
    denominator: int

    @property
    def value(self):
        return Fraction(self.y * self.numerator, self.denominator)


def lagrange_terms(points):
    """
    Yield the Lagrange contribution of each point to the polynomial's value at x = 0.

    For pivot j the basis weight is prod(-x_i) / prod(x_j - x_i) over i != j,
    both products kept as exact integers.
    """
    for j, (x_j, y_j) in enumerate(points):
        numerator = 1
        denominator = 1
        for i, (x_i, _) in enumerate(points):
            if i != j:
                numerator *= -x_i
                denominator *= x_j - x_i

        if denominator == 0:
            raise DuplicateCoordinate(x_j)

        yield LagrangeTerm(x_j, y_j, numerator, denominator)


def interpolate_at_zero(points, strict=None) -> int:
    """
    Recover the constant term of the polynomial through the given points.

    Terms are summed as exact fractions and divided once at the end, since a
    single term need not be integral even when the sum is. A fractional sum
    means the points do not share one integer polynomial: the value truncated
    toward zero is returned with a warning unless strict is set.
    """
    if not points:
        raise EmptyInput()
    if strict is None:
        strict = Config.STRICT_DIVISION

    total = sum((t.value for t in lagrange_terms(points)), Fraction(0))

    if total.denominator != 1:
        if strict:
            raise InexactDivision(total)
        warn("Interpolator", f"Interpolated value {total} is not an integer; truncating toward zero")

    log("Interpolator", f"Interpolated {len(points)} points at x = 0")
    return int(total)
