from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, overload

from lowterms.core.arith import gcd, lcm
from lowterms.core.errors import InvalidFraction
from lowterms.core.typing import IntegerLike, as_int, is_integer_like

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Fraction:
    """
    Non-negative rational number that is always stored in lowest terms.

    The constructor divides numerator and denominator by their greatest common divisor,
    so two fractions describing the same number compare and hash equal.

    Args:
        numerator (IntegerLike): non-negative integer
        denominator (IntegerLike, optional): positive integer. Defaults to 1.

    Raises:
        TypeError: if a component is not an integer
        InvalidFraction: if the denominator is zero or a component is negative
    """

    numerator: int
    denominator: int = 1

    def __post_init__(self):
        num = as_int(self.numerator, "numerator")
        denom = as_int(self.denominator, "denominator")
        if denom == 0:
            raise InvalidFraction(f"Denominator must not be zero: {num}/{denom}")
        if num < 0 or denom < 0:
            raise InvalidFraction(f"Negative fractions are not supported: {num}/{denom}")

        # gcd is undefined for a zero operand, zero is always represented as 0/1
        if num == 0:
            reduced_num, reduced_denom = 0, 1
        else:
            common_divisor = gcd(num, denom)
            reduced_num = num // common_divisor
            reduced_denom = denom // common_divisor

        logger.debug("normalized %d/%d to %d/%d", num, denom, reduced_num, reduced_denom)
        object.__setattr__(self, "numerator", reduced_num)
        object.__setattr__(self, "denominator", reduced_denom)

    def __repr__(self) -> str:
        return f"Fraction({self.numerator}, {self.denominator})"

    def __str__(self) -> str:
        return f"{self.numerator}/{self.denominator}"

    def reduced(self) -> Fraction:
        # instances are normalized on construction
        return self

    # Addition
    @overload
    def __add__(self, other: Fraction) -> Fraction: ...

    @overload
    def __add__(self, other: int) -> Fraction: ...

    def __add__(self, other: Any) -> Fraction:
        if isinstance(other, Fraction):
            return add(self, other)
        elif is_integer_like(other):
            return add(self, Fraction(other))
        return NotImplemented

    @overload
    def __radd__(self, other: Fraction) -> Fraction: ...

    @overload
    def __radd__(self, other: int) -> Fraction: ...

    def __radd__(self, other: Any) -> Fraction:
        return self.__add__(other)


def add(a: Fraction | IntegerLike, b: Fraction | IntegerLike) -> Fraction:
    """
    Sum of two fractions over their least common denominator.

    Both numerators are scaled to the common denominator, summed, and the result is
    normalized again. Integers are treated as n/1. The operands are left untouched.

    Args:
        a (Fraction | IntegerLike): first summand
        b (Fraction | IntegerLike): second summand

    Raises:
        TypeError: if an operand is neither a Fraction nor an integer

    Returns:
        Fraction: normalized sum
    """
    if not isinstance(a, Fraction):
        a = Fraction(a)
    if not isinstance(b, Fraction):
        b = Fraction(b)

    common_denom = lcm(a.denominator, b.denominator)
    scaled_a = a.numerator * (common_denom // a.denominator)
    scaled_b = b.numerator * (common_denom // b.denominator)
    logger.debug("adding %s and %s over common denominator %d", a, b, common_denom)
    return Fraction(scaled_a + scaled_b, common_denom)
