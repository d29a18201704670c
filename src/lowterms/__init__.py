from lowterms.core.arith import gcd, lcm
from lowterms.core.errors import InvalidFraction
from lowterms.core.fraction import Fraction, add
from lowterms.core.typing import IntegerLike

__all__ = [
    "Fraction",
    "InvalidFraction",
    "IntegerLike",
    "add",
    "gcd",
    "lcm",
]
