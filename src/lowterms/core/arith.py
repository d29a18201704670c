from __future__ import annotations

from lowterms.core.typing import IntegerLike, as_int


def _positive_pair(a: IntegerLike, b: IntegerLike) -> tuple[int, int]:
    a_int, b_int = as_int(a, "a"), as_int(b, "b")
    if a_int <= 0 or b_int <= 0:
        raise ValueError(f"Operands must be strictly positive, got a={a_int}, b={b_int}")
    return a_int, b_int


def gcd(a: IntegerLike, b: IntegerLike) -> int:
    """
    Greatest common divisor of two positive integers using the Euclidean algorithm.

    The larger operand becomes the dividend. The pair (a, b) is replaced by (b, a mod b)
    until the remainder vanishes, the last non-zero divisor is the result.

    Args:
        a (IntegerLike): first operand, must be > 0
        b (IntegerLike): second operand, must be > 0

    Raises:
        TypeError: if an operand is not an integer
        ValueError: if an operand is zero or negative

    Returns:
        int: largest integer dividing both a and b
    """
    a_int, b_int = _positive_pair(a, b)
    if a_int < b_int:
        a_int, b_int = b_int, a_int

    remainder = a_int % b_int
    while remainder > 0:
        a_int, b_int = b_int, remainder
        remainder = a_int % b_int
    return b_int


def lcm(a: IntegerLike, b: IntegerLike) -> int:
    """
    Least common multiple of two positive integers. Divides before multiplying to keep
    the intermediate value small.

    Args:
        a (IntegerLike): first operand, must be > 0
        b (IntegerLike): second operand, must be > 0

    Returns:
        int: smallest positive integer divisible by both a and b
    """
    a_int, b_int = _positive_pair(a, b)
    return a_int // gcd(a_int, b_int) * b_int
