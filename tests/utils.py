from lowterms import gcd


def brute_force_gcd(a: int, b: int) -> int:
    return max(d for d in range(1, min(a, b) + 1) if a % d == 0 and b % d == 0)


def is_lowest_terms(num: int, denom: int) -> bool:
    if num == 0:
        return denom == 1
    return gcd(num, denom) == 1
