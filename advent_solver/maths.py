"""Greatest common divisor and least common multiple."""


def gcd(a: int, b: int) -> int:
    """Return the greatest common divisor of two non-negative integers."""
    while b:
        a, b = b, a % b
    return a


def lcm(a: int, b: int) -> int:
    """Return the least common multiple of two non-negative integers.

    Raises ZeroDivisionError when both arguments are zero.
    """
    return a * b // gcd(a, b)