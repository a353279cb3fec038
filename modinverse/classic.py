"""Modular inversion by the classic Extended Euclidean Algorithm."""

from operator import index
from typing import Optional


def mod_inv(x: int, n: int) -> Optional[int]:
    """
    Computes the inverse of x modulo n, i.e. v in [0, n) with v*x = 1 (mod n).

    Works for any integer x and any modulus n >= 2. Returns None when
    gcd(x, n) != 1, since no inverse exists then.

    Raises ValueError if n < 2. That is a caller bug, not a "no inverse"
    outcome, and is never reported as None.
    """
    x, n = index(x), index(n)
    if n < 2:
        raise ValueError("The modulus must be greater than 1")

    # s = x_s*x' + n_s*n and b = x_b*x' + n_b*n, where x' is x reduced
    # into [0, n). n_s and n_b are not needed, so they are not tracked.
    s, x_s, b, x_b = ((x % n) + n) % n, 1, n, 0

    while s > 0:
        q = b // s
        s, x_s, b, x_b = b - q * s, x_b - q * x_s, s, x_s

    # b = gcd(x', n) and |x_b| <= n.
    if b != 1:
        return None
    return x_b + n if x_b < 0 else x_b
