"""
Modular inversion by the binary Extended Euclidean Algorithm.

Only shifts, subtractions and parity tests are used, which makes this the
faster choice for odd moduli when division is expensive.

The caller is trusted: ``mod_inv`` does NOT validate its inputs. It requires
n odd and positive, x positive and gcd(x, n) == 1. Outside that set the
result is unspecified, and no exception is raised. Use
``check_preconditions`` (or ``modinverse.classic.mod_inv``, which validates
and handles any x) when the inputs are not known to be good.
"""

from math import gcd
from operator import index


def mod_inv(x: int, n: int) -> int:
    """
    Returns the inverse of x modulo n in [0, n).

    Preconditions (unchecked): n odd, n > 0, x > 0, gcd(x, n) == 1.
    """
    x, n = index(x), index(n)
    a, b, u, v = x, n, 1, 0

    # Loop invariants:
    #   (1) b is odd                 (4) b = v*x (mod n)
    #   (2) u < n and v < n          (5) gcd(a, b) = gcd(x, n) = 1
    #   (3) a = u*x (mod n)          (6) a, b, u, v >= 0
    # Each pass lowers a + b, so a reaches 0, then b = 1 by (5) and v is
    # the inverse by (4).
    while a > 0:
        if a & 1:
            # a and b are both odd. Subtract the smaller from the larger and
            # keep the odd one in b.
            if a >= b:
                a, u = a - b, u - v
            else:
                a, b, u, v = b - a, a, v - u, u
            if u < 0:
                u += n

        # a is even and b is odd, so halving a keeps gcd(a, b). u becomes
        # u * 2^-1 (mod n); n is odd, so u + n is even when u is odd.
        a >>= 1
        if u & 1:
            u += n
        u >>= 1

    return v


def check_preconditions(x: int, n: int) -> bool:
    """True if (x, n) is a valid input for ``mod_inv``."""
    x, n = index(x), index(n)
    return n > 0 and n & 1 == 1 and x > 0 and gcd(x, n) == 1
