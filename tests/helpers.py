import math
import random

# Largest prime below 2**63, the top of the signed 64-bit input range.
INT64_PRIME = 2**63 - 25
INT64_MAX = 2**63 - 1


def brute_force_inverse(x: int, n: int) -> int | None:
    """
    Linear search for the inverse of x modulo n.
    Only for small n in tests.
    """
    for v in range(n):
        if (v * x) % n == 1:
            return v
    return None


def is_inverse(v: int, x: int, n: int) -> bool:
    """v lies in [0, n) and v*x = 1 (mod n)."""
    return 0 <= v < n and (v * x) % n == 1


def random_coprime(n: int, lo: int = 1, hi: int | None = None) -> int:
    """Random x in [lo, hi] with gcd(x, n) == 1."""
    hi = n - 1 if hi is None else hi
    while True:
        x = random.randint(lo, hi)
        if math.gcd(x, n) == 1:
            return x


def random_noncoprime_pair(max_factor: int = 1000) -> tuple[int, int]:
    """
    Random (x, n) with n >= 2 and gcd(x, n) > 1.
    Both are built from a shared factor d >= 2, so no factoring is needed.
    """
    d = random.randint(2, max_factor)
    n = d * random.randint(1, 10**6)
    x = d * random.randint(-(10**6), 10**6)
    return x, n
