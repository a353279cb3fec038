from math import gcd

from . import binary, classic


class RingZModN:
    def __init__(self, N):
        if N < 2:
            raise ValueError(f"Z/{N} is not a ring with 1 != 0; need N >= 2")
        self.N = N

    def add(self, a, b):
        return (a + b) % self.N

    def sub(self, a, b):
        return (a - b) % self.N

    def mul(self, a, b):
        return (a * b) % self.N

    def is_zero(self, a):
        return a % self.N == 0

    def is_unit(self, a):
        return gcd(a % self.N, self.N) == 1

    def inv(self, a):
        """Inverse of a in Z/N, via the Extended Euclidean Algorithm."""
        r = classic.mod_inv(a, self.N)
        if r is None:
            raise ZeroDivisionError(f"{a} is not invertible in Z/{self.N}")
        return r

    def binary_inv(self, a):
        """
        Inverse of a in Z/N via the binary algorithm.

        The binary algorithm trusts its caller, so the ring checks what it
        needs here: N must be odd and a must be a unit.
        """
        if self.N % 2 == 0:
            raise ValueError(f"Binary inversion needs an odd modulus, got {self.N}")
        a = a % self.N
        if not self.is_unit(a):
            raise ZeroDivisionError(f"{a} is not invertible in Z/{self.N}")
        return binary.mod_inv(a, self.N)

    def div(self, a, b):
        """
        Solves b*x = a in Z/N and returns the smallest non-negative x.

        For a unit b this is a * b^-1. Otherwise a solution exists only when
        g = gcd(b, N) divides a; it is then unique modulo N/g.
        """
        a, b = a % self.N, b % self.N
        if self.is_unit(b):
            return self.mul(a, self.inv(b))

        g = gcd(b, self.N)
        if a % g != 0:
            raise ValueError(f"Exact division {a}/{b} impossible in Z/{self.N}")
        m = self.N // g
        if m == 1:
            return 0
        return ((a // g) * classic.mod_inv(b // g, m)) % m
