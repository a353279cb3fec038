from typing import Sequence, Tuple

from .classic import mod_inv


def crt(residues: Sequence[int], moduli: Sequence[int]) -> Tuple[int, int]:
    """
    Chinese Remainder reconstruction for pairwise coprime moduli.

    Returns (x, M) where M is the product of the moduli, 0 <= x < M and
    x = residues[i] (mod moduli[i]) for every i.
    """
    if len(residues) != len(moduli):
        raise ValueError(
            f"Got {len(residues)} residues for {len(moduli)} moduli"
        )
    if not moduli:
        raise ValueError("At least one modulus is required")

    x, M = 0, 1
    for r, m in zip(residues, moduli):
        if m < 2:
            raise ValueError(f"Moduli must be greater than 1, got {m}")
        # Lift x (mod M) to x' (mod M*m) with x' = r (mod m).
        inv = mod_inv(M, m)
        if inv is None:
            raise ValueError(f"Modulus {m} is not coprime to the others")
        t = ((r - x) * inv) % m
        x, M = x + M * t, M * m

    return x, M
