from .binary import mod_inv as binary_mod_inv
from .classic import mod_inv
from .crt import crt
from .ring import RingZModN

__all__ = ["RingZModN", "binary_mod_inv", "crt", "mod_inv"]
