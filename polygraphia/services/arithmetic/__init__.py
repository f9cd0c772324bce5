"""Modular arithmetic and the integer matrix engine."""

from polygraphia.services.arithmetic.matrix import Matrix
from polygraphia.services.arithmetic.modular import ALPHABET_SIZE, are_coprime, gcd, mod_inverse

__all__ = [
    "ALPHABET_SIZE",
    "Matrix",
    "are_coprime",
    "gcd",
    "mod_inverse",
]
