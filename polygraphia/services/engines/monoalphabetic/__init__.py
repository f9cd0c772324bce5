"""Monoalphabetic cipher engines."""

from polygraphia.services.engines.monoalphabetic.caesar import CaesarCipher
from polygraphia.services.engines.monoalphabetic.affine import AffineCipher

__all__ = [
    "CaesarCipher",
    "AffineCipher",
]
