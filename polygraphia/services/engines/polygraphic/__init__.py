"""Polygraphic cipher engines."""

from polygraphia.services.engines.polygraphic.playfair import PlayfairCipher
from polygraphia.services.engines.polygraphic.hill import HillCipher

__all__ = [
    "PlayfairCipher",
    "HillCipher",
]
