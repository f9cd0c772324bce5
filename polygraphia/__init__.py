"""Classical cipher library: Caesar, Affine, Playfair and Hill."""

from polygraphia.core.exceptions import (
    DecryptionError,
    EncryptionError,
    EngineNotFoundError,
    InvalidInputError,
    InvalidKeyError,
    PolygraphiaError,
)
from polygraphia.models.schemas import CipherType, TextMode
from polygraphia.services.arithmetic import Matrix, are_coprime, gcd, mod_inverse
from polygraphia.services.engines.base import Cipher
from polygraphia.services.engines.registry import EngineRegistry
from polygraphia.services.engines.monoalphabetic import AffineCipher, CaesarCipher
from polygraphia.services.engines.polygraphic import HillCipher, PlayfairCipher

__version__ = "0.1.0"

__all__ = [
    "AffineCipher",
    "CaesarCipher",
    "Cipher",
    "CipherType",
    "DecryptionError",
    "EncryptionError",
    "EngineNotFoundError",
    "EngineRegistry",
    "HillCipher",
    "InvalidInputError",
    "InvalidKeyError",
    "Matrix",
    "PlayfairCipher",
    "PolygraphiaError",
    "TextMode",
    "are_coprime",
    "gcd",
    "mod_inverse",
]
