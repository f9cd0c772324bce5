import logging
from typing import Any, Callable, ClassVar

from polygraphia.core.exceptions import InvalidInputError, InvalidKeyError
from polygraphia.models.schemas import CipherType, TextMode
from polygraphia.services.arithmetic.modular import ALPHABET_SIZE, are_coprime, gcd, mod_inverse
from polygraphia.services.engines.base import Cipher
from polygraphia.services.engines.registry import EngineRegistry
from polygraphia.services.preprocessing.normalizer import TextNormalizer

logger = logging.getLogger(__name__)


@EngineRegistry.register
class AffineCipher(Cipher):
    """
    Affine cipher.

    The Affine cipher encrypts using the formula: E(x) = (ax + b) mod 26
    where 'a' must be coprime with 26 (valid values: 1, 3, 5, 7, 9, 11, 15, 17, 19, 21, 23, 25).

    Decryption uses: D(y) = a^(-1) * (y - b) mod 26
    where a^(-1) is the modular multiplicative inverse of a mod 26.

    The inverse is recomputed whenever the multiplier changes, so
    ``multiplier * inv_multiplier % 26 == 1`` holds for the lifetime of
    an open instance.
    """

    name = "affine"
    cipher_type = CipherType.AFFINE
    display_name = "Affine Cipher"
    description = (
        "A monoalphabetic substitution cipher using the formula E(x) = (ax + b) mod 26. "
        "Combines multiplicative and additive shifts. "
        "The 'a' value must be coprime with 26."
    )
    key_format = '"a,b" or {"a": 5, "b": 8} where a is the multiplier and b the shift'

    # Valid 'a' values (coprime with 26)
    VALID_MULTIPLIERS: ClassVar[tuple[int, ...]] = (1, 3, 5, 7, 9, 11, 15, 17, 19, 21, 23, 25)

    def __init__(self, shift: int, multiplier: int, mode: TextMode | str | None = None):
        super().__init__(mode)
        self._validate_multiplier(multiplier)
        self._shift = self._normalize(shift, "shift")
        self._multiplier = multiplier % ALPHABET_SIZE
        self._inv_multiplier = mod_inverse(self._multiplier, ALPHABET_SIZE)
        self._normalizer = TextNormalizer()

    @classmethod
    def from_key(
        cls,
        key: int | str | dict[str, Any],
        mode: TextMode | str | None = None,
    ) -> "AffineCipher":
        try:
            if isinstance(key, dict):
                a = int(key.get("a", key.get("multiplier", 1)))
                b = int(key.get("b", key.get("shift", 0)))
            elif isinstance(key, str):
                # "a,b" format
                parts = key.replace(" ", "").split(",")
                if len(parts) != 2:
                    raise ValueError(key)
                a, b = int(parts[0]), int(parts[1])
            else:
                raise TypeError(type(key).__name__)
        except (ValueError, TypeError):
            raise InvalidKeyError(
                f"Invalid Affine key: {key!r}. Expected 'a,b' or {{'a': ..., 'b': ...}}.",
            ) from None
        return cls(b, a, mode)

    @property
    def shift(self) -> int:
        return self._shift

    @property
    def multiplier(self) -> int:
        return self._multiplier

    @property
    def inv_multiplier(self) -> int:
        return self._inv_multiplier

    def set_shift(self, shift: int) -> None:
        self._shift = self._normalize(shift, "shift")

    def set_multiplier(self, multiplier: int) -> None:
        self._validate_multiplier(multiplier)
        self._multiplier = multiplier % ALPHABET_SIZE
        self._inv_multiplier = mod_inverse(self._multiplier, ALPHABET_SIZE)

    def encrypt(self, plaintext: str) -> str:
        """Encrypt using E(x) = (ax + b) mod 26."""
        self._check_text(plaintext, encrypt=True)
        a, b = self._multiplier, self._shift
        return self._process(plaintext, lambda x: a * x + b, "Plaintext")

    def decrypt(self, ciphertext: str) -> str:
        """Decrypt using D(y) = a^(-1) * (y - b) mod 26."""
        self._check_text(ciphertext, encrypt=False)
        a_inv, b = self._inv_multiplier, self._shift
        return self._process(
            ciphertext,
            lambda y: a_inv * ((y - b) % ALPHABET_SIZE),
            "Ciphertext",
        )

    def _process(self, text: str, transform: Callable[[int], int], label: str) -> str:
        result = self._normalizer.substitute(text, self._mode, transform)
        if self._mode == TextMode.ALPHA_ONLY and not result:
            raise InvalidInputError(
                f"{label} must contain at least one alphabetic character",
                {"cipher": self.name},
            )
        return result

    def _zeroize(self) -> None:
        self._shift = 0
        self._multiplier = 0
        self._inv_multiplier = 0

    @classmethod
    def _validate_multiplier(cls, multiplier: int) -> None:
        cls._normalize(multiplier, "multiplier")
        if not are_coprime(multiplier, ALPHABET_SIZE):
            logger.debug("Rejected Affine multiplier %s", multiplier)
            valid = ", ".join(str(a) for a in cls.VALID_MULTIPLIERS)
            raise InvalidKeyError(
                f"Multiplier {multiplier} must be coprime with 26 "
                f"(gcd = {gcd(multiplier, ALPHABET_SIZE)}). Valid values: {valid}",
                {"multiplier": multiplier, "valid": list(cls.VALID_MULTIPLIERS)},
            )

    @staticmethod
    def _normalize(value: int, field: str) -> int:
        if isinstance(value, bool) or not isinstance(value, int):
            raise InvalidKeyError(
                f"Affine {field} must be an integer, got {type(value).__name__}",
                {field: repr(value)},
            )
        return value % ALPHABET_SIZE
