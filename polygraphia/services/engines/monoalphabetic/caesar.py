from typing import Any

from polygraphia.core.exceptions import InvalidInputError, InvalidKeyError
from polygraphia.models.schemas import CipherType, TextMode
from polygraphia.services.arithmetic.modular import ALPHABET_SIZE
from polygraphia.services.engines.base import Cipher
from polygraphia.services.engines.registry import EngineRegistry
from polygraphia.services.preprocessing.normalizer import TextNormalizer


@EngineRegistry.register
class CaesarCipher(Cipher):
    """
    Caesar cipher.

    Each letter is shifted a fixed number of positions in the alphabet.
    For example, with shift=3: A->D, B->E, ..., Z->C

    Case is preserved. The shift is stored reduced modulo 26, so any
    integer is a valid key.
    """

    name = "caesar"
    cipher_type = CipherType.CAESAR
    display_name = "Caesar Cipher"
    description = (
        "A substitution cipher where each letter is shifted by a fixed number "
        "of positions in the alphabet."
    )
    key_format = 'Integer shift, e.g. 3, "3" or {"shift": 3}'

    def __init__(self, shift: int, mode: TextMode | str | None = None):
        super().__init__(mode)
        self._shift = self._normalize_shift(shift)
        self._normalizer = TextNormalizer()

    @classmethod
    def from_key(
        cls,
        key: int | str | dict[str, Any],
        mode: TextMode | str | None = None,
    ) -> "CaesarCipher":
        if isinstance(key, dict):
            key = key.get("shift", key.get("key"))
        if isinstance(key, str):
            try:
                key = int(key.strip())
            except ValueError:
                raise InvalidKeyError(
                    f"Invalid Caesar key: {key!r}. Expected an integer shift.",
                ) from None
        return cls(key, mode)

    @property
    def shift(self) -> int:
        return self._shift

    def set_shift(self, shift: int) -> None:
        self._shift = self._normalize_shift(shift)

    def encrypt(self, plaintext: str) -> str:
        """Encrypt by shifting each letter forward."""
        self._check_text(plaintext, encrypt=True)
        return self._process(plaintext, self._shift, "Plaintext")

    def decrypt(self, ciphertext: str) -> str:
        """Decrypt by shifting each letter backward."""
        self._check_text(ciphertext, encrypt=False)
        return self._process(ciphertext, -self._shift, "Ciphertext")

    def _process(self, text: str, shift: int, label: str) -> str:
        result = self._normalizer.substitute(text, self._mode, lambda x: x + shift)
        if self._mode == TextMode.ALPHA_ONLY and not result:
            raise InvalidInputError(
                f"{label} must contain at least one alphabetic character",
                {"cipher": self.name},
            )
        return result

    def _zeroize(self) -> None:
        self._shift = 0

    @staticmethod
    def _normalize_shift(shift: int) -> int:
        if isinstance(shift, bool) or not isinstance(shift, int):
            raise InvalidKeyError(
                f"Caesar shift must be an integer, got {type(shift).__name__}",
                {"shift": repr(shift)},
            )
        return shift % ALPHABET_SIZE
