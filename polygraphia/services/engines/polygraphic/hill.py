import logging
import math
from typing import Any, ClassVar

from polygraphia.core.config import get_settings
from polygraphia.core.exceptions import InvalidInputError, InvalidKeyError
from polygraphia.models.schemas import CipherType, TextMode
from polygraphia.services.arithmetic.matrix import Matrix
from polygraphia.services.arithmetic.modular import ALPHABET_SIZE
from polygraphia.services.engines.base import Cipher
from polygraphia.services.engines.registry import EngineRegistry
from polygraphia.services.preprocessing.normalizer import TextNormalizer

logger = logging.getLogger(__name__)


@EngineRegistry.register
class HillCipher(Cipher):
    """
    Hill cipher.

    The Hill cipher uses matrix multiplication for encryption.
    Plaintext is divided into vectors of length n, and each vector
    is multiplied by an n x n key matrix modulo 26.

    For a 2x2 matrix:
    [a b]   [p1]   [a*p1 + b*p2]
    [c d] x [p2] = [c*p1 + d*p2] (mod 26)

    The key is a string whose letter count is a perfect square; its
    letters fill the matrix row by row. The key matrix must be
    invertible modulo 26.
    """

    name = "hill"
    cipher_type = CipherType.HILL
    display_name = "Hill Cipher"
    description = (
        "A polygraphic cipher using linear algebra. "
        "Blocks of letters are encrypted by multiplying with a key matrix. "
        "The key matrix must be invertible modulo 26."
    )
    key_format = 'Letters, perfect-square count, e.g. "hill" (2x2) or {"key": "gybnqkurp"}'

    FILLER: ClassVar[str] = "x"

    def __init__(self, key: str, mode: TextMode | str | None = None):
        super().__init__(mode)
        self._normalizer = TextNormalizer()
        self.set_key(key)

    @classmethod
    def from_key(
        cls,
        key: int | str | dict[str, Any],
        mode: TextMode | str | None = None,
    ) -> "HillCipher":
        if isinstance(key, dict):
            key = key.get("key", "")
        if not isinstance(key, str):
            raise InvalidKeyError(f"Hill key must be a string, got {type(key).__name__}")
        return cls(key, mode)

    @property
    def key(self) -> Matrix:
        return self._key

    @property
    def inv_key(self) -> Matrix:
        return self._inv_key

    @property
    def key_size(self) -> int:
        return self._key_size

    def set_key(self, key: str) -> None:
        """
        Replace the key matrix.

        The new key is fully validated before any state changes.

        Raises:
            InvalidKeyError: If the letter count is not a perfect square, the
                matrix is larger than the configured maximum, or it is not
                invertible modulo 26
        """
        key_matrix, inv_key_matrix = self._prepare_key(key)
        self._key = key_matrix
        self._inv_key = inv_key_matrix
        self._key_size = key_matrix.size
        logger.debug("Loaded %dx%d Hill key", self._key_size, self._key_size)

    def _prepare_key(self, key: str) -> tuple[Matrix, Matrix]:
        letters = self._normalizer.letters(key)
        if not letters:
            raise InvalidKeyError("Key must contain at least one letter", {"cipher": self.name})

        size = math.isqrt(len(letters))
        if size * size != len(letters):
            raise InvalidKeyError(
                f"Key length {len(letters)} must be a perfect square (4, 9, 16, 25, ...)",
                {"length": len(letters)},
            )

        # Cofactor expansion grows factorially with the key size
        max_size = get_settings().max_hill_key_size
        if size > max_size:
            raise InvalidKeyError(
                f"Key matrix {size}x{size} exceeds the maximum of {max_size}x{max_size}",
                {"size": size, "max_size": max_size},
            )

        key_matrix = Matrix(size, tuple(self._normalizer.index(c) for c in letters))
        try:
            inv_key_matrix = key_matrix.mod_inverse(ALPHABET_SIZE)
        except InvalidKeyError:
            logger.debug("Rejected non-invertible %dx%d Hill key", size, size)
            raise
        return key_matrix, inv_key_matrix

    def prepare_text(self, text: str) -> str:
        """Keep lowercase letters and pad with x to a multiple of the block size."""
        clean = self._normalizer.letters(text)
        remainder = len(clean) % self._key_size
        if remainder:
            clean += self.FILLER * (self._key_size - remainder)
        return clean

    def encrypt(self, plaintext: str) -> str:
        """Encrypt using the key matrix."""
        self._check_text(plaintext, encrypt=True)
        self._require_letters(plaintext, "Plaintext")
        return self._process_text(plaintext, self._key)

    def decrypt(self, ciphertext: str) -> str:
        """Decrypt using the inverse key matrix."""
        self._check_text(ciphertext, encrypt=False)
        self._require_letters(ciphertext, "Ciphertext")
        return self._process_text(ciphertext, self._inv_key)

    def _require_letters(self, text: str, label: str) -> None:
        if not self._normalizer.has_letters(text):
            raise InvalidInputError(
                f"{label} must contain at least one alphabetic character",
                {"cipher": self.name},
            )

    def _process_text(self, text: str, matrix: Matrix) -> str:
        prepared = self.prepare_text(text)
        n = self._key_size

        result = []
        for i in range(0, len(prepared), n):
            block = [self._normalizer.index(c) for c in prepared[i:i + n]]
            result.extend(
                self._normalizer.letter(value % ALPHABET_SIZE)
                for value in matrix.multiply_vector(block)
            )

        return "".join(result)

    def _zeroize(self) -> None:
        n = self._key_size
        zeros = Matrix(n, (0,) * (n * n))
        self._key = zeros
        self._inv_key = zeros
