import logging
from typing import Any, ClassVar

from polygraphia.core.exceptions import InvalidInputError, InvalidKeyError
from polygraphia.models.schemas import CipherType, TextMode
from polygraphia.services.engines.base import Cipher
from polygraphia.services.engines.registry import EngineRegistry
from polygraphia.services.preprocessing.normalizer import TextNormalizer

logger = logging.getLogger(__name__)


@EngineRegistry.register
class PlayfairCipher(Cipher):
    """
    Playfair cipher.

    The Playfair cipher encrypts digraphs (pairs of letters) using a 5x5 key square.
    The alphabet is reduced to 25 letters (I and J are combined).

    Rules for encryption:
    1. Same row: replace each letter with the one to its right
    2. Same column: replace each letter with the one below
    3. Rectangle: swap corners horizontally

    Double letters are separated by an 'x' (e.g., "balloon" -> "ba lx lo ox on").

    Output is always lowercase letters. The text mode is kept for a
    uniform interface but does not change how text is prepared.
    """

    name = "playfair"
    cipher_type = CipherType.PLAYFAIR
    display_name = "Playfair Cipher"
    description = (
        "A digraph substitution cipher using a 5x5 key square. "
        "Pairs of letters are encrypted together based on their positions "
        "in the square. I and J are treated as the same letter."
    )
    key_format = 'Keyword, e.g. "monarchy" or {"key": "monarchy"}'

    ALPHABET: ClassVar[str] = "abcdefghiklmnopqrstuvwxyz"  # 25 letters, i=j
    SIZE: ClassVar[int] = 5
    FILLER: ClassVar[str] = "x"

    def __init__(self, key: str, mode: TextMode | str | None = None):
        super().__init__(mode)
        self._key = ""
        self._square: tuple[tuple[str, ...], ...] = ()
        self._positions: dict[str, tuple[int, int]] = {}
        self.set_key(key)

    @classmethod
    def from_key(
        cls,
        key: int | str | dict[str, Any],
        mode: TextMode | str | None = None,
    ) -> "PlayfairCipher":
        if isinstance(key, dict):
            key = key.get("key", key.get("keyword", ""))
        if not isinstance(key, str):
            raise InvalidKeyError(f"Playfair key must be a string, got {type(key).__name__}")
        return cls(key, mode)

    @property
    def key(self) -> str:
        """The 25-letter keyword that fills the square row by row."""
        return self._key

    @property
    def square(self) -> list[list[str]]:
        return [list(row) for row in self._square]

    def set_key(self, key: str) -> None:
        """
        Replace the keyword and rebuild the key square.

        Raises:
            InvalidKeyError: If the key is empty or contains no letters
        """
        if not key or not TextNormalizer().has_letters(key):
            raise InvalidKeyError(
                "Key cannot be empty",
                {"cipher": self.name},
            )

        prepared = self.prepare_key(key)
        self._key = prepared
        self._square = tuple(
            tuple(prepared[row * self.SIZE:(row + 1) * self.SIZE])
            for row in range(self.SIZE)
        )
        self._positions = {
            char: divmod(i, self.SIZE) for i, char in enumerate(prepared)
        }
        logger.debug("Built Playfair key square")

    @classmethod
    def prepare_key(cls, key: str) -> str:
        """
        Derive the 25-letter square keyword.

        Letters of the key come first (lowercased, j folded into i, first
        occurrence kept), followed by the unused letters of the reduced
        alphabet in order.
        """
        seen: list[str] = []
        for char in TextNormalizer().letters(key, fold_j=True):
            if char not in seen:
                seen.append(char)

        for char in cls.ALPHABET:
            if char not in seen:
                seen.append(char)

        return "".join(seen)

    @classmethod
    def prepare_text(cls, text: str) -> str:
        """
        Prepare text for digraph processing.

        - Keep letters only, lowercase
        - Replace j with i
        - Insert x between every pair of adjacent identical letters
        - Append x if the result has odd length
        """
        filtered = TextNormalizer().letters(text, fold_j=True)

        prepared = []
        for i, char in enumerate(filtered):
            prepared.append(char)
            if i + 1 < len(filtered) and filtered[i + 1] == char:
                prepared.append(cls.FILLER)

        if len(prepared) % 2 == 1:
            prepared.append(cls.FILLER)

        return "".join(prepared)

    @classmethod
    def _prepare_ciphertext(cls, text: str) -> str:
        """Ciphertext pairs are already split, so only filter and pad."""
        filtered = TextNormalizer().letters(text, fold_j=True)
        if len(filtered) % 2 == 1:
            filtered += cls.FILLER
        return filtered

    def encrypt(self, plaintext: str) -> str:
        """Encrypt using the key square."""
        self._check_text(plaintext, encrypt=True)
        self._require_letters(plaintext, "Plaintext")
        return self._process_text(plaintext, encrypt=True)

    def decrypt(self, ciphertext: str) -> str:
        """Decrypt using the key square."""
        self._check_text(ciphertext, encrypt=False)
        self._require_letters(ciphertext, "Ciphertext")
        return self._process_text(ciphertext, encrypt=False)

    def _require_letters(self, text: str, label: str) -> None:
        if not TextNormalizer().has_letters(text):
            raise InvalidInputError(
                f"{label} must contain at least one alphabetic character",
                {"cipher": self.name},
            )

    def _find_position(self, char: str) -> tuple[int, int]:
        """Find the row and column of a character in the square."""
        try:
            return self._positions[char]
        except KeyError:
            raise InvalidInputError(
                f"Character '{char}' not found in key square",
                {"character": char},
            ) from None

    def _process_pair(self, pair: str, encrypt: bool) -> str:
        if len(pair) != 2:
            raise InvalidInputError(
                "Pair must contain exactly 2 characters",
                {"pair": pair},
            )

        row1, col1 = self._find_position(pair[0])
        row2, col2 = self._find_position(pair[1])
        step = 1 if encrypt else self.SIZE - 1

        if row1 == row2:
            # Same row: shift horizontally
            col1, col2 = (col1 + step) % self.SIZE, (col2 + step) % self.SIZE
        elif col1 == col2:
            # Same column: shift vertically
            row1, row2 = (row1 + step) % self.SIZE, (row2 + step) % self.SIZE
        else:
            # Rectangle: swap columns
            col1, col2 = col2, col1

        return self._square[row1][col1] + self._square[row2][col2]

    def _process_text(self, text: str, encrypt: bool) -> str:
        prepared = self.prepare_text(text) if encrypt else self._prepare_ciphertext(text)
        return "".join(
            self._process_pair(prepared[i:i + 2], encrypt)
            for i in range(0, len(prepared), 2)
        )

    def _zeroize(self) -> None:
        self._key = ""
        self._square = ()
        self._positions = {}
