import string
from typing import Callable

from polygraphia.models.schemas import TextMode
from polygraphia.services.arithmetic.modular import ALPHABET_SIZE


class TextNormalizer:
    """
    Letter-level text handling shared by the cipher engines.

    Only ASCII letters are treated as alphabetic. Everything else is
    either dropped or passed through depending on the TextMode.
    """

    LETTERS = frozenset(string.ascii_letters)
    ALPHABET = string.ascii_lowercase

    def is_letter(self, char: str) -> bool:
        return char in self.LETTERS

    def has_letters(self, text: str) -> bool:
        return any(c in self.LETTERS for c in text)

    def letters(self, text: str, fold_j: bool = False) -> str:
        """
        Reduce text to lowercase letters.

        Args:
            text: Input text
            fold_j: Replace 'j' with 'i' (25-letter square alphabets)

        Returns:
            Lowercase letters of ``text`` in order
        """
        result = "".join(c.lower() for c in text if c in self.LETTERS)
        if fold_j:
            result = result.replace("j", "i")
        return result

    def index(self, char: str) -> int:
        """Alphabet index of a letter, a=0 through z=25."""
        return ord(char.lower()) - ord("a")

    def letter(self, index: int) -> str:
        return self.ALPHABET[index % ALPHABET_SIZE]

    def substitute(
        self,
        text: str,
        mode: TextMode,
        transform: Callable[[int], int],
    ) -> str:
        """
        Apply a per-letter index transform, preserving case.

        Args:
            text: Input text
            mode: ALPHA_ONLY drops non-letters, PRESERVE_ALL keeps them
            transform: Maps a letter index to a new (unreduced) index

        Returns:
            Transformed text
        """
        result = []
        for char in text:
            if char in self.LETTERS:
                base = ord("A") if char.isupper() else ord("a")
                shifted = transform(self.index(char)) % ALPHABET_SIZE
                result.append(chr(base + shifted))
            elif mode == TextMode.PRESERVE_ALL:
                result.append(char)
        return "".join(result)
