import logging
from abc import ABC, abstractmethod
from typing import Any, ClassVar

from polygraphia.core.exceptions import (
    DecryptionError,
    EncryptionError,
    InvalidInputError,
    PolygraphiaError,
)
from polygraphia.models.schemas import CipherType, TextMode

logger = logging.getLogger(__name__)


class Cipher(ABC):
    """
    Abstract capability shared by all cipher schemes.

    Each cipher implementation must provide:
    - encrypt(): Transform plaintext to ciphertext
    - decrypt(): Transform ciphertext to plaintext
    - from_key(): Build an instance from loosely typed key material
    - _zeroize(): Overwrite numeric key material

    Instances own their key material. ``close()`` (or leaving a ``with``
    block) zeroes it; a closed cipher refuses further work.
    """

    # Cipher metadata
    name: ClassVar[str]
    cipher_type: ClassVar[CipherType]
    display_name: ClassVar[str]
    description: ClassVar[str]
    key_format: ClassVar[str]

    def __init__(self, mode: TextMode | str | None = None):
        self._mode = self._parse_mode(mode) if mode is not None else TextMode.default()
        self._closed = False

    @classmethod
    @abstractmethod
    def from_key(
        cls,
        key: int | str | dict[str, Any],
        mode: TextMode | str | None = None,
    ) -> "Cipher":
        """
        Build a cipher from key material as it arrives from a host.

        Args:
            key: Key in any of the formats listed in ``key_format``
            mode: Text mode, defaults to PRESERVE_ALL

        Raises:
            InvalidKeyError: If the key cannot be parsed or is invalid
        """
        pass

    @abstractmethod
    def encrypt(self, plaintext: str) -> str:
        """
        Encrypt plaintext with the current key.

        Raises:
            InvalidInputError: If the text is empty or has no usable letters
        """
        pass

    @abstractmethod
    def decrypt(self, ciphertext: str) -> str:
        """
        Decrypt ciphertext with the current key.

        Raises:
            InvalidInputError: If the text is empty or has no usable letters
        """
        pass

    @abstractmethod
    def _zeroize(self) -> None:
        pass

    @property
    def mode(self) -> TextMode:
        return self._mode

    def set_mode(self, mode: TextMode | str) -> None:
        self._mode = self._parse_mode(mode)

    @staticmethod
    def _parse_mode(mode: TextMode | str) -> TextMode:
        try:
            return TextMode(mode)
        except ValueError:
            valid = ", ".join(m.value for m in TextMode)
            raise InvalidInputError(
                f"Invalid text mode {mode!r}. Valid modes: {valid}",
                {"mode": repr(mode)},
            ) from None

    @property
    def closed(self) -> bool:
        return self._closed

    def close(self) -> None:
        """Overwrite key material. Safe to call more than once."""
        if self._closed:
            return
        self._zeroize()
        self._closed = True
        logger.debug("Zeroed key material for %s cipher", self.name)

    def __enter__(self) -> "Cipher":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def __repr__(self) -> str:
        state = "closed" if self._closed else self._mode.value
        return f"<{type(self).__name__} {state}>"

    def _check_text(self, text: str, encrypt: bool) -> None:
        """Reject closed instances and empty text before any work starts."""
        label = "Plaintext" if encrypt else "Ciphertext"
        if self._closed:
            error: type[PolygraphiaError] = EncryptionError if encrypt else DecryptionError
            raise error(
                f"{self.name} cipher has been closed",
                {"cipher": self.name},
            )
        if not text:
            raise InvalidInputError(f"{label} cannot be empty", {"cipher": self.name})
