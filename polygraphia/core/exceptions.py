from typing import Any


class PolygraphiaError(Exception):
    """Base exception for all cipher errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class InvalidInputError(PolygraphiaError):
    """Raised when text is empty or has no usable alphabetic content."""

    pass


class InvalidKeyError(PolygraphiaError):
    """Raised when key material fails a structural or mathematical check."""

    pass


class EncryptionError(PolygraphiaError):
    """Raised when encryption cannot run on a cipher instance."""

    pass


class DecryptionError(PolygraphiaError):
    """Raised when decryption cannot run on a cipher instance."""

    pass


class EngineNotFoundError(PolygraphiaError):
    """Raised when requested cipher is not registered."""

    def __init__(self, engine_name: str):
        super().__init__(
            f"Cipher '{engine_name}' not found",
            {"engine_name": engine_name},
        )
