import logging
from typing import Any, Type

from polygraphia.core.exceptions import EngineNotFoundError
from polygraphia.models.schemas import CipherInfo, CipherType, TextMode
from polygraphia.services.engines.base import Cipher

logger = logging.getLogger(__name__)


class EngineRegistry:
    """
    Registry for cipher classes.

    Maps each CipherType to the class implementing it. Ciphers carry
    their own key state, so the registry hands out fresh instances
    instead of caching them.
    """

    _engines: dict[CipherType, Type[Cipher]] = {}

    @classmethod
    def register(cls, engine_class: Type[Cipher]) -> Type[Cipher]:
        """
        Register a cipher class.

        Can be used as a decorator:
            @EngineRegistry.register
            class CaesarCipher(Cipher):
                ...

        Args:
            engine_class: The cipher class to register

        Returns:
            The cipher class (for decorator usage)
        """
        cls._engines[engine_class.cipher_type] = engine_class
        return engine_class

    @classmethod
    def get_engine_class(cls, cipher_type: CipherType | str) -> Type[Cipher]:
        """
        Look up the class for a cipher name.

        Raises:
            EngineNotFoundError: If the name is unknown or unregistered
        """
        try:
            resolved = CipherType(cipher_type)
        except ValueError:
            raise EngineNotFoundError(str(cipher_type)) from None

        if resolved not in cls._engines:
            raise EngineNotFoundError(resolved.value)
        return cls._engines[resolved]

    @classmethod
    def create(
        cls,
        cipher_type: CipherType | str,
        key: int | str | dict[str, Any],
        mode: TextMode | str | None = None,
    ) -> Cipher:
        """
        Build a keyed cipher instance.

        Args:
            cipher_type: Name of the cipher, e.g. "hill"
            key: Key material in the cipher's accepted formats
            mode: Text mode, defaults to PRESERVE_ALL

        Returns:
            A new cipher instance

        Raises:
            EngineNotFoundError: If the cipher is unknown
            InvalidKeyError: If the key material is invalid
        """
        engine_class = cls.get_engine_class(cipher_type)
        cipher = engine_class.from_key(key, mode)
        logger.debug("Created %s cipher (mode=%s)", cipher.name, cipher.mode.value)
        return cipher

    @classmethod
    def describe(cls) -> list[CipherInfo]:
        return [
            CipherInfo(
                cipher_type=engine_class.cipher_type,
                name=engine_class.display_name,
                description=engine_class.description,
                key_format=engine_class.key_format,
            )
            for engine_class in cls._engines.values()
        ]

    @classmethod
    def list_registered(cls) -> list[CipherType]:
        """
        List all registered cipher types.

        Returns:
            List of registered cipher types
        """
        return list(cls._engines.keys())

    @classmethod
    def is_registered(cls, cipher_type: CipherType | str) -> bool:
        """
        Check if a cipher type is registered.

        Args:
            cipher_type: The cipher type to check

        Returns:
            True if registered
        """
        try:
            return CipherType(cipher_type) in cls._engines
        except ValueError:
            return False


# Import engines to trigger registration
def _load_engines() -> None:
    """Load all engine modules to trigger registration."""
    from polygraphia.services.engines.monoalphabetic import affine, caesar  # noqa: F401
    from polygraphia.services.engines.polygraphic import hill, playfair  # noqa: F401


# Load engines when module is imported
_load_engines()
