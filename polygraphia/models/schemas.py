from enum import Enum
from typing import Annotated, Any

from pydantic import BaseModel, ConfigDict, Field


# ============================================================================
# Enums
# ============================================================================


class TextMode(str, Enum):
    """How non-alphabetic characters are handled during transformation."""

    ALPHA_ONLY = "alpha_only"  # Drop everything that is not a letter
    PRESERVE_ALL = "preserve_all"  # Pass non-letters through unchanged

    @classmethod
    def default(cls) -> "TextMode":
        return cls.PRESERVE_ALL


class CipherType(str, Enum):
    """Supported cipher schemes."""

    CAESAR = "caesar"
    AFFINE = "affine"
    PLAYFAIR = "playfair"
    HILL = "hill"


# ============================================================================
# Request Schemas
# ============================================================================

# Longest key string accepted over the wire
MAX_KEY_LENGTH = 256


class CipherRequest(BaseModel):
    """Request schema for /encrypt and /decrypt endpoints."""

    cipher_type: CipherType
    text: str = Field(min_length=1)
    key: int | Annotated[str, Field(max_length=MAX_KEY_LENGTH)] | dict[str, Any]
    mode: TextMode | None = None


# ============================================================================
# Response Schemas
# ============================================================================


class CipherResponse(BaseModel):
    """Success/error discriminated result of a cipher operation."""

    success: bool
    cipher_type: CipherType
    result: str | None = None
    error: str | None = None


class CipherInfo(BaseModel):
    """Description of a registered cipher."""

    model_config = ConfigDict(from_attributes=True)

    cipher_type: CipherType
    name: str
    description: str
    key_format: str


class CipherListResponse(BaseModel):
    """Response schema for /ciphers endpoint."""

    ciphers: list[CipherInfo]
    default_mode: TextMode


class ErrorResponse(BaseModel):
    """Standard error response."""

    error: str
    message: str
    details: dict[str, Any] = Field(default_factory=dict)
