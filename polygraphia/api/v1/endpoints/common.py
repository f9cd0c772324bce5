import logging

from fastapi import HTTPException, Response, status

from polygraphia.core.config import Settings
from polygraphia.core.exceptions import EngineNotFoundError, PolygraphiaError
from polygraphia.models.schemas import CipherRequest, CipherResponse
from polygraphia.services.engines.registry import EngineRegistry

logger = logging.getLogger(__name__)


def run_cipher(
    request: CipherRequest,
    settings: Settings,
    response: Response,
    encrypt: bool,
) -> CipherResponse:
    """
    Build the requested cipher and forward the text to it.

    Cipher failures come back as ``success=False`` with HTTP 400 so
    callers always receive the same response shape. The cipher's key
    material is zeroed before returning.
    """
    # Validate text length
    if len(request.text) > settings.max_text_length:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Text exceeds maximum length of {settings.max_text_length}",
        )

    mode = request.mode or settings.default_text_mode

    try:
        with EngineRegistry.create(request.cipher_type, request.key, mode) as cipher:
            result = cipher.encrypt(request.text) if encrypt else cipher.decrypt(request.text)
    except EngineNotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=e.message,
        )
    except PolygraphiaError as e:
        logger.info(
            "%s failed for %s: %s",
            "Encryption" if encrypt else "Decryption",
            request.cipher_type.value,
            type(e).__name__,
        )
        response.status_code = status.HTTP_400_BAD_REQUEST
        return CipherResponse(
            success=False,
            cipher_type=request.cipher_type,
            error=str(e),
        )

    return CipherResponse(
        success=True,
        cipher_type=request.cipher_type,
        result=result,
    )
