from fastapi import APIRouter, Response

from polygraphia.api.v1.endpoints.common import run_cipher
from polygraphia.dependencies import SettingsDep
from polygraphia.models.schemas import CipherRequest, CipherResponse, ErrorResponse

router = APIRouter()


@router.post(
    "",
    response_model=CipherResponse,
    responses={
        400: {"model": CipherResponse, "description": "Invalid input or key"},
        404: {"model": ErrorResponse, "description": "Cipher type not supported"},
    },
    summary="Encrypt plaintext",
    description="Encrypt plaintext using a specified cipher type and key.",
)
def encrypt_plaintext(
    request: CipherRequest,
    settings: SettingsDep,
    response: Response,
) -> CipherResponse:
    """Encrypt plaintext with the requested cipher and key."""
    return run_cipher(request, settings, response, encrypt=True)
