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
    summary="Decrypt ciphertext",
    description="Decrypt ciphertext using a specified cipher type and key.",
)
def decrypt_ciphertext(
    request: CipherRequest,
    settings: SettingsDep,
    response: Response,
) -> CipherResponse:
    """Decrypt ciphertext with the requested cipher and key."""
    return run_cipher(request, settings, response, encrypt=False)
