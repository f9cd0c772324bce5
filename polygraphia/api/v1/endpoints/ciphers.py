from fastapi import APIRouter

from polygraphia.dependencies import SettingsDep
from polygraphia.models.schemas import CipherListResponse
from polygraphia.services.engines.registry import EngineRegistry

router = APIRouter()


@router.get(
    "",
    response_model=CipherListResponse,
    summary="List ciphers",
    description="List every available cipher with its key format.",
)
async def list_ciphers(settings: SettingsDep) -> CipherListResponse:
    return CipherListResponse(
        ciphers=EngineRegistry.describe(),
        default_mode=settings.default_text_mode,
    )
