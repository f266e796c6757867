from fastapi import APIRouter, Depends

from pitch_expert.api.deps import get_settings
from pitch_expert.core.config import Settings
from pitch_expert.core.renderer import public_config
from pitch_expert.schemas.display import PublicConfig

router = APIRouter(prefix="/config", tags=["config"])


@router.get("", response_model=PublicConfig)
async def read_config(settings: Settings = Depends(get_settings)):
    """Branding, feature flags and default language. Never secrets."""
    return public_config(settings)
