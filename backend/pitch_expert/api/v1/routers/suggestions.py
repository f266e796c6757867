from fastapi import APIRouter, Depends, Request

from pitch_expert.api.deps import get_client, get_pitch_session, get_settings
from pitch_expert.controllers import suggestion_controller
from pitch_expert.core.config import Settings
from pitch_expert.core.pitch_client import PitchClient
from pitch_expert.schemas.actions import SuggestionCreate
from pitch_expert.schemas.display import SuggestionStatusRead
from pitch_expert.schemas.session import PitchSession

router = APIRouter(prefix="/suggestions", tags=["suggestions"])


@router.post("", response_model=SuggestionStatusRead)
async def submit_suggestion(
    payload: SuggestionCreate,
    request: Request,
    session: PitchSession = Depends(get_pitch_session),
    client: PitchClient = Depends(get_client),
    settings: Settings = Depends(get_settings),
):
    """Forward a feature idea to the endpoint."""
    return await suggestion_controller.submit_suggestion(
        session,
        client,
        settings,
        payload.suggestion,
        user_agent=request.headers.get("user-agent"),
    )
