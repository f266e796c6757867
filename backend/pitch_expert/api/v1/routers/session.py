"""Session router: thin HTTP layer, delegates all logic to session_controller."""

from fastapi import APIRouter, Depends, Response

from pitch_expert.api.deps import get_client, get_pitch_session, get_settings
from pitch_expert.controllers import session_controller
from pitch_expert.core.config import Settings
from pitch_expert.core.page_template import RESULTS_ANCHOR
from pitch_expert.core.pitch_client import PitchClient
from pitch_expert.schemas.actions import FieldUpdate
from pitch_expert.schemas.display import GenerateResponse, SessionView
from pitch_expert.schemas.session import PitchSession

router = APIRouter(prefix="/session", tags=["session"])


@router.get("", response_model=SessionView)
async def read_session(
    session: PitchSession = Depends(get_pitch_session),
    settings: Settings = Depends(get_settings),
):
    """Return everything the page shows for this browser."""
    return session_controller.get_view(session, settings)


@router.patch("/form", response_model=SessionView)
async def update_form_field(
    payload: FieldUpdate,
    session: PitchSession = Depends(get_pitch_session),
    settings: Settings = Depends(get_settings),
):
    """Set one form field."""
    session_controller.update_field(session, payload.field, payload.value)
    return session_controller.get_view(session, settings)


@router.post("/clear", response_model=SessionView)
async def clear_session(
    session: PitchSession = Depends(get_pitch_session),
    settings: Settings = Depends(get_settings),
):
    """Reset the form and drop the current result."""
    session_controller.clear(session)
    return session_controller.get_view(session, settings)


@router.post("/generate", response_model=GenerateResponse)
async def generate_pitch(
    session: PitchSession = Depends(get_pitch_session),
    client: PitchClient = Depends(get_client),
    settings: Settings = Depends(get_settings),
):
    """Validate the form and ask the generation endpoint for a pitch."""
    fresh = await session_controller.submit(session, client)
    return GenerateResponse(
        view=session_controller.get_view(session, settings),
        scroll_to=RESULTS_ANCHOR if fresh else None,
        scroll_delay_ms=settings.SCROLL_DELAY_MS if fresh else 0,
    )


@router.post("/language", response_model=SessionView)
async def toggle_language(
    response: Response,
    session: PitchSession = Depends(get_pitch_session),
    settings: Settings = Depends(get_settings),
):
    """Switch between English and Arabic and remember the choice."""
    language = session_controller.toggle_language(session)
    response.set_cookie(
        settings.LANGUAGE_COOKIE_NAME,
        language.value,
        max_age=settings.LANGUAGE_COOKIE_MAX_AGE,
        samesite="lax",
    )
    return session_controller.get_view(session, settings)


@router.post("/solutions/{index}/toggle", response_model=SessionView)
async def toggle_solution(
    index: int,
    session: PitchSession = Depends(get_pitch_session),
    settings: Settings = Depends(get_settings),
):
    """Expand a solution card, or collapse it if it is already expanded."""
    session_controller.toggle_solution(session, index)
    return session_controller.get_view(session, settings)
