from fastapi import APIRouter, Depends
from fastapi.responses import HTMLResponse

from pitch_expert.api.deps import get_pitch_session, get_settings
from pitch_expert.controllers import presentation_controller
from pitch_expert.core.config import Settings
from pitch_expert.schemas.actions import SlideUpdate
from pitch_expert.schemas.display import PresentationView
from pitch_expert.schemas.session import PitchSession

router = APIRouter(prefix="/presentation", tags=["presentation"])


@router.post("/open", response_model=PresentationView)
async def open_presentation(
    session: PitchSession = Depends(get_pitch_session),
    settings: Settings = Depends(get_settings),
):
    return presentation_controller.open_presentation(session, settings)


@router.post("/close", response_model=PresentationView)
async def close_presentation(session: PitchSession = Depends(get_pitch_session)):
    return presentation_controller.close_presentation(session)


@router.post("/next", response_model=PresentationView)
async def next_slide(
    session: PitchSession = Depends(get_pitch_session),
    settings: Settings = Depends(get_settings),
):
    return presentation_controller.next_slide(session, settings)


@router.post("/previous", response_model=PresentationView)
async def previous_slide(
    session: PitchSession = Depends(get_pitch_session),
    settings: Settings = Depends(get_settings),
):
    return presentation_controller.previous_slide(session, settings)


@router.put("/slide", response_model=PresentationView)
async def go_to_slide(
    payload: SlideUpdate,
    session: PitchSession = Depends(get_pitch_session),
    settings: Settings = Depends(get_settings),
):
    """Jump to a slide; out-of-range indexes are clamped."""
    return presentation_controller.go_to_slide(session, settings, payload.index)


@router.get("/deck", response_class=HTMLResponse)
async def get_deck(
    session: PitchSession = Depends(get_pitch_session),
    settings: Settings = Depends(get_settings),
):
    """Return the self-contained HTML slide deck."""
    return HTMLResponse(content=presentation_controller.get_deck_html(session, settings))
