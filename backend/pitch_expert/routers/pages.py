"""The single HTML page."""

from fastapi import APIRouter, Depends
from fastapi.responses import HTMLResponse

from pitch_expert.api.deps import get_pitch_session, get_settings
from pitch_expert.controllers import session_controller
from pitch_expert.core.config import Settings
from pitch_expert.core.page_template import render_page
from pitch_expert.schemas.session import PitchSession

router = APIRouter(tags=["pages"])


@router.get("/", response_class=HTMLResponse)
async def index(
    session: PitchSession = Depends(get_pitch_session),
    settings: Settings = Depends(get_settings),
):
    view = session_controller.get_view(session, settings)
    return HTMLResponse(content=render_page(view, settings.API_V1_STR, settings.SCROLL_DELAY_MS))
