"""Presentation mode: a four-slide view over the current pitch result."""

from fastapi import HTTPException, status

from pitch_expert.core.config import Settings
from pitch_expert.core.deck_template import render_presentation_deck
from pitch_expert.core.renderer import build_slides, render_presentation
from pitch_expert.schemas.display import PresentationView
from pitch_expert.schemas.session import SLIDE_COUNT, PitchSession, PresentationState


def _clamp(index: int) -> int:
    return max(0, min(SLIDE_COUNT - 1, index))


def _require_result(session: PitchSession, settings: Settings) -> None:
    if not settings.ENABLE_PRESENTATION_MODE:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Presentation mode is disabled")
    if session.result is None:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail="No pitch has been generated")


def open_presentation(session: PitchSession, settings: Settings) -> PresentationView:
    _require_result(session, settings)
    session.presentation.visible = True
    session.presentation.slide_index = _clamp(session.presentation.slide_index)
    return render_presentation(session)


def close_presentation(session: PitchSession) -> PresentationView:
    session.presentation = PresentationState()
    return render_presentation(session)


def go_to_slide(session: PitchSession, settings: Settings, index: int) -> PresentationView:
    """Move to *index*, clamped to the first and last slide."""
    _require_result(session, settings)
    session.presentation.slide_index = _clamp(index)
    return render_presentation(session)


def next_slide(session: PitchSession, settings: Settings) -> PresentationView:
    return go_to_slide(session, settings, session.presentation.slide_index + 1)


def previous_slide(session: PitchSession, settings: Settings) -> PresentationView:
    return go_to_slide(session, settings, session.presentation.slide_index - 1)


def get_deck_html(session: PitchSession, settings: Settings) -> str:
    _require_result(session, settings)
    return render_presentation_deck(
        build_slides(session.result, session.language),
        language=session.language,
        start_index=session.presentation.slide_index,
        title=settings.PROJECT_NAME,
    )
