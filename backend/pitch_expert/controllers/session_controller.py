"""
Session controller: every legal transition of the per-browser state.

Request state machine::

    idle/error/success --submit(valid)--> loading --ok-->   success
                                          loading --fail--> error
    idle/error/success --submit(blank)--> error(validationError), result kept
    any                --clear()-------> idle

There is no cancellation. ``clear`` and a new ``submit`` bump
``session.generation``; a response that comes back for an older
generation is dropped.
"""

import logging
import time

from fastapi import HTTPException, status
from starlette.concurrency import run_in_threadpool

from pitch_expert.core import i18n
from pitch_expert.core.config import Settings
from pitch_expert.core.exceptions import PitchExpertError
from pitch_expert.core.i18n import Language, t
from pitch_expert.core.pitch_client import PitchClient
from pitch_expert.core.renderer import render_view
from pitch_expert.schemas.display import SessionView
from pitch_expert.schemas.pitch import FORM_FIELDS, CompanyData
from pitch_expert.schemas.session import (
    ErrorState,
    IdleState,
    LoadingState,
    PitchSession,
    PresentationState,
    SuccessState,
)

logger = logging.getLogger(__name__)


def update_field(session: PitchSession, field: str, value: str) -> None:
    """Set one form field. An active error is cleared; a result it kept comes back."""
    if field not in FORM_FIELDS:
        raise HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=f"Unknown field: {field}")
    setattr(session.form, field, value)
    if isinstance(session.request, ErrorState):
        result = session.request.result
        session.request = SuccessState(result=result) if result is not None else IdleState()


def clear(session: PitchSession) -> None:
    """Reset the form and drop any result, error, expanded card and presentation."""
    session.form = CompanyData()
    session.request = IdleState()
    session.expanded_solution = None
    session.presentation = PresentationState()
    session.generation += 1


def validate(session: PitchSession) -> bool:
    if session.form.has_input():
        return True
    session.request = ErrorState(message=t("validationError", session.language), result=session.result)
    return False


async def submit(session: PitchSession, client: PitchClient) -> bool:
    """
    Validate the form and request a pitch.

    Returns True when a fresh result was stored. A blank form only sets the
    validation error. The outbound call runs in the threadpool; while it is
    in flight the session reports ``loading`` and a second submit is refused.
    """
    if session.is_loading:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail="A pitch request is already in progress")
    if not validate(session):
        return False

    session.generation += 1
    generation = session.generation
    language = session.language
    company = session.form.model_copy()

    session.request = LoadingState(generation=generation)
    session.expanded_solution = None
    session.presentation = PresentationState()

    try:
        result = await run_in_threadpool(client.generate, company, language)
        outcome = SuccessState(result=result)
    except PitchExpertError as exc:
        outcome = ErrorState(message=exc.message)
    except Exception as exc:
        logger.error("Pitch generation crashed: %s", exc, exc_info=True)
        fallback = t("errorFallback", language)
        if session.generation == generation:
            session.request = ErrorState(message=fallback)
        raise HTTPException(status_code=500, detail=fallback) from exc

    if session.generation != generation:
        logger.debug("Discarding stale pitch response for session %s", session.id)
        return False

    session.request = outcome
    if isinstance(outcome, ErrorState):
        logger.info("Pitch request failed for session %s: %s", session.id, outcome.message)
        return False
    return True


def toggle_language(session: PitchSession) -> Language:
    session.language = i18n.toggle(session.language)
    return session.language


def toggle_solution(session: PitchSession, index: int) -> int | None:
    """Expand solution *index*, or collapse it if it is the one already expanded."""
    result = session.result
    if result is None:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail="No pitch has been generated")
    if not 0 <= index < len(result.solutions):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Solution not found")

    session.expanded_solution = None if session.expanded_solution == index else index
    return session.expanded_solution


def get_view(session: PitchSession, settings: Settings, now: float | None = None) -> SessionView:
    return render_view(session, settings, time.monotonic() if now is None else now)
