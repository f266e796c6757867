"""
Shared FastAPI dependencies, single source of truth for DI.

All routers should import get_settings, get_client and get_pitch_session
from HERE. The settings, session store and client are created once by
``create_app`` and hung on ``app.state``.
"""

from fastapi import Depends, Request

from pitch_expert.core.config import Settings
from pitch_expert.core.i18n import parse_language
from pitch_expert.core.pitch_client import PitchClient
from pitch_expert.core.session_store import SessionStore
from pitch_expert.schemas.session import PitchSession

__all__ = ["get_settings", "get_store", "get_client", "get_pitch_session"]

SESSION_KEY = "sid"


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_store(request: Request) -> SessionStore:
    return request.app.state.session_store


def get_client(request: Request) -> PitchClient:
    return request.app.state.pitch_client


def get_pitch_session(
    request: Request,
    settings: Settings = Depends(get_settings),
    store: SessionStore = Depends(get_store),
) -> PitchSession:
    """
    Return this browser's session, creating it on first contact.

    The language preference cookie is read only here, when the session is
    created; afterwards the session owns the current language.
    """
    session = store.get(request.session.get(SESSION_KEY))
    if session is None:
        stored = request.cookies.get(settings.LANGUAGE_COOKIE_NAME)
        language = parse_language(stored, default=settings.DEFAULT_LANGUAGE)
        session = store.create(language)
        request.session[SESSION_KEY] = session.id
    return session
