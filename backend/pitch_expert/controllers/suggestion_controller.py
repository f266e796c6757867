import logging
import time

from fastapi import HTTPException, status
from starlette.concurrency import run_in_threadpool

from pitch_expert.core.config import Settings
from pitch_expert.core.exceptions import TransportError
from pitch_expert.core.i18n import t
from pitch_expert.core.pitch_client import PitchClient
from pitch_expert.schemas.display import SuggestionStatusRead
from pitch_expert.schemas.session import PitchSession

logger = logging.getLogger(__name__)


async def submit_suggestion(
    session: PitchSession,
    client: PitchClient,
    settings: Settings,
    text: str,
    user_agent: str | None = None,
) -> SuggestionStatusRead:
    """
    Send a feature suggestion.

    Tracked apart from the pitch request: it never touches the request
    state. The resulting status expires after ``SUGGESTION_STATUS_SECONDS``.
    Concurrent submissions are not deduplicated.
    """
    if not settings.ENABLE_FEATURE_SUGGESTIONS:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Feature suggestions are disabled")
    if not text.strip():
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Suggestion text is required")

    session.suggestion_submitting = True
    try:
        await run_in_threadpool(client.submit_suggestion, text, user_agent)
        outcome = "success"
    except TransportError as exc:
        logger.warning("Suggestion from session %s not delivered: %s", session.id, exc.message)
        outcome = "error"
    finally:
        session.suggestion_submitting = False

    session.suggestion_status = outcome
    session.suggestion_status_until = time.monotonic() + settings.SUGGESTION_STATUS_SECONDS

    key = "featureSuccess" if outcome == "success" else "featureError"
    return SuggestionStatusRead(status=outcome, message=t(key, session.language))
