import logging
import time

from fastapi import HTTPException, status

from pitch_expert.core.config import Settings
from pitch_expert.core.exceptions import ExportError
from pitch_expert.core.exporters import build_pdf, share_links
from pitch_expert.core.i18n import t
from pitch_expert.core.renderer import build_share_text
from pitch_expert.schemas.display import ClipboardCopy, ShareLinks
from pitch_expert.schemas.pitch import PitchResult
from pitch_expert.schemas.session import PitchSession

logger = logging.getLogger(__name__)


def _require_result(session: PitchSession) -> PitchResult:
    result = session.result
    if result is None:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail="No pitch has been generated")
    return result


def export_pdf(session: PitchSession) -> bytes:
    """
    Build the PDF for the current result.

    A failure is logged and answered with one generic alert; the request
    state of the session is left alone.
    """
    result = _require_result(session)
    try:
        return build_pdf(result, session.language)
    except ExportError as exc:
        logger.error("PDF export failed for session %s", session.id, exc_info=True)
        raise HTTPException(status_code=500, detail=exc.message) from exc


def get_share_links(session: PitchSession) -> ShareLinks:
    return share_links(_require_result(session), session.language)


def copy_share_text(session: PitchSession, settings: Settings, now: float | None = None) -> ClipboardCopy:
    """Hand the share text to the clipboard and show "copied" for a moment."""
    result = _require_result(session)
    now = time.monotonic() if now is None else now
    session.copied_until = now + settings.COPIED_ACK_SECONDS
    return ClipboardCopy(
        text=build_share_text(result, session.language),
        ack_label=t("copied", session.language),
        ack_seconds=settings.COPIED_ACK_SECONDS,
    )
