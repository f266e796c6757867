from fastapi import APIRouter, Depends
from fastapi.responses import Response

from pitch_expert.api.deps import get_pitch_session, get_settings
from pitch_expert.controllers import export_controller
from pitch_expert.core.config import Settings
from pitch_expert.schemas.display import ClipboardCopy, ShareLinks
from pitch_expert.schemas.session import PitchSession

router = APIRouter(prefix="/exports", tags=["exports"])


@router.get("/pdf")
async def download_pdf(
    session: PitchSession = Depends(get_pitch_session),
    settings: Settings = Depends(get_settings),
):
    """Download the current pitch as a PDF document."""
    content = export_controller.export_pdf(session)
    return Response(
        content=content,
        media_type="application/pdf",
        headers={"Content-Disposition": f'attachment; filename="{settings.PDF_FILENAME}"'},
    )


@router.get("/share", response_model=ShareLinks)
async def get_share_links(session: PitchSession = Depends(get_pitch_session)):
    """Share text plus ready-made mailto and WhatsApp links."""
    return export_controller.get_share_links(session)


@router.post("/clipboard", response_model=ClipboardCopy)
async def copy_to_clipboard(
    session: PitchSession = Depends(get_pitch_session),
    settings: Settings = Depends(get_settings),
):
    return export_controller.copy_share_text(session, settings)
