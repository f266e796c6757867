"""
Export adapters: PDF document and share deep links.

All of them read a PitchResult and never change it. The share text comes
from ``renderer.build_share_text`` so clipboard, email and WhatsApp carry
the exact same string.
"""

from __future__ import annotations

from io import BytesIO
from urllib.parse import quote
from xml.sax.saxutils import escape

from reportlab.lib.pagesizes import A4
from reportlab.lib.styles import ParagraphStyle, getSampleStyleSheet
from reportlab.lib.units import mm
from reportlab.platypus import ListFlowable, ListItem, Paragraph, SimpleDocTemplate, Spacer

from pitch_expert.core.exceptions import ExportError
from pitch_expert.core.i18n import Language, t
from pitch_expert.core.renderer import build_share_text
from pitch_expert.schemas.display import ShareLinks
from pitch_expert.schemas.pitch import PitchResult

PDF_TITLE = "ZOHO Pitch"
WHATSAPP_URL = "https://wa.me/"


def _styles() -> dict[str, ParagraphStyle]:
    base = getSampleStyleSheet()
    return {
        "title": ParagraphStyle("PitchTitle", parent=base["Title"], fontSize=16, leading=20, alignment=0),
        "heading": ParagraphStyle("PitchHeading", parent=base["Heading2"], fontSize=13, leading=16, spaceBefore=8),
        "body": ParagraphStyle("PitchBody", parent=base["BodyText"], fontSize=11, leading=14),
        "closing": ParagraphStyle("PitchClosing", parent=base["Italic"], fontSize=10, leading=13, spaceBefore=10),
    }


def _bullets(items: list[str], style: ParagraphStyle) -> list:
    if not items:
        return []
    return [ListFlowable(
        [ListItem(Paragraph(escape(item), style), leftIndent=12) for item in items],
        bulletType="bullet",
        start="•",
        leftIndent=12,
    )]


def build_pdf(result: PitchResult, language: Language) -> bytes:
    """
    Lay out the fixed pitch template and return the PDF bytes.

    Sections: title, industry line, key challenges, recommended solutions
    (``title: summary``), key benefits and the closing paragraph. The
    document is English throughout since the built-in PDF fonts carry no
    Arabic glyphs; *language* only selects the error message.
    Empty sections keep their heading so the document shape is stable.

    Raises:
        ExportError: reportlab failed to build the document.
    """
    styles = _styles()
    story = [
        Paragraph(escape(PDF_TITLE), styles["title"]),
        Spacer(1, 4 * mm),
        Paragraph(escape(f"Industry: {result.industry if result.industry is not None else 'N/A'}"), styles["body"]),
        Paragraph("Key Challenges", styles["heading"]),
        *_bullets(list(result.pain_points), styles["body"]),
        Paragraph("Recommended Solutions", styles["heading"]),
        *_bullets([f"{s.title}: {s.summary}" for s in result.solutions], styles["body"]),
        Paragraph("Key Benefits", styles["heading"]),
        *_bullets(list(result.proposal_benefits), styles["body"]),
        Paragraph(escape(t("proposalClosing", Language.en)), styles["closing"]),
    ]

    buffer = BytesIO()
    doc = SimpleDocTemplate(
        buffer,
        pagesize=A4,
        leftMargin=20 * mm,
        rightMargin=20 * mm,
        topMargin=20 * mm,
        bottomMargin=20 * mm,
        title=PDF_TITLE,
    )
    try:
        doc.build(story)
    except Exception as exc:
        raise ExportError(t("exportError", language)) from exc
    return buffer.getvalue()


def mailto_link(share_text: str, subject: str = "") -> str:
    link = "mailto:?"
    if subject:
        link += f"subject={quote(subject, safe='')}&"
    return link + f"body={quote(share_text, safe='')}"


def whatsapp_link(share_text: str) -> str:
    return f"{WHATSAPP_URL}?text={quote(share_text, safe='')}"


def share_links(result: PitchResult, language: Language) -> ShareLinks:
    share_text = build_share_text(result, language)
    return ShareLinks(
        share_text=share_text,
        mailto=mailto_link(share_text, subject=t("appTitle", language)),
        whatsapp=whatsapp_link(share_text),
    )
