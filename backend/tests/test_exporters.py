from urllib.parse import unquote

import pytest
from reportlab.platypus import SimpleDocTemplate

from pitch_expert.core import exporters
from pitch_expert.core.exceptions import ExportError
from pitch_expert.core.exporters import build_pdf, mailto_link, share_links, whatsapp_link
from pitch_expert.core.i18n import Language, t
from pitch_expert.core.renderer import build_share_text
from pitch_expert.schemas.pitch import PitchResult


def test_pdf_is_a_pdf_document(sample_result):
    content = build_pdf(sample_result, Language.en)
    assert content.startswith(b"%PDF")
    assert len(content) > 500


def test_pdf_for_empty_result_still_builds():
    assert build_pdf(PitchResult(), Language.en).startswith(b"%PDF")


def test_pdf_escapes_markup_in_content():
    result = PitchResult(industry="R&D <labs>", pain_points=["a < b & c"])
    assert build_pdf(result, Language.en).startswith(b"%PDF")


def test_arabic_pdf_uses_english_closing(sample_result, monkeypatch):
    texts = []
    real_paragraph = exporters.Paragraph

    def recording_paragraph(text, style, *args, **kwargs):
        texts.append(text)
        return real_paragraph(text, style, *args, **kwargs)

    monkeypatch.setattr(exporters, "Paragraph", recording_paragraph)

    assert build_pdf(sample_result, Language.ar).startswith(b"%PDF")
    assert texts[-1] == t("proposalClosing", Language.en)
    assert t("proposalClosing", Language.ar) not in texts


def test_pdf_failure_raises_export_error(sample_result, monkeypatch):
    def broken_build(self, flowables, **kwargs):
        raise RuntimeError("layout failed")

    monkeypatch.setattr(SimpleDocTemplate, "build", broken_build)

    with pytest.raises(ExportError) as excinfo:
        build_pdf(sample_result, Language.ar)
    assert excinfo.value.message == t("exportError", Language.ar)


def test_mailto_link_percent_encodes_body():
    link = mailto_link("One\n• Two & more", subject="Pitch?")

    assert link == "mailto:?subject=Pitch%3F&body=One%0A%E2%80%A2%20Two%20%26%20more"


def test_mailto_link_without_subject():
    assert mailto_link("hi there") == "mailto:?body=hi%20there"


def test_whatsapp_link_percent_encodes_text():
    link = whatsapp_link("a b\nc")
    assert link == "https://wa.me/?text=a%20b%0Ac"


def test_share_links_carry_the_share_text(sample_result):
    links = share_links(sample_result, Language.ar)
    expected = build_share_text(sample_result, Language.ar)

    assert links.share_text == expected
    assert unquote(links.whatsapp.split("?text=", 1)[1]) == expected
    assert unquote(links.mailto.split("&body=", 1)[1]) == expected
