import pytest
from fastapi.testclient import TestClient

from conftest import FakeHttp, FakeResponse
from pitch_expert.core.i18n import Language, t
from pitch_expert.main import create_app

API = "/api/v1"


def _generate(api, website="acme.com"):
    api.patch(f"{API}/session/form", json={"field": "website", "value": website})
    return api.post(f"{API}/session/generate")


def test_health(api):
    response = api.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "healthy", "endpoint_configured": True}


def test_page_renders_in_english_by_default(api):
    response = api.get("/")

    assert response.status_code == 200
    assert "text/html" in response.headers["content-type"]
    assert 'dir="ltr"' in response.text
    assert t("generateButton", Language.en) in response.text


def test_fresh_session_view(api):
    view = api.get(f"{API}/session").json()

    assert view["language"] == "en"
    assert view["direction"] == "ltr"
    assert view["status"] == "idle"
    assert view["results"] is None
    assert view["form"]["website"] == ""


def test_stored_language_preference_is_applied_on_first_load(api):
    api.cookies.set("language", "ar")

    view = api.get(f"{API}/session").json()

    assert view["language"] == "ar"
    assert view["direction"] == "rtl"
    assert 'dir="rtl"' in api.get("/").text


def test_unknown_stored_language_falls_back_to_default(api):
    api.cookies.set("language", "xx")
    assert api.get(f"{API}/session").json()["language"] == "en"


def test_language_toggle_persists_preference(api):
    response = api.post(f"{API}/session/language")

    assert response.status_code == 200
    assert response.json()["direction"] == "rtl"
    assert response.cookies.get("language") == "ar"
    assert api.get(f"{API}/session").json()["language"] == "ar"

    back = api.post(f"{API}/session/language")

    assert back.json()["language"] == "en"
    assert back.json()["direction"] == "ltr"
    assert back.cookies.get("language") == "en"
    assert 'dir="ltr"' in api.get("/").text


def test_unknown_form_field_is_rejected(api):
    response = api.patch(f"{API}/session/form", json={"field": "email", "value": "x"})
    assert response.status_code == 422


def test_blank_generate_sets_validation_error_without_calling_endpoint(api, fake_http):
    body = api.post(f"{API}/session/generate").json()

    assert body["view"]["status"] == "error"
    assert body["view"]["error"] == t("validationError", Language.en)
    assert body["scroll_to"] is None
    assert fake_http.calls == []


def test_generate_flow(api, fake_http):
    response = _generate(api)

    assert response.status_code == 200
    body = response.json()
    assert body["scroll_to"] == "results-section"
    assert body["scroll_delay_ms"] == 100
    assert body["view"]["status"] == "success"
    assert body["view"]["results"]["industry"]["value"] == "Retail"
    assert fake_http.calls[0]["json"]["companyData"]["website"] == "acme.com"

    page = api.get("/").text
    assert 'id="results-section"' in page
    assert "Zoho Inventory" in page


def test_generate_error_is_shown(settings):
    http = FakeHttp(FakeResponse(500))
    with TestClient(create_app(settings, http=http)) as client:
        body = _generate(client).json()

    assert body["view"]["status"] == "error"
    assert body["view"]["error"] == t("errorFallback", Language.en)


def test_sessions_are_isolated(settings, fake_http):
    app = create_app(settings, http=fake_http)
    with TestClient(app) as first, TestClient(app) as second:
        _generate(first)
        assert second.get(f"{API}/session").json()["status"] == "idle"


def test_clear_after_result(api):
    _generate(api)
    view = api.post(f"{API}/session/clear").json()

    assert view["status"] == "idle"
    assert view["results"] is None
    assert view["form"]["website"] == ""


def test_solution_toggle(api):
    _generate(api)

    view = api.post(f"{API}/session/solutions/0/toggle").json()
    card = view["results"]["solutions"]["cards"][0]
    assert card["expanded"] is True
    assert card["paragraphs"] == ["Step one", "Step two"]

    assert api.post(f"{API}/session/solutions/9/toggle").status_code == 404


def test_exports_require_a_result(api):
    assert api.get(f"{API}/exports/pdf").status_code == 409
    assert api.get(f"{API}/exports/share").status_code == 409
    assert api.post(f"{API}/exports/clipboard").status_code == 409


def test_pdf_download(api):
    _generate(api)
    response = api.get(f"{API}/exports/pdf")

    assert response.status_code == 200
    assert response.headers["content-type"] == "application/pdf"
    assert response.headers["content-disposition"] == 'attachment; filename="zoho-pitch.pdf"'
    assert response.content.startswith(b"%PDF")


def test_share_links(api):
    _generate(api)
    links = api.get(f"{API}/exports/share").json()

    assert links["share_text"].startswith("Faster onboarding\n• Lower costs\n\n")
    assert links["mailto"].startswith("mailto:?")
    assert links["whatsapp"].startswith("https://wa.me/?text=")


def test_clipboard_acknowledgement(api):
    _generate(api)
    body = api.post(f"{API}/exports/clipboard").json()

    assert body["ack_label"] == "Copied!"
    assert body["ack_seconds"] == 2.0
    assert api.get(f"{API}/session").json()["copied"] is True


def test_presentation_over_http(api):
    _generate(api)

    assert api.post(f"{API}/presentation/open").json()["visible"] is True
    assert api.post(f"{API}/presentation/next").json()["slide_index"] == 1
    assert api.put(f"{API}/presentation/slide", json={"index": 42}).json()["slide_index"] == 3
    assert api.post(f"{API}/presentation/previous").json()["slide_index"] == 2

    deck = api.get(f"{API}/presentation/deck")
    assert deck.status_code == 200
    assert t("presentationSlide1", Language.en) in deck.text

    closed = api.post(f"{API}/presentation/close").json()
    assert closed["visible"] is False
    assert closed["slide_index"] == 0


def test_suggestion_submit(api, fake_http):
    response = api.post(f"{API}/suggestions", json={"suggestion": "Dark mode"}, headers={"User-Agent": "pytest-ua"})

    assert response.status_code == 200
    assert response.json() == {"status": "success", "message": t("featureSuccess", Language.en)}
    assert fake_http.calls[-1]["json"] == {"type": "suggestion", "suggestion": "Dark mode", "userAgent": "pytest-ua"}
    assert api.get(f"{API}/session").json()["suggestion_status"] == "success"


def test_suggestion_failure_is_reported(settings):
    with TestClient(create_app(settings, http=FakeHttp(FakeResponse(503)))) as client:
        body = client.post(f"{API}/suggestions", json={"suggestion": "idea"}).json()
    assert body["status"] == "error"
    assert body["message"] == t("featureError", Language.en)


def test_blank_suggestion_is_rejected(api, fake_http):
    assert api.post(f"{API}/suggestions", json={"suggestion": "   "}).status_code == 400
    assert fake_http.calls == []


@pytest.mark.parametrize("flag, method, path", [
    ("ENABLE_PRESENTATION_MODE", "post", "/presentation/open"),
    ("ENABLE_FEATURE_SUGGESTIONS", "post", "/suggestions"),
])
def test_disabled_features_return_404(settings, fake_http, flag, method, path):
    disabled = settings.model_copy(update={flag: False})
    with TestClient(create_app(disabled, http=fake_http)) as client:
        _generate(client)
        response = getattr(client, method)(f"{API}{path}", json={"suggestion": "idea"})
    assert response.status_code == 404


def test_public_config(api):
    config = api.get(f"{API}/config").json()

    assert config["enable_presentation_mode"] is True
    assert config["default_language"] == "en"
    assert "secret_key" not in config


def test_expired_session_is_recreated(settings, fake_http):
    app = create_app(settings, http=fake_http)
    store = app.state.session_store
    now = [0.0]
    store.clock = lambda: now[0]

    with TestClient(app) as client:
        _generate(client)
        assert client.get(f"{API}/session").json()["status"] == "success"

        now[0] = settings.SESSION_IDLE_SECONDS + 1
        view = client.get(f"{API}/session").json()

    assert view["status"] == "idle"
    assert view["results"] is None
    assert len(store) == 1
