import pytest
from fastapi.testclient import TestClient

from pitch_expert.core.config import Settings
from pitch_expert.core.i18n import Language
from pitch_expert.core.pitch_client import PitchClient
from pitch_expert.main import create_app
from pitch_expert.schemas.pitch import PitchResult
from pitch_expert.schemas.session import PitchSession

ENDPOINT = "https://script.example.test/exec"

_NO_JSON = object()


class FakeResponse:
    def __init__(self, status_code: int = 200, body=_NO_JSON):
        self.status_code = status_code
        self._body = body

    @property
    def ok(self) -> bool:
        return self.status_code < 400

    def json(self):
        if self._body is _NO_JSON:
            raise ValueError("Expecting value")
        return self._body


class FakeHttp:
    """Stands in for ``requests.Session``; replays outcomes in order, repeating the last."""

    def __init__(self, *outcomes, on_post=None):
        self.outcomes = list(outcomes) or [FakeResponse(200, {})]
        self.calls: list[dict] = []
        self.on_post = on_post

    def post(self, url, json=None, timeout=None):
        self.calls.append({"url": url, "json": json, "timeout": timeout})
        if self.on_post is not None:
            self.on_post()
        outcome = self.outcomes.pop(0) if len(self.outcomes) > 1 else self.outcomes[0]
        if isinstance(outcome, Exception):
            raise outcome
        return outcome


SAMPLE_PAYLOAD = {
    "industry": "Retail",
    "industryConfidence": "high",
    "researchSummary": "Regional chain of 12 stores.",
    "painPoints": ["slow checkout", "manual stock counts"],
    "automations": [
        {"title": "Inventory sync", "productivityGain": "10h/week", "costSavings": "$2k/month"},
        {"title": "Loyalty emails", "productivityGain": "4h/week"},
    ],
    "solutions": [
        {"title": "Zoho Inventory", "summary": "Track stock", "expandedDetail": "Step one\nStep two"},
        {"title": "Zoho CRM", "summary": "Know customers"},
    ],
    "proposalBenefits": ["Faster onboarding", "Lower costs"],
    "salesTip": "Open with the checkout queue.",
    "deepDiveExamples": [
        {"zohoApp": "Inventory", "feature": "Barcode", "benefit": "Speed", "implementation": "Scan"},
        {"zohoApp": "CRM", "feature": "Segments", "benefit": "Targeting", "implementation": "Tag"},
        {"zohoApp": "Books", "feature": "Invoices", "benefit": "Cash", "implementation": "Sync"},
    ],
}


@pytest.fixture
def settings() -> Settings:
    return Settings(
        PITCH_ENDPOINT_URL=ENDPOINT,
        RETRY_ATTEMPTS=0,
        REQUEST_TIMEOUT_SECONDS=5.0,
        SECRET_KEY="test-secret",
        MODE="testing",
    )


@pytest.fixture
def sample_result() -> PitchResult:
    return PitchResult.model_validate(SAMPLE_PAYLOAD)


@pytest.fixture
def session() -> PitchSession:
    return PitchSession(id="test-session", language=Language.en)


@pytest.fixture
def fake_http() -> FakeHttp:
    return FakeHttp(FakeResponse(200, SAMPLE_PAYLOAD))


@pytest.fixture
def client_for(settings):
    def _make(http: FakeHttp) -> PitchClient:
        return PitchClient(settings, http=http)
    return _make


@pytest.fixture
def api(settings, fake_http) -> TestClient:
    with TestClient(create_app(settings, http=fake_http)) as test_client:
        yield test_client
