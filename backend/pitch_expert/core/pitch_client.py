"""
Client for the external generation endpoint.

One endpoint URL serves two request types, told apart by the ``type``
field of the JSON body: ``pitch`` (returns a ``PitchResult`` or
``{"error": ...}``) and ``suggestion`` (body ignored).
"""

import logging

import requests
from pydantic import ValidationError

from pitch_expert.core.config import Settings
from pitch_expert.core.exceptions import FormValidationError, PayloadError, TransportError
from pitch_expert.core.i18n import Language, t
from pitch_expert.schemas.pitch import CompanyData, PitchRequest, PitchResult, SuggestionRequest

logger = logging.getLogger(__name__)


class PitchClient:
    """Talks to the generation endpoint configured in ``PITCH_ENDPOINT_URL``."""

    def __init__(self, settings: Settings, http: requests.Session | None = None):
        self.settings = settings
        self.http = http or requests.Session()

    def generate(self, company: CompanyData, language: Language = Language.en) -> PitchResult:
        """
        Request a pitch for *company*.

        The form is sent verbatim. Transport failures (connection errors,
        timeouts, 5xx) are retried up to ``RETRY_ATTEMPTS`` extra times;
        payload errors and 4xx responses are not.

        Raises:
            FormValidationError: every form field is blank; nothing is sent.
            TransportError: non-2xx status or the call itself failed.
            PayloadError: 2xx body carrying ``error`` or not shaped like a PitchResult.

        The message of either error is the endpoint's own ``error`` text when
        it sent one, otherwise the localized ``errorFallback``.
        """
        if not company.has_input():
            raise FormValidationError(t("validationError", language))
        fallback = t("errorFallback", language)
        if not self.settings.PITCH_ENDPOINT_URL:
            logger.error("PITCH_ENDPOINT_URL is not configured")
            raise TransportError(fallback)

        payload = PitchRequest(company_data=company).model_dump(by_alias=True)
        attempts = 1 + self.settings.RETRY_ATTEMPTS

        for attempt in range(1, attempts + 1):
            try:
                data = self._post_pitch(payload, fallback)
                break
            except TransportError as exc:
                if not exc.retryable or attempt == attempts:
                    raise
                logger.warning(
                    "Pitch request failed (attempt %d/%d, status %s), retrying",
                    attempt, attempts, exc.status_code,
                )

        try:
            return PitchResult.model_validate(data)
        except ValidationError as exc:
            logger.warning("Pitch response did not match the expected shape: %s", exc)
            raise PayloadError(fallback) from exc

    def _post_pitch(self, payload: dict, fallback: str):
        try:
            response = self.http.post(
                self.settings.PITCH_ENDPOINT_URL,
                json=payload,
                timeout=self.settings.REQUEST_TIMEOUT_SECONDS,
            )
        except requests.RequestException as exc:
            logger.warning("Pitch request transport failure: %s", exc)
            raise TransportError(fallback) from exc

        try:
            data = response.json()
        except ValueError:
            data = None

        error = data.get("error") if isinstance(data, dict) else None

        if not response.ok:
            logger.warning("Pitch endpoint returned HTTP %s", response.status_code)
            raise TransportError(str(error) if error else fallback, status_code=response.status_code)

        if error:
            raise PayloadError(str(error))

        if not isinstance(data, dict):
            logger.warning("Pitch endpoint returned a non-object body")
            raise PayloadError(fallback)

        return data

    def submit_suggestion(self, text: str, user_agent: str | None = None) -> None:
        """Post a feature suggestion. Single attempt; raises ``TransportError`` on failure."""
        payload = SuggestionRequest(suggestion=text, user_agent=user_agent).model_dump(
            by_alias=True, exclude_none=True
        )
        try:
            response = self.http.post(
                self.settings.PITCH_ENDPOINT_URL,
                json=payload,
                timeout=self.settings.REQUEST_TIMEOUT_SECONDS,
            )
        except requests.RequestException as exc:
            logger.warning("Suggestion submit failed: %s", exc)
            raise TransportError(str(exc)) from exc

        if not response.ok:
            logger.warning("Suggestion endpoint returned HTTP %s", response.status_code)
            raise TransportError(f"HTTP {response.status_code}", status_code=response.status_code)
