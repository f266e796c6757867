import secrets
from enum import Enum
from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from pitch_expert.core.i18n import Language


class ModeEnum(str, Enum):
    development = "development"
    production = "production"
    testing = "testing"


class Settings(BaseSettings):
    """Read-only application settings, loaded once from the environment."""

    model_config = SettingsConfigDict(
        case_sensitive=True,
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        frozen=True,
    )

    # ── App ───────────────────────────────────────────────────
    MODE: ModeEnum = ModeEnum.production
    API_V1_STR: str = "/api/v1"
    PROJECT_NAME: str = "ZOHO Sales Expert & Pitch Generator"
    SECRET_KEY: str = secrets.token_urlsafe(32)
    LOG_LEVEL: str = "INFO"

    # ── Generation endpoint ───────────────────────────────────
    PITCH_ENDPOINT_URL: str = ""
    REQUEST_TIMEOUT_SECONDS: float = 60.0
    RETRY_ATTEMPTS: int = 2

    # ── Branding ──────────────────────────────────────────────
    LOGO_EAND_URL: str = "https://ik.imagekit.io/xtj3m9hth/image-remove1bg-preview%20(3).png?updatedAt=1761220721716"
    LOGO_ZOHO_URL: str = "https://ik.imagekit.io/xtj3m9hth/image-removebg-preview%20(3).png?updatedAt=1761220721361"

    # ── Feature flags ─────────────────────────────────────────
    ENABLE_PRESENTATION_MODE: bool = True
    ENABLE_FEATURE_SUGGESTIONS: bool = True

    # ── Language preference ───────────────────────────────────
    DEFAULT_LANGUAGE: Language = Language.en
    LANGUAGE_COOKIE_NAME: str = "language"
    LANGUAGE_COOKIE_MAX_AGE: int = 60 * 60 * 24 * 365

    # ── Sessions ──────────────────────────────────────────────
    SESSION_IDLE_SECONDS: float = 60 * 60

    # ── UI timings ────────────────────────────────────────────
    SCROLL_DELAY_MS: int = 100
    SUGGESTION_STATUS_SECONDS: float = 3.0
    COPIED_ACK_SECONDS: float = 2.0

    # ── Exports ───────────────────────────────────────────────
    PDF_FILENAME: str = "zoho-pitch.pdf"

    ALLOWED_ORIGINS: list[str] = [
        "http://localhost:8000",
        "http://127.0.0.1:8000",
    ]

    @field_validator("RETRY_ATTEMPTS")
    @classmethod
    def non_negative_retries(cls, v: int) -> int:
        if v < 0:
            raise ValueError("RETRY_ATTEMPTS must be >= 0")
        return v

    @field_validator("SESSION_IDLE_SECONDS")
    @classmethod
    def positive_idle_timeout(cls, v: float) -> float:
        if v <= 0:
            raise ValueError("SESSION_IDLE_SECONDS must be > 0")
        return v


@lru_cache
def get_settings() -> Settings:
    return Settings()
