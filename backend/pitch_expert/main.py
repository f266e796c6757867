import logging

import requests
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from starlette.middleware.cors import CORSMiddleware
from starlette.middleware.sessions import SessionMiddleware

from pitch_expert.api.v1.api import router
from pitch_expert.core.config import Settings, get_settings
from pitch_expert.core.pitch_client import PitchClient
from pitch_expert.core.session_store import SessionStore
from pitch_expert.routers import pages

logger = logging.getLogger(__name__)


def create_app(settings: Settings | None = None, http: requests.Session | None = None) -> FastAPI:
    """Build the application around an explicit, read-only *settings* value."""
    settings = settings or get_settings()
    logging.getLogger("pitch_expert").setLevel(settings.LOG_LEVEL)

    app = FastAPI(
        title=settings.PROJECT_NAME,
        openapi_url=f"{settings.API_V1_STR}/openapi.json",
    )
    app.state.settings = settings
    app.state.session_store = SessionStore(idle_seconds=settings.SESSION_IDLE_SECONDS)
    app.state.pitch_client = PitchClient(settings, http=http)

    # ── Global Exception Handler (ensures 500s return JSON through CORS) ──

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        logger.error("Unhandled exception: %s", exc, exc_info=True)
        return JSONResponse(
            status_code=500,
            content={"detail": "Internal server error"},
        )

    # ── Middleware ────────────────────────────────────────────

    # SessionMiddleware: carries the opaque id of the server-side PitchSession
    app.add_middleware(SessionMiddleware, secret_key=settings.SECRET_KEY, same_site="lax")

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.ALLOWED_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # ── Routers ───────────────────────────────────────────────

    app.include_router(router, prefix=settings.API_V1_STR)
    app.include_router(pages.router)

    # ── Health ────────────────────────────────────────────────

    @app.get("/health")
    def health():
        return {
            "status": "healthy",
            "endpoint_configured": bool(settings.PITCH_ENDPOINT_URL),
        }

    logger.info("%s ready (mode=%s)", settings.PROJECT_NAME, settings.MODE.value)
    return app


app = create_app()
