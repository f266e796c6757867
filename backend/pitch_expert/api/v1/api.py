"""API v1: aggregates all routers under a single prefix."""

from fastapi import APIRouter

from pitch_expert.api.v1.routers import config, exports, presentation, session, suggestions

router = APIRouter()
router.include_router(session.router)
router.include_router(presentation.router)
router.include_router(exports.router)
router.include_router(suggestions.router)
router.include_router(config.router)
