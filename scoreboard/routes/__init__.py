"""API routes."""

from fastapi import APIRouter

from scoreboard.routes import scores, ui

api_router = APIRouter()

# Score endpoints (submit, leaderboard, player best)
api_router.include_router(scores.router, prefix="/v1", tags=["scores"])

# UI endpoints (Home bootstrap)
api_router.include_router(ui.router, prefix="/v1/ui", tags=["ui"])
