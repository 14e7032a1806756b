"""
Health check endpoints
"""

from typing import Any
from fastapi import APIRouter, Depends

from app.api.deps import get_app_state
from app.config import settings
from app.core.state import AppState

router = APIRouter()


@router.get("/live")
async def liveness() -> Any:
    """
    Kubernetes liveness probe
    """
    return {"status": "alive", "service": "escapemap-api"}


@router.get("/ready")
async def readiness(state: AppState = Depends(get_app_state)) -> Any:
    """
    Kubernetes readiness probe
    """
    checks = {
        "storage": await state.storage.ping(),
        "branches_loaded": state.last_error is None,
        "api": True
    }

    return {
        "status": "ready" if all(checks.values()) else "not ready",
        "checks": checks,
        "version": settings.APP_VERSION,
        "last_error": state.last_error,
        "statistics": {
            "approved_branches": len(state.moderation.approved),
            "pending_reports": len(state.moderation.pending),
            "favorites": len(state.moderation.favorites)
        }
    }
