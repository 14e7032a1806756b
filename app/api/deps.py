"""
Shared endpoint dependencies
"""

from fastapi import Depends, Query, Request

from app.core.state import AppState
from app.schemas.venue import ScoreFilter


def get_app_state(request: Request) -> AppState:
    return request.app.state.app_state


def require_admin_mode(state: AppState = Depends(get_app_state)) -> AppState:
    """
    Gate admin actions on the local admin toggle. This mirrors the UI and is
    not an access control check.
    """
    state.user.require_admin()
    return state


def score_filter(
    difficulty_min: int = Query(0, ge=0, le=10),
    difficulty_max: int = Query(10, ge=0, le=10),
    fear_min: int = Query(0, ge=0, le=10),
    fear_max: int = Query(10, ge=0, le=10),
    activity_min: int = Query(0, ge=0, le=10),
    activity_max: int = Query(10, ge=0, le=10),
    recommendation_min: int = Query(0, ge=0, le=10),
    recommendation_max: int = Query(10, ge=0, le=10)
) -> ScoreFilter:
    return ScoreFilter(
        difficulty=(difficulty_min, difficulty_max),
        fear=(fear_min, fear_max),
        activity=(activity_min, activity_max),
        recommendation=(recommendation_min, recommendation_max),
    )
