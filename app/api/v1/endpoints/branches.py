"""
Approved branch endpoints
"""

from typing import Any, List
from fastapi import APIRouter, Depends

from app.api.deps import get_app_state
from app.core.exceptions import NotFoundError
from app.core.state import AppState
from app.schemas.response import SuccessResponse
from app.schemas.venue import Venue

router = APIRouter()


@router.get("/", response_model=SuccessResponse[List[Venue]])
async def get_branches(state: AppState = Depends(get_app_state)) -> Any:
    """
    Get list of approved branches
    """
    return SuccessResponse(data=state.moderation.approved)


@router.post("/refresh", response_model=SuccessResponse[List[Venue]])
async def refresh_branches(state: AppState = Depends(get_app_state)) -> Any:
    """
    Re-fetch branches from the backend. Pending reports are untouched.
    """
    venues = await state.fetch_branches()
    await state.save_escape_data()
    return SuccessResponse(data=venues, message="Branches refreshed")


@router.get("/{branch_id}", response_model=SuccessResponse[Venue])
async def get_branch(branch_id: str, state: AppState = Depends(get_app_state)) -> Any:
    venue = state.moderation.get_approved(branch_id)
    if not venue:
        raise NotFoundError("Branch", branch_id)
    return SuccessResponse(data=venue)
