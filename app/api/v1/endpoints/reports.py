"""
User report endpoints
"""

from typing import Any, List
from fastapi import APIRouter, Depends, status

from app.api.deps import get_app_state
from app.core.state import AppState
from app.schemas.response import SuccessResponse
from app.schemas.venue import ThemeReportCreate, Venue, VenueReportCreate

router = APIRouter()


@router.post(
    "/branches",
    response_model=SuccessResponse[Venue],
    status_code=status.HTTP_201_CREATED
)
async def report_branch(
    form: VenueReportCreate,
    state: AppState = Depends(get_app_state)
) -> Any:
    """
    Report a new branch with its first theme. The address must geocode;
    the branch appears on the map only after admin approval.
    """
    venue = await state.reports.report_venue(form)
    await state.save_escape_data()
    return SuccessResponse(data=venue, message="Report submitted, pending approval")


@router.post(
    "/themes",
    response_model=SuccessResponse[Venue],
    status_code=status.HTTP_201_CREATED
)
async def report_theme(
    form: ThemeReportCreate,
    state: AppState = Depends(get_app_state)
) -> Any:
    """
    Report a new theme for an approved branch
    """
    venue = state.reports.report_theme(form)
    await state.save_escape_data()
    return SuccessResponse(data=venue, message="Theme report submitted, pending approval")


@router.get("/pending", response_model=SuccessResponse[List[Venue]])
async def get_pending_reports(state: AppState = Depends(get_app_state)) -> Any:
    return SuccessResponse(data=state.moderation.pending)
