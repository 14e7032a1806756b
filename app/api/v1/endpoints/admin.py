"""
Admin moderation endpoints

Approve/reject/delete are idempotent: acting on an id that is not there is
not an error, ``data`` just reports whether anything changed.
"""

from typing import Any, Optional
from fastapi import APIRouter, Depends

from app.api.deps import require_admin_mode
from app.core.state import AppState
from app.schemas.response import SuccessResponse
from app.schemas.venue import Venue

router = APIRouter()


@router.post("/reports/{report_id}/approve", response_model=SuccessResponse[Optional[Venue]])
async def approve_report(report_id: str, state: AppState = Depends(require_admin_mode)) -> Any:
    """
    Move a pending report into the approved branches
    """
    venue = state.moderation.approve(report_id)
    await state.save_escape_data()
    message = "Report approved" if venue else "No pending report with that id"
    return SuccessResponse(data=venue, message=message)

@router.post("/reports/{report_id}/reject", response_model=SuccessResponse[bool])
async def reject_report(report_id: str, state: AppState = Depends(require_admin_mode)) -> Any:
    removed = state.moderation.reject(report_id)
    await state.save_escape_data()
    return SuccessResponse(data=removed, message="Report rejected" if removed else "Nothing to reject")

@router.post("/branches/{branch_id}/delete", response_model=SuccessResponse[bool])
async def delete_branch(branch_id: str, state: AppState = Depends(require_admin_mode)) -> Any:
    """
    Remove an approved branch and its themes. Favorites and reviews of those
    themes are left in place and simply stop resolving.
    """
    removed = state.moderation.delete(branch_id)
    await state.save_escape_data()
    return SuccessResponse(data=removed, message="Branch deleted" if removed else "Nothing to delete")
