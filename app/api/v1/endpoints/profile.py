"""
Local profile endpoints (nickname, notifications, admin toggle)
"""

from typing import Any
from fastapi import APIRouter, Depends

from app.api.deps import get_app_state
from app.core.state import AppState
from app.schemas.response import SuccessResponse
from app.schemas.user import NicknameUpdate, UserPreferences

router = APIRouter()


@router.get("/", response_model=SuccessResponse[UserPreferences])
async def get_profile(state: AppState = Depends(get_app_state)) -> Any:
    return SuccessResponse(data=state.user.preferences)


@router.patch("/", response_model=SuccessResponse[UserPreferences])
async def update_nickname(
    update: NicknameUpdate,
    state: AppState = Depends(get_app_state)
) -> Any:
    state.user.set_nickname(update.nickname)
    await state.save_user()
    return SuccessResponse(data=state.user.preferences, message="Nickname updated")


@router.post("/notifications/toggle", response_model=SuccessResponse[UserPreferences])
async def toggle_notifications(state: AppState = Depends(get_app_state)) -> Any:
    state.user.toggle_notifications()
    await state.save_user()
    return SuccessResponse(data=state.user.preferences)


@router.post("/admin/toggle", response_model=SuccessResponse[UserPreferences])
async def toggle_admin(state: AppState = Depends(get_app_state)) -> Any:
    state.user.toggle_admin()
    await state.save_user()
    return SuccessResponse(data=state.user.preferences)
