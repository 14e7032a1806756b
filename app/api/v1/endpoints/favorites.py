"""
Favorite theme endpoints
"""

from typing import Any, List
from fastapi import APIRouter, Depends

from app.api.deps import get_app_state
from app.core.state import AppState
from app.schemas.response import SuccessResponse
from app.schemas.venue import ThemeDisplay
from app.services.catalog_service import favorite_themes

router = APIRouter()


@router.get("/", response_model=SuccessResponse[List[str]])
async def get_favorites(state: AppState = Depends(get_app_state)) -> Any:
    """
    Favorite theme ids, including ids whose theme no longer exists
    """
    return SuccessResponse(data=state.moderation.favorites)


@router.get("/themes", response_model=SuccessResponse[List[ThemeDisplay]])
async def get_favorite_themes(state: AppState = Depends(get_app_state)) -> Any:
    """
    Favorite themes that still exist
    """
    return SuccessResponse(data=favorite_themes(state.moderation))


@router.post("/{theme_id}", response_model=SuccessResponse[List[str]])
async def add_favorite(theme_id: str, state: AppState = Depends(get_app_state)) -> Any:
    state.moderation.add_favorite(theme_id)
    await state.save_favorites()
    return SuccessResponse(data=state.moderation.favorites, message="Favorite added")


@router.delete("/{theme_id}", response_model=SuccessResponse[List[str]])
async def remove_favorite(theme_id: str, state: AppState = Depends(get_app_state)) -> Any:
    state.moderation.remove_favorite(theme_id)
    await state.save_favorites()
    return SuccessResponse(data=state.moderation.favorites, message="Favorite removed")


@router.post("/{theme_id}/toggle", response_model=SuccessResponse[bool])
async def toggle_favorite(theme_id: str, state: AppState = Depends(get_app_state)) -> Any:
    """
    Flip a favorite; ``data`` is the new membership
    """
    is_favorite = state.moderation.toggle_favorite(theme_id)
    await state.save_favorites()
    return SuccessResponse(data=is_favorite)
