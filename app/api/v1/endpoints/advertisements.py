"""
Advertisement endpoints
"""

from typing import Any, List
from fastapi import APIRouter, Depends

from app.api.deps import get_app_state
from app.core.state import AppState
from app.schemas.advertisement import Advertisement
from app.schemas.response import SuccessResponse

router = APIRouter()


@router.get("/", response_model=SuccessResponse[List[Advertisement]])
async def get_advertisements(state: AppState = Depends(get_app_state)) -> Any:
    ads = await state.backend.get_advertisements()
    return SuccessResponse(data=ads)
