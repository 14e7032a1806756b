"""
Geocoding endpoint
"""

from typing import Any
from fastapi import APIRouter, Depends, Query

from app.api.deps import get_app_state
from app.core.state import AppState
from app.schemas.response import SuccessResponse
from app.schemas.venue import Location

router = APIRouter()


@router.get("/", response_model=SuccessResponse[Location])
async def geocode(
    address: str = Query("", max_length=500),
    state: AppState = Depends(get_app_state)
) -> Any:
    """
    Resolve an address to coordinates (first match)
    """
    location = await state.geocoder.geocode(address)
    return SuccessResponse(data=location)
