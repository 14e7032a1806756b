"""
Map rendering endpoint
"""

from typing import Any, Optional
from fastapi import APIRouter, Depends, Query

from app.api.deps import get_app_state, score_filter
from app.config import settings
from app.core.state import AppState
from app.schemas.map import MapView
from app.schemas.response import SuccessResponse
from app.schemas.venue import Location, ScoreFilter
from app.services.catalog_service import filter_venues, search_venues

router = APIRouter()


@router.get("/render", response_model=SuccessResponse[MapView])
async def render_map(
    zoom: float = Query(..., ge=0, le=22),
    q: Optional[str] = None,
    filters: ScoreFilter = Depends(score_filter),
    state: AppState = Depends(get_app_state)
) -> Any:
    """
    Markers for the current zoom: nothing when zoomed out, clusters at medium
    zoom and one marker per venue when zoomed in
    """
    venues = filter_venues(search_venues(state.moderation.approved, q), filters)

    if venues:
        center = Location(lat=venues[0].lat, lng=venues[0].lng)
    else:
        center = Location(lat=settings.MAP_DEFAULT_CENTER_LAT, lng=settings.MAP_DEFAULT_CENTER_LNG)

    view = MapView(
        render=state.clusterer.render(venues, zoom),
        center=center,
        venue_count=len(venues)
    )
    return SuccessResponse(data=view)
