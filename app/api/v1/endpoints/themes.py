"""
Theme list, feed and detail endpoints
"""

from typing import Any, List, Optional
import logging
from fastapi import APIRouter, Depends

from app.api.deps import get_app_state, score_filter
from app.config import settings
from app.core.exceptions import BackendError, NotFoundError
from app.core.state import AppState
from app.schemas.advertisement import Feed
from app.schemas.response import SuccessResponse
from app.schemas.venue import SCORE_FIELDS, ScoreFilter, ThemeDetail, ThemeDisplay
from app.services.catalog_service import (
    SortOption,
    filter_themes,
    interleave_ads,
    search_themes,
    sort_themes,
)

router = APIRouter()
logger = logging.getLogger(__name__)


def _query_themes(
    state: AppState,
    q: Optional[str],
    sort_by: SortOption,
    filters: ScoreFilter
) -> List[ThemeDisplay]:
    themes = filter_themes(search_themes(state.moderation.all_themes(), q), filters)
    return sort_themes(themes, sort_by)


@router.get("/", response_model=SuccessResponse[List[ThemeDisplay]])
async def get_themes(
    q: Optional[str] = None,
    sort_by: SortOption = SortOption.RECOMMENDATION,
    filters: ScoreFilter = Depends(score_filter),
    state: AppState = Depends(get_app_state)
) -> Any:
    """
    Get every theme of every approved branch with search, filters and sorting
    """
    return SuccessResponse(data=_query_themes(state, q, sort_by, filters))


@router.get("/feed", response_model=SuccessResponse[Feed])
async def get_theme_feed(
    q: Optional[str] = None,
    sort_by: SortOption = SortOption.RECOMMENDATION,
    filters: ScoreFilter = Depends(score_filter),
    state: AppState = Depends(get_app_state)
) -> Any:
    """
    List-page feed: themes with an advertisement after every few cards
    """
    themes = _query_themes(state, q, sort_by, filters)

    try:
        ads = await state.backend.get_advertisements()
    except BackendError as e:
        # The list is still usable without banners
        logger.warning(f"Advertisements unavailable: {e.message}")
        ads = []

    return SuccessResponse(data=interleave_ads(themes, ads, every=settings.FEED_AD_INTERVAL))


@router.get("/{theme_id}", response_model=SuccessResponse[ThemeDetail])
async def get_theme(theme_id: str, state: AppState = Depends(get_app_state)) -> Any:
    """
    Theme detail. Scores shown are the review averages when reviews have been
    loaded, otherwise the theme's own scores.
    """
    theme = state.moderation.find_theme(theme_id)
    if not theme:
        raise NotFoundError("Theme", theme_id)

    averages = state.reviews.average_scores(theme_id)
    source = averages if averages else theme
    detail = ThemeDetail(
        **theme.model_dump(),
        is_favorite=state.moderation.is_favorite(theme_id),
        review_count=averages.count if averages else 0,
        display_scores={field: getattr(source, field) for field in SCORE_FIELDS}
    )
    return SuccessResponse(data=detail)
