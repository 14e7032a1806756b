"""
Catalog queries for the map and list views: search, score filters, sorting,
favorites and the ad-interleaved list feed
"""

from enum import Enum
from itertools import cycle
from typing import List, Sequence

from app.core.moderation import ModerationStore
from app.schemas.advertisement import Advertisement, Feed, FeedItem
from app.schemas.venue import ScoreFilter, ThemeDisplay, Venue


class SortOption(str, Enum):
    RECOMMENDATION = "recommendation"
    DIFFICULTY = "difficulty"
    ACTIVITY = "activity"
    FEAR = "fear"


def _contains(text: str, query: str) -> bool:
    return query in (text or "").lower()


def search_venues(venues: Sequence[Venue], query: str) -> List[Venue]:
    """Match brand, branch or any theme name"""
    query = (query or "").strip().lower()
    if not query:
        return list(venues)
    return [
        venue for venue in venues
        if _contains(venue.brand_name, query)
        or _contains(venue.branch_name, query)
        or any(_contains(theme.name, query) for theme in venue.themes)
    ]


def filter_venues(venues: Sequence[Venue], filters: ScoreFilter) -> List[Venue]:
    """Keep venues with at least one theme inside every score range"""
    if filters.is_default:
        return list(venues)
    return [venue for venue in venues if any(filters.matches(t) for t in venue.themes)]


def search_themes(themes: Sequence[ThemeDisplay], query: str) -> List[ThemeDisplay]:
    query = (query or "").strip().lower()
    if not query:
        return list(themes)
    return [
        theme for theme in themes
        if _contains(theme.brand_name, query)
        or _contains(theme.branch_name, query)
        or _contains(theme.name, query)
    ]


def filter_themes(themes: Sequence[ThemeDisplay], filters: ScoreFilter) -> List[ThemeDisplay]:
    return [theme for theme in themes if filters.matches(theme)]


def sort_themes(
    themes: Sequence[ThemeDisplay],
    sort_by: SortOption = SortOption.RECOMMENDATION
) -> List[ThemeDisplay]:
    """Highest score first; ties keep their current order"""
    key = SortOption(sort_by).value
    return sorted(themes, key=lambda theme: getattr(theme, key), reverse=True)


def favorite_themes(store: ModerationStore) -> List[ThemeDisplay]:
    """
    Resolve favorite ids against the approved themes. Ids whose theme was
    deleted are skipped.
    """
    by_id = {theme.id: theme for theme in store.all_themes()}
    return [by_id[theme_id] for theme_id in store.favorites if theme_id in by_id]


def interleave_ads(
    themes: Sequence[ThemeDisplay],
    ads: Sequence[Advertisement],
    every: int = 5
) -> Feed:
    """
    Insert an ad after every ``every``-th theme, but never after the last one
    """
    items: List[FeedItem] = []
    ad_source = cycle(sorted(ads, key=lambda ad: ad.display_order)) if ads else None

    for index, theme in enumerate(themes):
        items.append(FeedItem(kind="theme", item=theme))
        is_last = index == len(themes) - 1
        if ad_source is not None and every > 0 and (index + 1) % every == 0 and not is_last:
            items.append(FeedItem(kind="ad", item=next(ad_source)))

    return Feed(total_themes=len(themes), items=items)
