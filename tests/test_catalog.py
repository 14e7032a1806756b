"""
Unit tests for search, filters, sorting, favorites and the ad feed
"""

import pytest

from app.core.moderation import ModerationStore
from app.schemas.advertisement import Advertisement
from app.schemas.venue import ScoreFilter
from app.services.catalog_service import (
    SortOption,
    favorite_themes,
    filter_themes,
    filter_venues,
    interleave_ads,
    search_themes,
    search_venues,
    sort_themes,
)
from factories import make_theme, make_venue


@pytest.fixture
def store():
    return ModerationStore(approved=[
        make_venue("b1", brand="셜록홈즈", branch="강남 1호점", themes=[
            make_theme("t1", "빛과 그림자", (4, 2, 6, 8)),
            make_theme("t2", "지하감옥", (7, 5, 3, 7)),
        ]),
        make_venue("b2", brand="키이스케이프", branch="홍대점", themes=[
            make_theme("t3", "삐릿-뽀", (8, 1, 9, 10)),
        ]),
        make_venue("b3", brand="비트포비아", branch="강남던전", themes=[
            make_theme("t4", "강남목욕탕", (5, 0, 4, 8)),
        ]),
    ])


def ad(ad_id, order):
    return Advertisement(id=ad_id, title=f"광고 {ad_id}", display_order=order)


@pytest.mark.unit
class TestSearchAndFilter:
    """Map and list queries"""

    def test_search_venues_by_brand_branch_or_theme(self, store):
        venues = store.approved

        assert [v.id for v in search_venues(venues, "강남")] == ["b1", "b3"]
        assert [v.id for v in search_venues(venues, "삐릿")] == ["b2"]
        assert [v.id for v in search_venues(venues, "  ")] == ["b1", "b2", "b3"]

    def test_search_case_insensitive(self):
        venues = [make_venue("x", brand="Key Escape")]

        assert search_venues(venues, "key") == venues

    def test_filter_venues_any_theme(self, store):
        scary = ScoreFilter(fear=(5, 10))

        assert [v.id for v in filter_venues(store.approved, scary)] == ["b1"]

    def test_default_filter_keeps_themeless_venues(self):
        venues = [make_venue("empty")]

        assert filter_venues(venues, ScoreFilter()) == venues

    def test_filter_themes_all_ranges(self, store):
        filters = ScoreFilter(difficulty=(5, 8), activity=(0, 5))

        assert [t.id for t in filter_themes(store.all_themes(), filters)] == ["t2", "t4"]

    def test_search_themes(self, store):
        assert [t.id for t in search_themes(store.all_themes(), "감옥")] == ["t2"]
        assert [t.id for t in search_themes(store.all_themes(), "홍대")] == ["t3"]


@pytest.mark.unit
class TestSorting:
    """Descending sort, stable on ties"""

    def test_default_recommendation(self, store):
        assert [t.id for t in sort_themes(store.all_themes())] == ["t3", "t1", "t4", "t2"]

    @pytest.mark.parametrize("sort_by,expected", [
        (SortOption.DIFFICULTY, ["t3", "t2", "t4", "t1"]),
        (SortOption.FEAR, ["t2", "t1", "t3", "t4"]),
        ("activity", ["t3", "t1", "t4", "t2"]),
    ])
    def test_sort_options(self, store, sort_by, expected):
        assert [t.id for t in sort_themes(store.all_themes(), sort_by)] == expected


@pytest.mark.unit
class TestFavoriteThemes:
    """Favorites resolved against live themes"""

    def test_dangling_ids_omitted(self, store):
        store.add_favorite("t3")
        store.add_favorite("gone")
        store.add_favorite("t1")

        assert [t.id for t in favorite_themes(store)] == ["t3", "t1"]

        store.delete("b2")

        assert [t.id for t in favorite_themes(store)] == ["t1"]
        assert store.favorites == ["t3", "gone", "t1"]


@pytest.mark.unit
class TestAdFeed:
    """Ads after every N themes"""

    def test_interleave(self, store):
        themes = store.all_themes() * 3  # 12 cards

        feed = interleave_ads(themes, [ad("2", 2), ad("1", 1)], every=5)

        kinds = [item.kind for item in feed.items]
        assert feed.total_themes == 12
        assert kinds.count("ad") == 2
        assert kinds[5] == "ad" and kinds[11] == "ad"
        assert [item.item.id for item in feed.items if item.kind == "ad"] == ["1", "2"]

    def test_no_ad_after_last_card(self, store):
        themes = (store.all_themes() * 3)[:10]

        feed = interleave_ads(themes, [ad("1", 1)], every=5)

        assert feed.items[-1].kind == "theme"
        assert [item.kind for item in feed.items].count("ad") == 1

    def test_ads_cycle(self, store):
        themes = store.all_themes() * 4  # 16 cards

        feed = interleave_ads(themes, [ad("1", 1)], every=5)

        assert [item.item.id for item in feed.items if item.kind == "ad"] == ["1", "1", "1"]

    def test_without_ads(self, store):
        feed = interleave_ads(store.all_themes(), [], every=5)

        assert all(item.kind == "theme" for item in feed.items)
        assert len(feed.items) == 4
