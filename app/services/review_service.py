"""
Review cache backed by the REST backend
"""

import logging
from typing import List, Optional

from app.schemas.review import AverageScores, Review, ReviewCreate
from app.schemas.venue import SCORE_FIELDS
from app.services.backend_client import BackendClient

logger = logging.getLogger(__name__)


class ReviewService:
    """
    Keeps the reviews fetched so far, newest first per theme. Backend failures
    propagate to the caller; the cache is only touched after a success.
    """

    def __init__(self, backend: BackendClient):
        self.backend = backend
        self._reviews: List[Review] = []

    def reviews_for(self, theme_id: str) -> List[Review]:
        return [r for r in self._reviews if r.theme_id == theme_id]

    async def fetch_by_theme(self, theme_id: str) -> List[Review]:
        """Replace the cached reviews of one theme with the backend's list"""
        fetched = await self.backend.get_theme_reviews(theme_id)
        others = [r for r in self._reviews if r.theme_id != theme_id]
        self._reviews = others + fetched
        return fetched

    async def add_review(self, theme_id: str, review: ReviewCreate, nickname: str) -> Review:
        created = await self.backend.create_review(
            theme_id=theme_id,
            nickname=nickname,
            scores={field: getattr(review, field) for field in SCORE_FIELDS},
            comment=review.comment
        )
        self._reviews.insert(0, created)
        logger.info(f"Review {created.id} added to theme {theme_id} by {nickname}")
        return created

    async def delete_review(self, review_id: str) -> None:
        await self.backend.delete_review(review_id)
        self._reviews = [r for r in self._reviews if r.id != review_id]
        logger.info(f"Review {review_id} deleted")

    def average_scores(self, theme_id: str) -> Optional[AverageScores]:
        reviews = self.reviews_for(theme_id)
        if not reviews:
            return None

        count = len(reviews)
        return AverageScores(
            count=count,
            **{
                field: round(sum(getattr(r, field) for r in reviews) / count, 1)
                for field in SCORE_FIELDS
            }
        )
