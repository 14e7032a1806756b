"""
Review endpoints
"""

from typing import Any, List
from fastapi import APIRouter, Depends, status

from app.api.deps import get_app_state
from app.core.state import AppState
from app.schemas.response import MessageResponse, SuccessResponse
from app.schemas.review import Review, ReviewCreate

router = APIRouter()


@router.get("/themes/{theme_id}/reviews", response_model=SuccessResponse[List[Review]])
async def get_theme_reviews(theme_id: str, state: AppState = Depends(get_app_state)) -> Any:
    """
    Load the reviews of a theme from the backend
    """
    reviews = await state.reviews.fetch_by_theme(theme_id)
    return SuccessResponse(data=reviews)


@router.post(
    "/themes/{theme_id}/reviews",
    response_model=SuccessResponse[Review],
    status_code=status.HTTP_201_CREATED
)
async def create_review(
    theme_id: str,
    review: ReviewCreate,
    state: AppState = Depends(get_app_state)
) -> Any:
    """
    Submit a review. The nickname defaults to the profile nickname and is not
    verified.
    """
    nickname = (review.nickname or "").strip() or state.user.nickname
    created = await state.reviews.add_review(theme_id, review, nickname)
    return SuccessResponse(data=created, message="Review created")


@router.post("/reviews/{review_id}/delete", response_model=MessageResponse)
async def delete_review(review_id: str, state: AppState = Depends(get_app_state)) -> Any:
    await state.reviews.delete_review(review_id)
    return MessageResponse(message="Review deleted")
