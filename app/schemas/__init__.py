"""
Pydantic schemas for request and response validation
"""

from app.schemas.venue import (
    Location,
    Theme,
    Venue,
    ThemeDisplay,
    ThemeDetail,
    ScoreFilter,
    VenueReportCreate,
    ThemeReportCreate
)
from app.schemas.review import (
    Review,
    ReviewCreate,
    AverageScores
)
from app.schemas.map import (
    RenderTier,
    Cluster,
    RenderInstruction,
    MapView
)
from app.schemas.response import (
    SuccessResponse,
    ErrorResponse,
    MessageResponse
)

__all__ = [
    "Location",
    "Theme",
    "Venue",
    "ThemeDisplay",
    "ThemeDetail",
    "ScoreFilter",
    "VenueReportCreate",
    "ThemeReportCreate",
    "Review",
    "ReviewCreate",
    "AverageScores",
    "RenderTier",
    "Cluster",
    "RenderInstruction",
    "MapView",
    "SuccessResponse",
    "ErrorResponse",
    "MessageResponse"
]
