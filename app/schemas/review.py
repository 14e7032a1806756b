"""
Review schemas
"""

from typing import Any, Dict, Optional
from datetime import datetime
from pydantic import BaseModel, Field, field_validator

from app.schemas.venue import SCORE_FIELDS, SERVER_SCORE_FIELDS, clamp_score


class Review(BaseModel):
    id: str
    theme_id: str
    nickname: str
    difficulty: int = Field(..., ge=0, le=10)
    fear: int = Field(..., ge=0, le=10)
    activity: int = Field(..., ge=0, le=10)
    recommendation: int = Field(..., ge=0, le=10)
    comment: str = ""
    created_at: Optional[datetime] = None

    @classmethod
    def from_backend(cls, data: Dict[str, Any]) -> "Review":
        return cls(
            id=str(data["id"]),
            theme_id=str(data["themeId"]),
            nickname=data.get("userNickname") or data.get("nickname") or "",
            comment=data.get("comment") or "",
            created_at=data.get("createdAt"),
            **{
                field: data.get(server_field) or 0
                for field, server_field in SERVER_SCORE_FIELDS.items()
            }
        )


class ReviewCreate(BaseModel):
    # Falls back to the stored profile nickname when omitted
    nickname: Optional[str] = Field(None, max_length=50)
    difficulty: int = 5
    fear: int = 5
    activity: int = 5
    recommendation: int = 5
    comment: str = Field("", max_length=2000)

    @field_validator(*SCORE_FIELDS, mode="before")
    @classmethod
    def clamp(cls, v):
        return clamp_score(v)


class AverageScores(BaseModel):
    difficulty: float
    fear: float
    activity: float
    recommendation: float
    count: int
