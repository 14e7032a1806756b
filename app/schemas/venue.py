"""
Venue and theme schemas

Venues (branches) are the unit of moderation; themes live inside them and have
no lifecycle of their own.
"""

from typing import Any, Dict, List, Optional
from pydantic import BaseModel, Field, field_validator

SCORE_FIELDS = ("difficulty", "fear", "activity", "recommendation")

# Backend field name for each score
SERVER_SCORE_FIELDS = {
    "difficulty": "pointDifficulty",
    "fear": "pointFear",
    "activity": "pointActivity",
    "recommendation": "pointRecommendation",
}


def split_tags(raw: Any) -> List[str]:
    """Backend sends tags as one comma-joined string"""
    if not raw:
        return []
    if isinstance(raw, list):
        return [str(tag) for tag in raw]
    return [tag for tag in str(raw).split(",") if tag]


class Location(BaseModel):
    lat: float
    lng: float


class Theme(BaseModel):
    id: str
    name: str
    description: str = ""
    poster_url: str = ""
    difficulty: int = Field(0, ge=0, le=10)
    fear: int = Field(0, ge=0, le=10)
    activity: int = Field(0, ge=0, le=10)
    recommendation: int = Field(0, ge=0, le=10)
    tags: List[str] = []

    @classmethod
    def from_backend(cls, data: Dict[str, Any]) -> "Theme":
        return cls(
            id=str(data["id"]),
            name=data.get("name") or "",
            description=data.get("description") or "",
            poster_url=data.get("posterUrl") or "",
            tags=split_tags(data.get("tags")),
            **{
                field: data.get(server_field) or 0
                for field, server_field in SERVER_SCORE_FIELDS.items()
            }
        )


class Venue(BaseModel):
    """
    A physical escape-room branch.

    Coordinates are deliberately unconstrained here: the moderation store
    accepts whatever upstream hands it, and ``has_valid_coordinates`` is the
    check callers use.
    """
    id: str
    brand_name: str
    branch_name: str
    address: str
    lat: float
    lng: float
    website_url: Optional[str] = None
    phone: Optional[str] = None
    themes: List[Theme] = []
    # Set on theme reports: the approved venue the themes belong to
    parent_id: Optional[str] = None

    @property
    def has_valid_coordinates(self) -> bool:
        return -90 <= self.lat <= 90 and -180 <= self.lng <= 180

    @property
    def display_name(self) -> str:
        return f"{self.brand_name} {self.branch_name}".strip()

    @classmethod
    def from_backend(cls, data: Dict[str, Any]) -> "Venue":
        return cls(
            id=str(data["id"]),
            brand_name=data.get("brandName") or "",
            branch_name=data.get("branchName") or "",
            address=data.get("address") or "",
            lat=data.get("latitude"),
            lng=data.get("longitude"),
            website_url=data.get("websiteUrl"),
            phone=data.get("phone"),
            themes=[Theme.from_backend(t) for t in data.get("themes") or []],
        )

    def to_backend(self) -> Dict[str, Any]:
        """Payload for ``POST /branches``"""
        return {
            "brandName": self.brand_name,
            "branchName": self.branch_name,
            "address": self.address,
            "latitude": self.lat,
            "longitude": self.lng,
            "websiteUrl": self.website_url,
            "phone": self.phone,
        }


class ThemeDisplay(Theme):
    """Theme flattened with its parent venue's fields for list views"""
    branch_id: str
    brand_name: str
    branch_name: str
    address: str
    location: Location
    website_url: Optional[str] = None

    @classmethod
    def from_venue(cls, theme: Theme, venue: Venue) -> "ThemeDisplay":
        return cls(
            **theme.model_dump(),
            branch_id=venue.id,
            brand_name=venue.brand_name,
            branch_name=venue.branch_name,
            address=venue.address,
            location=Location(lat=venue.lat, lng=venue.lng),
            website_url=venue.website_url,
        )


class ThemeDetail(ThemeDisplay):
    """Theme display plus review aggregates"""
    is_favorite: bool = False
    review_count: int = 0
    # Review averages when reviews exist, otherwise the theme's own scores
    display_scores: Dict[str, float] = {}


def clamp_score(value: Any) -> int:
    """Clamp and step a score the way the authoring sliders do"""
    try:
        number = float(value)
    except (TypeError, ValueError):
        raise ValueError("score must be a number")
    return int(min(10, max(0, round(number))))


class ScoreInput(BaseModel):
    difficulty: int = 5
    fear: int = 0
    activity: int = 5
    recommendation: int = 5

    @field_validator(*SCORE_FIELDS, mode="before")
    @classmethod
    def clamp(cls, v):
        return clamp_score(v)


class VenueReportCreate(ScoreInput):
    """A new venue with its first theme, reported by a user"""
    brand_name: str = Field(..., max_length=100)
    branch_name: str = Field(..., max_length=100)
    address: str = Field(..., max_length=500)
    website_url: Optional[str] = None
    theme_name: str = Field(..., max_length=200)
    theme_description: str = ""

    class Config:
        json_schema_extra = {
            "example": {
                "brand_name": "셜록홈즈",
                "branch_name": "강남 1호점",
                "address": "서울 강남구 강남대로 123",
                "website_url": "http://sherlock-holmes.co.kr",
                "theme_name": "빛과 그림자",
                "theme_description": "그림자 속에 숨겨진 비밀을 찾아라",
                "difficulty": 4,
                "fear": 2,
                "activity": 6,
                "recommendation": 8
            }
        }


class ThemeReportCreate(ScoreInput):
    """A new theme for an already approved venue"""
    branch_id: str
    theme_name: str = Field(..., max_length=200)
    theme_description: str = ""


class ScoreFilter(BaseModel):
    """Inclusive score ranges used by map and list filtering"""
    difficulty: tuple[int, int] = (0, 10)
    fear: tuple[int, int] = (0, 10)
    activity: tuple[int, int] = (0, 10)
    recommendation: tuple[int, int] = (0, 10)

    def matches(self, theme: Theme) -> bool:
        for field in SCORE_FIELDS:
            low, high = getattr(self, field)
            if not low <= getattr(theme, field) <= high:
                return False
        return True

    @property
    def is_default(self) -> bool:
        return all(getattr(self, field) == (0, 10) for field in SCORE_FIELDS)
