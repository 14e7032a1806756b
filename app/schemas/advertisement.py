"""
Advertisement schemas
"""

from typing import Any, Dict, List, Union
from pydantic import BaseModel

from app.schemas.venue import ThemeDisplay


class Advertisement(BaseModel):
    id: str
    title: str
    description: str = ""
    image_url: str = ""
    link_url: str = ""
    link_text: str = ""
    display_order: int = 0

    @classmethod
    def from_backend(cls, data: Dict[str, Any]) -> "Advertisement":
        return cls(
            id=str(data["id"]),
            title=data.get("title") or "",
            description=data.get("description") or "",
            image_url=data.get("imageUrl") or "",
            link_url=data.get("linkUrl") or "",
            link_text=data.get("linkText") or "",
            display_order=data.get("displayOrder") or 0,
        )


class FeedItem(BaseModel):
    """One entry of the list-page feed: a theme card or an ad banner"""
    kind: str  # "theme" or "ad"
    item: Union[ThemeDisplay, Advertisement]


class Feed(BaseModel):
    total_themes: int
    items: List[FeedItem]
