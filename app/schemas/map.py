"""
Map rendering schemas
"""

from enum import Enum
from typing import List
from pydantic import BaseModel

from app.schemas.venue import Location, Venue


class RenderTier(str, Enum):
    NOTHING = "nothing"
    CLUSTERS = "clusters"
    MARKERS = "markers"


class Cluster(BaseModel):
    lat: float
    lng: float
    venues: List[Venue]

    @property
    def size(self) -> int:
        return len(self.venues)


class RenderInstruction(BaseModel):
    tier: RenderTier
    zoom: float
    clusters: List[Cluster] = []
    markers: List[Venue] = []

    @property
    def is_empty(self) -> bool:
        return not self.clusters and not self.markers


class MapView(BaseModel):
    """Render instruction plus where the map should be centred"""
    render: RenderInstruction
    center: Location
    venue_count: int
