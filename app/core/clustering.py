"""
Map marker clustering and zoom-tiered rendering

Venues are grouped with a single greedy pass in input order. Each new cluster
is seeded at the first unassigned venue and absorbs every later unassigned
venue lying within ``distance`` (plain Euclidean distance in degree space) of
the cluster's running centroid. The centroid is updated as a running mean
after every absorption, so membership and centroids depend on input order.
Callers that need stable output must pass venues in a stable order.

Cost is O(n^2) per call, which is fine for a city-scale directory.
"""

import math
import logging
from typing import List, Sequence

from app.schemas.map import Cluster, RenderInstruction, RenderTier
from app.schemas.venue import Venue

logger = logging.getLogger(__name__)


def cluster_venues(venues: Sequence[Venue], distance: float) -> List[Cluster]:
    """
    Group venues into clusters. Every venue ends up in exactly one cluster and
    clusters are never merged with each other.
    """
    clusters: List[Cluster] = []
    assigned = [False] * len(venues)

    for i, seed in enumerate(venues):
        if assigned[i]:
            continue
        assigned[i] = True

        members = [seed]
        lat, lng = seed.lat, seed.lng

        for j in range(i + 1, len(venues)):
            if assigned[j]:
                continue
            other = venues[j]
            if math.hypot(other.lat - lat, other.lng - lng) < distance:
                n = len(members)
                lat = (lat * n + other.lat) / (n + 1)
                lng = (lng * n + other.lng) / (n + 1)
                members.append(other)
                assigned[j] = True

        clusters.append(Cluster(lat=lat, lng=lng, venues=members))

    return clusters


class Clusterer:
    """Decides the render tier for a zoom level and builds the render groups"""

    def __init__(self, min_zoom_to_show: float, cluster_zoom: float, distance: float):
        if min_zoom_to_show > cluster_zoom:
            raise ValueError("min_zoom_to_show must not exceed cluster_zoom")
        self.min_zoom_to_show = min_zoom_to_show
        self.cluster_zoom = cluster_zoom
        self.distance = distance

    def tier_for(self, zoom: float) -> RenderTier:
        if zoom < self.min_zoom_to_show:
            return RenderTier.NOTHING
        if zoom < self.cluster_zoom:
            return RenderTier.CLUSTERS
        return RenderTier.MARKERS

    def render(self, venues: Sequence[Venue], zoom: float) -> RenderInstruction:
        tier = self.tier_for(zoom)

        if tier == RenderTier.CLUSTERS:
            clusters = cluster_venues(venues, self.distance)
            logger.debug(f"Clustered {len(venues)} venues into {len(clusters)} groups at zoom {zoom}")
            return RenderInstruction(tier=tier, zoom=zoom, clusters=clusters)

        if tier == RenderTier.MARKERS:
            return RenderInstruction(tier=tier, zoom=zoom, markers=list(venues))

        return RenderInstruction(tier=tier, zoom=zoom)
