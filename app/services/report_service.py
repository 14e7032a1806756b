"""
User report submission: new venues and new themes for existing venues

Reports are validated and geocoded here, before anything reaches the
moderation store.
"""

import logging
import time
from typing import Callable, Optional

from app.config import settings
from app.core.exceptions import ValidationError
from app.core.moderation import ModerationStore
from app.schemas.venue import Theme, ThemeReportCreate, Venue, VenueReportCreate
from app.services.geocoding_service import GeocodingService

logger = logging.getLogger(__name__)


def _require(value: Optional[str], field: str) -> str:
    value = (value or "").strip()
    if not value:
        raise ValidationError(f"{field} is required", field=field)
    return value


class ReportService:
    def __init__(
        self,
        store: ModerationStore,
        geocoder: GeocodingService,
        clock: Callable[[], float] = time.time
    ):
        self.store = store
        self.geocoder = geocoder
        self.clock = clock
        self._last_stamp = 0

    def _stamp(self) -> int:
        """Millisecond timestamp, bumped so two reports never share an id"""
        stamp = int(self.clock() * 1000)
        if stamp <= self._last_stamp:
            stamp = self._last_stamp + 1
        self._last_stamp = stamp
        return stamp

    def _new_theme(self, stamp: int, name: str, description: str, scores) -> Theme:
        return Theme(
            id=f"theme-{stamp}",
            name=name,
            description=description,
            poster_url=settings.REPORT_DEFAULT_POSTER_URL,
            difficulty=scores.difficulty,
            fear=scores.fear,
            activity=scores.activity,
            recommendation=scores.recommendation,
            tags=[settings.REPORT_DEFAULT_TAG],
        )

    async def report_venue(self, form: VenueReportCreate) -> Venue:
        brand_name = _require(form.brand_name, "brand_name")
        branch_name = _require(form.branch_name, "branch_name")
        address = _require(form.address, "address")
        theme_name = _require(form.theme_name, "theme_name")

        # Submission is blocked until the address resolves
        location = await self.geocoder.geocode(address)

        stamp = self._stamp()
        venue = Venue(
            id=f"branch-{stamp}",
            brand_name=brand_name,
            branch_name=branch_name,
            address=address,
            lat=location.lat,
            lng=location.lng,
            website_url=(form.website_url or "").strip() or None,
            themes=[self._new_theme(stamp, theme_name, form.theme_description, form)],
        )
        self.store.report(venue)
        return venue

    def report_theme(self, form: ThemeReportCreate) -> Venue:
        theme_name = _require(form.theme_name, "theme_name")
        parent = self.store.get_approved(form.branch_id)
        if parent is None:
            raise ValidationError(
                f"Branch {form.branch_id} is not an approved branch", field="branch_id"
            )

        stamp = self._stamp()
        venue = parent.model_copy(update={
            "id": f"branch-{stamp}",
            "parent_id": parent.id,
            "themes": [self._new_theme(stamp, theme_name, form.theme_description, form)],
        })
        self.store.report(venue)
        return venue
