"""
Application state: the one object that owns every store and collaborator

Built once in the FastAPI lifespan and reached from endpoints through the
``get_app_state`` dependency. There are no module-level store singletons.
"""

import logging
from typing import List, Optional

from pydantic import ValidationError as PydanticValidationError

from app.config import settings
from app.core.clustering import Clusterer
from app.core.exceptions import BackendError
from app.core.moderation import ModerationStore
from app.core.preferences import UserStore
from app.core.seeding import seed_venues
from app.core.storage import (
    ESCAPE_DATA_STORAGE_KEY,
    FAVORITE_STORAGE_KEY,
    USER_STORAGE_KEY,
    StateStorage,
)
from app.schemas.user import UserPreferences
from app.schemas.venue import Venue
from app.services.backend_client import BackendClient
from app.services.geocoding_service import GeocodingService
from app.services.report_service import ReportService
from app.services.review_service import ReviewService

logger = logging.getLogger(__name__)


def _parse_venues(raw, key: str) -> List[Venue]:
    venues = []
    for item in raw or []:
        try:
            venues.append(Venue.model_validate(item))
        except PydanticValidationError as e:
            logger.warning(f"Dropping unreadable venue from {key}: {e}")
    return venues


class AppState:
    def __init__(
        self,
        storage: StateStorage,
        backend: BackendClient,
        geocoder: GeocodingService
    ):
        self.storage = storage
        self.backend = backend
        self.geocoder = geocoder

        self.moderation = ModerationStore()
        self.user = UserStore()
        self.clusterer = Clusterer(
            min_zoom_to_show=settings.MAP_MIN_ZOOM_TO_SHOW,
            cluster_zoom=settings.MAP_CLUSTER_ZOOM,
            distance=settings.MAP_CLUSTER_DISTANCE
        )
        self.reviews = ReviewService(backend)
        self.reports = ReportService(self.moderation, geocoder)

        self.is_loading = False
        self.last_error: Optional[str] = None

    async def load(self) -> None:
        """
        Restore persisted state and fetch fresh venues.

        Approved venues always come from the latest fetch (or the seed data
        when the fetch fails); cached copies are never trusted across schema
        changes. Pending reports are carried over from storage verbatim.
        """
        await self.storage.clear_legacy()

        user_state = await self.storage.load(USER_STORAGE_KEY)
        if user_state:
            try:
                self.user = UserStore(UserPreferences.model_validate(user_state))
            except PydanticValidationError as e:
                logger.warning(f"Ignoring unreadable {USER_STORAGE_KEY}: {e}")

        favorite_state = await self.storage.load(FAVORITE_STORAGE_KEY) or {}
        escape_state = await self.storage.load(ESCAPE_DATA_STORAGE_KEY) or {}
        self.moderation.restore(
            pending=_parse_venues(escape_state.get("pending_branches"), ESCAPE_DATA_STORAGE_KEY),
            favorites=[str(theme_id) for theme_id in favorite_state.get("favorites") or []]
        )

        try:
            await self.fetch_branches()
        except BackendError:
            if settings.SEED_ON_BACKEND_FAILURE:
                logger.warning("Backend unavailable at startup, using seed venues")
                self.moderation.replace_approved(seed_venues())

        await self.save_escape_data()
        logger.info(
            f"State loaded: {len(self.moderation.approved)} approved, "
            f"{len(self.moderation.pending)} pending, "
            f"{len(self.moderation.favorites)} favorites"
        )

    async def fetch_branches(self) -> List[Venue]:
        self.is_loading = True
        self.last_error = None
        try:
            venues = await self.backend.get_branches()
        except BackendError as e:
            self.last_error = e.message
            logger.error(f"Failed to fetch branches: {e.message}")
            raise
        finally:
            self.is_loading = False

        self.moderation.replace_approved(venues)
        return venues

    async def save_user(self) -> None:
        await self.storage.save(USER_STORAGE_KEY, self.user.state())

    async def save_favorites(self) -> None:
        await self.storage.save(FAVORITE_STORAGE_KEY, self.moderation.favorite_state())

    async def save_escape_data(self) -> None:
        await self.storage.save(ESCAPE_DATA_STORAGE_KEY, self.moderation.escape_data_state())

    async def close(self) -> None:
        await self.backend.close()
        await self.geocoder.close()
        await self.storage.close()
