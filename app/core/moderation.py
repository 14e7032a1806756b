"""
Moderation store: approved venues, pending reports and favorites

Lifecycle of a venue::

            report()            approve()
    (none) ---------> PENDING -----------> APPROVED ---------> (removed)
                         |                            delete()
                         | reject()
                         v
                     (removed)

A venue id lives in exactly one of the approved and pending collections.
There is no way back from APPROVED to PENDING and no edit in place.

Every mutation is a plain synchronous method, so a mutation never interleaves
with another one on the event loop. Persisting the result is the caller's job
(see ``AppState``).
"""

import logging
from typing import Any, Dict, Iterable, List, Optional

from app.schemas.venue import ThemeDisplay, Venue

logger = logging.getLogger(__name__)


class ModerationStore:
    """Owns the approved, pending and favorite collections"""

    def __init__(
        self,
        approved: Optional[Iterable[Venue]] = None,
        pending: Optional[Iterable[Venue]] = None,
        favorites: Optional[Iterable[str]] = None
    ):
        self._approved: List[Venue] = list(approved or [])
        self._pending: List[Venue] = list(pending or [])
        # dict keeps insertion order and doubles as an ordered set
        self._favorites: Dict[str, None] = dict.fromkeys(favorites or [])

    # -- collections -------------------------------------------------------

    @property
    def approved(self) -> List[Venue]:
        return list(self._approved)

    @property
    def pending(self) -> List[Venue]:
        return list(self._pending)

    @property
    def favorites(self) -> List[str]:
        return list(self._favorites)

    def get_approved(self, venue_id: str) -> Optional[Venue]:
        return next((v for v in self._approved if v.id == venue_id), None)

    def get_pending(self, venue_id: str) -> Optional[Venue]:
        return next((v for v in self._pending if v.id == venue_id), None)

    def restore(self, pending: Iterable[Venue], favorites: Iterable[str]) -> None:
        """Load persisted pending reports and favorites"""
        self._pending = list(pending)
        self._favorites = dict.fromkeys(favorites)

    def replace_approved(self, venues: Iterable[Venue]) -> None:
        """Swap in a fresh backend fetch"""
        self._approved = list(venues)
        logger.info(f"Approved venues replaced ({len(self._approved)} venues)")

    # -- moderation transitions ---------------------------------------------

    def report(self, venue: Venue) -> None:
        """
        Queue a venue for approval. Duplicates and out-of-range coordinates
        are accepted as-is; validation happens upstream.
        """
        self._pending.append(venue)
        logger.info(f"Venue reported: {venue.id} ({venue.display_name})")

    def approve(self, venue_id: str) -> Optional[Venue]:
        """
        Promote a pending venue. Approving an id that is not pending is a
        silent no-op and returns None.

        A pending venue carrying ``parent_id`` of an approved venue is a theme
        report: its themes are appended to that parent instead of adding a
        second venue.
        """
        venue = self.get_pending(venue_id)
        if venue is None:
            return None

        self._pending = [v for v in self._pending if v.id != venue_id]

        parent = self.get_approved(venue.parent_id) if venue.parent_id else None
        if parent is not None:
            merged = parent.model_copy(update={"themes": [*parent.themes, *venue.themes]})
            self._approved = [merged if v.id == parent.id else v for v in self._approved]
            logger.info(f"Theme report {venue_id} merged into venue {parent.id}")
            return merged

        promoted = venue.model_copy(update={"parent_id": None})
        self._approved.append(promoted)
        logger.info(f"Venue approved: {venue_id}")
        return promoted

    def reject(self, venue_id: str) -> bool:
        """Discard a pending report. Returns whether anything was removed."""
        before = len(self._pending)
        self._pending = [v for v in self._pending if v.id != venue_id]
        removed = len(self._pending) != before
        if removed:
            logger.info(f"Venue report rejected: {venue_id}")
        return removed

    def delete(self, venue_id: str) -> bool:
        """
        Remove an approved venue together with its themes. Favorites and
        reviews pointing at those themes are left dangling on purpose.
        """
        before = len(self._approved)
        self._approved = [v for v in self._approved if v.id != venue_id]
        removed = len(self._approved) != before
        if removed:
            logger.info(f"Venue deleted: {venue_id}")
        return removed

    # -- favorites ----------------------------------------------------------

    def add_favorite(self, theme_id: str) -> None:
        self._favorites[theme_id] = None

    def remove_favorite(self, theme_id: str) -> None:
        self._favorites.pop(theme_id, None)

    def toggle_favorite(self, theme_id: str) -> bool:
        """Flip membership and return the new state"""
        if self.is_favorite(theme_id):
            self.remove_favorite(theme_id)
            return False
        self.add_favorite(theme_id)
        return True

    def is_favorite(self, theme_id: str) -> bool:
        return theme_id in self._favorites

    # -- projections --------------------------------------------------------

    def all_themes(self) -> List[ThemeDisplay]:
        """Every theme of every approved venue, with venue fields attached"""
        return [
            ThemeDisplay.from_venue(theme, venue)
            for venue in self._approved
            for theme in venue.themes
        ]

    def find_theme(self, theme_id: str) -> Optional[ThemeDisplay]:
        """None when the theme no longer exists"""
        return next((t for t in self.all_themes() if t.id == theme_id), None)

    # -- persistence boundary -----------------------------------------------

    def escape_data_state(self) -> Dict[str, Any]:
        return {
            "branches": [v.model_dump(mode="json") for v in self._approved],
            "pending_branches": [v.model_dump(mode="json") for v in self._pending],
        }

    def favorite_state(self) -> Dict[str, Any]:
        return {"favorites": self.favorites}
