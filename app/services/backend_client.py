"""
Backend REST client

Talks JSON to the directory backend. Every response is wrapped in the
``{success, data, error: {code, message}}`` envelope; anything else, including
transport failures, surfaces as ``BackendError``. Nothing is retried.
"""

import logging
from typing import Any, Callable, Dict, List, Optional, TypeVar

import httpx
from pydantic import ValidationError as PydanticValidationError

from app.config import settings
from app.core.exceptions import BackendError
from app.schemas.advertisement import Advertisement
from app.schemas.response import BackendEnvelope
from app.schemas.review import Review
from app.schemas.venue import SERVER_SCORE_FIELDS, Theme, Venue

logger = logging.getLogger(__name__)

T = TypeVar("T")


class BackendClient:
    """Client for the branches/themes/reviews/auth/advertisements endpoints"""

    def __init__(self, http_client: Optional[httpx.AsyncClient] = None):
        self._owns_client = http_client is None
        self.http = http_client or httpx.AsyncClient(
            base_url=settings.BACKEND_API_URL,
            timeout=settings.BACKEND_TIMEOUT_SECONDS
        )

    async def close(self) -> None:
        if self._owns_client:
            await self.http.aclose()

    async def _request(
        self,
        method: str,
        path: str,
        failure_message: str,
        json: Optional[Dict[str, Any]] = None
    ) -> Any:
        try:
            response = await self.http.request(method, path, json=json)
        except httpx.HTTPError as e:
            logger.error(f"Backend {method} {path} failed: {e}")
            raise BackendError(f"{failure_message}: {e}")

        try:
            envelope = BackendEnvelope.model_validate(response.json())
        except (ValueError, PydanticValidationError):
            logger.error(f"Backend {method} {path} returned HTTP {response.status_code} without an envelope")
            raise BackendError(
                f"{failure_message}: HTTP {response.status_code}",
                details={"status_code": response.status_code}
            )

        if not envelope.success:
            error = envelope.error
            message = error.message if error and error.message else failure_message
            code = error.code if error and error.code else "BACKEND_ERROR"
            logger.warning(f"Backend {method} {path} rejected: {code} {message}")
            raise BackendError(message, code=code)

        return envelope.data

    @staticmethod
    def _parse(parser: Callable[[Dict[str, Any]], T], data: Any, what: str) -> T:
        try:
            return parser(data)
        except (KeyError, TypeError, PydanticValidationError) as e:
            raise BackendError(f"Malformed {what} data from backend: {e}")

    def _parse_list(self, parser: Callable[[Dict[str, Any]], T], data: Any, what: str) -> List[T]:
        return [self._parse(parser, item, what) for item in data or []]

    # Branches

    async def get_branches(self) -> List[Venue]:
        data = await self._request("GET", "/branches", "Failed to fetch branches")
        return self._parse_list(Venue.from_backend, data, "branch")

    async def get_branch(self, branch_id: str) -> Venue:
        data = await self._request("GET", f"/branches/{branch_id}", "Failed to fetch branch")
        return self._parse(Venue.from_backend, data, "branch")

    async def create_branch(self, venue: Venue) -> Venue:
        data = await self._request(
            "POST", "/branches", "Failed to create branch", json=venue.to_backend()
        )
        return self._parse(Venue.from_backend, data, "branch")

    async def delete_branch(self, branch_id: str) -> None:
        await self._request("POST", f"/branches/{branch_id}/delete", "Failed to delete branch")

    # Themes

    async def get_themes(self) -> List[Theme]:
        data = await self._request("GET", "/themes", "Failed to fetch themes")
        return self._parse_list(Theme.from_backend, data, "theme")

    async def get_theme(self, theme_id: str) -> Theme:
        data = await self._request("GET", f"/themes/{theme_id}", "Failed to fetch theme")
        return self._parse(Theme.from_backend, data, "theme")

    async def get_branch_themes(self, branch_id: str) -> List[Theme]:
        data = await self._request("GET", f"/branches/{branch_id}/themes", "Failed to fetch themes")
        return self._parse_list(Theme.from_backend, data, "theme")

    # Reviews

    async def get_theme_reviews(self, theme_id: str) -> List[Review]:
        data = await self._request("GET", f"/themes/{theme_id}/reviews", "Failed to fetch reviews")
        return self._parse_list(Review.from_backend, data, "review")

    async def create_review(
        self,
        theme_id: str,
        nickname: str,
        scores: Dict[str, int],
        comment: str
    ) -> Review:
        payload = {
            "themeId": int(theme_id) if theme_id.isdigit() else theme_id,
            "nickname": nickname,
            "comment": comment,
        }
        for field, server_field in SERVER_SCORE_FIELDS.items():
            payload[server_field] = scores[field]

        data = await self._request("POST", "/reviews", "Failed to create review", json=payload)
        return self._parse(Review.from_backend, data, "review")

    async def delete_review(self, review_id: str) -> None:
        await self._request("POST", f"/reviews/{review_id}/delete", "Failed to delete review")

    # Auth

    async def register(self, email: str, password: str, nickname: str) -> Any:
        return await self._request(
            "POST",
            "/auth/register",
            "Failed to register",
            json={"email": email, "password": password, "nickname": nickname}
        )

    async def login(self, email: str, password: str) -> Any:
        return await self._request(
            "POST",
            "/auth/login",
            "Failed to login",
            json={"email": email, "password": password}
        )

    # Advertisements

    async def get_advertisements(self) -> List[Advertisement]:
        data = await self._request("GET", "/advertisements", "Failed to fetch advertisements")
        ads = self._parse_list(Advertisement.from_backend, data, "advertisement")
        return sorted(ads, key=lambda ad: ad.display_order)
