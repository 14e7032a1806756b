"""
Address geocoding through the Kakao local search API
"""

import logging
from typing import Optional

import httpx

from app.config import settings
from app.core.exceptions import GeocodingError, GeocodingNotFoundError, ValidationError
from app.schemas.venue import Location

logger = logging.getLogger(__name__)


class GeocodingService:
    """Resolves a free-text address to the coordinate of the first match"""

    def __init__(
        self,
        api_key: Optional[str] = None,
        http_client: Optional[httpx.AsyncClient] = None
    ):
        self.api_key = api_key if api_key is not None else settings.KAKAO_REST_API_KEY
        self._owns_client = http_client is None
        self.http = http_client or httpx.AsyncClient(timeout=settings.BACKEND_TIMEOUT_SECONDS)

    async def close(self) -> None:
        if self._owns_client:
            await self.http.aclose()

    async def geocode(self, address: str) -> Location:
        address = (address or "").strip()
        if not address:
            raise ValidationError("Address is required", field="address")

        if not self.api_key:
            raise GeocodingError("Kakao API key is missing")

        try:
            response = await self.http.get(
                settings.KAKAO_API_URL,
                params={"query": address},
                headers={"Authorization": f"KakaoAK {self.api_key}"}
            )
            response.raise_for_status()
            documents = response.json().get("documents") or []
        except (httpx.HTTPError, ValueError, AttributeError) as e:
            logger.error(f"Geocoding error for '{address}': {e}")
            raise GeocodingError("Geocoding service unavailable")

        if not documents:
            logger.info(f"No geocoding result for '{address}'")
            raise GeocodingNotFoundError(address)

        first = documents[0]
        try:
            return Location(lat=float(first["y"]), lng=float(first["x"]))
        except (KeyError, TypeError, ValueError) as e:
            logger.error(f"Malformed geocoding result for '{address}': {e}")
            raise GeocodingError("Malformed geocoding result")
