"""
Google Places web service client (autocomplete + place details).
"""

import logging
from typing import Optional, List, Dict, Any
import httpx
from core.domain.errors import PlacesApiError
from core.interfaces.places import IPlacesClient
from locales import t

logger = logging.getLogger(__name__)

PLACES_BASE_URL = "https://maps.googleapis.com/maps/api/place"


class GooglePlacesClient(IPlacesClient):
    """IPlacesClient backed by the Places API JSON endpoints"""

    def __init__(
        self,
        api_key: str,
        language: str = "fr",
        base_url: str = PLACES_BASE_URL,
        timeout: float = 10,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.api_key = api_key
        self.language = language
        self.base_url = base_url
        self.timeout = timeout
        self.transport = transport
        self._http: Optional[httpx.AsyncClient] = None

    async def initialize(self) -> None:
        if not self.api_key:
            raise PlacesApiError(t("places_missing_key"))
        if self._http is None:
            self._http = httpx.AsyncClient(
                base_url=self.base_url,
                timeout=self.timeout,
                transport=self.transport,
            )

    async def close(self) -> None:
        if self._http is not None:
            await self._http.aclose()
            self._http = None

    async def _get(self, path: str, params: Dict[str, Any]) -> Dict[str, Any]:
        if self._http is None:
            raise PlacesApiError(t("places_load_failed"))

        params = {**params, "key": self.api_key, "language": self.language}
        try:
            response = await self._http.get(path, params=params)
            response.raise_for_status()
            return response.json()
        except httpx.HTTPError as e:
            logger.error(f"Google Places request {path} failed: {e}")
            raise PlacesApiError(t("places_load_failed")) from e
        except ValueError as e:
            logger.error(f"Google Places returned invalid JSON for {path}: {e}")
            raise PlacesApiError(t("places_load_failed")) from e

    async def autocomplete(self, text: str, country: str, place_type: str) -> List[Dict[str, Any]]:
        payload = await self._get("/autocomplete/json", {
            "input": text,
            "components": f"country:{country}",
            "types": place_type,
        })
        status = payload.get("status")
        if status == "ZERO_RESULTS":
            return []
        if status != "OK":
            raise PlacesApiError(t("places_request_failed", status=status), status=status)
        return payload.get("predictions") or []

    async def place_details(self, place_id: str, fields: List[str]) -> Dict[str, Any]:
        payload = await self._get("/details/json", {
            "place_id": place_id,
            "fields": ",".join(fields),
        })
        status = payload.get("status")
        if status != "OK":
            raise PlacesApiError(t("places_request_failed", status=status), status=status)
        return payload.get("result") or {}
