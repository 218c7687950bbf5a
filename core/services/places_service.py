"""
Places lookup - address autocomplete and geocoding for the club form.

Failures never raise to the caller: they are reported through `status` and
`error` so the form keeps working with an empty suggestion list.
"""

import logging
from typing import Optional, List, Dict, Any
from core.domain.models import (
    PlaceSuggestion, PlaceLocation, PlaceSearchResult, PlaceSelectResult, PlacesStatus,
)
from core.domain.constants import (
    MIN_PLACES_QUERY_LENGTH, MAX_PLACE_SUGGESTIONS, PLACES_TYPE, PLACE_DETAIL_FIELDS,
)
from core.domain.errors import PlacesApiError
from core.interfaces.places import IPlacesClient
from locales import t, DEFAULT_LANG

logger = logging.getLogger(__name__)


def to_suggestion(prediction: Dict[str, Any]) -> PlaceSuggestion:
    formatting = prediction.get("structured_formatting") or {}
    return PlaceSuggestion(
        label=formatting.get("main_text") or prediction.get("description", ""),
        secondary_label=formatting.get("secondary_text"),
        place_id=prediction["place_id"],
    )


def location_label(place: Dict[str, Any]) -> str:
    """
    "City, Country" from the address components.
    City is the locality, or the first-level administrative area when there is none.
    Falls back to the provider's formatted address.
    """
    city = ""
    country = ""
    for component in place.get("address_components") or []:
        types = component.get("types") or []
        if "locality" in types:
            city = component.get("long_name", "")
        elif "administrative_area_level_1" in types and not city:
            city = component.get("long_name", "")
        if "country" in types:
            country = component.get("long_name", "")

    parts = [part for part in (city, country) if part]
    if parts:
        return ", ".join(parts)
    return place.get("formatted_address") or ""


class PlacesLookupService:
    """Autocomplete + details flow on top of an IPlacesClient"""

    def __init__(self, client: IPlacesClient, country: str = "fr", lang: str = DEFAULT_LANG):
        self.client = client
        self.country = country
        self.lang = lang
        self.status = PlacesStatus.IDLE
        self.error: Optional[str] = None

    @property
    def ready(self) -> bool:
        return self.status == PlacesStatus.READY

    async def start(self) -> PlacesStatus:
        """Initialize the provider. Leaves the lookup disabled on failure."""
        self.status = PlacesStatus.LOADING
        try:
            await self.client.initialize()
        except PlacesApiError as e:
            logger.warning(f"Places lookup disabled: {e.message}")
            self.status = PlacesStatus.ERROR
            self.error = e.message
        else:
            self.status = PlacesStatus.READY
            self.error = None
            logger.info("Places lookup ready")
        return self.status

    async def stop(self) -> None:
        await self.client.close()
        self.status = PlacesStatus.IDLE

    def _result(self, suggestions: List[PlaceSuggestion] = None, error: str = None) -> PlaceSearchResult:
        return PlaceSearchResult(
            status=self.status,
            suggestions=suggestions or [],
            error=error or self.error,
        )

    async def search(self, text: str) -> PlaceSearchResult:
        """Suggestions for partial input; short input clears them"""
        query = (text or "").strip()
        if len(query) < MIN_PLACES_QUERY_LENGTH or not self.ready:
            return self._result()

        try:
            predictions = await self.client.autocomplete(query, self.country, PLACES_TYPE)
        except PlacesApiError as e:
            logger.warning(f"Place predictions failed for '{query}': {e.message}")
            return self._result(error=e.message)

        suggestions = [to_suggestion(p) for p in predictions[:MAX_PLACE_SUGGESTIONS]]
        return self._result(suggestions)

    def _selection(self, location: PlaceLocation = None, error: str = None) -> PlaceSelectResult:
        return PlaceSelectResult(status=self.status, location=location, error=error or self.error)

    async def select(self, place_id: str) -> PlaceSelectResult:
        """Resolve a chosen suggestion to a label and coordinates"""
        if not self.ready or not place_id:
            return self._selection()

        try:
            place = await self.client.place_details(place_id, PLACE_DETAIL_FIELDS)
        except PlacesApiError as e:
            logger.warning(f"Place details failed for {place_id}: {e.message}")
            return self._selection(error=e.message)

        location = (place.get("geometry") or {}).get("location") or {}
        if "lat" not in location or "lng" not in location:
            logger.warning(f"Place {place_id} has no coordinates")
            return self._selection(error=t("places_no_coordinates", self.lang))

        return self._selection(PlaceLocation(
            label=location_label(place),
            latitude=location["lat"],
            longitude=location["lng"],
        ))
