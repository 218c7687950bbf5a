from core.services.statistics_service import StatisticsService
from core.services.places_service import PlacesLookupService

__all__ = [
    "StatisticsService",
    "PlacesLookupService",
]
