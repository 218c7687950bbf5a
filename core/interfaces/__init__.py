from core.interfaces.repositories import (
    IClubRepository,
    IClubDeletionStrategy,
    IStatisticsRepository,
    IAuthGateway,
)
from core.interfaces.places import IPlacesClient

__all__ = [
    # Repositories
    "IClubRepository",
    "IClubDeletionStrategy",
    "IStatisticsRepository",
    "IAuthGateway",
    # Places
    "IPlacesClient",
]
