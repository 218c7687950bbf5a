"""
Places provider interface.
Explicit lifecycle: initialize() -> ready | PlacesApiError, then queries.
"""

from abc import ABC, abstractmethod
from typing import List, Dict, Any


class IPlacesClient(ABC):
    """Interface for a place prediction / details provider"""

    @abstractmethod
    async def initialize(self) -> None:
        """Prepare the client. Raises PlacesApiError when it cannot be used."""
        pass

    @abstractmethod
    async def autocomplete(self, text: str, country: str, place_type: str) -> List[Dict[str, Any]]:
        """Ranked raw predictions for partial input"""
        pass

    @abstractmethod
    async def place_details(self, place_id: str, fields: List[str]) -> Dict[str, Any]:
        """Raw place details (address components, formatted address, geometry)"""
        pass

    @abstractmethod
    async def close(self) -> None:
        pass
