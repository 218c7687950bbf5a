from infrastructure.places.google_places_client import GooglePlacesClient

__all__ = ["GooglePlacesClient"]
