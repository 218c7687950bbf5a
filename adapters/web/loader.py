"""
Admin web loader - wires repositories and services from settings.
"""

from aiohttp import web
from config.settings import settings

# Infrastructure
from infrastructure.database import (
    SupabaseClubRepository,
    SupabaseStatisticsRepository,
    SupabaseAuthGateway,
)
from infrastructure.database.supabase_client import get_supabase
from infrastructure.places import GooglePlacesClient

# Core services
from core.services import StatisticsService, PlacesLookupService

from adapters.web.admin import create_admin_app


def build_admin_app() -> web.Application:
    """Create the admin app with Supabase and Google Places behind it."""
    client = get_supabase()

    # === REPOSITORIES ===
    club_repo = SupabaseClubRepository(client)
    stats_repo = SupabaseStatisticsRepository(client)
    auth_gateway = SupabaseAuthGateway(client)

    # === SERVICES ===
    stats_service = StatisticsService(stats_repo=stats_repo)
    places_service = PlacesLookupService(
        client=GooglePlacesClient(
            api_key=settings.google_places_api_key,
            language=settings.places_language,
        ),
        country=settings.places_country,
    )

    return create_admin_app(
        club_repo=club_repo,
        stats_service=stats_service,
        places_service=places_service,
        auth_gateway=auth_gateway,
    )
