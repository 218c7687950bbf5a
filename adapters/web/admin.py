"""
Admin web app - JSON API for the club back office and the statistics dashboard.
Every /api/ route requires a Supabase access token (Authorization: Bearer ...).
"""

import logging
from uuid import UUID
from aiohttp import web

from core.domain.models import ClubCreate, ClubUpdate
from core.interfaces.repositories import IClubRepository, IAuthGateway
from core.services.statistics_service import StatisticsService
from core.services.places_service import PlacesLookupService
from adapters.web.middleware import make_auth_middleware, error_middleware

logger = logging.getLogger(__name__)


def _club_id(request: web.Request) -> UUID:
    try:
        return UUID(request.match_info["club_id"])
    except ValueError as e:
        raise ValueError(f"Invalid club id: {request.match_info['club_id']}") from e


async def _json_body(request: web.Request) -> dict:
    try:
        body = await request.json()
    except ValueError as e:
        raise ValueError("Request body must be valid JSON") from e
    if not isinstance(body, dict):
        raise ValueError("Request body must be a JSON object")
    return body


def create_admin_app(
    club_repo: IClubRepository,
    stats_service: StatisticsService,
    places_service: PlacesLookupService,
    auth_gateway: IAuthGateway,
) -> web.Application:
    """Create aiohttp app with the club, statistics and places routes."""

    async def handle_health(request: web.Request) -> web.Response:
        return web.json_response({"status": "ok", "places": places_service.status.value})

    # === CLUBS ===

    async def handle_list_clubs(request: web.Request) -> web.Response:
        clubs = await club_repo.list_all()
        return web.json_response([club.model_dump(mode="json") for club in clubs])

    async def handle_create_club(request: web.Request) -> web.Response:
        club_data = ClubCreate.model_validate(await _json_body(request))
        club = await club_repo.create(club_data, request.get("user_id"))
        return web.json_response(club.model_dump(mode="json"), status=201)

    async def handle_update_club(request: web.Request) -> web.Response:
        club_id = _club_id(request)
        club_data = ClubUpdate.model_validate(await _json_body(request))
        club = await club_repo.update(club_id, club_data)
        return web.json_response(club.model_dump(mode="json"))

    async def handle_delete_club(request: web.Request) -> web.Response:
        await club_repo.delete(_club_id(request), request.get("user_id"))
        return web.Response(status=204)

    # === STATISTICS ===

    async def handle_stats(request: web.Request) -> web.Response:
        stats = await stats_service.get_statistics()
        return web.json_response(stats.model_dump(mode="json"))

    # === PLACES ===

    async def handle_place_suggestions(request: web.Request) -> web.Response:
        result = await places_service.search(request.query.get("q", ""))
        return web.json_response(result.model_dump(mode="json"))

    async def handle_place_details(request: web.Request) -> web.Response:
        result = await places_service.select(request.match_info["place_id"])
        return web.json_response(result.model_dump(mode="json"))

    async def on_startup(app: web.Application):
        await places_service.start()

    async def on_cleanup(app: web.Application):
        await places_service.stop()

    app = web.Application(middlewares=[error_middleware, make_auth_middleware(auth_gateway)])
    app.router.add_get("/health", handle_health)
    app.router.add_get("/api/clubs", handle_list_clubs)
    app.router.add_post("/api/clubs", handle_create_club)
    app.router.add_patch("/api/clubs/{club_id}", handle_update_club)
    app.router.add_delete("/api/clubs/{club_id}", handle_delete_club)
    app.router.add_get("/api/stats", handle_stats)
    app.router.add_get("/api/places/suggestions", handle_place_suggestions)
    app.router.add_get("/api/places/{place_id}", handle_place_details)
    app.on_startup.append(on_startup)
    app.on_cleanup.append(on_cleanup)
    return app
