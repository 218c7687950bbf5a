"""
Middleware for the admin web app.

- auth middleware: resolves the bearer token and gates every /api/ route
- error middleware: maps domain errors to JSON responses
"""

import logging
from typing import Awaitable, Callable
from aiohttp import web
from pydantic import ValidationError

from core.domain.errors import (
    AppError, AuthError, NotFoundError, ClubDeletionError,
)
from core.interfaces.repositories import IAuthGateway
from locales import t

logger = logging.getLogger(__name__)

Handler = Callable[[web.Request], Awaitable[web.StreamResponse]]

PROTECTED_PREFIX = "/api/"


def _bearer_token(request: web.Request) -> str:
    header = request.headers.get("Authorization", "")
    scheme, _, token = header.partition(" ")
    if scheme.lower() != "bearer":
        return ""
    return token.strip()


def make_auth_middleware(auth_gateway: IAuthGateway):
    """Reject unauthenticated calls; expose the caller as request['user_id']"""

    @web.middleware
    async def auth_middleware(request: web.Request, handler: Handler) -> web.StreamResponse:
        if not request.path.startswith(PROTECTED_PREFIX):
            return await handler(request)

        user_id = await auth_gateway.get_user_id(_bearer_token(request))
        if user_id is None:
            return web.json_response({"error": t("auth_invalid_token")}, status=401)

        request["user_id"] = user_id
        return await handler(request)

    return auth_middleware


@web.middleware
async def error_middleware(request: web.Request, handler: Handler) -> web.StreamResponse:
    try:
        return await handler(request)
    except ValidationError as e:
        return web.json_response({"error": "Invalid data", "details": e.errors(include_url=False, include_context=False, include_input=False)}, status=400)
    except ValueError as e:
        return web.json_response({"error": str(e)}, status=400)
    except AuthError as e:
        return web.json_response({"error": e.message}, status=401)
    except NotFoundError as e:
        return web.json_response({"error": e.message}, status=404)
    except ClubDeletionError as e:
        logger.error(f"{request.method} {request.path} failed at stage {e.stage}: {e.message}")
        return web.json_response({"error": e.message, "stage": e.stage}, status=500)
    except AppError as e:
        logger.error(f"{request.method} {request.path} failed: {e.message}")
        return web.json_response({"error": e.message}, status=500)
