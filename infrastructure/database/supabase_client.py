"""
Supabase client initialization.
Single point of database connection.
"""

from supabase import create_client, Client
from supabase.lib.client_options import ClientOptions
from postgrest.exceptions import APIError
import httpx
import asyncio
import concurrent.futures
import logging
from functools import wraps
from typing import Optional

from config.settings import settings
from core.domain.errors import ConfigurationError

logger = logging.getLogger(__name__)

_client: Optional[Client] = None


def get_supabase() -> Client:
    """Return the shared Supabase client, creating it on first use."""
    global _client
    if _client is None:
        url = settings.supabase_url
        key = settings.supabase_api_key
        if not url or not key:
            logger.error(
                "Supabase credentials not configured "
                f"(SUPABASE_URL: {'set' if url else 'MISSING'}, "
                f"SUPABASE_KEY: {'set' if key else 'MISSING'})"
            )
            raise ConfigurationError(
                "Required env vars: SUPABASE_URL, SUPABASE_SERVICE_KEY (or SUPABASE_KEY)"
            )

        # Schema isolation: staging may use its own schema, production uses public
        if settings.db_schema != "public":
            _client = create_client(url, key, options=ClientOptions(schema=settings.db_schema))
        else:
            _client = create_client(url, key)
    return _client


# Dedicated bounded thread pool for DB operations - prevents exhausting the
# default executor when many Supabase calls run concurrently.
_db_executor = concurrent.futures.ThreadPoolExecutor(
    max_workers=10,
    thread_name_prefix="supabase-db",
)


def run_sync(func):
    """
    Decorator to run synchronous Supabase operations in async context.
    Supabase Python SDK is synchronous, so we need this wrapper.
    Uses a dedicated bounded thread pool instead of the default executor.
    """
    @wraps(func)
    async def wrapper(*args, **kwargs):
        loop = asyncio.get_running_loop()
        return await loop.run_in_executor(_db_executor, lambda: func(*args, **kwargs))
    return wrapper


# A backend call can fail with a structured PostgREST error or at transport level
BACKEND_ERRORS = (APIError, httpx.HTTPError)


def error_text(error: Exception) -> str:
    """Human-readable message of a backend error"""
    return getattr(error, "message", None) or str(error)
