"""
Club Admin - Main entry point.

Back office for club records and platform statistics, backed by Supabase.
Serves the JSON admin API with aiohttp.
"""

import asyncio
import logging
import sys
from aiohttp import web
from config.settings import settings
from core.domain.errors import ConfigurationError

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    handlers=[
        logging.StreamHandler(sys.stdout),
        logging.FileHandler("admin.log", encoding="utf-8"),
    ],
)
logger = logging.getLogger(__name__)

# Set DEBUG level only for our app loggers, not for noisy libraries
if settings.debug:
    for name in ['adapters', 'core', 'infrastructure', '__main__']:
        logging.getLogger(name).setLevel(logging.DEBUG)
# Silence noisy HTTP logs (supabase and places both go through httpx)
logging.getLogger('httpx').setLevel(logging.WARNING)
logging.getLogger('httpcore').setLevel(logging.WARNING)
logging.getLogger('hpack').setLevel(logging.WARNING)


async def main():
    """Main function - starts the admin web server."""
    logger.info("=== Club Admin Starting ===")
    logger.info(f"  env: {settings.env}")
    logger.info(f"  db schema: {settings.db_schema}")
    logger.info(f"  places: {'enabled' if settings.google_places_api_key else 'disabled (no API key)'}")

    from adapters.web.loader import build_admin_app
    try:
        app = build_admin_app()
    except ConfigurationError as e:
        logger.error(f"Configuration error: {e.message}")
        sys.exit(1)

    runner = web.AppRunner(app)
    await runner.setup()
    site = web.TCPSite(runner, settings.web_host, settings.port)
    await site.start()
    logger.info(f"Admin API running on {settings.web_host}:{settings.port}")

    try:
        await asyncio.Event().wait()
    finally:
        await runner.cleanup()
        logger.info("Admin API stopped.")


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except KeyboardInterrupt:
        logger.info("Admin stopped by user (Ctrl+C)")
    except SystemExit as e:
        sys.exit(e.code)
