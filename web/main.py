"""HTTP entrypoint: aiohttp application serving the ledger API."""
import logging
from typing import Optional

from aiohttp import web

from database.base import Database
from services.auth import PasswordGate, SessionManager
from web.app_keys import DATABASE, PASSWORD_GATE, SESSIONS, SETTINGS
from web.config import Settings
from web.handlers import register_all_handlers
from web.logging_config import setup_logging
from web.middlewares import get_middlewares

logger = logging.getLogger(__name__)


def build_app(settings: Settings, database: Optional[Database] = None) -> web.Application:
    """
    Assemble the application.

    Args:
        settings: Application settings
        database: Pre-built database handle; tests pass Database.in_memory()

    Returns:
        Application whose startup creates the schema and cleanup closes the engine
    """
    app = web.Application(middlewares=get_middlewares())
    app[SETTINGS] = settings
    app[DATABASE] = database or Database.from_settings(settings)
    app[PASSWORD_GATE] = PasswordGate(settings)
    app[SESSIONS] = SessionManager(settings)

    register_all_handlers(app)

    app.on_startup.append(_on_startup)
    app.on_cleanup.append(_on_cleanup)
    return app


async def _on_startup(app: web.Application):
    settings = app[SETTINGS]
    if not settings.app_password:
        logger.error("APP_PASSWORD is not set: every login will fail")
    if not settings.jwt_secret:
        logger.error("JWT_SECRET is not set: sessions cannot be issued")
    await app[DATABASE].init()


async def _on_cleanup(app: web.Application):
    await app[DATABASE].close()
    logger.info("Database connections closed")


def main():
    settings = Settings()
    setup_logging(settings)
    logger.info(f"Starting car ledger API ({settings.environment}) on {settings.host}:{settings.port}")
    web.run_app(build_app(settings), host=settings.host, port=settings.port, print=None)


if __name__ == "__main__":
    main()
