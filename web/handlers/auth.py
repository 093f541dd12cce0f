"""Login and logout endpoints."""
import logging

from aiohttp import web

from core.exceptions import ConfigurationError
from web.app_keys import PASSWORD_GATE, SESSION_COOKIE, SESSIONS, SETTINGS

logger = logging.getLogger(__name__)


def setup_routes(app: web.Application):
    """Setup authentication routes."""
    app.router.add_post('/api/auth', login)
    app.router.add_post('/api/auth/logout', logout)


async def login(request: web.Request):
    """Check the password and set the session cookie."""
    try:
        body = await request.json()
    except ValueError:
        body = None

    password = body.get("password") if isinstance(body, dict) else None
    if not password:
        return web.json_response(
            {"success": False, "error": "Password is required"},
            status=400
        )

    sessions = request.app[SESSIONS]
    try:
        if not request.app[PASSWORD_GATE].verify_password(password):
            logger.warning("Login attempt with invalid password")
            return web.json_response(
                {"success": False, "error": "Invalid password"},
                status=401
            )
        token = sessions.create_session()
    except ConfigurationError as e:
        logger.error(f"Authentication error: {e}")
        return web.json_response(
            {"success": False, "error": "Authentication service not configured"},
            status=500
        )

    response = web.json_response({"success": True})
    response.set_cookie(
        SESSION_COOKIE,
        token,
        httponly=True,
        secure=request.app[SETTINGS].is_production,
        samesite="Lax",
        max_age=sessions.expires_in_seconds,
        path="/",
    )
    logger.info("Session created")
    return response


async def logout(request: web.Request):
    """
    Clear the session cookie.

    Tokens are stateless, so an already issued token keeps working until it
    expires if the client held on to it.
    """
    response = web.json_response({"success": True})
    response.del_cookie(SESSION_COOKIE, path="/")
    return response
