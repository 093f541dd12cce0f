"""Session middleware for aiohttp - validates the signed session cookie."""
import logging
from typing import Callable

from aiohttp import web

from core.exceptions import AuthenticationError
from web.app_keys import SESSION_COOKIE, SESSIONS

logger = logging.getLogger(__name__)

AUTH_PATH = '/api/auth'


def is_public(path: str) -> bool:
    """Everything outside /api/, plus /api/auth and the routes under it."""
    if not path.startswith('/api/'):
        return True
    return path == AUTH_PATH or path.startswith(AUTH_PATH + '/')


@web.middleware
async def session_auth_middleware(request: web.Request, handler: Callable):
    """Middleware to protect /api/* endpoints.

    Login and logout stay public; everything else under /api/ needs a
    valid, unexpired session token in the ``sessionId`` cookie. Rejections
    are raised as AuthenticationError and rendered by the error middleware.
    """
    if is_public(request.path):
        return await handler(request)

    token = request.cookies.get(SESSION_COOKIE)
    if not token:
        logger.warning(f"API access without session: {request.path}")
        raise AuthenticationError("Unauthorized: No session found")

    if not request.app[SESSIONS].validate_session(token):
        logger.warning(f"Invalid or expired session for {request.path}")
        raise AuthenticationError("Unauthorized: Invalid or expired session")

    return await handler(request)
