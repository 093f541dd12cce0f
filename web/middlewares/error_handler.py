"""
Error handler middleware for centralized exception handling.

The only place where ledger error kinds become HTTP status codes.
"""

import logging
from typing import Callable

from aiohttp import web

from core.exceptions import (
    AuthenticationError,
    ConfigurationError,
    LedgerError,
    ResourceNotFoundError,
    ValidationError,
)

logger = logging.getLogger(__name__)

GENERIC_ERROR = "Internal server error"


def error_status(error: LedgerError) -> int:
    """HTTP status for a ledger error kind."""
    if isinstance(error, ValidationError):
        return 400
    if isinstance(error, AuthenticationError):
        return 401
    if isinstance(error, ResourceNotFoundError):
        return 404
    return 500


@web.middleware
async def error_handler_middleware(request: web.Request, handler: Callable):
    """
    Catch ledger and unexpected errors and answer with ``{"error": ...}``.

    Validation, auth and not-found messages go to the client verbatim;
    configuration and unexpected failures are logged and answered with a
    generic message.
    """
    try:
        return await handler(request)
    except web.HTTPException:
        raise
    except ConfigurationError as e:
        logger.error(f"Configuration error on {request.method} {request.path}: {e}")
        return web.json_response({"error": "Service not configured"}, status=500)
    except LedgerError as e:
        status = error_status(e)
        if status >= 500:
            logger.error(f"Unhandled ledger error: {e}", exc_info=True)
            return web.json_response({"error": GENERIC_ERROR}, status=status)
        logger.info(f"{request.method} {request.path} rejected ({status}): {e.message}")
        return web.json_response({"error": e.message}, status=status)
    except Exception as e:
        logger.error(
            f"Unhandled error on {request.method} {request.path}: {e}",
            exc_info=True
        )
        return web.json_response({"error": GENERIC_ERROR}, status=500)
