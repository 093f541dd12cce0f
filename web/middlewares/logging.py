"""
Logging middleware for request/response tracking.

Logs every HTTP request with timing information.
"""

import logging
import time
from typing import Callable

from aiohttp import web

logger = logging.getLogger(__name__)


@web.middleware
async def logging_middleware(request: web.Request, handler: Callable):
    """Log method, path, status and duration of each request."""
    start_time = time.time()
    status = 500
    try:
        response = await handler(request)
        status = response.status
        return response
    except web.HTTPException as e:
        status = e.status
        raise
    finally:
        duration = time.time() - start_time
        logger.info(
            f"{request.method} {request.path} -> {status} in {duration:.3f}s",
            extra={
                "method": request.method,
                "path": request.path,
                "status": status,
                "duration": duration,
            }
        )
