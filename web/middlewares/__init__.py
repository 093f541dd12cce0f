"""
Middlewares package initialization.

This package contains all middleware components:
- logging.py: Request/response logging
- error_handler.py: Ledger error to HTTP status translation
- session.py: Session cookie check for /api/*
"""

from web.middlewares.error_handler import error_handler_middleware
from web.middlewares.logging import logging_middleware
from web.middlewares.session import session_auth_middleware


def get_middlewares() -> list:
    """
    Middlewares in execution order.

    Logging first to capture every request, errors next so rejected
    sessions and handler failures are both rendered as JSON.
    """
    return [
        logging_middleware,
        error_handler_middleware,
        session_auth_middleware,
    ]


__all__ = ['get_middlewares']
