"""
Handlers package initialization.

- auth.py: login/logout (session cookie)
- api.py: ledger REST endpoints and health check
"""

from aiohttp import web


def register_all_handlers(app: web.Application):
    """Register every route on the application."""
    from . import api, auth

    auth.setup_routes(app)
    api.setup_routes(app)
