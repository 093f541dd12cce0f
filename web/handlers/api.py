"""
REST API endpoints for the ledger.

Thin request -> service -> response adapters. Validation and business
rules live in the services; status codes come from the error middleware.
"""

import logging
from datetime import datetime, timezone
from typing import Any, Dict, Type

from aiohttp import web

from core.exceptions import ResourceNotFoundError, ValidationError
from services.base import BaseEntityService
from services.expenses import ExpenseService
from services.mileage import MileageService
from services.refills import RefillService
from services.trips import TripService
from web.app_keys import DATABASE

logger = logging.getLogger(__name__)


def setup_routes(app: web.Application):
    """Setup all API routes."""
    # Health check
    app.router.add_get('/health', health_check)

    # Mileage goes before /api/trips/{id} so "mileage" is not taken for an id
    app.router.add_get('/api/trips/mileage', get_mileage)

    EntityResource(ExpenseService, 'expense', 'expenses').register(app)
    EntityResource(RefillService, 'refill', 'refills').register(app)
    EntityResource(TripService, 'trip', 'trips').register(app)


# ========== Helpers ==========

async def read_json(request: web.Request) -> Dict[str, Any]:
    """Request body as a JSON object."""
    try:
        body = await request.json()
    except ValueError:
        raise ValidationError("Invalid JSON body") from None
    if not isinstance(body, dict):
        raise ValidationError("Request body must be a JSON object")
    return body


# ========== Health Check ==========

async def health_check(request: web.Request):
    """Health check endpoint."""
    return web.json_response({
        "status": "ok",
        "time": datetime.now(timezone.utc).isoformat()
    })


# ========== Mileage ==========

async def get_mileage(request: web.Request):
    """Cumulative distance over time from trips and refills."""
    async with request.app[DATABASE].session() as session:
        points = await MileageService(session).get_mileage_over_time()
    return web.json_response({"data": [p.to_json() for p in points]})


# ========== Entities ==========

class EntityResource:
    """CRUD endpoints for one entity service under /api/<plural>."""

    def __init__(self, service_class: Type[BaseEntityService], singular: str, plural: str):
        self.service_class = service_class
        self.singular = singular
        self.plural = plural

    def register(self, app: web.Application):
        base = f'/api/{self.plural}'
        app.router.add_get(base, self.list)
        app.router.add_post(base, self.create)
        app.router.add_get(base + '/{id}', self.get)
        app.router.add_put(base + '/{id}', self.update)
        app.router.add_delete(base + '/{id}', self.delete)

    def _entity_id(self, request: web.Request) -> int:
        try:
            return int(request.match_info['id'])
        except ValueError:
            raise ValidationError(f"Invalid {self.singular} ID") from None

    async def list(self, request: web.Request):
        async with request.app[DATABASE].session() as session:
            records = await self.service_class(session).list()
        return web.json_response({self.plural: [r.to_json() for r in records]})

    async def create(self, request: web.Request):
        body = await read_json(request)
        async with request.app[DATABASE].session() as session:
            record = await self.service_class(session).create(body)
        return web.json_response({self.singular: record.to_json()}, status=201)

    async def get(self, request: web.Request):
        entity_id = self._entity_id(request)
        async with request.app[DATABASE].session() as session:
            record = await self.service_class(session).get_by_id(entity_id)
        if record is None:
            raise ResourceNotFoundError(self.singular, entity_id)
        return web.json_response({self.singular: record.to_json()})

    async def update(self, request: web.Request):
        entity_id = self._entity_id(request)
        body = await read_json(request)
        async with request.app[DATABASE].session() as session:
            record = await self.service_class(session).update(entity_id, body)
        return web.json_response({self.singular: record.to_json()})

    async def delete(self, request: web.Request):
        entity_id = self._entity_id(request)
        async with request.app[DATABASE].session() as session:
            deleted = await self.service_class(session).delete(entity_id)
        if not deleted:
            raise ResourceNotFoundError(self.singular, entity_id)
        return web.json_response({"success": True})
