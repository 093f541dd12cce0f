"""Typed keys for objects stored on the aiohttp application."""
from aiohttp import web

from database.base import Database
from services.auth import PasswordGate, SessionManager
from web.config import Settings

SETTINGS = web.AppKey("settings", Settings)
DATABASE = web.AppKey("database", Database)
PASSWORD_GATE = web.AppKey("password_gate", PasswordGate)
SESSIONS = web.AppKey("sessions", SessionManager)

SESSION_COOKIE = "sessionId"
