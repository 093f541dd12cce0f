"""
Password gate and stateless session tokens.

Tokens are HS256 JWTs issued with PyJWT. There is no server-side session
store: logout only clears the client's cookie, and a token stays valid
until it expires.
"""
import logging
import re
import time
from datetime import datetime, timezone
from typing import Callable, Optional

import jwt

from core.exceptions import ConfigurationError

logger = logging.getLogger(__name__)

DEFAULT_EXPIRES_IN = "24h"
DEFAULT_EXPIRES_SECONDS = 60 * 60 * 24
ALGORITHM = "HS256"

_DURATION_RE = re.compile(r"^(\d+)([smhd])$")
_UNIT_SECONDS = {"s": 1, "m": 60, "h": 60 * 60, "d": 60 * 60 * 24}


def parse_expires_in(value: Optional[str]) -> int:
    """
    Convert a duration like ``30m``, ``24h`` or ``7d`` to seconds.

    Anything that does not match ``<int><s|m|h|d>`` falls back to 24 hours.
    """
    match = _DURATION_RE.match(value or "")
    if not match:
        return DEFAULT_EXPIRES_SECONDS
    return int(match.group(1)) * _UNIT_SECONDS[match.group(2)]


class PasswordGate:
    """Admit/deny decision against the single configured password."""

    def __init__(self, settings):
        self.settings = settings

    def verify_password(self, candidate: str) -> bool:
        """
        Check a candidate password.

        Comparison is plain string equality against the configured value.

        Raises:
            ConfigurationError: If no password is configured
        """
        configured = self.settings.app_password
        if not configured:
            raise ConfigurationError("APP_PASSWORD is not configured")
        return candidate == configured


class SessionManager:
    """Issues and validates signed, time-limited session tokens."""

    def __init__(self, settings, clock: Callable[[], float] = time.time):
        """
        Args:
            settings: Application settings (jwt_secret, jwt_expires_in)
            clock: Source of the current UNIX time, injectable for tests
        """
        self.settings = settings
        self.clock = clock

    @property
    def expires_in_seconds(self) -> int:
        return parse_expires_in(self.settings.jwt_expires_in)

    def _secret(self) -> str:
        secret = self.settings.jwt_secret
        if not secret:
            raise ConfigurationError("JWT_SECRET is not configured")
        return secret

    def create_session(self) -> str:
        """
        Create a token for an authenticated session.

        Raises:
            ConfigurationError: If no signing secret is configured
        """
        secret = self._secret()
        issued_at = int(self.clock())
        payload = {
            "authenticated": True,
            "createdAt": datetime.fromtimestamp(issued_at, timezone.utc).isoformat(),
            "iat": issued_at,
            "exp": issued_at + self.expires_in_seconds,
        }
        return jwt.encode(payload, secret, algorithm=ALGORITHM)

    def validate_session(self, token: Optional[str]) -> bool:
        """
        Check signature, expiry and the ``authenticated`` claim.

        Expiry is checked against the injected clock rather than PyJWT's
        wall clock. Never raises: every failure, including a missing
        secret, is False.
        """
        try:
            payload = jwt.decode(
                token,
                self._secret(),
                algorithms=[ALGORITHM],
                options={"require": ["exp"], "verify_exp": False, "verify_iat": False},
            )
        except ConfigurationError as e:
            logger.error(f"Cannot validate session: {e}")
            return False
        except jwt.PyJWTError as e:
            logger.debug(f"Rejected session token: {e}")
            return False
        except Exception as e:
            logger.debug(f"Malformed session token: {e}")
            return False

        expires_at = payload.get("exp")
        if not isinstance(expires_at, (int, float)) or self.clock() >= expires_at:
            logger.debug("Session token expired")
            return False

        return payload.get("authenticated") is True
