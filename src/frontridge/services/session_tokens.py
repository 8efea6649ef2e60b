"""Stateless signed session tokens."""

import base64
import binascii
import hashlib
import hmac
import json
import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import UTC, datetime, timedelta

from frontridge.config import DEFAULT_SESSION_DURATION
from frontridge.domain.auth import SessionToken
from frontridge.services.credentials import constant_time_equals

_logger = logging.getLogger(__name__)

_SEPARATOR = "."


def _utcnow() -> datetime:
    return datetime.now(tz=UTC)


@dataclass(frozen=True)
class SessionTokenCodec:
    """Creates and validates ``payload.signature`` session tokens.

    The payload is unpadded base64url JSON holding a single ``exp`` field in
    epoch milliseconds. The signature is an unpadded base64url HMAC-SHA256 of
    the encoded payload. Nothing is stored server side, so rotating the
    secret is the only way to revoke outstanding tokens.
    """

    secret: str
    duration: timedelta = DEFAULT_SESSION_DURATION
    clock: Callable[[], datetime] = field(default=_utcnow)

    def create(self) -> SessionToken:
        """Mint a token that expires ``duration`` from now."""
        expires_at = self.clock() + self.duration
        exp_ms = int(expires_at.timestamp() * 1000)
        payload = _b64encode(
            json.dumps({"exp": exp_ms}, separators=(",", ":")).encode("utf-8")
        )
        token = f"{payload}{_SEPARATOR}{self._sign(payload)}"
        return SessionToken(token=token, expires_at=expires_at)

    def validate(self, token: str | None) -> bool:
        """Return true when the token is correctly signed and unexpired."""
        if not token:
            return False
        parts = token.split(_SEPARATOR)
        if len(parts) != 2:  # noqa: PLR2004
            return False
        payload, signature = parts
        if not payload or not signature:
            return False
        if not constant_time_equals(signature, self._sign(payload)):
            return False

        try:
            data = json.loads(_b64decode(payload).decode("utf-8"))
        except (binascii.Error, UnicodeDecodeError, ValueError):
            _logger.warning("Failed to parse session token payload")
            return False
        if not isinstance(data, dict):
            return False
        exp = data.get("exp")
        if isinstance(exp, bool) or not isinstance(exp, int | float):
            return False
        return exp > self.clock().timestamp() * 1000

    def _sign(self, payload: str) -> str:
        digest = hmac.new(
            self.secret.encode("utf-8"), payload.encode("utf-8"), hashlib.sha256
        ).digest()
        return _b64encode(digest)


def _b64encode(raw: bytes) -> str:
    return base64.urlsafe_b64encode(raw).rstrip(b"=").decode("ascii")


def _b64decode(encoded: str) -> bytes:
    padding = "=" * (-len(encoded) % 4)
    return base64.urlsafe_b64decode(encoded + padding)
