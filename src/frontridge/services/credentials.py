"""Admin credential verification."""

import hmac
import logging
from dataclasses import dataclass

import bcrypt

from frontridge.domain.errors import ConfigurationError

_logger = logging.getLogger(__name__)


def constant_time_equals(provided: str | None, expected: str | None) -> bool:
    """Compare two strings without leaking where they first differ.

    Lengths are compared up front, so only the length can leak through timing.
    """
    if not provided or not expected:
        return False
    provided_bytes = provided.encode("utf-8")
    expected_bytes = expected.encode("utf-8")
    if len(provided_bytes) != len(expected_bytes):
        return False
    return hmac.compare_digest(provided_bytes, expected_bytes)


@dataclass(frozen=True)
class CredentialVerifier:
    """Checks a submitted password against the configured admin credential."""

    password_hash: str | None = None
    password: str | None = None

    def verify(self, submitted: str) -> bool:
        """Return true when the submitted password matches.

        A bcrypt hash takes precedence over a plaintext password. Raises
        ``ConfigurationError`` when neither is configured.
        """
        if self.password_hash:
            return _check_hash(submitted, self.password_hash)
        if self.password:
            return constant_time_equals(submitted, self.password)
        raise ConfigurationError(
            "Admin password is not configured. "
            "Set ADMIN_PASSWORD or ADMIN_PASSWORD_HASH."
        )


def _check_hash(submitted: str, password_hash: str) -> bool:
    try:
        return bcrypt.checkpw(submitted.encode("utf-8"), password_hash.encode("utf-8"))
    except Exception:
        _logger.exception("Failed to compare password hash")
        return False
