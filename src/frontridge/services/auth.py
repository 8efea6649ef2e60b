"""Admin login and the session gate."""

import logging
from collections.abc import Mapping
from dataclasses import dataclass

from frontridge.domain.auth import SessionToken
from frontridge.domain.errors import NotAuthenticatedError
from frontridge.services.credentials import CredentialVerifier
from frontridge.services.session_tokens import SessionTokenCodec

SESSION_COOKIE_NAME = "admin_session"

_logger = logging.getLogger(__name__)


@dataclass
class AdminAuthService:
    """Application service for the single shared admin account."""

    verifier: CredentialVerifier
    codec: SessionTokenCodec

    def login(self, password: str) -> SessionToken:
        """Verify the password and mint a session token."""
        if not self.verifier.verify(password):
            _logger.info("Admin login rejected")
            raise NotAuthenticatedError
        return self.codec.create()

    def is_authenticated(self, cookies: Mapping[str, str]) -> bool:
        """Return true when the request carries a valid session cookie."""
        return self.codec.validate(cookies.get(SESSION_COOKIE_NAME))
