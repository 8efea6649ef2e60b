"""Domain models for admin sessions."""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class SessionToken:
    """A signed bearer token and the instant it stops being valid."""

    token: str
    expires_at: datetime
