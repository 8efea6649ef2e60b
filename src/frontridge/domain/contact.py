"""Domain models for contact form submissions."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ContactMessage:
    """A validated contact form submission."""

    full_name: str
    email: str
    message: str
    phone: str | None = None
