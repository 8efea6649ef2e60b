"""Contact form relay."""

import html
import logging
import re
from dataclasses import dataclass
from typing import Protocol

from frontridge.domain.contact import ContactMessage
from frontridge.domain.errors import ConfigurationError, ValidationError

_logger = logging.getLogger(__name__)

_EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")


class EmailClient(Protocol):
    """Interface for a transactional email provider."""

    async def send_email(  # noqa: PLR0913
        self,
        *,
        sender: str,
        recipient: str,
        reply_to: str,
        subject: str,
        html_body: str,
    ) -> str:
        """Send an email and return the provider's message id."""


@dataclass
class ContactService:
    """Validates contact submissions and forwards them by email."""

    email_client: EmailClient | None
    recipient: str
    sender: str

    async def submit(
        self,
        *,
        full_name: str | None,
        email: str | None,
        message: str | None,
        phone: str | None = None,
    ) -> str:
        """Send a contact message and return the provider's message id."""
        contact = _validate(full_name, email, message, phone)
        if self.email_client is None:
            raise ConfigurationError(
                "Email delivery is not configured. Set RESEND_API_KEY."
            )
        email_id = await self.email_client.send_email(
            sender=self.sender,
            recipient=self.recipient,
            reply_to=contact.email,
            subject=f"New Contact Form Submission from {contact.full_name}",
            html_body=render_contact_email(contact),
        )
        _logger.info("Contact message sent: email_id=%s", email_id)
        return email_id


def _validate(
    full_name: str | None, email: str | None, message: str | None, phone: str | None
) -> ContactMessage:
    cleaned_name = (full_name or "").strip()
    cleaned_email = (email or "").strip()
    cleaned_message = (message or "").strip()
    if not cleaned_name or not cleaned_email or not cleaned_message:
        raise ValidationError("Missing required fields")
    if not _EMAIL_PATTERN.match(cleaned_email):
        raise ValidationError("Invalid email address")
    return ContactMessage(
        full_name=cleaned_name,
        email=cleaned_email,
        message=cleaned_message,
        phone=(phone or "").strip() or None,
    )


def render_contact_email(contact: ContactMessage) -> str:
    """Render the notification email body with escaped user input."""
    name = html.escape(contact.full_name)
    email = html.escape(contact.email, quote=True)
    message = html.escape(contact.message)
    phone_block = ""
    if contact.phone:
        phone = html.escape(contact.phone, quote=True)
        phone_block = (
            '<p style="color: #6b7280; font-weight: 600;">PHONE NUMBER</p>'
            f'<p><a href="tel:{phone}" style="color: #f97316;">{phone}</a></p>'
        )
    return (
        "<!DOCTYPE html>"
        '<html><head><meta charset="utf-8"></head>'
        '<body style="font-family: Arial, sans-serif; '
        'max-width: 600px; margin: 0 auto;">'
        '<h1 style="color: #f97316;">New Contact Form Submission</h1>'
        '<p style="color: #6b7280; font-weight: 600;">FULL NAME</p>'
        f"<p>{name}</p>"
        '<p style="color: #6b7280; font-weight: 600;">EMAIL ADDRESS</p>'
        f'<p><a href="mailto:{email}" style="color: #f97316;">{email}</a></p>'
        f"{phone_block}"
        '<h2 style="color: #f97316;">Message</h2>'
        f'<p style="white-space: pre-wrap;">{message}</p>'
        '<p style="color: #9ca3af; font-size: 12px;">'
        "Sent from Front Ridge Construction contact form</p>"
        "</body></html>"
    )
