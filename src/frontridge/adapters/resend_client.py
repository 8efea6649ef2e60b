"""Resend transactional email client."""

from dataclasses import dataclass

import httpx

from frontridge.domain.errors import DeliveryError
from frontridge.services.contact import EmailClient


@dataclass
class HttpxResendClient(EmailClient):
    """Resend client using httpx."""

    api_key: str
    http_client: httpx.AsyncClient
    base_url: str = "https://api.resend.com"

    @classmethod
    def create(cls, api_key: str) -> "HttpxResendClient":
        """Create a Resend client with a managed httpx session."""
        return cls(api_key=api_key, http_client=httpx.AsyncClient())

    async def send_email(  # noqa: PLR0913
        self,
        *,
        sender: str,
        recipient: str,
        reply_to: str,
        subject: str,
        html_body: str,
    ) -> str:
        """Send an email via the Resend API and return its id."""
        try:
            response = await self.http_client.post(
                f"{self.base_url}/emails",
                headers={"Authorization": f"Bearer {self.api_key}"},
                json={
                    "from": sender,
                    "to": [recipient],
                    "reply_to": reply_to,
                    "subject": subject,
                    "html": html_body,
                },
                timeout=15,
            )
            response.raise_for_status()
        except httpx.HTTPError as exc:
            raise DeliveryError(str(exc)) from exc
        payload = response.json()
        if not payload.get("id"):
            raise DeliveryError("Resend returned no email id")
        return str(payload["id"])

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        await self.http_client.aclose()
