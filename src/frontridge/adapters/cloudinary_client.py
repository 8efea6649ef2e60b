"""Cloudinary image upload client."""

import hashlib
import logging
import time
from dataclasses import dataclass

import httpx

from frontridge.domain.errors import UploadError
from frontridge.domain.images import UploadedImage
from frontridge.services.images import ImageStorageClient

_logger = logging.getLogger(__name__)

_API_BASE_URL = "https://api.cloudinary.com/v1_1"


@dataclass
class CloudinaryImageClient(ImageStorageClient):
    """Signed Cloudinary uploads over httpx."""

    cloud_name: str
    api_key: str
    api_secret: str
    http_client: httpx.AsyncClient
    timeout: float = 60

    @classmethod
    def create(
        cls, cloud_name: str, api_key: str, api_secret: str
    ) -> "CloudinaryImageClient":
        """Create a Cloudinary client with a managed httpx session."""
        return cls(
            cloud_name=cloud_name,
            api_key=api_key,
            api_secret=api_secret,
            http_client=httpx.AsyncClient(),
        )

    async def upload(
        self, data: bytes, *, filename: str, mime_type: str, folder: str
    ) -> UploadedImage:
        """Upload image bytes and return the hosted image metadata."""
        params = {"folder": folder, "timestamp": str(int(time.time()))}
        form = {
            **params,
            "api_key": self.api_key,
            "signature": sign_params(params, self.api_secret),
        }
        url = f"{_API_BASE_URL}/{self.cloud_name}/image/upload"
        try:
            response = await self.http_client.post(
                url,
                data=form,
                files={"file": (filename, data, mime_type)},
                timeout=self.timeout,
            )
        except httpx.TimeoutException as exc:
            raise UploadError("Image upload timed out") from exc
        except httpx.HTTPError as exc:
            raise UploadError(str(exc)) from exc

        payload = _json_or_empty(response)
        if response.is_error:
            _logger.warning(
                "Cloudinary upload rejected: status=%s", response.status_code
            )
            raise UploadError(_error_message(payload))
        url = payload.get("secure_url")
        public_id = payload.get("public_id")
        if not url or not public_id:
            _logger.warning("Cloudinary upload response missing url or public_id")
            raise UploadError("")
        return UploadedImage(
            url=str(url),
            public_id=str(public_id),
            byte_size=int(payload.get("bytes", len(data))),
            format=str(payload.get("format", "")),
            width=payload.get("width"),
            height=payload.get("height"),
        )

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        await self.http_client.aclose()


def sign_params(params: dict[str, str], api_secret: str) -> str:
    """Return the Cloudinary SHA-1 signature for upload parameters."""
    to_sign = "&".join(f"{key}={params[key]}" for key in sorted(params))
    digest = hashlib.sha1((to_sign + api_secret).encode("utf-8"))  # noqa: S324
    return digest.hexdigest()


def _json_or_empty(response: httpx.Response) -> dict[str, object]:
    try:
        payload = response.json()
    except ValueError:
        return {}
    return payload if isinstance(payload, dict) else {}


def _error_message(payload: dict[str, object]) -> str:
    error = payload.get("error")
    if isinstance(error, dict) and error.get("message"):
        return str(error["message"])
    return ""
