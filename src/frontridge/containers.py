"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from supabase import create_client

from frontridge.adapters.cloudinary_client import CloudinaryImageClient
from frontridge.adapters.resend_client import HttpxResendClient
from frontridge.adapters.supabase_works_repository import SupabaseWorksRepository
from frontridge.adapters.works_api_client import HttpxWorksClient
from frontridge.config import Settings, parse_session_duration, resolve_signing_secret
from frontridge.services.auth import AdminAuthService
from frontridge.services.contact import ContactService
from frontridge.services.credentials import CredentialVerifier
from frontridge.services.images import ImageUploadService
from frontridge.services.session_tokens import SessionTokenCodec
from frontridge.services.works import WorksService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    auth_service: AdminAuthService
    works_service: WorksService
    image_service: ImageUploadService
    contact_service: ContactService
    works_client: HttpxWorksClient | None
    close_resources: Callable[[], Awaitable[None]]


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    supabase_client = create_client(
        resolved_settings.supabase_url, resolved_settings.supabase_service_key
    )
    works_repository = SupabaseWorksRepository(
        supabase_client, table=resolved_settings.works_table
    )
    auth_service = AdminAuthService(
        verifier=CredentialVerifier(
            password_hash=resolved_settings.admin_password_hash,
            password=resolved_settings.admin_password,
        ),
        codec=SessionTokenCodec(
            secret=resolve_signing_secret(resolved_settings),
            duration=parse_session_duration(
                resolved_settings.admin_session_duration_ms
            ),
        ),
    )

    image_client = None
    if resolved_settings.cloudinary_configured:
        image_client = CloudinaryImageClient.create(
            cloud_name=resolved_settings.cloudinary_cloud_name,
            api_key=resolved_settings.cloudinary_api_key,
            api_secret=resolved_settings.cloudinary_api_secret,
        )
    image_service = ImageUploadService(
        client=image_client,
        max_bytes=resolved_settings.upload_max_bytes,
        default_folder=resolved_settings.upload_default_folder,
    )

    email_client = None
    if resolved_settings.resend_api_key:
        email_client = HttpxResendClient.create(resolved_settings.resend_api_key)
    contact_service = ContactService(
        email_client=email_client,
        recipient=resolved_settings.contact_email,
        sender=resolved_settings.contact_sender,
    )

    works_client = None
    if resolved_settings.works_api_base_url:
        works_client = HttpxWorksClient.create(
            resolved_settings.works_api_base_url,
            ttl_seconds=resolved_settings.works_cache_ttl_seconds,
        )

    async def close_resources() -> None:
        if image_client is not None:
            await image_client.close()
        if email_client is not None:
            await email_client.close()
        if works_client is not None:
            await works_client.close()

    return AppContainer(
        settings=resolved_settings,
        auth_service=auth_service,
        works_service=WorksService(works_repository),
        image_service=image_service,
        contact_service=contact_service,
        works_client=works_client,
        close_resources=close_resources,
    )
