"""Shared test fixtures."""

from dataclasses import dataclass, field, replace
from datetime import UTC, datetime
from uuid import UUID, uuid4

import pytest

from frontridge.config import Settings
from frontridge.containers import AppContainer
from frontridge.domain.errors import UploadError
from frontridge.domain.images import UploadedImage
from frontridge.domain.works import WorkCategory, WorkRecord
from frontridge.services.auth import AdminAuthService
from frontridge.services.contact import ContactService, EmailClient
from frontridge.services.credentials import CredentialVerifier
from frontridge.services.images import ImageStorageClient, ImageUploadService
from frontridge.services.session_tokens import SessionTokenCodec
from frontridge.services.works import WorkRepository, WorksService

ADMIN_PASSWORD = "correct horse battery staple"
SIGNING_SECRET = "test-signing-secret"


@dataclass
class InMemoryWorkRepository(WorkRepository):
    """In-memory works repository for tests."""

    works: dict[UUID, WorkRecord] = field(default_factory=dict)

    def list_works(self) -> list[WorkRecord]:
        return sorted(
            self.works.values(), key=lambda work: work.created_at, reverse=True
        )

    def insert_work(self, fields: dict[str, object]) -> WorkRecord:
        work = WorkRecord(
            id=uuid4(),
            name=str(fields["name"]),
            description=str(fields.get("description", "")),
            category=WorkCategory(fields.get("category", WorkCategory.RESTAURANTS)),
            title_image_url=str(fields["title_image_url"]),
            gallery_image_urls=list(fields.get("gallery_image_urls", [])),
            created_at=fields.get("created_at", datetime.now(tz=UTC)),
        )
        self.works[work.id] = work
        return work

    def update_work(
        self, work_id: UUID, fields: dict[str, object]
    ) -> WorkRecord | None:
        current = self.works.get(work_id)
        if current is None:
            return None
        updated = replace(current, **fields)
        self.works[work_id] = updated
        return updated

    def delete_work(self, work_id: UUID) -> bool:
        return self.works.pop(work_id, None) is not None


@dataclass
class FakeImageStorageClient(ImageStorageClient):
    """Fake object store that records uploads."""

    uploads: list[dict[str, object]] = field(default_factory=list)
    error: str | None = None

    async def upload(
        self, data: bytes, *, filename: str, mime_type: str, folder: str
    ) -> UploadedImage:
        if self.error is not None:
            raise UploadError(self.error)
        self.uploads.append(
            {
                "size": len(data),
                "filename": filename,
                "mime_type": mime_type,
                "folder": folder,
            }
        )
        return UploadedImage(
            url=f"https://res.cloudinary.com/demo/image/upload/{folder}/{filename}",
            public_id=f"{folder}/{filename}",
            byte_size=len(data),
            format=mime_type.removeprefix("image/"),
            width=640,
            height=480,
        )


@dataclass
class FakeEmailClient(EmailClient):
    """Fake email client that records sent messages."""

    sent: list[dict[str, str]] = field(default_factory=list)

    async def send_email(  # noqa: PLR0913
        self,
        *,
        sender: str,
        recipient: str,
        reply_to: str,
        subject: str,
        html_body: str,
    ) -> str:
        self.sent.append(
            {
                "sender": sender,
                "recipient": recipient,
                "reply_to": reply_to,
                "subject": subject,
                "html_body": html_body,
            }
        )
        return f"email-{len(self.sent)}"


def make_work(
    name: str = "Harbour Bistro",
    created_at: datetime | None = None,
    **overrides: object,
) -> WorkRecord:
    """Build a work record with sensible defaults."""
    values: dict[str, object] = {
        "id": uuid4(),
        "name": name,
        "description": "",
        "category": WorkCategory.RESTAURANTS,
        "title_image_url": "https://cdn.example.com/title.jpg",
        "gallery_image_urls": [],
        "created_at": created_at or datetime.now(tz=UTC),
    }
    values.update(overrides)
    return WorkRecord(**values)


@pytest.fixture
def settings() -> Settings:
    return Settings(
        supabase_url="https://example.supabase.co",
        supabase_service_key=(
            "eyJhbGciOiJIUzI1NiIsInR5cCI6IkpXVCJ9."
            "eyJyb2xlIjoic2VydmljZV9yb2xlIn0."
            "c2lnbmF0dXJl"
        ),
        admin_password=ADMIN_PASSWORD,
        admin_session_secret=SIGNING_SECRET,
        cloudinary_cloud_name="demo",
        cloudinary_api_key="cloud-key",
        cloudinary_api_secret="cloud-secret",
        resend_api_key="resend-key",
        environment="test",
    )


@pytest.fixture
def works_repository() -> InMemoryWorkRepository:
    return InMemoryWorkRepository()


@pytest.fixture
def image_client() -> FakeImageStorageClient:
    return FakeImageStorageClient()


@pytest.fixture
def email_client() -> FakeEmailClient:
    return FakeEmailClient()


@pytest.fixture
def codec() -> SessionTokenCodec:
    return SessionTokenCodec(secret=SIGNING_SECRET)


@pytest.fixture
def container(
    settings: Settings,
    works_repository: InMemoryWorkRepository,
    image_client: FakeImageStorageClient,
    email_client: FakeEmailClient,
    codec: SessionTokenCodec,
) -> AppContainer:
    auth_service = AdminAuthService(
        verifier=CredentialVerifier(password=settings.admin_password),
        codec=codec,
    )
    image_service = ImageUploadService(
        client=image_client,
        max_bytes=settings.upload_max_bytes,
        default_folder=settings.upload_default_folder,
    )
    contact_service = ContactService(
        email_client=email_client,
        recipient=settings.contact_email,
        sender=settings.contact_sender,
    )

    async def close_resources() -> None:
        return None

    return AppContainer(
        settings=settings,
        auth_service=auth_service,
        works_service=WorksService(works_repository),
        image_service=image_service,
        contact_service=contact_service,
        works_client=None,
        close_resources=close_resources,
    )
