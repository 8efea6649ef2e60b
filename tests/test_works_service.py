"""Tests for the works service."""

from datetime import UTC, datetime, timedelta
from uuid import uuid4

import pytest

from frontridge.domain.errors import NotFoundError, ValidationError
from frontridge.domain.works import WorkCategory
from frontridge.services.works import WorksService, serialize_work
from tests.conftest import InMemoryWorkRepository, make_work


@pytest.fixture
def service() -> WorksService:
    return WorksService(InMemoryWorkRepository())


def test_create_then_list_includes_new_work(service: WorksService) -> None:
    created = service.create_work(
        name="  Harbour Bistro ",
        title_image_url=" https://cdn.example.com/bistro.jpg ",
        description=" Full fit-out ",
        gallery_image_urls=["https://cdn.example.com/1.jpg", "", None, "  "],
    )

    works = service.list_works()

    assert [work.id for work in works] == [created.id]
    assert created.name == "Harbour Bistro"
    assert created.title_image_url == "https://cdn.example.com/bistro.jpg"
    assert created.description == "Full fit-out"
    assert created.category is WorkCategory.RESTAURANTS
    assert created.gallery_image_urls == ["https://cdn.example.com/1.jpg"]
    assert created.updated_at is None


def test_created_ids_are_unique(service: WorksService) -> None:
    ids = {
        service.create_work(name=f"Work {i}", title_image_url="https://x/y.jpg").id
        for i in range(5)
    }

    assert len(ids) == 5


@pytest.mark.parametrize(
    ("name", "title_image_url"),
    [
        ("", "https://cdn.example.com/a.jpg"),
        ("   ", "https://cdn.example.com/a.jpg"),
        (None, "https://cdn.example.com/a.jpg"),
        ("Clinic", ""),
        ("Clinic", None),
    ],
)
def test_create_requires_name_and_title_image(
    service: WorksService, name: str | None, title_image_url: str | None
) -> None:
    with pytest.raises(ValidationError):
        service.create_work(name=name, title_image_url=title_image_url)

    assert service.list_works() == []


def test_create_accepts_known_category(service: WorksService) -> None:
    work = service.create_work(
        name="Clinic", title_image_url="https://x/y.jpg", category="Healthcare"
    )

    assert work.category is WorkCategory.HEALTHCARE


def test_create_rejects_unknown_category(service: WorksService) -> None:
    with pytest.raises(ValidationError, match="Commercial Offices"):
        service.create_work(
            name="Clinic", title_image_url="https://x/y.jpg", category="Warehouses"
        )


def test_list_is_newest_first() -> None:
    repository = InMemoryWorkRepository()
    now = datetime.now(tz=UTC)
    older = make_work("Older", created_at=now - timedelta(days=2))
    newest = make_work("Newest", created_at=now)
    middle = make_work("Middle", created_at=now - timedelta(days=1))
    for work in (older, newest, middle):
        repository.works[work.id] = work

    works = WorksService(repository).list_works()

    assert [work.name for work in works] == ["Newest", "Middle", "Older"]


def test_partial_update_only_touches_given_fields(service: WorksService) -> None:
    created = service.create_work(
        name="Office Tower",
        title_image_url="https://cdn.example.com/tower.jpg",
        category="Commercial Offices",
        gallery_image_urls=["https://cdn.example.com/1.jpg"],
    )

    updated = service.update_work(str(created.id), description="x")

    assert updated.description == "x"
    assert updated.updated_at is not None
    assert updated.name == created.name
    assert updated.category == created.category
    assert updated.title_image_url == created.title_image_url
    assert updated.gallery_image_urls == created.gallery_image_urls
    assert updated.created_at == created.created_at


def test_update_replaces_gallery_even_when_empty(service: WorksService) -> None:
    created = service.create_work(
        name="Cafe",
        title_image_url="https://x/y.jpg",
        gallery_image_urls=["https://x/1.jpg", "https://x/2.jpg"],
    )

    updated = service.update_work(str(created.id), gallery_image_urls=[])

    assert updated.gallery_image_urls == []


def test_update_ignores_blank_strings(service: WorksService) -> None:
    created = service.create_work(name="Cafe", title_image_url="https://x/y.jpg")

    with pytest.raises(ValidationError, match="No valid fields"):
        service.update_work(str(created.id), name="   ", description="")

    assert service.list_works()[0].name == "Cafe"


def test_update_rejects_invalid_id(service: WorksService) -> None:
    with pytest.raises(ValidationError, match="Invalid work id"):
        service.update_work("not-an-id", name="New")


def test_update_missing_work_raises_not_found(service: WorksService) -> None:
    with pytest.raises(NotFoundError):
        service.update_work(str(uuid4()), name="New")


def test_delete_twice_raises_not_found(service: WorksService) -> None:
    created = service.create_work(name="Cafe", title_image_url="https://x/y.jpg")

    service.delete_work(str(created.id))

    with pytest.raises(NotFoundError):
        service.delete_work(str(created.id))
    assert service.list_works() == []


def test_delete_rejects_invalid_id(service: WorksService) -> None:
    with pytest.raises(ValidationError):
        service.delete_work("12345")


def test_serialize_work_uses_public_field_names() -> None:
    work = make_work(
        "Clinic",
        created_at=datetime(2026, 3, 1, tzinfo=UTC),
        category=WorkCategory.HEALTHCARE,
        gallery_image_urls=["https://x/1.jpg"],
    )

    data = serialize_work(work)

    assert data == {
        "id": str(work.id),
        "name": "Clinic",
        "description": "",
        "category": "Healthcare",
        "titleImageUrl": "https://cdn.example.com/title.jpg",
        "galleryImageUrls": ["https://x/1.jpg"],
        "createdAt": "2026-03-01T00:00:00+00:00",
        "updatedAt": None,
    }
