"""Shared fixtures for the add-product tests."""

import pytest

from src.form import ProductFormState
from src.models import ImageFile
from src.services import NotificationService, ProductSubmissionService
from tests.fakes import FakeDocumentStore, FakeStorage, make_service


@pytest.fixture
def sample_image() -> ImageFile:
    return ImageFile(filename="sofa.png", content=b"\x89PNG fake image bytes", content_type="image/png")


@pytest.fixture
def storage() -> FakeStorage:
    return FakeStorage()


@pytest.fixture
def document_store() -> FakeDocumentStore:
    return FakeDocumentStore()


@pytest.fixture
def notifications() -> NotificationService:
    return NotificationService()


@pytest.fixture
def form() -> ProductFormState:
    return ProductFormState()


@pytest.fixture
def filled_form(form, sample_image) -> ProductFormState:
    """A form with every field set and an image selected."""
    form.set_title("Sofa")
    form.set_short_description("Two-seater")
    form.set_description("Grey fabric two-seater sofa")
    form.set_price("250")
    form.set_category("sofa")
    form.set_image(sample_image)
    form.set_preview("data:image/png;base64,AAAA")
    return form


@pytest.fixture
def service(storage, document_store, notifications) -> ProductSubmissionService:
    return make_service(storage, document_store, notifications)
