"""
Shared fixtures: in-memory store, API client and role tokens
"""

import asyncio
import os

import pytest

# Must be set before content_tree.core.config is imported
os.environ["STORAGE_BACKEND"] = "memory"
os.environ["SECRET_KEY"] = "test-secret-key-for-testing-only-0123456789"

from fastapi.testclient import TestClient

from content_tree.app.main import app
from content_tree.core.security import Principal, UserRole, create_access_token
from content_tree.models.category import CategoryCreate
from content_tree.models.content import ContentCreate
from content_tree.services.category import CategoryService
from content_tree.services.content import ContentService
from content_tree.services.service_factory import get_document_store
from content_tree.store.memory import MemoryDocumentStore


@pytest.fixture
def store():
    """Fresh store per test"""
    return MemoryDocumentStore()


@pytest.fixture
def client(store):
    """API client bound to the test store"""
    app.dependency_overrides[get_document_store] = lambda: store

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()


@pytest.fixture
def run():
    """Run a service coroutine to completion"""
    return asyncio.run


def _headers(role: UserRole) -> dict:
    token = create_access_token(f"{role.value}-1", role)
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def admin_headers():
    return _headers(UserRole.ADMIN)


@pytest.fixture
def editor_headers():
    return _headers(UserRole.EDITOR)


@pytest.fixture
def user_headers():
    return _headers(UserRole.USER)


@pytest.fixture
def editor():
    return Principal(user_id="editor-1", role=UserRole.EDITOR)


@pytest.fixture
def user():
    return Principal(user_id="user-1", role=UserRole.USER)


@pytest.fixture
def make_category(store, editor, run):
    """Create a category through the service"""
    service = CategoryService(store)

    def _make(name, parent=None, enabled=True, keywords=None):
        data = CategoryCreate(
            name=name,
            parent_id=parent.id if parent else None,
            keywords=keywords or [],
            enabled=enabled,
        )
        return run(service.create_category(data, editor))

    return _make


@pytest.fixture
def make_content(store, editor, run):
    """Create a content item through the service"""
    service = ContentService(store)

    def _make(name, category=None, enabled=True, keywords=None, description=""):
        data = ContentCreate(
            name=name,
            category_id=category.id if category else None,
            keywords=keywords or [],
            enabled=enabled,
            description=description,
        )
        return run(service.create_content(data, editor))

    return _make
