import pytest
from fastapi.testclient import TestClient

from main import app
from services.contact_store import InMemoryContactMessageStore, get_contact_store


@pytest.fixture()
def store():
    """Fresh message store per test, wired into the app."""
    store = InMemoryContactMessageStore()
    app.dependency_overrides[get_contact_store] = lambda: store
    yield store
    app.dependency_overrides.pop(get_contact_store, None)


@pytest.fixture()
def client(store):
    with TestClient(app) as c:
        yield c


@pytest.fixture()
def valid_payload():
    return {
        "name": "Al",
        "email": "a@b.co",
        "subject": "Hello there",
        "message": "This is a message.",
    }
