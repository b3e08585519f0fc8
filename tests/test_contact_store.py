import threading
from datetime import timezone

import pytest
from pydantic import ValidationError

from schemas.contact import ContactMessageCreate
from services.contact_store import (
    InMemoryContactMessageStore,
    contact_store,
    get_contact_store,
)


@pytest.fixture()
def record(valid_payload):
    return ContactMessageCreate(**valid_payload)


def test_create_assigns_id_and_timestamp(record):
    store = InMemoryContactMessageStore()

    message = store.create(record)

    assert message.id
    assert message.created_at.tzinfo == timezone.utc
    assert len(store) == 1


def test_round_trip_returns_submitted_fields(record, valid_payload):
    store = InMemoryContactMessageStore()
    created = store.create(record)

    fetched = store.get(created.id)

    assert fetched == created
    assert fetched.model_dump(exclude={"id", "created_at"}) == valid_payload


def test_ids_are_unique(record):
    store = InMemoryContactMessageStore()

    ids = {store.create(record).id for _ in range(500)}

    assert len(ids) == 500
    assert len(store) == 500


def test_concurrent_creates_keep_every_record(record):
    store = InMemoryContactMessageStore()

    def worker():
        for _ in range(100):
            store.create(record)

    threads = [threading.Thread(target=worker) for _ in range(8)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    messages = store.list_messages()
    assert len(messages) == 800
    assert len({message.id for message in messages}) == 800


def test_list_messages_keeps_insertion_order(valid_payload):
    store = InMemoryContactMessageStore()
    first = store.create(ContactMessageCreate(**valid_payload))
    second = store.create(
        ContactMessageCreate(**{**valid_payload, "name": "Bea"})
    )

    assert [m.id for m in store.list_messages()] == [first.id, second.id]


def test_stored_messages_are_immutable(record):
    store = InMemoryContactMessageStore()
    message = store.create(record)

    with pytest.raises(ValidationError):
        message.name = "Changed"

    assert store.get(message.id).name == record.name


def test_unknown_id_returns_none():
    assert InMemoryContactMessageStore().get("missing") is None


def test_dependency_returns_process_store():
    assert get_contact_store() is contact_store
