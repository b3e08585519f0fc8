import threading
from abc import ABC, abstractmethod
from datetime import datetime, timezone
from typing import Dict, List, Optional
from uuid import uuid4

from models.contact_message import ContactMessage
from schemas.contact import ContactMessageCreate


class ContactMessageStore(ABC):
    @abstractmethod
    def create(self, record: ContactMessageCreate) -> ContactMessage:
        """Store a validated submission and return it with id and timestamp."""


class InMemoryContactMessageStore(ContactMessageStore):
    """Append-only message store living for the lifetime of the process.

    Inserts happen under a lock, so ids stay unique when handlers run on
    FastAPI's thread pool.
    """

    def __init__(self):
        self._messages: Dict[str, ContactMessage] = {}
        self._lock = threading.Lock()

    def create(self, record: ContactMessageCreate) -> ContactMessage:
        with self._lock:
            message_id = str(uuid4())
            while message_id in self._messages:
                message_id = str(uuid4())

            message = ContactMessage(
                id=message_id,
                created_at=datetime.now(timezone.utc),
                **record.model_dump(),
            )
            self._messages[message_id] = message
            return message

    # Internal enumeration, not exposed over HTTP.
    def get(self, message_id: str) -> Optional[ContactMessage]:
        with self._lock:
            return self._messages.get(message_id)

    def list_messages(self) -> List[ContactMessage]:
        with self._lock:
            return list(self._messages.values())

    def __len__(self) -> int:
        with self._lock:
            return len(self._messages)


contact_store = InMemoryContactMessageStore()


# Dependency to get the message store
def get_contact_store() -> ContactMessageStore:
    return contact_store
