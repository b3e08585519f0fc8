from datetime import datetime, timezone

import anyio
import pytest

from core.config import settings
from models.contact_message import ContactMessage
from services import notification_service


@pytest.fixture()
def contact():
    return ContactMessage(
        id="3f1c2d8e-0000-4000-8000-000000000000",
        name="Al <b>",
        email="a@b.co",
        subject="Hello there",
        message="This is a <script>message</script>.",
        created_at=datetime(2026, 1, 1, tzinfo=timezone.utc),
    )


@pytest.fixture(autouse=True)
def _owner(monkeypatch):
    monkeypatch.setattr(settings, "OWNER_EMAIL", "owner@example.com")


class _FakeMail:
    def __init__(self, error=None):
        self.sent = []
        self.error = error

    async def send_message(self, message):
        if self.error:
            raise self.error
        self.sent.append(message)


def test_owner_message_escapes_user_content(contact):
    message = notification_service.build_owner_message(contact)

    assert message.subject == "New contact message: Hello there"
    assert "&lt;script&gt;" in message.body
    assert "<script>" not in message.body
    assert contact.id in message.body


def test_notify_owner_sends_message(monkeypatch, contact):
    mail = _FakeMail()
    monkeypatch.setattr(notification_service, "build_fast_mail", lambda: mail)

    anyio.run(notification_service.notify_owner, contact)

    assert len(mail.sent) == 1


def test_notify_owner_logs_delivery_failure(monkeypatch, contact, caplog):
    mail = _FakeMail(error=ConnectionError("smtp down"))
    monkeypatch.setattr(notification_service, "build_fast_mail", lambda: mail)
    caplog.set_level("ERROR", logger="services.notification_service")

    anyio.run(notification_service.notify_owner, contact)

    assert "Owner notification failed" in caplog.text
    assert mail.sent == []
