import logging
from html import escape

from fastapi_mail import MessageSchema, MessageType, MultipartSubtypeEnum

from core.config import settings
from core.mail import build_fast_mail
from models.contact_message import ContactMessage

logger = logging.getLogger(__name__)


def build_owner_message(contact: ContactMessage) -> MessageSchema:
    html = f"""
    <div style="font-family: Arial, sans-serif; padding: 15px; border: 1px solid #eee; border-radius: 8px;">
        <h2 style="color: #4F46E5;">New Portfolio Contact Message</h2>
        <p><strong>Name:</strong> {escape(contact.name)}</p>
        <p><strong>Email:</strong> {escape(contact.email)}</p>
        <p><strong>Subject:</strong> {escape(contact.subject)}</p>
        <p style="margin-top: 15px;"><strong>Message:</strong></p>
        <div style="border-left: 3px solid #ccc; padding-left: 10px; margin-top: 5px; white-space: pre-wrap;">
            {escape(contact.message)}
        </div>
        <p style="color: #888; font-size: 12px;">Reference: {contact.id}</p>
    </div>
    """

    return MessageSchema(
        subject=f"New contact message: {contact.subject}",
        recipients=[settings.OWNER_EMAIL],
        body=html,
        subtype=MessageType.html,
        multipart_subtype=MultipartSubtypeEnum.alternative,
    )


async def notify_owner(contact: ContactMessage) -> None:
    """Mail a stored message to the site owner. Runs as a background task."""
    try:
        await build_fast_mail().send_message(build_owner_message(contact))
    except Exception:
        logger.exception("Owner notification failed id=%s", contact.id)
        return

    logger.info("Owner notified id=%s", contact.id)
