# backend/models/contact_message.py
from datetime import datetime

from pydantic import BaseModel, ConfigDict


class ContactMessage(BaseModel):
    """A stored contact submission. Never mutated after creation."""

    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    email: str
    subject: str
    message: str
    created_at: datetime
