import re
from typing import List, Optional, Union

from pydantic import BaseModel, Field, field_validator
from pydantic_core import PydanticCustomError

EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")

# field -> minimum length
MIN_LENGTHS = {
    "name": 2,
    "subject": 5,
    "message": 10,
}


def required_message(field_name: str) -> str:
    return f"{field_name.capitalize()} is required"


def text_length(value: str) -> int:
    # Counted in UTF-16 units, the same way the browser form counts.
    return len(value.encode("utf-16-le", "surrogatepass")) // 2


class ContactMessageCreate(BaseModel):
    """A contact form submission that passed validation."""

    name: str = Field(..., description="Full name (at least 2 characters)")
    email: str = Field(..., description="Reply-to address")
    subject: str = Field(..., description="Subject (at least 5 characters)")
    message: str = Field(..., description="Message (at least 10 characters)")

    @field_validator("name", "email", "subject", "message")
    @classmethod
    def check_field(cls, value: str, info):
        field_name = info.field_name

        if not value.strip():
            raise PydanticCustomError("required", required_message(field_name))

        if field_name == "email" and not EMAIL_PATTERN.fullmatch(value):
            raise PydanticCustomError(
                "email_format", "Please enter a valid email address"
            )

        min_length = MIN_LENGTHS.get(field_name)
        if min_length and text_length(value) < min_length:
            raise PydanticCustomError(
                "too_short",
                "{field} must be at least {min_length} characters",
                {"field": field_name.capitalize(), "min_length": min_length},
            )

        return value


class FieldError(BaseModel):
    path: List[Union[str, int]]
    message: str


class ContactSuccessResponse(BaseModel):
    success: bool = True
    message: str
    id: str


class ContactErrorResponse(BaseModel):
    success: bool = False
    message: str
    errors: Optional[List[FieldError]] = None

