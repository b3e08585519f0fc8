from dataclasses import dataclass, field
from typing import Any, List, Optional

from pydantic import ValidationError

from schemas.contact import ContactMessageCreate, FieldError, required_message

NOT_AN_OBJECT_MESSAGE = "Request body must be a JSON object"


@dataclass
class ValidationResult:
    """Outcome of checking a contact submission.

    Exactly one of ``data`` / ``errors`` is meaningful, selected by ``ok``.
    """

    ok: bool
    data: Optional[ContactMessageCreate] = None
    errors: List[FieldError] = field(default_factory=list)

    @property
    def error_fields(self) -> List[str]:
        return [str(error.path[0]) for error in self.errors if error.path]


def _to_field_error(error: dict) -> FieldError:
    path = list(error.get("loc", ()))
    if error.get("type") == "missing" and path:
        return FieldError(path=path, message=required_message(str(path[0])))
    return FieldError(path=path, message=error["msg"])


def invalid(message: str) -> ValidationResult:
    return ValidationResult(ok=False, errors=[FieldError(path=[], message=message)])


def validate_contact_submission(payload: Any) -> ValidationResult:
    # Every field is checked; one error per offending field.
    if not isinstance(payload, dict):
        return invalid(NOT_AN_OBJECT_MESSAGE)

    try:
        data = ContactMessageCreate.model_validate(payload)
    except ValidationError as exc:
        return ValidationResult(
            ok=False,
            errors=[_to_field_error(error) for error in exc.errors()],
        )

    return ValidationResult(ok=True, data=data)
