import logging

from fastapi import APIRouter, BackgroundTasks, Depends, Request, status
from fastapi.responses import JSONResponse

from core.config import settings
from core.errors import internal_error_response
from schemas.contact import ContactErrorResponse, ContactSuccessResponse
from services.contact_store import ContactMessageStore, get_contact_store
from services.notification_service import notify_owner
from services.validation_service import invalid, validate_contact_submission

logger = logging.getLogger(__name__)

router = APIRouter()

INVALID_JSON_MESSAGE = "Request body must be valid JSON"


@router.post(
    "/api/contact",
    response_model=ContactSuccessResponse,
    status_code=status.HTTP_200_OK,
    responses={
        400: {"model": ContactErrorResponse, "description": "Invalid form data"},
        500: {"model": ContactErrorResponse, "description": "Internal Server Error"},
    },
)
async def submit_contact(
    request: Request,
    background_tasks: BackgroundTasks,
    store: ContactMessageStore = Depends(get_contact_store),
):
    try:
        payload = await request.json()
    except ValueError:
        result = invalid(INVALID_JSON_MESSAGE)
    else:
        result = validate_contact_submission(payload)

    if not result.ok:
        logger.info("Contact submission rejected fields=%s", result.error_fields)
        body = ContactErrorResponse(
            message=settings.CONTACT_INVALID_MESSAGE,
            errors=result.errors,
        )
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=body.model_dump(),
        )

    try:
        contact = store.create(result.data)
    except Exception:
        logger.exception("Contact message could not be stored")
        return internal_error_response()

    email_domain = contact.email.split("@")[-1]
    logger.info(
        "Contact message stored id=%s email_domain=%s", contact.id, email_domain
    )

    if settings.notifications_configured:
        background_tasks.add_task(notify_owner, contact)

    return ContactSuccessResponse(
        message=settings.CONTACT_SUCCESS_MESSAGE,
        id=contact.id,
    )
