# ==============================================================================
# CONTACT ENDPOINT
# ==============================================================================

from __future__ import annotations

from fastapi import APIRouter

from online_course.api.dependencies import ContactServiceDep
from online_course.schemas.base import APIResponse
from online_course.schemas.contact import ContactMessage

router = APIRouter(prefix="/contact", tags=["Contact"])


@router.post(
    "",
    response_model=APIResponse[ContactMessage],
    summary="Send contact message",
    description="Emails the message to the site operators. A missing or malformed body yields 400.",
)
async def send_message(
    message: ContactMessage,
    service: ContactServiceDep,
) -> APIResponse[ContactMessage]:
    await service.send(message)
    return APIResponse.ok(data=message, message="Message sent successfully!")
