# ==============================================================================
# CONTACT SERVICE
# ==============================================================================

from __future__ import annotations

import logging

from online_course.integrations.email_notification import EmailNotification
from online_course.schemas.contact import ContactMessage

logger = logging.getLogger(__name__)


class ContactService:
    """Forwards contact form messages to the email collaborator."""

    def __init__(self, email: EmailNotification) -> None:
        self._email = email

    async def send(self, message: ContactMessage) -> None:
        """
        Dispatch a contact message.

        Raises:
            ServiceUnavailableError: If delivery fails
        """
        await self._email.send_contact_message(message)
        logger.info(f"Contact message dispatched from {message.email}")
