# ==============================================================================
# EMAIL NOTIFICATION - Contact Message Delivery
# ==============================================================================

from __future__ import annotations

import asyncio
import logging
import smtplib
from abc import ABC, abstractmethod
from email.header import Header
from email.mime.text import MIMEText
from html import escape
from typing import Optional

from online_course.core.exceptions import ServiceUnavailableError
from online_course.schemas.contact import ContactMessage

logger = logging.getLogger(__name__)


class EmailNotification(ABC):
    """Contract of the email collaborator."""

    @abstractmethod
    async def send_contact_message(self, message: ContactMessage) -> None:
        """
        Deliver a contact form message to the site operators.

        Raises:
            ServiceUnavailableError: If the message cannot be delivered
        """
        pass


def render_contact_email(message: ContactMessage) -> str:
    """HTML body of a contact message; user input is escaped."""
    subject = message.subject or "No subject"
    return (
        "<html><body>"
        "<h2>Message from the online course site</h2>"
        f"<p><b>From:</b> {escape(message.name)} ({escape(message.email)})</p>"
        f"<p><b>Subject:</b> {escape(subject)}</p>"
        "<hr>"
        f'<pre style="white-space:pre-wrap;">{escape(message.message)}</pre>'
        "</body></html>"
    )


class SMTPEmailNotification(EmailNotification):
    """Sends contact messages through an SMTP relay."""

    def __init__(
        self,
        host: str,
        port: int,
        sender: str,
        recipient: str,
        username: Optional[str] = None,
        password: Optional[str] = None,
        use_tls: bool = True,
        timeout: float = 10.0,
    ) -> None:
        self._host = host
        self._port = port
        self._sender = sender
        self._recipient = recipient
        self._username = username
        self._password = password
        self._use_tls = use_tls
        self._timeout = timeout

    def _build(self, message: ContactMessage) -> MIMEText:
        mime = MIMEText(render_contact_email(message), "html", "utf-8")
        mime["From"] = self._sender
        mime["To"] = self._recipient
        mime["Subject"] = Header(
            f"Contact form: {message.subject or 'No subject'}", "utf-8"
        )
        mime.add_header("Reply-To", message.email)
        return mime

    def _send(self, mime: MIMEText) -> None:
        with smtplib.SMTP(self._host, self._port, timeout=self._timeout) as server:
            server.ehlo()
            if self._use_tls:
                server.starttls()
                server.ehlo()
            if self._username and self._password:
                server.login(self._username, self._password)
            server.sendmail(self._sender, [self._recipient], mime.as_string())

    async def send_contact_message(self, message: ContactMessage) -> None:
        mime = self._build(message)
        try:
            await asyncio.to_thread(self._send, mime)
        except (smtplib.SMTPException, OSError) as e:
            logger.error(f"Failed to send contact email: {e}")
            raise ServiceUnavailableError(
                message="Email delivery failed",
                service_name="email",
            ) from e
        logger.info(f"Contact email sent to {self._recipient}")


class LoggingEmailNotification(EmailNotification):
    """Used when no SMTP server is configured; records the message in the log."""

    async def send_contact_message(self, message: ContactMessage) -> None:
        logger.info(
            f"SMTP not configured, contact message from {message.email} "
            f"('{message.subject or 'No subject'}') was not delivered"
        )
