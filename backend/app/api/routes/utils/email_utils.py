import logging
import re
from typing import Callable, Optional

from app.api.routes.utils import smtp_utils
from app.core.config import Settings, get_settings
from app.core.email_config import resolve_smtp_config
from app.core.exceptions import InvalidSubmissionError
from app.schemas import OutboundMessage, SubmissionRequest


logger = logging.getLogger("contactmail.email")

CONFIRMATION_SUBJECT = "Thank you for your message"
CONFIRMATION_HTML = "<p>Thank you for your email. We will get in touch with you shortly.</p>"

_LINE_BREAKS = re.compile(r"[\r\n]+")


def build_confirmation_email(request: SubmissionRequest, mailbox: str) -> OutboundMessage:
    """Acknowledgement sent back to the submitter."""
    return OutboundMessage(
        sender=mailbox,
        recipient=request.to,
        subject=CONFIRMATION_SUBJECT,
        html_body=CONFIRMATION_HTML,
    )


def _header_text(value: str) -> str:
    """Fold line breaks so free text can go into a header."""
    return _LINE_BREAKS.sub(" ", value).strip()


def build_business_email(request: SubmissionRequest, mailbox: str) -> OutboundMessage:
    """Copy of the submission forwarded to the business mailbox."""
    # contact_name and body are embedded as-is
    html = f"""
    <h2>New contact form submission</h2>
    <p><strong>From:</strong> {request.contact_name} ({request.to})</p>
    <p><strong>Message:</strong></p>
    <p>{request.body}</p>
    """
    return OutboundMessage(
        sender=mailbox,
        recipient=mailbox,
        subject=f"New message from {_header_text(request.contact_name)}",
        html_body=html,
    )


class EmailService:
    """
    Sends the confirmation email, then the business copy.
    Each send resolves configuration and opens its own SMTP session.
    """

    def __init__(self, settings_provider: Callable[[], Settings] = get_settings):
        if settings_provider is None:
            raise ValueError("settings_provider is required")
        self._settings_provider = settings_provider

    async def deliver(self, request: Optional[SubmissionRequest]) -> None:
        if request is None:
            raise InvalidSubmissionError("request is required")

        try:
            await self._send(build_confirmation_email, request)
            await self._send(build_business_email, request)
        except Exception as e:
            logger.error(f"Error sending email to {request.to}: {e}")
            raise

    async def _send(
        self,
        build: Callable[[SubmissionRequest, str], OutboundMessage],
        request: SubmissionRequest,
    ) -> None:
        config = resolve_smtp_config(self._settings_provider())
        message = build(request, config.username)
        await smtp_utils.send_message(config, message)


def get_email_service() -> EmailService:
    """FastAPI dependency providing the delivery service."""
    return EmailService()
