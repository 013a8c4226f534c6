import logging
from contextlib import asynccontextmanager
from email.message import EmailMessage
from typing import AsyncIterator

import aiosmtplib

from app.core.email_config import SmtpConfig
from app.core.exceptions import (
    EmailAuthenticationError,
    EmailConnectionError,
    EmailTransmissionError,
)
from app.schemas import OutboundMessage


logger = logging.getLogger("contactmail.smtp")


def build_mime_message(message: OutboundMessage) -> EmailMessage:
    """Convert an outbound message into a single-part HTML email."""
    email = EmailMessage()
    email["From"] = message.sender
    email["To"] = message.recipient
    email["Subject"] = message.subject
    email.set_content(message.html_body, subtype="html")
    return email


async def _disconnect(client: aiosmtplib.SMTP) -> None:
    if not client.is_connected:
        return
    try:
        await client.quit()
    except (aiosmtplib.SMTPException, OSError) as e:
        logger.debug(f"QUIT failed, dropping connection: {e}")
        client.close()


@asynccontextmanager
async def smtp_session(config: SmtpConfig) -> AsyncIterator[aiosmtplib.SMTP]:
    """
    Open an authenticated SMTP session over STARTTLS.
    The connection is closed on exit whether or not the body raised.
    """
    client = aiosmtplib.SMTP(hostname=config.host, port=config.port, start_tls=False)
    try:
        try:
            await client.connect()
            await client.starttls()
        except (aiosmtplib.SMTPException, OSError) as e:
            raise EmailConnectionError(
                f"Could not connect to {config.host}:{config.port}: {e}"
            ) from e

        try:
            await client.login(config.username, config.password.get_secret_value())
        except aiosmtplib.SMTPAuthenticationError as e:
            raise EmailAuthenticationError(
                f"Authentication failed for {config.username}: {e}"
            ) from e
        except (aiosmtplib.SMTPServerDisconnected, OSError) as e:
            raise EmailConnectionError(
                f"Connection to {config.host}:{config.port} lost during login: {e}"
            ) from e
        except aiosmtplib.SMTPException as e:
            raise EmailAuthenticationError(
                f"Authentication failed for {config.username}: {e}"
            ) from e

        yield client
    finally:
        await _disconnect(client)


async def send_message(config: SmtpConfig, message: OutboundMessage) -> None:
    """Send one message over a fresh session. No retries."""
    email = build_mime_message(message)

    async with smtp_session(config) as client:
        try:
            await client.send_message(email)
        except aiosmtplib.SMTPServerDisconnected as e:
            raise EmailConnectionError(
                f"Connection to {config.host}:{config.port} lost while sending: {e}"
            ) from e
        except aiosmtplib.SMTPException as e:
            raise EmailTransmissionError(
                f"Relay rejected message to {message.recipient}: {e}"
            ) from e
        except OSError as e:
            raise EmailConnectionError(
                f"Connection to {config.host}:{config.port} lost while sending: {e}"
            ) from e

    logger.info(f"Email sent to {message.recipient}")
