from pydantic import BaseModel, SecretStr

from app.core.config import Settings
from app.core.exceptions import ConfigurationError


"""
SMTP connection parameters for the contact mailer.
Values come from Settings and are checked on every send.
"""


class SmtpConfig(BaseModel):
    host: str
    port: int
    username: str
    password: SecretStr


def _is_blank(value: str | None) -> bool:
    return value is None or not value.strip()


def _parse_port(value: str | None) -> int | None:
    if value is None:
        return None
    text = value.strip()
    # ASCII digits with one optional sign only
    digits = text[1:] if text.startswith(("+", "-")) else text
    if not digits.isascii() or not digits.isdigit():
        return None
    port = int(text)
    return port if port > 0 else None


def resolve_smtp_config(settings: Settings) -> SmtpConfig:
    """
    Validate the relay settings in order: host, port, username, password.
    The first failing check raises ConfigurationError.
    """
    if _is_blank(settings.EMAIL_HOST):
        raise ConfigurationError("EmailHost configuration is missing")

    port = _parse_port(settings.PORT)
    if port is None:
        raise ConfigurationError("Invalid Port configuration")

    if _is_blank(settings.EMAIL_USERNAME):
        raise ConfigurationError("EmailUsername configuration is missing")

    password = settings.EMAIL_PASSWORD
    if password is None or _is_blank(password.get_secret_value()):
        raise ConfigurationError("EmailPassword configuration is missing")

    return SmtpConfig(
        host=settings.EMAIL_HOST.strip(),
        port=port,
        username=settings.EMAIL_USERNAME.strip(),
        password=password,
    )
