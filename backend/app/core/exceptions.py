class InvalidSubmissionError(ValueError):
    """Raised when the delivery service is handed no submission."""


class EmailDeliveryError(Exception):
    """Base class for every failure while sending contact emails."""


class ConfigurationError(EmailDeliveryError):
    """A required SMTP setting is missing or malformed."""


class EmailConnectionError(EmailDeliveryError):
    """The relay could not be reached or the STARTTLS upgrade failed."""


class EmailAuthenticationError(EmailDeliveryError):
    """The relay rejected the configured credentials."""


class EmailTransmissionError(EmailDeliveryError):
    """The relay refused the message after authentication."""
