from typing import Optional

from pydantic import AliasChoices, Field, SecretStr
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """
    Application configuration loaded from environment variables.
    SMTP values stay optional here; they are validated on every send.
    """

    # SMTP relay
    EMAIL_HOST: Optional[str] = Field(
        default=None, validation_alias=AliasChoices("EmailHost", "EMAIL_HOST")
    )
    PORT: Optional[str] = Field(
        default=None, validation_alias=AliasChoices("Port", "PORT")
    )
    EMAIL_USERNAME: Optional[str] = Field(
        default=None, validation_alias=AliasChoices("EmailUsername", "EMAIL_USERNAME")
    )
    EMAIL_PASSWORD: Optional[SecretStr] = Field(
        default=None, validation_alias=AliasChoices("EmailPassword", "EMAIL_PASSWORD")
    )

    # App
    APP_ENV: str = "development"

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"
        coerce_numbers_to_str = True


def get_settings() -> Settings:
    """Read configuration fresh so relay changes apply without a restart."""
    return Settings()
