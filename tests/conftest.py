"""
Pytest configuration and fixtures for all tests.
"""

import os
from unittest.mock import AsyncMock, MagicMock, patch

import pytest

# Set up test environment variables before importing any modules
os.environ.setdefault('APP_ENV', 'development')

from app.core.config import Settings
from app.schemas import SubmissionRequest


def make_settings(**overrides):
    """Build Settings without reading a .env file."""
    values = {
        'EmailHost': 'smtp.test.com',
        'Port': '587',
        'EmailUsername': 'test@test.com',
        'EmailPassword': 'password',
    }
    values.update(overrides)
    return Settings(_env_file=None, **values)


@pytest.fixture
def valid_settings():
    """Settings pointing at a fake relay."""
    return make_settings()


@pytest.fixture
def submission():
    """A complete contact form submission."""
    return SubmissionRequest(to='user@test.com', contactName='User', body='Hello')


@pytest.fixture
def smtp_client():
    """Mock aiosmtplib client with async protocol methods."""
    client = MagicMock()
    client.connect = AsyncMock()
    client.starttls = AsyncMock()
    client.login = AsyncMock()
    client.send_message = AsyncMock()
    client.quit = AsyncMock()
    client.close = MagicMock()
    client.is_connected = True
    return client


@pytest.fixture
def mock_smtp(smtp_client):
    """Patch aiosmtplib.SMTP so every session gets smtp_client."""
    with patch('aiosmtplib.SMTP', return_value=smtp_client) as smtp_cls:
        yield smtp_cls
