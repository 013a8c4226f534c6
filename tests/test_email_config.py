"""
Tests for SMTP configuration validation.
"""

import pytest

from app.core.email_config import resolve_smtp_config
from app.core.exceptions import ConfigurationError, EmailDeliveryError
from conftest import make_settings


class TestResolveSmtpConfig:
    """Test validation of relay settings."""

    def test_valid_settings(self, valid_settings):
        config = resolve_smtp_config(valid_settings)

        assert config.host == 'smtp.test.com'
        assert config.port == 587
        assert config.username == 'test@test.com'
        assert config.password.get_secret_value() == 'password'

    def test_numeric_port_is_accepted(self):
        config = resolve_smtp_config(make_settings(Port=2525))

        assert config.port == 2525

    def test_signed_port_is_accepted(self):
        config = resolve_smtp_config(make_settings(Port='+587'))

        assert config.port == 587

    def test_surrounding_whitespace_is_stripped(self):
        config = resolve_smtp_config(
            make_settings(EmailHost='  smtp.test.com ', Port=' 587 ')
        )

        assert config.host == 'smtp.test.com'
        assert config.port == 587

    @pytest.mark.parametrize('host', [None, '', '   '])
    def test_missing_host(self, host):
        with pytest.raises(ConfigurationError) as exc_info:
            resolve_smtp_config(make_settings(EmailHost=host))

        assert str(exc_info.value) == 'EmailHost configuration is missing'

    @pytest.mark.parametrize('port', [
        None, '', 'abc', '0', '-25', '58.7', '5_87', '\u0665\u0668\u0667', '+-587', '+',
    ])
    def test_invalid_port(self, port):
        with pytest.raises(ConfigurationError) as exc_info:
            resolve_smtp_config(make_settings(Port=port))

        assert str(exc_info.value) == 'Invalid Port configuration'

    @pytest.mark.parametrize('username', [None, '', ' '])
    def test_missing_username(self, username):
        with pytest.raises(ConfigurationError) as exc_info:
            resolve_smtp_config(make_settings(EmailUsername=username))

        assert str(exc_info.value) == 'EmailUsername configuration is missing'

    @pytest.mark.parametrize('password', [None, '', '  '])
    def test_missing_password(self, password):
        with pytest.raises(ConfigurationError) as exc_info:
            resolve_smtp_config(make_settings(EmailPassword=password))

        assert str(exc_info.value) == 'EmailPassword configuration is missing'

    def test_host_is_checked_before_port(self):
        with pytest.raises(ConfigurationError) as exc_info:
            resolve_smtp_config(make_settings(EmailHost='', Port='bad'))

        assert str(exc_info.value) == 'EmailHost configuration is missing'

    def test_port_is_checked_before_credentials(self):
        with pytest.raises(ConfigurationError) as exc_info:
            resolve_smtp_config(
                make_settings(Port='bad', EmailUsername='', EmailPassword='')
            )

        assert str(exc_info.value) == 'Invalid Port configuration'

    def test_username_is_checked_before_password(self):
        with pytest.raises(ConfigurationError) as exc_info:
            resolve_smtp_config(make_settings(EmailUsername='', EmailPassword=''))

        assert str(exc_info.value) == 'EmailUsername configuration is missing'

    def test_configuration_error_is_a_delivery_error(self):
        with pytest.raises(EmailDeliveryError):
            resolve_smtp_config(make_settings(EmailHost=None))


class TestSettingsFromEnvironment:
    """Test that settings are read from the documented variable names."""

    def test_reads_relay_variable_names(self, monkeypatch):
        monkeypatch.setenv('EmailHost', 'relay.example.com')
        monkeypatch.setenv('Port', '2525')
        monkeypatch.setenv('EmailUsername', 'owner@example.com')
        monkeypatch.setenv('EmailPassword', 'secret')

        from app.core.config import Settings

        config = resolve_smtp_config(Settings(_env_file=None))

        assert config.host == 'relay.example.com'
        assert config.port == 2525
        assert config.username == 'owner@example.com'
        assert config.password.get_secret_value() == 'secret'

    def test_get_settings_reads_fresh_values(self, monkeypatch):
        from app.core.config import get_settings

        monkeypatch.setenv('EmailHost', 'first.example.com')
        assert get_settings().EMAIL_HOST == 'first.example.com'

        monkeypatch.setenv('EmailHost', 'second.example.com')
        assert get_settings().EMAIL_HOST == 'second.example.com'
