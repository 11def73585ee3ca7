# tests/unit/libs/price-common/test_config.py
from unittest.mock import patch

from price_common import config


def test_uses_default_credentials():
    assert config.uses_default_credentials("user", "password") is True
    assert config.uses_default_credentials("svc_prices", "password") is False
    assert config.uses_default_credentials("user", "s3cret") is False


def test_log_database_credentials_source_warns_on_defaults():
    with patch.object(config, "uses_default_credentials", return_value=True), \
            patch.object(config.logger, "warning") as warning:
        config.log_database_credentials_source()

    warning.assert_called_once()
    assert "POSTGRES_USER" in warning.call_args[0][0]


def test_log_database_credentials_source_reports_environment_credentials():
    with patch.object(config, "uses_default_credentials", return_value=False), \
            patch.object(config.logger, "info") as info, \
            patch.object(config.logger, "warning") as warning:
        config.log_database_credentials_source()

    info.assert_called_once_with("Database credentials: Using environment variables.")
    warning.assert_not_called()
