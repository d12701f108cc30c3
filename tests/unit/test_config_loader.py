"""
Unit tests for config loader.
"""

import os
from unittest.mock import patch

import pytest

from secure_query.errors import ConfigurationError
from secure_query.models.config import SecureQueryConfig
from secure_query.utils.config_loader import load_config


class TestConfigLoader:
    """Test cases for config loader."""

    def test_load_config_defaults(self):
        """Test loading config with no variables set."""
        with patch.dict(os.environ, {}, clear=False):
            for name in ("ENCRYPTION_KEY", "SECURE_QUERY_SAFE_CHARS", "SECURE_QUERY_SPACE_AS_PLUS"):
                os.environ.pop(name, None)
            # Mock load_dotenv to prevent loading from .env file
            with patch("secure_query.utils.config_loader.load_dotenv"):
                config = load_config()

            assert config.encryption_key is None
            assert config.query_safe_chars == ""
            assert config.query_space_as_plus is True

    def test_load_config_with_values(self):
        """Test loading config from environment variables."""
        with patch.dict(
            os.environ,
            {
                "ENCRYPTION_KEY": "my-key",
                "SECURE_QUERY_SAFE_CHARS": "/:",
                "SECURE_QUERY_SPACE_AS_PLUS": "false",
            },
            clear=False,
        ):
            with patch("secure_query.utils.config_loader.load_dotenv"):
                config = load_config()

            assert config.encryption_key == "my-key"
            assert config.query_safe_chars == "/:"
            assert config.query_space_as_plus is False

    @pytest.mark.parametrize("raw,expected", [("TRUE", True), ("1", True), ("no", False)])
    def test_load_config_bool_values(self, raw, expected):
        """Test accepted boolean spellings."""
        with patch.dict(os.environ, {"SECURE_QUERY_SPACE_AS_PLUS": raw}, clear=False):
            with patch("secure_query.utils.config_loader.load_dotenv"):
                config = load_config()

            assert config.query_space_as_plus is expected

    def test_load_config_invalid_bool(self):
        """Test invalid boolean raises ConfigurationError."""
        with patch.dict(os.environ, {"SECURE_QUERY_SPACE_AS_PLUS": "maybe"}, clear=False):
            with patch("secure_query.utils.config_loader.load_dotenv"):
                with pytest.raises(ConfigurationError, match="SECURE_QUERY_SPACE_AS_PLUS"):
                    load_config()

    def test_load_config_calls_load_dotenv(self):
        """Test that .env loading is attempted."""
        with patch("secure_query.utils.config_loader.load_dotenv") as mock_load_dotenv:
            load_config()

        mock_load_dotenv.assert_called_once()

    def test_encryption_key_hidden_from_repr(self):
        """Test that the key is not shown in the config repr."""
        config = SecureQueryConfig(encryption_key="super-secret-key")

        assert "super-secret-key" not in repr(config)
