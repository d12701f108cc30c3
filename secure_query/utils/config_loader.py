"""
Configuration loader utility.

Automatically loads environment variables with sensible defaults.
"""

import os

from dotenv import load_dotenv

from ..errors import ConfigurationError
from ..models.config import SecureQueryConfig

_TRUE_VALUES = ("true", "1", "yes")
_FALSE_VALUES = ("false", "0", "no")


def _parse_bool(name: str, raw: str) -> bool:
    value = raw.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    raise ConfigurationError(f"{name} must be one of true/false/1/0/yes/no, got '{raw}'")


def load_config() -> SecureQueryConfig:
    """
    Load configuration from environment variables with defaults.

    Optional environment variables:
    - ENCRYPTION_KEY (Fernet key for FernetCryptoProvider)
    - SECURE_QUERY_SAFE_CHARS (default: empty, only unreserved characters kept)
    - SECURE_QUERY_SPACE_AS_PLUS (default: true)

    Returns:
        SecureQueryConfig instance

    Raises:
        ConfigurationError: If an environment variable holds an invalid value
    """
    load_dotenv()

    encryption_key = os.environ.get("ENCRYPTION_KEY") or None
    safe_chars = os.environ.get("SECURE_QUERY_SAFE_CHARS", "")

    space_as_plus = True
    raw_space_as_plus = os.environ.get("SECURE_QUERY_SPACE_AS_PLUS")
    if raw_space_as_plus:
        space_as_plus = _parse_bool("SECURE_QUERY_SPACE_AS_PLUS", raw_space_as_plus)

    return SecureQueryConfig(
        encryption_key=encryption_key,
        query_safe_chars=safe_chars,
        query_space_as_plus=space_as_plus,
    )
