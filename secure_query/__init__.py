"""
SecureQuery - request parameters with plain and encrypted fields in one mapping.

This package lets callers mark individual API parameters as secure, encrypt
them with a pluggable crypto provider and serialize the result as a URL query
string.
"""

from .errors import ConfigurationError, EncryptionError, SecureQueryError
from .models.config import SecureQueryConfig
from .models.secure_query import SecureQuery, decrypt_fields
from .models.text import PlainText, SecureText, Text, plain, secure, to_text
from .services.crypto_provider import CryptoProvider
from .services.encryption import FernetCryptoProvider
from .utils.config_loader import load_config
from .utils.data_masker import DataMasker
from .utils.query_string import as_query_string, parse_query_string

__version__ = "0.1.0"
__license__ = "MIT"

__all__ = [
    "SecureQuery",
    "PlainText",
    "SecureText",
    "Text",
    "plain",
    "secure",
    "to_text",
    "decrypt_fields",
    "CryptoProvider",
    "FernetCryptoProvider",
    "SecureQueryConfig",
    "load_config",
    "DataMasker",
    "as_query_string",
    "parse_query_string",
    "SecureQueryError",
    "ConfigurationError",
    "EncryptionError",
]
