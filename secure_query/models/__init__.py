"""Pydantic models and value types for SecureQuery."""

from .config import SecureQueryConfig
from .secure_query import SecureQuery, decrypt_fields
from .text import PlainText, SecureText, Text, plain, secure, to_text

__all__ = [
    "SecureQueryConfig",
    "SecureQuery",
    "decrypt_fields",
    "PlainText",
    "SecureText",
    "Text",
    "plain",
    "secure",
    "to_text",
]
