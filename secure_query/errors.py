"""
SecureQuery exceptions and error handling.

This module defines custom exceptions for the SecureQuery package.
"""

from typing import Literal, Optional

EncryptionErrorCode = Literal[
    "ENCRYPTION_FAILED",
    "DECRYPTION_FAILED",
    "ENCRYPTION_KEY_REQUIRED",
]


class SecureQueryError(Exception):
    """Base exception for SecureQuery errors."""

    def __init__(self, message: str, code: Optional[str] = None):
        """
        Initialize SecureQuery error.

        Args:
            message: Error message
            code: Machine-readable error code if applicable
        """
        super().__init__(message)
        self.message = message
        self.code = code


class ConfigurationError(SecureQueryError):
    """Raised when configuration is invalid."""

    pass


class EncryptionError(SecureQueryError):
    """Raised when a crypto provider fails to encrypt or decrypt a value."""

    def __init__(
        self,
        message: str,
        code: Optional[EncryptionErrorCode] = None,
        field_name: Optional[str] = None,
    ):
        """
        Initialize encryption error.

        Args:
            message: Error message (never contains the secret itself)
            code: Encryption error code
            field_name: Name of the query field being processed, if known
        """
        super().__init__(message, code=code)
        self.field_name = field_name
