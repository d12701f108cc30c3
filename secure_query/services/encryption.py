"""
Fernet crypto provider for SecureQuery.

This provider encrypts secure query fields locally with a symmetric Fernet
key taken from the constructor, the configuration or the ENCRYPTION_KEY
environment variable.
"""

import logging
import os
from typing import TYPE_CHECKING, Optional

from cryptography.fernet import Fernet, InvalidToken

from ..errors import ConfigurationError, EncryptionError

if TYPE_CHECKING:
    from ..models.config import SecureQueryConfig

logger = logging.getLogger(__name__)


class FernetCryptoProvider:
    """
    Crypto provider backed by ``cryptography.fernet.Fernet``.

    Holds at most one encrypted value at a time. Not safe for concurrent use;
    share one instance per ``SecureQuery.encrypted`` call.
    """

    def __init__(
        self,
        encryption_key: Optional[str] = None,
        config: Optional["SecureQueryConfig"] = None,
    ):
        """
        Initialize Fernet crypto provider.

        Args:
            encryption_key: Fernet key; overrides config and environment
            config: Optional configuration containing encryption_key

        Raises:
            ConfigurationError: If no key is found or the key is invalid
        """
        key = encryption_key
        if not key and config is not None:
            key = config.encryption_key
        if not key:
            key = os.environ.get("ENCRYPTION_KEY")
        if not key:
            raise ConfigurationError(
                "ENCRYPTION_KEY not found. Set ENCRYPTION_KEY environment variable "
                "or provide encryption_key.",
                code="ENCRYPTION_KEY_REQUIRED",
            )

        try:
            self.fernet = Fernet(key.encode() if isinstance(key, str) else key)
        except (ValueError, TypeError) as e:
            raise ConfigurationError(f"Failed to initialize Fernet encryption: {e}") from e

        self._secure_text: Optional[str] = None

    @property
    def pending(self) -> bool:
        """Whether an encrypted value is waiting to be retrieved and cleared."""
        return self._secure_text is not None

    def encrypt(self, plaintext: str) -> None:
        """
        Encrypt plaintext and keep the token until ``clear`` is called.

        Empty plaintext is stored as an empty string.

        Args:
            plaintext: Value to encrypt

        Raises:
            EncryptionError: If plaintext cannot be encoded as UTF-8
        """
        if not plaintext:
            self._secure_text = ""
            return
        try:
            data = plaintext.encode("utf-8")
        except UnicodeEncodeError as e:
            logger.error("Failed to encrypt value: text is not valid UTF-8")
            raise EncryptionError(
                "Failed to encrypt value: text is not valid UTF-8",
                code="ENCRYPTION_FAILED",
            ) from e
        self._secure_text = self.fernet.encrypt(data).decode("ascii")

    def get_secure_text(self) -> str:
        """
        Return the token produced by the most recent ``encrypt`` call.

        Returns:
            URL-safe base64 Fernet token, or empty string if nothing is pending
        """
        return self._secure_text or ""

    def clear(self) -> None:
        """Drop the stored token."""
        self._secure_text = None

    def decrypt(self, ciphertext: str) -> str:
        """
        Decrypt a Fernet token.

        Args:
            ciphertext: Token returned by a previous encryption

        Returns:
            Decrypted plaintext (empty string for empty input)

        Raises:
            EncryptionError: If the token is corrupted or was made with another key
        """
        if not ciphertext:
            return ""
        try:
            return self.fernet.decrypt(ciphertext.encode("utf-8")).decode("utf-8")
        except (InvalidToken, UnicodeError) as e:
            logger.error("Failed to decrypt value: invalid token or wrong key")
            raise EncryptionError(
                "Failed to decrypt value: invalid token or wrong key",
                code="DECRYPTION_FAILED",
            ) from e
