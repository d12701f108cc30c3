"""
Shared pytest fixtures for SecureQuery tests.
"""

import os
from typing import List, Optional

import pytest
from cryptography.fernet import Fernet

# Set test environment variables
os.environ["ENCRYPTION_KEY"] = "_-aheB8oQwob2XxUyN1JK2RLOs_Hpi3WSkKluxLZzmE="


class RecordingCryptoProvider:
    """Crypto provider double that wraps values as 'encrypted(...)' and records calls."""

    def __init__(self):
        self.calls: List[tuple] = []
        self._encrypted_text: Optional[str] = None

    def encrypt(self, plaintext: str) -> None:
        self.calls.append(("encrypt", plaintext))
        self._encrypted_text = f"encrypted({plaintext})"

    def get_secure_text(self) -> str:
        self.calls.append(("get_secure_text",))
        return self._encrypted_text or ""

    def clear(self) -> None:
        self.calls.append(("clear",))
        self._encrypted_text = None

    def decrypt(self, ciphertext: str) -> str:
        self.calls.append(("decrypt", ciphertext))
        return f"decrypted({ciphertext})"


class FailingCryptoProvider(RecordingCryptoProvider):
    """Crypto provider double whose encrypt always raises."""

    def encrypt(self, plaintext: str) -> None:
        self.calls.append(("encrypt", plaintext))
        raise RuntimeError("crypto module unavailable")


@pytest.fixture
def crypto_provider():
    """Recording crypto provider."""
    return RecordingCryptoProvider()


@pytest.fixture
def failing_crypto_provider():
    """Crypto provider that fails on encrypt."""
    return FailingCryptoProvider()


@pytest.fixture
def fernet_key():
    """Freshly generated Fernet key."""
    return Fernet.generate_key().decode()
