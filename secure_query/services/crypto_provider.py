"""
Crypto provider protocol.

Defines the structural typing contract used by ``SecureQuery.encrypted`` to
encrypt secure fields. Implementations don't need to inherit from it.

Implementations keep the most recent encrypted value in a single internal
slot: ``encrypt`` fills it, ``get_secure_text`` reads it and ``clear``
discards it. Callers must not interleave these calls across fields.
"""

from typing import Protocol, runtime_checkable


@runtime_checkable
class CryptoProvider(Protocol):
    """Field-level encryption of sensitive string values."""

    def encrypt(self, plaintext: str) -> None:
        """Encrypt plaintext and store the result internally, replacing any prior one."""
        ...

    def get_secure_text(self) -> str:
        """Return the value stored by the most recent ``encrypt`` call."""
        ...

    def clear(self) -> None:
        """Discard the internally stored encrypted value."""
        ...

    def decrypt(self, ciphertext: str) -> str:
        """Decrypt ciphertext and return the plaintext."""
        ...
