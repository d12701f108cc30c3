"""Crypto provider contract and implementations for SecureQuery."""

from .crypto_provider import CryptoProvider
from .encryption import FernetCryptoProvider

__all__ = [
    "CryptoProvider",
    "FernetCryptoProvider",
]
