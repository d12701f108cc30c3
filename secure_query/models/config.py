"""
Configuration types for SecureQuery.

This module contains the Pydantic model that defines the configuration
structure used by the crypto provider and the query encoder.
"""

from typing import Optional

from pydantic import BaseModel, Field


class SecureQueryConfig(BaseModel):
    """SecureQuery configuration.

    Optional fields:
    - encryption_key: Fernet key used by FernetCryptoProvider
    - query_safe_chars: Extra characters left unescaped in query strings
    - query_space_as_plus: Encode spaces as '+' (True) or '%20' (False)
    """

    encryption_key: Optional[str] = Field(
        default=None, repr=False, description="URL-safe base64 Fernet key"
    )
    query_safe_chars: str = Field(
        default="", description="Characters not percent-encoded in query strings"
    )
    query_space_as_plus: bool = Field(
        default=True, description="Encode spaces as '+' instead of '%20'"
    )
