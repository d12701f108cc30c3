"""
Data masker utility for keeping secret query values out of logs.

Field names are matched against a list of sensitive keywords so that callers
can decide which plain fields should be promoted to secure ones.
"""

import re
from typing import Dict, Iterable, List, Mapping, Set

# Upper-case runs (acronyms), capitalized or lower-case words, digits
_WORD_PATTERN = re.compile(r"[A-Z]+(?![a-z])|[A-Z]?[a-z]+|\d+")


class DataMasker:
    """Static class for masking sensitive data."""

    MASKED_VALUE = "***MASKED***"

    # Set of sensitive field names (normalized)
    _sensitive_fields: Set[str] = {
        "password",
        "passwd",
        "pwd",
        "secret",
        "token",
        "apikey",
        "authorization",
        "cookie",
        "session",
        "ssn",
        "creditcard",
        "cardnumber",
        "cvv",
        "pin",
        "otp",
        "accesstoken",
        "refreshtoken",
        "privatekey",
        "secretkey",
    }

    @classmethod
    def _tokens(cls, key: str) -> List[str]:
        """Split a field name on '_', '-' and camelCase boundaries."""
        tokens: List[str] = []
        for part in re.split(r"[_\-]+", key):
            tokens.extend(word.lower() for word in _WORD_PATTERN.findall(part))
        return tokens

    @classmethod
    def is_sensitive_field(cls, key: str) -> bool:
        """
        Check if a field name indicates sensitive data.

        Keywords match whole words of the name ('user_password', 'refreshToken'),
        or two adjacent words for compound entries ('api_key', 'creditCard').
        Words merely containing a keyword ('shipping') do not match.

        Args:
            key: Field name to check

        Returns:
            True if field is sensitive, False otherwise
        """
        normalized_key = key.lower().replace("_", "").replace("-", "")
        if normalized_key in cls._sensitive_fields:
            return True

        tokens = cls._tokens(key)
        if any(token in cls._sensitive_fields for token in tokens):
            return True

        return any(a + b in cls._sensitive_fields for a, b in zip(tokens, tokens[1:]))

    @classmethod
    def mask_fields(cls, params: Mapping[str, str], keys: Iterable[str]) -> Dict[str, str]:
        """
        Return a copy of params with the values of the given keys masked.

        Args:
            params: Plain key/value mapping
            keys: Keys whose values must not be shown

        Returns:
            Masked copy of params
        """
        hidden = set(keys)
        return {key: cls.MASKED_VALUE if key in hidden else value for key, value in params.items()}

