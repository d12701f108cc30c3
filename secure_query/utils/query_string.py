"""
Query string utilities for SecureQuery.

This module serializes plain key/value mappings into URL-encoded query
strings and parses them back.
"""

import logging
from typing import Dict, List, Mapping
from urllib.parse import parse_qsl, quote, quote_plus, unquote

logger = logging.getLogger(__name__)


def _encode(value: str, safe: str, space_as_plus: bool) -> str:
    if space_as_plus:
        return quote_plus(value, safe=safe)
    return quote(value, safe=safe)


def as_query_string(params: Mapping[str, str], safe: str = "", space_as_plus: bool = True) -> str:
    """
    Convert a plain key/value mapping into a URL-encoded query string.

    Keys and values are percent-encoded individually. Entries that cannot be
    encoded (for example text holding lone surrogates) are skipped; they do
    not abort the rest of the query string.

    Args:
        params: Plain key/value mapping (typically the result of ``SecureQuery.encrypted``)
        safe: Extra characters to leave unescaped
        space_as_plus: Encode spaces as '+' instead of '%20'

    Returns:
        Query string without a leading '?' (empty string when nothing was encoded)

    Examples:
        >>> as_query_string({"username": "Alice", "password": "ENC(Hello, Bob!)"})
        'username=Alice&password=ENC%28Hello%2C+Bob%21%29'
    """
    segments: List[str] = []

    for key, value in params.items():
        try:
            encoded_key = _encode(key, safe, space_as_plus)
            encoded_value = _encode(value, safe, space_as_plus)
        except UnicodeEncodeError:
            logger.debug("Skipping query field that could not be percent-encoded")
            continue
        segments.append(f"{encoded_key}={encoded_value}")

    return "&".join(segments)


def parse_query_string(query_string: str, space_as_plus: bool = True) -> Dict[str, str]:
    """
    Parse a URL-encoded query string into a plain key/value mapping.

    Inverse of ``as_query_string``. A single leading '?' is ignored and
    repeated keys keep their last value.

    Args:
        query_string: Query string (e.g., 'username=Alice&password=abc')
        space_as_plus: Decode '+' as a space

    Returns:
        Dictionary of decoded keys and values
    """
    if query_string.startswith("?"):
        query_string = query_string[1:]

    if space_as_plus:
        return dict(parse_qsl(query_string, keep_blank_values=True))

    params: Dict[str, str] = {}
    for segment in query_string.split("&"):
        if not segment:
            continue
        key, _, value = segment.partition("=")
        params[unquote(key)] = unquote(value)
    return params
