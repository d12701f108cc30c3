"""Utility modules for SecureQuery."""

from .config_loader import load_config
from .data_masker import DataMasker
from .query_string import as_query_string, parse_query_string

__all__ = [
    "load_config",
    "DataMasker",
    "as_query_string",
    "parse_query_string",
]
