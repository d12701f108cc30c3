"""
Tagged text values for SecureQuery.

A query field is either plain text, sent as-is, or secure text, which must
pass through a crypto provider before it leaves the process.
"""

from typing import Any, Literal, Union

from pydantic import BaseModel, Field, StrictStr

from ..utils.data_masker import DataMasker


class PlainText(BaseModel):
    """Text sent through unchanged."""

    kind: Literal["plain"] = Field(default="plain", description="Variant tag")
    text: StrictStr = Field(..., description="Field content")

    class Config:
        frozen = True

    def __init__(self, text: str, **data: Any):
        super().__init__(text=text, **data)

    @property
    def is_secure(self) -> bool:
        return False


class SecureText(BaseModel):
    """Text that must be encrypted before it is sent."""

    kind: Literal["secure"] = Field(default="secure", description="Variant tag")
    text: StrictStr = Field(..., description="Plaintext content to encrypt")

    class Config:
        frozen = True

    def __init__(self, text: str, **data: Any):
        super().__init__(text=text, **data)

    @property
    def is_secure(self) -> bool:
        return True

    def __repr_args__(self):
        # Keep plaintext secrets out of reprs and log lines
        return [("kind", self.kind), ("text", DataMasker.MASKED_VALUE)]


Text = Union[PlainText, SecureText]


def plain(text: str) -> PlainText:
    """Shorthand for ``PlainText(text)``."""
    return PlainText(text)


def secure(text: str) -> SecureText:
    """Shorthand for ``SecureText(text)``."""
    return SecureText(text)


def to_text(value: Union[str, Text]) -> Text:
    """
    Convert a value into a tagged text value.

    Bare strings become PlainText; tagged values are returned unchanged.

    Args:
        value: String or tagged text value

    Returns:
        Tagged text value

    Raises:
        TypeError: If value is neither a string nor a tagged text value

    Examples:
        >>> to_text("Alice")
        PlainText(kind='plain', text='Alice')
    """
    if isinstance(value, (PlainText, SecureText)):
        return value
    if isinstance(value, str):
        return PlainText(value)
    raise TypeError(
        f"Query values must be str, PlainText or SecureText, got {type(value).__name__}"
    )
