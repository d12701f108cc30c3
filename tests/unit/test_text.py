"""
Unit tests for tagged text values.
"""

import pytest
from pydantic import ValidationError

from secure_query.models.text import PlainText, SecureText, plain, secure, to_text


class TestTaggedText:
    """Test cases for PlainText and SecureText."""

    def test_plain_text_positional(self):
        """Test creating plain text positionally."""
        value = PlainText("I am Alice")

        assert value.text == "I am Alice"
        assert value.kind == "plain"
        assert value.is_secure is False

    def test_secure_text_positional(self):
        """Test creating secure text positionally."""
        value = SecureText("I am Bob")

        assert value.text == "I am Bob"
        assert value.kind == "secure"
        assert value.is_secure is True

    def test_keyword_construction(self):
        """Test creating values with keyword argument."""
        assert PlainText(text="x") == PlainText("x")
        assert SecureText(text="x") == SecureText("x")

    def test_variants_are_not_equal(self):
        """Test that plain and secure values with same text differ."""
        assert PlainText("same") != SecureText("same")

    def test_empty_and_unicode_text_accepted(self):
        """Test that no content validation is performed."""
        assert PlainText("").text == ""
        assert SecureText("🎉 Привет 世界").text == "🎉 Привет 世界"

    def test_non_string_rejected(self):
        """Test that only strings are accepted."""
        with pytest.raises(ValidationError):
            PlainText(123)
        with pytest.raises(ValidationError):
            SecureText(None)

    def test_values_are_immutable(self):
        """Test that the variant content cannot be reassigned."""
        value = SecureText("secret")

        with pytest.raises(ValidationError):
            value.text = "other"

    def test_secure_repr_is_masked(self):
        """Test that secure text never shows its plaintext in repr."""
        value = SecureText("hunter2")

        assert "hunter2" not in repr(value)
        assert "hunter2" not in str(value)
        assert "***MASKED***" in repr(value)

    def test_plain_repr_shows_text(self):
        """Test that plain text repr shows its content."""
        assert "Alice" in repr(PlainText("Alice"))

    def test_shorthands(self):
        """Test plain() and secure() helpers."""
        assert plain("a") == PlainText("a")
        assert secure("b") == SecureText("b")


class TestToText:
    """Test cases for to_text conversion."""

    def test_string_becomes_plain(self):
        """Test that bare strings convert to PlainText."""
        assert to_text("I am Carol") == PlainText("I am Carol")

    def test_tagged_values_unchanged(self):
        """Test that tagged values are returned as-is."""
        value = SecureText("I am Dave")

        assert to_text(value) is value

    def test_unsupported_type(self):
        """Test that other types raise TypeError."""
        with pytest.raises(TypeError, match="got int"):
            to_text(42)
