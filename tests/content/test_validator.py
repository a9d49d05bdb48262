"""Unit tests for InputValidator and InputField.

Tests truncation-by-refusal and the live remaining count.
"""

from __future__ import annotations

import pytest

from social_post_generator.constants import INPUT_MAX_LENGTH
from social_post_generator.content.validator import InputField, InputValidator


class TestInputValidator:
    """Tests for InputValidator."""

    def test_default_limit_is_280(self):
        assert InputValidator().max_length == 280 == INPUT_MAX_LENGTH

    def test_accepts_text_at_limit(self):
        validator = InputValidator()
        text = "a" * 280
        assert validator.accept("", text) == text

    def test_refuses_text_over_limit_and_keeps_current(self):
        validator = InputValidator()
        current = "a" * 280
        assert validator.accept(current, current + "b") == current

    def test_refusal_never_cuts(self):
        """Over-long paste leaves the prior value, not a truncated paste."""
        validator = InputValidator()
        assert validator.accept("hello", "x" * 500) == "hello"

    def test_empty_text_is_acceptable(self):
        assert InputValidator().is_acceptable("")

    def test_counts_characters_not_bytes(self):
        validator = InputValidator(max_length=3)
        assert validator.is_acceptable("🚀🚀🚀")
        assert not validator.is_acceptable("🚀🚀🚀🚀")

    def test_custom_limit(self):
        validator = InputValidator(max_length=5)
        assert validator.accept("abc", "abcdef") == "abc"
        assert validator.remaining("abc") == 2

    @pytest.mark.parametrize("extra", [1, 2, 50, 1000])
    def test_refusal_is_idempotent(self, extra: int):
        """Repeated over-long edits keep returning the last valid value."""
        validator = InputValidator()
        current = "x" * 279
        for _ in range(3):
            current = validator.accept(current, "x" * (280 + extra))
        assert current == "x" * 279


class TestInputField:
    """Tests for InputField."""

    def test_starts_empty_with_full_remaining(self):
        field = InputField()
        assert field.value == ""
        assert field.remaining == 280
        assert str(field) == "0/280"

    def test_update_within_limit(self):
        field = InputField()
        assert field.update("Hello") is True
        assert field.value == "Hello"
        assert field.length == 5
        assert field.remaining == 275

    def test_update_over_limit_is_refused(self):
        field = InputField()
        field.update("a" * 280)
        assert field.update("a" * 281) is False
        assert field.value == "a" * 280
        assert field.remaining == 0

    def test_initial_value_over_limit_is_refused(self):
        field = InputField(value="a" * 300)
        assert field.value == ""

    def test_clear(self):
        field = InputField(value="something")
        field.clear()
        assert field.value == ""
