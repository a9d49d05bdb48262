"""Input length validation for the post text field."""

from __future__ import annotations

from ..constants import INPUT_MAX_LENGTH


class InputValidator:
    """Enforces the maximum input length by refusal.

    An edit that would push the text past ``max_length`` is refused and the
    previous value is kept. Nothing is ever cut. Length is counted in
    characters. Empty text is accepted here and blocked only at submission.
    """

    def __init__(self, max_length: int = INPUT_MAX_LENGTH):
        self.max_length = max_length

    def is_acceptable(self, text: str) -> bool:
        return len(text) <= self.max_length

    def accept(self, current: str, proposed: str) -> str:
        """Return ``proposed`` if it fits, otherwise ``current``."""
        if self.is_acceptable(proposed):
            return proposed
        return current

    def remaining(self, text: str) -> int:
        return self.max_length - len(text)


class InputField:
    """The bounded input field with a live remaining-character count."""

    def __init__(self, validator: InputValidator | None = None, value: str = ""):
        self.validator = validator or InputValidator()
        self._value = self.validator.accept("", value)

    @property
    def value(self) -> str:
        return self._value

    @property
    def length(self) -> int:
        return len(self._value)

    @property
    def remaining(self) -> int:
        return self.validator.remaining(self._value)

    def update(self, text: str) -> bool:
        """Apply an edit. Returns False when the edit was refused."""
        if not self.validator.is_acceptable(text):
            return False
        self._value = text
        return True

    def clear(self) -> None:
        self._value = ""

    def __str__(self) -> str:
        return f"{self.length}/{self.validator.max_length}"
