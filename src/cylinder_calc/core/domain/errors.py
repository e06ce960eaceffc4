"""Recoverable input errors.

The input reader catches `InputValidationError`, shows `message` on stderr and
prompts again. Nothing outside the reader loop is expected to see them.
"""

from __future__ import annotations


class InputValidationError(ValueError):
    """Base class for a rejected input line."""

    message: str = "Invalid input."

    def __init__(self, raw: str, message: str | None = None) -> None:
        self.raw = raw
        if message is not None:
            self.message = message
        super().__init__(self.message)


class MalformedInputError(InputValidationError):
    """The line is not a base-10 integer token."""

    message = "Invalid input. Please enter a valid integer."


class NonPositiveValueError(InputValidationError):
    """The line is an integer, but zero or negative."""

    message = "Value must be positive. Please try again."

    def __init__(self, raw: str, value: int) -> None:
        self.value = value
        super().__init__(raw)
