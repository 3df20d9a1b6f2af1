"""
Validation Errors - Programmer-Misuse Signals.

Failed checks never raise; they become messages in a ValidationResult.
The exceptions below only signal misuse of the API itself.
"""

from __future__ import annotations

from typing import List, Optional


class MissingArgumentError(ValueError):
    """Raised when a required argument is None."""

    def __init__(self, message: str, argument: Optional[str] = None) -> None:
        super().__init__(message)
        self.argument = argument
        self.message = message


class NoValuePresentError(LookupError):
    """Raised when get() is called on a failed validation result."""

    def __init__(self, messages: Optional[List[str]] = None) -> None:
        self.messages = list(messages or [])
        super().__init__("no value present")


def require_check(check: object) -> None:
    if check is None:
        raise MissingArgumentError("a check itself must not be null", argument="check")


def require_message_provider(message_provider: object) -> None:
    if message_provider is None:
        raise MissingArgumentError(
            "the provider for the error message must not be null",
            argument="message_provider",
        )
