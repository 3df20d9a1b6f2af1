"""
Value Objects for Domain Layer.

Value objects are immutable objects that describe the outcome of a single
check. They carry no identity and are safe to share between threads.
"""

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, model_validator


# =============================================================================
# Type Aliases for improved readability
# =============================================================================

# Ordered failure messages of one validation run
MessageList = List[str]


class CheckResult(BaseModel):
    """Result of evaluating one check against one value."""

    passed: bool
    message: Optional[str] = None

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def _message_only_on_failure(self) -> "CheckResult":
        if self.passed and self.message is not None:
            raise ValueError("a passed check must not carry a message")
        if not self.passed and self.message is None:
            raise ValueError("a failed check must carry a message")
        return self

    @classmethod
    def success(cls) -> "CheckResult":
        return cls(passed=True)

    @classmethod
    def failure(cls, message: str) -> "CheckResult":
        return cls(passed=False, message=message)
