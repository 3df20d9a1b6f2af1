"""
Domain Layer - Value Objects.

Value Objects:
    - CheckResult: Outcome of a single check (passed, or failed with message)

Design Principles:
    - Immutable (frozen models)
    - No infrastructure dependencies
"""

from chain_validator.domain.value_objects import CheckResult, MessageList

__all__ = ["CheckResult", "MessageList"]
