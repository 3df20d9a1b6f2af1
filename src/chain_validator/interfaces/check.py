"""
Check Protocols.

Defines the callable contracts that callers supply to a validation chain.
Plain functions, lambdas and bound methods all satisfy them structurally.

Design Notes:
    - Uses typing.Protocol for structural subtyping
    - Checks return a truthy value to pass, falsy to fail
    - Checks may raise; the validator converts that into a failure
"""

from __future__ import annotations

from typing import List, Protocol, TypeVar

T_contra = TypeVar("T_contra", contravariant=True)
T = TypeVar("T")


class Check(Protocol[T_contra]):
    """Predicate evaluated against the value under validation."""

    def __call__(self, value: T_contra) -> bool:
        ...


class MessageProvider(Protocol[T_contra]):
    """Builds the failure message for a value that did not pass a check."""

    def __call__(self, value: T_contra) -> str:
        ...


class FallbackProvider(Protocol[T]):
    """Recovers a value from a failed validation result."""

    def __call__(self, source: T, messages: List[str]) -> T:
        """
        Produce a replacement value.

        Args:
            source: Value carried by the failed result (may be None)
            messages: Failure messages in check order

        Returns:
            Replacement value
        """
        ...
