"""
Validation Result - Outcome of Evaluating a Chain.

A result is either valid (no messages) or invalid (at least one message).
Both states share one structure; the combinators branch on is_successful:

    - map: transform the value of a valid result, skip on invalid
    - flat_map: continue with another validation stage, skip on invalid
    - or_else_get: unwrap the value, or recover from the messages
    - get: unwrap the value, raising on invalid

A valid result may legitimately carry None, for example after a mapper
returned None. An absent value does not make a result invalid.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, Generic, Iterable, List, Optional, Tuple, TypeVar

from chain_validator.interfaces.check import FallbackProvider
from chain_validator.validation.errors import NoValuePresentError

logger = logging.getLogger(__name__)

T = TypeVar("T")
U = TypeVar("U")


@dataclass(frozen=True)
class ValidationResult(Generic[T]):
    """
    Immutable result of a validation run.

    State is read through attributes: source, messages (a tuple) and the
    derived is_successful flag. get_messages() is a method because it
    builds a new list on every call, which the caller may modify freely.
    """

    source: Optional[T] = None
    messages: Tuple[str, ...] = ()

    def __post_init__(self) -> None:
        # Accept any iterable but never keep a reference to the caller's list
        object.__setattr__(self, "messages", tuple(self.messages))

    @classmethod
    def valid(cls, value: Optional[T] = None) -> "ValidationResult[T]":
        """Create a successful result carrying value."""
        return cls(value, ())

    @classmethod
    def invalid(
        cls,
        messages: Iterable[str],
        source: Optional[T] = None,
    ) -> "ValidationResult[T]":
        """
        Create a failed result.

        Args:
            messages: Failure messages (at least one)
            source: Value that failed validation, if it should be kept

        Raises:
            ValueError: If messages is empty
        """
        collected = tuple(messages)
        if not collected:
            raise ValueError("an invalid result needs at least one message")
        return cls(source, collected)

    @property
    def is_successful(self) -> bool:
        """True if and only if no check failed."""
        return not self.messages

    def get_messages(self) -> List[str]:
        """Failure messages in check order; empty when successful."""
        return list(self.messages)

    def map(self, mapper: Callable[[T], U]) -> "ValidationResult[U]":
        """
        Transform the value of a successful result.

        The mapper is called at most once and never on a failed result.
        A failed result is returned with its messages and no value.

        Args:
            mapper: Function applied to the validated value

        Returns:
            New result carrying the mapped value, or the same messages
        """
        if not self.is_successful:
            return ValidationResult(None, self.messages)
        return ValidationResult(mapper(self.source), ())

    def flat_map(
        self,
        mapper: Callable[[T], "ValidationResult[U]"],
    ) -> "ValidationResult[U]":
        """
        Continue with another validation stage.

        On success the result returned by mapper replaces this one
        entirely. On failure mapper is not called and the messages of
        this result are kept.

        Args:
            mapper: Function returning the next stage's ValidationResult

        Raises:
            TypeError: If mapper does not return a ValidationResult
        """
        if not self.is_successful:
            return ValidationResult(None, self.messages)

        next_result = mapper(self.source)
        if not isinstance(next_result, ValidationResult):
            raise TypeError(
                f"flat_map mapper must return a ValidationResult, "
                f"got {type(next_result).__name__}"
            )
        return next_result

    def get(self) -> Optional[T]:
        """
        Value of a successful result.

        Raises:
            NoValuePresentError: If the validation failed
        """
        if not self.is_successful:
            logger.warning(
                f"get() called on failed validation result with "
                f"{len(self.messages)} messages"
            )
            raise NoValuePresentError(self.get_messages())
        return self.source

    def or_else_get(self, fallback: FallbackProvider[Any]) -> Any:
        """
        Value of a successful result, or a value recovered from failure.

        Args:
            fallback: Called with (source, messages) only when the
                validation failed; source may be None

        Returns:
            The validated value or the fallback's result
        """
        if self.is_successful:
            return self.source
        return fallback(self.source, self.get_messages())
