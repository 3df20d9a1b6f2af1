"""
Validation - Entry Point of a Validation Chain.

Usage (functional):
    result = (
        Validation.of(first_name)
        .with_(lambda v: v is not None, lambda v: 'The parameter "first_name" must not be null.')
        .with_(lambda v: v.strip() != "")
        .validate()
        .flat_map(lambda _: Validation.of(last_name)
                  .with_(lambda v: v is not None, lambda v: 'The parameter "last_name" must not be null.')
                  .validate())
        .map(lambda _: success_response_for(first_name, last_name))
        .or_else_get(lambda source, messages: error_response_for(messages))
    )

Usage (imperative):
    result = Validation.of(first_name).with_(is_not_blank).validate()
    if result.is_successful:
        ...
    else:
        error_response_for(result.get_messages())
"""

from __future__ import annotations

from typing import Any, Generic, Optional, TypeVar

from chain_validator.config.models import DEFAULT_CONFIG, ValidationConfig
from chain_validator.interfaces.check import Check
from chain_validator.validation.step import ValidationStep
from chain_validator.validation.validator import UNSET, Validator

T = TypeVar("T")


class Validation(Generic[T]):
    """Wraps a raw value and starts a validation chain for it."""

    def __init__(self, value: Optional[T], config: Optional[ValidationConfig] = None) -> None:
        self._value = value
        self._config = config or DEFAULT_CONFIG

    @classmethod
    def of(
        cls,
        value: Optional[T],
        config: Optional[ValidationConfig] = None,
    ) -> "Validation[T]":
        """
        Create a new validation for value.

        Args:
            value: Value to validate; None is allowed
            config: Optional configuration for messages and logging

        Returns:
            Validation without any checks attached
        """
        return cls(value, config)

    @property
    def value(self) -> Optional[T]:
        return self._value

    def with_(self, check: Check[T], message_provider: Any = UNSET) -> ValidationStep[T]:
        """
        Attach the first check.

        Args:
            check: Predicate to evaluate on validate()
            message_provider: Optional failure message provider

        Returns:
            ValidationStep holding this single check

        Raises:
            MissingArgumentError: If check or an explicit provider is None
        """
        validator = Validator.of(check, message_provider, config=self._config)
        return ValidationStep(self._value, (validator,), self._config)
