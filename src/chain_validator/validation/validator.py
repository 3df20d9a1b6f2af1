"""
Validator - Single Check Adapter.

Pairs one check with a policy for producing the failure message:
    - With a message provider: the provider always supplies the message
    - Without one: the text of an exception raised by the check, or a
      generic fallback naming the runtime type of the value

Design Notes:
    - Exceptions raised by the check never escape; they become failures
    - evaluate() returns the caught exception instead of storing it, so a
      Validator holds no mutable state and can be shared between threads
    - Exceptions raised by a message provider are caller bugs and propagate
"""

from __future__ import annotations

import logging
from typing import Any, Generic, Optional, Tuple, TypeVar

from chain_validator.config.models import DEFAULT_CONFIG, MessageConfig, ValidationConfig
from chain_validator.domain.value_objects import CheckResult
from chain_validator.interfaces.check import Check, MessageProvider
from chain_validator.validation.errors import require_check, require_message_provider

logger = logging.getLogger(__name__)

T = TypeVar("T")

# Marks an omitted message provider, as opposed to an explicit None
UNSET: Any = object()


def describe_type(value: Any, config: MessageConfig) -> str:
    """Runtime type name used in fallback messages."""
    if value is None:
        return config.null_type_name
    value_type = type(value)
    if config.qualified_type_names:
        return f"{value_type.__module__}.{value_type.__qualname__}"
    return value_type.__name__


def _callable_name(func: Any) -> str:
    return getattr(func, "__qualname__", None) or repr(func)


class Validator(Generic[T]):
    """
    Evaluates one check against a value and explains failures.

    Use Validator.of() rather than the constructor; it enforces the
    required-argument contract.
    """

    def __init__(
        self,
        check: Check[T],
        message_provider: Optional[MessageProvider[T]] = None,
        config: Optional[ValidationConfig] = None,
    ) -> None:
        """
        Initialize validator.

        Args:
            check: Predicate to evaluate
            message_provider: Optional failure message provider
            config: Validation configuration (defaults to DEFAULT_CONFIG)
        """
        self._check = check
        self._message_provider = message_provider
        self._config = config or DEFAULT_CONFIG

    @classmethod
    def of(
        cls,
        check: Check[T],
        message_provider: Any = UNSET,
        config: Optional[ValidationConfig] = None,
    ) -> "Validator[T]":
        """
        Create a validator.

        Args:
            check: Predicate to evaluate (must not be None)
            message_provider: Failure message provider. Omit it to derive
                messages from exceptions or the fallback; passing None
                explicitly is rejected.
            config: Validation configuration

        Raises:
            MissingArgumentError: If check or an explicit provider is None
        """
        require_check(check)
        if message_provider is UNSET:
            return cls(check, config=config)
        require_message_provider(message_provider)
        return cls(check, message_provider, config)

    @property
    def has_message_provider(self) -> bool:
        return self._message_provider is not None

    def check_value(self, value: T) -> CheckResult:
        """
        Evaluate the check and derive the failure message in one pass.

        Args:
            value: Value under validation (may be None)

        Returns:
            CheckResult that passed, or failed with its message
        """
        passed, error = self.evaluate(value)
        if passed:
            return CheckResult.success()
        return CheckResult.failure(self.get_error_message(value, error))

    def evaluate(self, value: T) -> Tuple[bool, Optional[Exception]]:
        """
        Evaluate the check; exceptions count as failure.

        The caught exception is returned rather than stored, so pass it on
        to get_error_message() to report its text:

            passed, error = validator.evaluate(value)
            if not passed:
                message = validator.get_error_message(value, error)

        Args:
            value: Value under validation (may be None)

        Returns:
            Tuple of (passed, exception raised by the check or None)
        """
        try:
            return bool(self._check(value)), None
        except Exception as e:
            if self._config.logging.log_check_exceptions:
                logger.debug(
                    f"Check {_callable_name(self._check)} raised "
                    f"{type(e).__name__}: {e}"
                )
            return False, e

    def get_error_message(
        self,
        value: T,
        error: Optional[BaseException] = None,
    ) -> str:
        """
        Failure message for a value that did not pass the check.

        Args:
            value: Value under validation (may be None)
            error: Exception returned by evaluate(), if any

        Returns:
            Message from the provider, the exception text, or the fallback

        Raises:
            TypeError: If the message provider does not return a str
        """
        if self._message_provider is not None:
            message = self._message_provider(value)
            if not isinstance(message, str):
                raise TypeError(
                    f"message provider {_callable_name(self._message_provider)} "
                    f"must return str, got {type(message).__name__}"
                )
            return message

        text = str(error) if error is not None else ""
        if text.strip():
            return text

        messages = self._config.messages
        return messages.fallback_template.format(type_name=describe_type(value, messages))

    def __repr__(self) -> str:
        return (
            f"Validator(check={_callable_name(self._check)}, "
            f"custom_message={self.has_message_provider})"
        )
