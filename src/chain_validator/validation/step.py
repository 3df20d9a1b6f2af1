"""
Validation Step - Immutable Chain of Checks.

Each call to with_() returns a new step holding one more validator; the
original step is left untouched and can be shared or extended again.

validate() runs every validator in insertion order, also after a failure,
so the result lists every reason why the value is invalid at once.
"""

from __future__ import annotations

import logging
from typing import Any, Generic, List, Optional, Tuple, TypeVar

from chain_validator.config.models import DEFAULT_CONFIG, ValidationConfig
from chain_validator.interfaces.check import Check
from chain_validator.validation.result import ValidationResult
from chain_validator.validation.validator import UNSET, Validator, describe_type

logger = logging.getLogger(__name__)

T = TypeVar("T")


class ValidationStep(Generic[T]):
    """Ordered, append-only sequence of validators bound to one value."""

    def __init__(
        self,
        source: Optional[T],
        validators: Tuple[Validator[T], ...],
        config: Optional[ValidationConfig] = None,
    ) -> None:
        """
        Initialize validation step.

        Args:
            source: Value under validation (may be None)
            validators: Validators in insertion order
            config: Validation configuration
        """
        self._source = source
        self._validators = tuple(validators)
        self._config = config or DEFAULT_CONFIG

    @property
    def source(self) -> Optional[T]:
        return self._source

    @property
    def validators(self) -> Tuple[Validator[T], ...]:
        return self._validators

    def with_(self, check: Check[T], message_provider: Any = UNSET) -> "ValidationStep[T]":
        """
        Append a check to the chain.

        Without a message provider the failure message is the text of an
        exception raised by the check, or a generic fallback.

        Args:
            check: Predicate to evaluate on validate()
            message_provider: Optional failure message provider

        Returns:
            New step with the check appended

        Raises:
            MissingArgumentError: If check or an explicit provider is None
        """
        validator = Validator.of(check, message_provider, config=self._config)
        return ValidationStep(self._source, self._validators + (validator,), self._config)

    def validate(self) -> ValidationResult[T]:
        """
        Run all checks and collect the messages of the failed ones.

        Returns:
            ValidationResult with the source value and messages in check order
        """
        messages: List[str] = []
        for validator in self._validators:
            result = validator.check_value(self._source)
            if not result.passed:
                messages.append(result.message)

        if self._config.logging.log_summary:
            logger.debug(
                f"Validated value of type "
                f"{describe_type(self._source, self._config.messages)}: "
                f"{len(messages)} of {len(self._validators)} checks failed"
            )

        return ValidationResult(self._source, tuple(messages))

    evaluate = validate

    def __len__(self) -> int:
        return len(self._validators)

    def __repr__(self) -> str:
        return f"ValidationStep(source={self._source!r}, checks={len(self._validators)})"
