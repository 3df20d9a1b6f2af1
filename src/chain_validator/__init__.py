"""
Chain Validator - Composable Value Validation.

Wrap any value, attach a sequence of checks, evaluate all of them and get
back a result that either carries the (possibly transformed) value or the
complete list of failure messages.

Architecture:
    - validation: Entry point, step chain, validator adapter, result
    - domain: Immutable value objects shared between layers
    - interfaces: Callable protocols for checks and message providers
    - config: Pydantic configuration models and YAML loader

Example:
    >>> from chain_validator import Validation
    >>> result = (
    ...     Validation.of("John Doe")
    ...     .with_(lambda v: v is not None, lambda v: "name must not be null")
    ...     .with_(lambda v: v.strip() != "")
    ...     .validate()
    ... )
    >>> result.is_successful
    True
"""

import logging

from chain_validator.config.models import DEFAULT_CONFIG, ValidationConfig
from chain_validator.domain.value_objects import CheckResult
from chain_validator.validation.entry import Validation
from chain_validator.validation.errors import MissingArgumentError, NoValuePresentError
from chain_validator.validation.result import ValidationResult
from chain_validator.validation.step import ValidationStep
from chain_validator.validation.validator import Validator

__version__ = "0.1.0"


def configure_logging(
    level: int = logging.INFO,
    format: str = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
) -> None:
    """
    Configure logging for Chain Validator.

    Call this at application startup to see log messages.
    By default, only WARNING and above are visible.

    Args:
        level: Logging level (default: INFO)
        format: Log message format

    Example:
        >>> import chain_validator
        >>> chain_validator.configure_logging(logging.DEBUG)
    """
    logging.basicConfig(
        level=level,
        format=format,
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    logging.getLogger("chain_validator").setLevel(level)


__all__ = [
    "Validation",
    "ValidationStep",
    "ValidationResult",
    "Validator",
    "CheckResult",
    "ValidationConfig",
    "DEFAULT_CONFIG",
    "MissingArgumentError",
    "NoValuePresentError",
    "configure_logging",
]
