"""
Validation Package - Chain Building and Evaluation.

This package provides:
    - Validation: Entry point wrapping the value to validate
    - ValidationStep: Immutable chain of checks
    - Validator: Adapter pairing one check with its message policy
    - ValidationResult: Outcome with map/flat_map/or_else_get combinators

Design Principles:
    - Evaluate every check, report every failure
    - Failed checks become messages, never exceptions
    - Only API misuse raises
"""

from chain_validator.validation.entry import Validation
from chain_validator.validation.errors import MissingArgumentError, NoValuePresentError
from chain_validator.validation.result import ValidationResult
from chain_validator.validation.step import ValidationStep
from chain_validator.validation.validator import Validator

__all__ = [
    "Validation",
    "ValidationStep",
    "Validator",
    "ValidationResult",
    "MissingArgumentError",
    "NoValuePresentError",
]
