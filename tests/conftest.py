"""
Pytest Configuration and Shared Fixtures.

This module contains fixtures available to all tests.
"""

from __future__ import annotations

from typing import List

import pytest

from chain_validator.config.models import LoggingConfig, MessageConfig, ValidationConfig
from tests.fixtures.people import Person


@pytest.fixture
def default_config() -> ValidationConfig:
    """Create default validation configuration."""
    return ValidationConfig()


@pytest.fixture
def quiet_config() -> ValidationConfig:
    """Configuration with diagnostic logging disabled."""
    return ValidationConfig(
        logging=LoggingConfig(log_check_exceptions=False, log_summary=False),
    )


@pytest.fixture
def short_type_config() -> ValidationConfig:
    """Configuration using unqualified type names in fallback messages."""
    return ValidationConfig(
        messages=MessageConfig(
            fallback_template="invalid {type_name}",
            null_type_name="nothing",
            qualified_type_names=False,
        ),
    )


@pytest.fixture
def valid_person() -> Person:
    """Create a person passing all sample checks."""
    return Person(name="John Doe", age=30)


@pytest.fixture
def invalid_person() -> Person:
    """Create a person failing the name and the age check."""
    return Person(name="John? Doe!4", age=-1)


@pytest.fixture
def people(valid_person: Person, invalid_person: Person) -> List[Person]:
    """Mixed list of valid and invalid persons."""
    return [valid_person, invalid_person, Person(name="Jane Roe", age=42)]
