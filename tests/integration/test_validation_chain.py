"""
Integration Tests for Complete Validation Chains.

Test Aspects Covered:
    ✅ Business Logic: Person validation end to end, staged validation
    ✅ Integration: Entry, step, validator and result working together
    ✅ Edge Cases: None values flowing through flat_map stages
"""

from __future__ import annotations

from typing import Dict, List, Optional
from unittest.mock import Mock

from chain_validator import Validation, ValidationResult
from tests.fixtures.people import Person, has_plain_name, is_of_age


def validate_person(person: Optional[Person]) -> ValidationResult[Person]:
    """Validate a person with the sample name and age checks."""
    return (
        Validation.of(person)
        .with_(has_plain_name, lambda p: f"name '{p.name}' contains invalid characters")
        .with_(is_of_age, lambda p: f"age {p.age} is below 19")
        .validate()
    )


class TestPersonValidation:
    """End-to-end validation of Person values."""

    def test_valid_person(self, valid_person: Person) -> None:
        """
        SCENARIO: Person('John Doe', 30) against name and age checks
        EXPECTED: Successful result, get() returns the same person
        """
        # Act
        result = validate_person(valid_person)

        # Assert
        assert result.is_successful
        assert result.get() is valid_person

    def test_invalid_person(self, invalid_person: Person) -> None:
        """
        SCENARIO: Person('John? Doe!4', -1) against name and age checks
        EXPECTED: Two messages in check-declaration order
        """
        # Act
        result = validate_person(invalid_person)

        # Assert
        assert not result.is_successful
        assert result.get_messages() == [
            "name 'John? Doe!4' contains invalid characters",
            "age -1 is below 19",
        ]

    def test_none_person_uses_exception_text(self) -> None:
        """
        SCENARIO: None validated with checks that dereference attributes
        EXPECTED: Each check fails with its exception text
        """
        # Act
        result = Validation.of(None).with_(has_plain_name).with_(is_of_age).validate()

        # Assert
        messages = result.get_messages()
        assert len(messages) == 2
        assert all("NoneType" in message for message in messages)

    def test_filter_list_of_values(self, people: List[Person]) -> None:
        """
        SCENARIO: Filtering a list by validation success
        EXPECTED: Only valid persons kept, order preserved
        """
        valid = [p for p in people if validate_person(p).is_successful]

        assert [p.name for p in valid] == ["John Doe", "Jane Roe"]


class TestStagedValidation:
    """Composition of independently built validation stages."""

    def build_response(self, first_name: Optional[str], last_name: Optional[str]) -> Dict[str, object]:
        """Functional style: validate both names, then map to a response."""
        return (
            Validation.of(first_name)
            .with_(lambda v: v is not None, lambda v: 'The parameter "first_name" must not be null.')
            .with_(lambda v: v.strip() != "")
            .validate()
            .flat_map(
                lambda _: Validation.of(last_name)
                .with_(lambda v: v is not None, lambda v: 'The parameter "last_name" must not be null.')
                .validate()
            )
            .map(lambda _: {"status": 200, "name": f"{first_name} {last_name}"})
            .or_else_get(lambda source, messages: {"status": 400, "errors": messages})
        )

    def test_both_stages_pass(self) -> None:
        response = self.build_response("John", "Doe")

        assert response == {"status": 200, "name": "John Doe"}

    def test_first_stage_fails_all_reasons(self) -> None:
        """
        SCENARIO: first_name is None
        EXPECTED: Both first-stage checks reported, second stage skipped
        """
        response = self.build_response(None, None)

        assert response["status"] == 400
        assert response["errors"] == [
            'The parameter "first_name" must not be null.',
            "'NoneType' object has no attribute 'strip'",
        ]

    def test_second_stage_fails(self) -> None:
        """
        SCENARIO: first_name valid, last_name None
        EXPECTED: Only the second stage's message
        """
        response = self.build_response("John", None)

        assert response == {
            "status": 400,
            "errors": ['The parameter "last_name" must not be null.'],
        }

    def test_second_stage_skipped_on_first_failure(self) -> None:
        """
        SCENARIO: First stage fails
        EXPECTED: Second stage builder never invoked
        """
        # Arrange
        second_stage = Mock()

        # Act
        result = (
            Validation.of("")
            .with_(lambda v: v != "", lambda v: "empty")
            .validate()
            .flat_map(second_stage)
        )

        # Assert
        second_stage.assert_not_called()
        assert result.get_messages() == ["empty"]

    def test_flat_map_into_hand_built_result(self) -> None:
        result = (
            Validation.of("Blubber")
            .with_(lambda v: v == "Blubber")
            .validate()
            .flat_map(lambda v: Validation.of(v).with_("Blubber".__eq__, lambda a: "great").validate())
            .map(len)
        )

        assert result.get() == 7

    def test_imperative_style(self) -> None:
        """
        SCENARIO: Caller checks is_successful instead of chaining
        EXPECTED: Messages of both stages can be combined manually
        """
        # Arrange
        messages: List[str] = []
        first = Validation.of("John").with_(lambda v: len(v) > 1).validate()

        # Act
        if first.is_successful:
            second = Validation.of(None).with_(lambda v: v is not None).validate()
            messages.extend(second.get_messages())
        messages[0:0] = first.get_messages()

        # Assert
        assert messages == ["validation failed for a value of type <null>"]
