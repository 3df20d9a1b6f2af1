"""
Unit Tests - Testing Individual Components in Isolation.

Unit tests should be fast, deterministic, and focused.

Test Files:
    - test_validator.py: Single check adapter and message policy
    - test_validation_step.py: Chain building and evaluation
    - test_validation_result.py: Result combinators
    - test_value_objects.py: CheckResult value object
    - test_config_loader.py: Configuration loading/validation
"""
