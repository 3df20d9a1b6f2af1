"""
Test Suite for Chain Validator.

Test organization:
    - unit/: Unit tests for individual components
    - integration/: Complete validation chains
    - fixtures/: Shared test values

Running Tests:
    pytest tests/                           # All tests
    pytest tests/unit/                      # Unit tests only
    pytest tests/integration/               # Integration tests only
    pytest --cov=src/chain_validator        # With coverage
"""
