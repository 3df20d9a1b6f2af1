"""
Integration Tests - End-to-End Validation Chains.

These tests verify that entry point, steps, validators and results
work together correctly.

Test Files:
    - test_validation_chain.py: Person validation and staged validation
"""
