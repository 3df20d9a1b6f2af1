"""
Test Fixtures - Shared Test Data.

This package contains reusable test values:
    - people.py: Person value object and sample checks

Usage:
    Import values in test files via pytest fixtures or direct import.
"""
