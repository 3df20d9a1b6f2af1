"""
Configuration Package - Models and Loaders.

This package handles the configurable aspects of validation:
    - Pydantic models for type-safe configuration
    - Loading one YAML section of an application config

Configuration Structure:
    - ValidationConfig: Root configuration object
    - MessageConfig: Fallback message synthesis
    - LoggingConfig: Diagnostic logging toggles
"""

from chain_validator.config.loader import (
    DEFAULT_SECTION,
    config_from_mapping,
    load_config,
    parse_config,
)
from chain_validator.config.models import (
    DEFAULT_CONFIG,
    LoggingConfig,
    MessageConfig,
    ValidationConfig,
)

__all__ = [
    "DEFAULT_SECTION",
    "config_from_mapping",
    "parse_config",
    "load_config",
    "DEFAULT_CONFIG",
    "LoggingConfig",
    "MessageConfig",
    "ValidationConfig",
]
