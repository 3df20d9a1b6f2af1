"""
Configuration Models - Pydantic Models for Type-Safe Config.

All configuration is validated at load time using Pydantic.
"""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator


class MessageConfig(BaseModel):
    """Configuration for synthesized failure messages."""

    fallback_template: str = Field(
        default="validation failed for a value of type {type_name}"
    )
    null_type_name: str = Field(default="<null>", min_length=1)
    qualified_type_names: bool = True

    model_config = {"frozen": True}

    @field_validator("fallback_template")
    @classmethod
    def _template_names_type(cls, value: str) -> str:
        if "{type_name}" not in value:
            raise ValueError("fallback_template must contain '{type_name}'")
        return value


class LoggingConfig(BaseModel):
    """Configuration for diagnostic logging during validation."""

    log_check_exceptions: bool = True
    log_summary: bool = True

    model_config = {"frozen": True}


class ValidationConfig(BaseModel):
    """Root configuration object."""

    version: str = "1.0"
    messages: MessageConfig = Field(default_factory=MessageConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    model_config = {"frozen": True}


DEFAULT_CONFIG = ValidationConfig()
