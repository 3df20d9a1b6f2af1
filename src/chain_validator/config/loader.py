"""
Configuration Loader - Validation Settings from YAML.

Validation settings usually live inside an application's own YAML config,
under a single section:

    chain_validator:
      messages:
        fallback_template: "invalid {type_name}"
      logging:
        log_summary: false

Only that section is read; the rest of the document belongs to the
application. Pass section=None when the document holds the settings at
its top level.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Mapping, Optional, Union

import yaml

from chain_validator.config.models import ValidationConfig

logger = logging.getLogger(__name__)

DEFAULT_SECTION = "chain_validator"


def config_from_mapping(
    data: Optional[Mapping[str, Any]],
    section: Optional[str] = DEFAULT_SECTION,
) -> ValidationConfig:
    """
    Build a ValidationConfig from already parsed settings.

    Args:
        data: Parsed document; None or an empty document gives the defaults
        section: Key holding the settings, or None for the whole document

    Returns:
        Validated ValidationConfig object

    Raises:
        ValueError: If the document or section is not a mapping
        ValidationError: If the settings are invalid
    """
    settings: Any = data or {}
    if not isinstance(settings, Mapping):
        raise ValueError(
            f"validation settings must be a mapping, got {type(settings).__name__}"
        )

    if section is not None:
        settings = settings.get(section) or {}
        if not isinstance(settings, Mapping):
            raise ValueError(
                f"section '{section}' must be a mapping, got {type(settings).__name__}"
            )

    return ValidationConfig.model_validate(dict(settings))


def parse_config(
    text: str,
    section: Optional[str] = DEFAULT_SECTION,
) -> ValidationConfig:
    """Build a ValidationConfig from YAML text."""
    return config_from_mapping(yaml.safe_load(text), section)


def load_config(
    path: Union[str, Path],
    section: Optional[str] = DEFAULT_SECTION,
) -> ValidationConfig:
    """
    Load validation settings from a YAML file.

    Args:
        path: YAML file, typically the application's config
        section: Key holding the settings, or None for the whole file

    Returns:
        Validated ValidationConfig object

    Raises:
        FileNotFoundError: If the file doesn't exist
        ValidationError: If the settings are invalid
    """
    text = Path(path).read_text(encoding="utf-8")
    config = parse_config(text, section)
    logger.debug(f"Loaded validation settings from {path} (section={section})")
    return config
