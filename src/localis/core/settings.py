"""
Localis settings - configuration of the command line tool.

Settings are read from a YAML file:

    config_file: ~/.config/localis/language.properties
    languages_directory: /usr/share/myapp/localis/localisation
    bundle_name: localis.localisation.language
    log_level: info

Every entry is optional.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator

from localis.i18n.bundle import BUNDLE_NAME
from localis.i18n.exceptions import ConfigurationError, LocalisationErrorCode

logger = logging.getLogger(__name__)

SETTINGS_FILE_NAME = "localis.yaml"

# Language files shipped with the package
PACKAGED_LANGUAGES_DIR = Path(__file__).resolve().parent.parent / "localisation"

LOG_LEVELS = ("debug", "info", "warning", "error", "critical")


def user_config_dir() -> Path:
    """Per-user configuration directory ($XDG_CONFIG_HOME/localis)."""
    base = os.environ.get("XDG_CONFIG_HOME") or str(Path.home() / ".config")
    return Path(base) / "localis"


def default_config_file() -> Path:
    """Default location of the persisted locale selection."""
    return user_config_dir() / "language.properties"


class LocalisSettings(BaseModel):
    """Root settings model."""

    config_file: Path = Field(default_factory=default_config_file)
    languages_directory: Path | None = None
    bundle_name: str = BUNDLE_NAME
    log_level: str = "info"

    @field_validator("config_file", "languages_directory")
    @classmethod
    def _expand_user(cls, value: Path | None) -> Path | None:
        return value.expanduser() if value is not None else None

    @field_validator("bundle_name")
    @classmethod
    def _check_bundle_name(cls, value: str) -> str:
        if not value or any(not part for part in value.split(".")):
            raise ValueError(f"invalid bundle name: {value!r}")
        return value

    @field_validator("log_level")
    @classmethod
    def _check_log_level(cls, value: str) -> str:
        level = value.lower()
        if level not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(LOG_LEVELS)}")
        return level

    def resolved_languages_directory(self) -> Path:
        """Languages directory, defaulting to the packaged language files."""
        return self.languages_directory or PACKAGED_LANGUAGES_DIR

    def logging_level(self) -> int:
        """Level for logging.basicConfig()."""
        return getattr(logging, self.log_level.upper())


def find_settings_file(explicit_path: Path | None = None) -> Path | None:
    """
    Locate the settings file.

    Search order:
    1. Explicit path from --settings
    2. localis.yaml in current directory
    3. $XDG_CONFIG_HOME/localis/localis.yaml

    Returns:
        Path of the settings file, or None to use defaults

    Raises:
        ConfigurationError: If an explicit path does not exist
    """
    if explicit_path is not None:
        if explicit_path.exists():
            return explicit_path
        raise ConfigurationError(
            f"Settings file not found: {explicit_path}",
            code=LocalisationErrorCode.INVALID_SETTINGS,
        )

    candidates = [
        Path(SETTINGS_FILE_NAME),
        user_config_dir() / SETTINGS_FILE_NAME,
    ]

    for candidate in candidates:
        if candidate.exists():
            return candidate

    return None


def load_settings(path: Path | str | None = None) -> LocalisSettings:
    """
    Load settings from a YAML file.

    Args:
        path: Path to the settings file, or None for defaults

    Returns:
        Validated settings

    Raises:
        ConfigurationError: If the file is unreadable or invalid
    """
    if path is None:
        return LocalisSettings()

    settings_path = Path(path)

    try:
        with settings_path.open("r", encoding="utf-8") as f:
            raw_settings = yaml.safe_load(f)
    except OSError as e:
        raise ConfigurationError(
            f"Cannot read settings file {settings_path}: {e}",
            code=LocalisationErrorCode.INVALID_SETTINGS,
        ) from e
    except yaml.YAMLError as e:
        raise ConfigurationError(
            f"Invalid YAML syntax: {e}",
            code=LocalisationErrorCode.INVALID_SETTINGS,
        ) from e

    # An empty file means defaults
    if raw_settings is None:
        raw_settings = {}

    try:
        settings = LocalisSettings.model_validate(raw_settings)
    except ValidationError as e:
        raise ConfigurationError(
            f"Settings validation failed: {e}",
            code=LocalisationErrorCode.INVALID_SETTINGS,
        ) from e

    logger.debug(f"Loaded settings from {settings_path}")
    return settings
