"""
Configuration for Taskline.

Settings come from, lowest to highest precedence: model defaults, a YAML file,
and the TASKLINE_* environment variables. The CLI applies its own flags last.
"""

import os
from pathlib import Path
from typing import Optional, Union

import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator

from .recovery import ConfigError

DEFAULT_CONFIG_PATH = Path.home() / ".config" / "taskline" / "config.yml"
DEFAULT_LOG_DIR = Path.home() / ".local" / "share" / "taskline" / "logs"

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
TRUTHY = ("1", "true", "yes", "on")


class Settings(BaseModel):
    """Effective runtime settings."""

    log_level: str = Field(default="WARNING", description="Console log level")
    debug: bool = Field(default=False, description="Verbose console logging")
    log_dir: Path = Field(default=DEFAULT_LOG_DIR, description="Directory holding taskline.log")
    log_to_file: bool = Field(default=True, description="Write the detailed log file")
    date_format: str = Field(default="%Y-%m-%d", description="strftime format for due dates in the shell")
    root_label: str = Field(default="Root", description="Name of the category tree's root node")

    @field_validator('log_level')
    @classmethod
    def validate_log_level(cls, v):
        if v.upper() not in LOG_LEVELS:
            raise ValueError(f"Invalid log level: {v}")
        return v.upper()

    @field_validator('root_label')
    @classmethod
    def validate_root_label(cls, v):
        if not v.strip():
            raise ValueError("root_label must not be blank")
        return v

    def to_yaml(self) -> str:
        data = self.model_dump(mode="json")
        return yaml.safe_dump(data, default_flow_style=False, sort_keys=False)

    @classmethod
    def from_yaml(cls, text: str) -> "Settings":
        data = yaml.safe_load(text) or {}
        if not isinstance(data, dict):
            raise ConfigError("Configuration must be a YAML mapping")
        return cls.model_validate(data)


def _config_path(path: Optional[Union[str, Path]]) -> Optional[Path]:
    """Resolve which file to read; None means defaults only."""
    if path:
        return Path(path).expanduser()

    env = os.getenv("TASKLINE_CONFIG")
    if env:
        return Path(env).expanduser()

    if DEFAULT_CONFIG_PATH.exists():
        return DEFAULT_CONFIG_PATH
    return None


def _apply_env(settings: Settings) -> Settings:
    updates = {}
    env_level = os.getenv("TASKLINE_LOG_LEVEL", "").strip()
    if env_level:
        updates["log_level"] = env_level
    env_debug = os.getenv("TASKLINE_DEBUG")
    if env_debug is not None:
        updates["debug"] = env_debug.strip().lower() in TRUTHY

    if not updates:
        return settings
    try:
        return Settings.model_validate({**settings.model_dump(), **updates})
    except ValidationError as e:
        raise ConfigError(f"Invalid environment override: {e}") from e


def load_settings(path: Optional[Union[str, Path]] = None) -> Settings:
    """
    Build the effective settings.

    Args:
        path: Explicit configuration file. It must exist when given.

    Returns:
        Settings with file values and environment overrides applied.
    """
    config_path = _config_path(path)
    if config_path is None:
        return _apply_env(Settings())

    try:
        text = config_path.read_text(encoding="utf-8")
    except (IOError, OSError) as e:
        raise ConfigError(f"Cannot read configuration {config_path}: {e}") from e

    try:
        settings = Settings.from_yaml(text)
    except yaml.YAMLError as e:
        raise ConfigError(f"YAML syntax error in {config_path}: {e}") from e
    except ValidationError as e:
        raise ConfigError(f"Invalid configuration in {config_path}: {e}") from e

    return _apply_env(settings)
