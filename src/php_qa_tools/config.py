"""Answers file loading and saving for non-interactive setup."""

from __future__ import annotations

from pathlib import Path
from typing import Dict, Optional, Union

import yaml
from pydantic import BaseModel, ConfigDict, Field, StrictBool, ValidationError, field_validator

from .questions import CONTINUE_KEY
from .settings import SETTING_NAMES, SettingsStore

ANSWER_KEYS = (CONTINUE_KEY, *SETTING_NAMES)

Answer = Union[StrictBool, str]


class SetupConfig(BaseModel):
    """Answers to replay and optional template overrides."""

    model_config = ConfigDict(extra="forbid")

    answers: Dict[str, Answer] = Field(default_factory=dict)
    templates_dir: Optional[str] = Field(
        default=None, description="Directory holding build.xml.dist and phpunit.xml.dist overrides."
    )

    @field_validator("answers")
    @classmethod
    def _known_keys(cls, value: Dict[str, Answer]) -> Dict[str, Answer]:
        unknown = sorted(key for key in value if key not in ANSWER_KEYS)
        if unknown:
            raise ValueError(f"Unknown answer keys: {', '.join(unknown)}")
        return value

    @classmethod
    def from_settings(cls, settings: SettingsStore) -> "SetupConfig":
        """Capture a finished run so it can be replayed."""

        answers: Dict[str, Answer] = {CONTINUE_KEY: True}
        for name in SETTING_NAMES:
            value = settings.get(name)
            if value is not None:
                answers[name] = value
        return cls(answers=answers)


class ConfigError(Exception):
    """Raised when an answers file is invalid."""


def load_config(path: Path) -> SetupConfig:
    """Load an answers file from YAML."""

    try:
        data = yaml.safe_load(path.read_text())
    except FileNotFoundError as exc:
        raise ConfigError(f"Answers file not found: {path}") from exc
    except yaml.YAMLError as exc:
        raise ConfigError(f"Failed to parse YAML: {exc}") from exc

    try:
        return SetupConfig.model_validate(data or {})
    except ValidationError as exc:
        raise ConfigError(f"Invalid answers file: {exc}") from exc


def save_config(config: SetupConfig, path: Path) -> None:
    """Persist an answers file to disk as YAML."""

    rendered = config.model_dump(exclude_none=True)
    path.write_text(yaml.safe_dump(rendered, sort_keys=False))


__all__ = [
    "ANSWER_KEYS",
    "SetupConfig",
    "ConfigError",
    "load_config",
    "save_config",
]
