# Copyright 2026 ACT Contributors
# SPDX-License-Identifier: Apache-2.0

"""Data model and YAML loader for the optional ``act.yaml`` project file."""

from pathlib import Path
from typing import Literal

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError

# ###############
# Public Interface
# ###############

CONFIG_FILE_NAME = "act.yaml"


class ConfigError(Exception):
    """Raised when a project configuration file is invalid or cannot be loaded."""


class ProjectConfig(BaseModel):
    """The parsed configuration for an ACT project.

    Attributes:
        build_directory: Relative path (from the project root) for generated scripts.
        script_suffix: File suffix of generated scripts.
        sources: Glob patterns selecting the ACT source files to build.
    """

    model_config = ConfigDict(extra="forbid", populate_by_name=True, frozen=True)

    build_directory: str = Field(alias="build-directory", default="build")
    script_suffix: Literal[".bat", ".cmd"] = Field(alias="script-suffix", default=".bat")
    sources: list[str] = Field(default_factory=lambda: ["**/*.act"])


def load_project_config(path: Path) -> ProjectConfig:
    """Load and validate a project configuration file.

    An empty file is treated as a configuration with all defaults.

    Args:
        path: Path to the ``act.yaml`` file.

    Returns:
        A validated ProjectConfig instance.

    Raises:
        ConfigError: If the file cannot be read, contains invalid YAML,
            or does not conform to the expected schema.
    """
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        raise ConfigError(f"Project config file not found: {path}") from None
    except OSError as exc:
        raise ConfigError(f"Cannot read project config file: {exc}") from exc

    return _parse_project_config(text, source_label=str(path))


# ################
# Implementation
# ################


def _parse_project_config(text: str, source_label: str = "<string>") -> ProjectConfig:
    """Parse project config YAML text into a ProjectConfig."""
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML in {source_label}: {exc}") from exc

    if data is None:
        data = {}

    if not isinstance(data, dict):
        raise ConfigError(f"{source_label}: project config must be a YAML mapping")

    try:
        return ProjectConfig.model_validate(data)
    except ValidationError as exc:
        raise ConfigError(f"Invalid project config {source_label}: {exc}") from exc
