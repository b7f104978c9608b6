# Copyright 2026 ACT Contributors
# SPDX-License-Identifier: Apache-2.0

"""Project configuration for ACT."""

from act.workspace.config import (
    CONFIG_FILE_NAME,
    ConfigError,
    ProjectConfig,
    load_project_config,
)

__all__ = [
    "CONFIG_FILE_NAME",
    "ConfigError",
    "ProjectConfig",
    "load_project_config",
]
