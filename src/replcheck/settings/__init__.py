# Copyright 2026 replcheck Contributors
# SPDX-License-Identifier: Apache-2.0

"""Configuration for replcheck."""

from replcheck.settings.config import (
    CONFIG_FILE_NAME,
    ConfigError,
    ReplConfig,
    ValidatorConfig,
    find_config,
    load_config,
)

__all__ = [
    "CONFIG_FILE_NAME",
    "ConfigError",
    "ReplConfig",
    "ValidatorConfig",
    "find_config",
    "load_config",
]
