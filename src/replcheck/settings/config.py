# Copyright 2026 replcheck Contributors
# SPDX-License-Identifier: Apache-2.0

"""Data model and YAML parser for the replcheck configuration file."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

import yaml

# ###############
# Public Interface
# ###############

CONFIG_FILE_NAME = ".replcheck.yaml"


class ConfigError(Exception):
    """Raised when a configuration file is invalid or cannot be loaded."""


@dataclass
class ValidatorConfig:
    """Policy switches for the input validator.

    Attributes:
        comment_bracket_parity: Keep counting brackets and literals inside block
            comments. A closing bracket that happens to match the stack top is
            then popped even though it sits in a comment.
        continue_unterminated_literals: Treat a literal without a closing quote
            at line end as still open, so the line is reported incomplete.
    """

    comment_bracket_parity: bool = False
    continue_unterminated_literals: bool = True


@dataclass
class ReplConfig:
    """The full configuration for validator and interactive front end.

    Attributes:
        validator: Validator policy.
        prompt: Prompt shown when no input is pending.
        continuation_prompt: Prompt shown while more lines are needed.
        indent_width: Spaces added to the continuation prompt per open entry.
    """

    validator: ValidatorConfig = field(default_factory=ValidatorConfig)
    prompt: str = "[replcheck] "
    continuation_prompt: str = "?   "
    indent_width: int = 2


def load_config(path: Path) -> ReplConfig:
    """Load and parse a replcheck configuration file.

    Args:
        path: Path to the ``.replcheck.yaml`` file.

    Returns:
        A ReplConfig populated from the file. Missing keys keep their defaults.

    Raises:
        ConfigError: If the file cannot be read or the configuration is invalid.
    """
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        raise ConfigError(f"Config file not found: {path}") from None
    except OSError as exc:
        raise ConfigError(f"Cannot read config file: {exc}") from exc

    return _parse_config(text, source_label=str(path))


def find_config(directory: Path) -> Path | None:
    """Return the configuration file in *directory*, or None if there is none."""
    candidate = directory / CONFIG_FILE_NAME
    return candidate if candidate.is_file() else None


# ################
# Implementation
# ################

_BOOL_KEYS: dict[str, str] = {
    "comment-bracket-parity": "comment_bracket_parity",
    "continue-unterminated-literals": "continue_unterminated_literals",
}

_STRING_KEYS: dict[str, str] = {
    "prompt": "prompt",
    "continuation-prompt": "continuation_prompt",
}

_KNOWN_KEYS = set(_BOOL_KEYS) | set(_STRING_KEYS) | {"indent-width"}


def _parse_config(text: str, source_label: str = "<string>") -> ReplConfig:
    """Parse configuration YAML text into a ReplConfig.

    Args:
        text: Raw YAML content.
        source_label: Human-readable label used in error messages (e.g. the file path).

    Returns:
        A ReplConfig instance.

    Raises:
        ConfigError: If the YAML is invalid or a field has the wrong type.
    """
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML in {source_label}: {exc}") from exc

    if data is None:
        return ReplConfig()

    if not isinstance(data, dict):
        raise ConfigError(f"{source_label}: configuration must be a YAML mapping")

    unknown = sorted(str(key) for key in data if key not in _KNOWN_KEYS)
    if unknown:
        raise ConfigError(f"{source_label}: unknown field(s): {', '.join(unknown)}")

    config = ReplConfig()
    for key, attr in _BOOL_KEYS.items():
        if key in data:
            setattr(config.validator, attr, _require_bool(data, key, source_label))
    for key, attr in _STRING_KEYS.items():
        if key in data:
            setattr(config, attr, _require_string(data, key, source_label))
    if "indent-width" in data:
        config.indent_width = _require_indent(data, "indent-width", source_label)
    return config


def _require_bool(mapping: dict[str, object], key: str, source_label: str) -> bool:
    value = mapping[key]
    if not isinstance(value, bool):
        raise ConfigError(f"{source_label}: '{key}' must be true or false")
    return value


def _require_string(mapping: dict[str, object], key: str, source_label: str) -> str:
    value = mapping[key]
    if not isinstance(value, str):
        raise ConfigError(f"{source_label}: '{key}' must be a string")
    return value


def _require_indent(mapping: dict[str, object], key: str, source_label: str) -> int:
    value = mapping[key]
    # bool is a subclass of int and is rejected explicitly.
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise ConfigError(f"{source_label}: '{key}' must be a non-negative integer")
    return value
