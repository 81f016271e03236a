# Copyright 2026 replcheck Contributors
# SPDX-License-Identifier: Apache-2.0

"""Transcript model recording the units a REPL session dispatched."""

from pathlib import Path
from typing import Literal

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError

# ###############
# Public Interface
# ###############

UnitStatus = Literal["complete", "incomplete", "mismatch"]


class TranscriptError(Exception):
    """Raised when a transcript cannot be read, written, or is invalid."""


class UnitRecord(BaseModel):
    """One logical unit assembled from consecutive input lines.

    Line numbers are 1-based and inclusive.
    """

    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    index: int = Field(ge=0)
    first_line: int = Field(alias="first-line", ge=1)
    last_line: int = Field(alias="last-line", ge=1)
    status: UnitStatus
    text: str

    @property
    def is_error(self) -> bool:
        return self.status != "complete"


class Transcript(BaseModel):
    """All units split from one input source."""

    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    source: str = "<stdin>"
    units: list[UnitRecord] = Field(default_factory=list)

    @property
    def has_errors(self) -> bool:
        """Return True if any unit is a mismatch or was left incomplete."""
        return any(unit.is_error for unit in self.units)


def load_transcript(path: Path) -> Transcript:
    """Load and validate a transcript from disk.

    An empty file is treated as an empty transcript.

    Args:
        path: Path to a transcript YAML file.

    Returns:
        A validated Transcript instance.

    Raises:
        TranscriptError: If the file cannot be read, contains invalid YAML,
            or does not conform to the expected schema.
    """
    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise TranscriptError(f"Cannot read transcript '{path}': {exc}") from exc

    try:
        data = yaml.safe_load(raw)
    except yaml.YAMLError as exc:
        raise TranscriptError(f"Invalid YAML in transcript '{path}': {exc}") from exc

    if data is None:
        data = {}

    try:
        return Transcript.model_validate(data)
    except ValidationError as exc:
        raise TranscriptError(f"Invalid transcript '{path}': {exc}") from exc


def save_transcript(transcript: Transcript, path: Path) -> None:
    """Save the transcript to disk, units in input order.

    Raises:
        TranscriptError: If the file cannot be written.
    """
    data = transcript.model_dump(by_alias=True, mode="json")
    try:
        path.write_text(
            yaml.safe_dump(data, default_flow_style=False, sort_keys=False, allow_unicode=True),
            encoding="utf-8",
        )
    except OSError as exc:
        raise TranscriptError(f"Cannot write transcript '{path}': {exc}") from exc
