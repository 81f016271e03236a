# Copyright 2026 replcheck Contributors
# SPDX-License-Identifier: Apache-2.0

"""Front-end session helpers: unit splitting and transcripts."""

from replcheck.session.splitter import split_to_transcript, split_units
from replcheck.session.transcript import (
    Transcript,
    TranscriptError,
    UnitRecord,
    UnitStatus,
    load_transcript,
    save_transcript,
)

__all__ = [
    "Transcript",
    "TranscriptError",
    "UnitRecord",
    "UnitStatus",
    "load_transcript",
    "save_transcript",
    "split_to_transcript",
    "split_units",
]
