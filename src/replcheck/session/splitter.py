# Copyright 2026 replcheck Contributors
# SPDX-License-Identifier: Apache-2.0

"""Split a stream of input lines into the units a REPL would dispatch."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from replcheck.session.transcript import Transcript, UnitRecord
from replcheck.validator.input_validator import InputValidator, ValidationResult

# ###############
# Public Interface
# ###############


def split_units(lines: Iterable[str], validator: InputValidator | None = None) -> Iterator[UnitRecord]:
    """Feed *lines* to a validator and yield every unit it closes.

    A unit ends on a complete or mismatched line. Text still pending when the
    lines run out is yielded as an incomplete unit. Complete units consisting
    only of whitespace are dropped.

    Args:
        lines: Input lines; trailing carriage returns and newlines are stripped.
        validator: The validator to drive. A fresh one is used when omitted.
            Input it already holds counts as starting on line 1. It is left
            reset when the iterator is exhausted.

    Yields:
        One UnitRecord per unit, in input order.
    """
    if validator is None:
        validator = InputValidator()

    index = 0
    first_line = 1
    lineno = 0
    for lineno, raw in enumerate(lines, start=1):
        if not validator.input:
            first_line = lineno
        result = validator.validate(raw.rstrip("\r\n"))
        if result is ValidationResult.INCOMPLETE:
            continue

        text = validator.take_input()
        if result is ValidationResult.COMPLETE and not text.strip():
            continue
        yield UnitRecord(index=index, first_line=first_line, last_line=lineno, status=result.value, text=text)
        index += 1

    if validator.input or validator.expected_indent:
        text = validator.take_input()
        yield UnitRecord(index=index, first_line=first_line, last_line=max(lineno, first_line), status="incomplete", text=text)


def split_to_transcript(
    lines: Iterable[str],
    source: str = "<stdin>",
    validator: InputValidator | None = None,
) -> Transcript:
    """Collect :func:`split_units` into a Transcript labelled with *source*."""
    return Transcript(source=source, units=list(split_units(lines, validator)))
