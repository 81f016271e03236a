# Copyright 2026 replcheck Contributors
# SPDX-License-Identifier: Apache-2.0

"""Line-by-line completeness validation of REPL input."""

from replcheck.validator.heuristics import CommentTrend, find_nested_block_comments
from replcheck.validator.input_validator import InputValidator, ValidationResult
from replcheck.validator.stack import (
    IN_COMMENT,
    DelimiterStack,
    DelimiterStackError,
    Entry,
    InComment,
    OpenBracket,
    OpenLiteral,
)

__all__ = [
    "IN_COMMENT",
    "CommentTrend",
    "DelimiterStack",
    "DelimiterStackError",
    "Entry",
    "InComment",
    "InputValidator",
    "OpenBracket",
    "OpenLiteral",
    "ValidationResult",
    "find_nested_block_comments",
]
