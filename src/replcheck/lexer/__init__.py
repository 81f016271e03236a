# Copyright 2026 replcheck Contributors
# SPDX-License-Identifier: Apache-2.0

"""Restricted punctuator scanner for line-by-line input checks."""

from replcheck.lexer.punctuators import (
    QUOTES,
    QuotedLiteral,
    Token,
    TokenKind,
    lex_punctuator,
    skip_quoted_literal,
)

__all__ = [
    "QUOTES",
    "QuotedLiteral",
    "Token",
    "TokenKind",
    "lex_punctuator",
    "skip_quoted_literal",
]
