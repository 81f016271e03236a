# Copyright 2026 replcheck Contributors
# SPDX-License-Identifier: Apache-2.0

"""Incremental completeness check for text typed into a REPL one line at a time.

After every line the validator reports whether the accumulated input can be
handed to the compiler, needs more lines, or already has a closing bracket
without a partner. It only re-lexes punctuators; the language grammar is never
consulted, so anything it lets through is left for the compiler to judge.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass

from replcheck.lexer.punctuators import QUOTES, Token, TokenKind, lex_punctuator, skip_quoted_literal
from replcheck.settings.config import ValidatorConfig
from replcheck.validator.heuristics import CommentTrend, find_nested_block_comments
from replcheck.validator.stack import IN_COMMENT, DelimiterStack, Entry, OpenBracket, OpenLiteral

# ###############
# Public Interface
# ###############


class ValidationResult(enum.Enum):
    """Classification of the input accumulated so far."""

    COMPLETE = "complete"
    INCOMPLETE = "incomplete"
    MISMATCH = "mismatch"


class InputValidator:
    """Accumulates REPL input and tracks which delimiters are still open.

    One instance serves one input stream. Call :meth:`reset` (or
    :meth:`take_input`) after a complete unit has been dispatched or after a
    mismatch has been reported.
    """

    def __init__(self, config: ValidatorConfig | None = None) -> None:
        self._config = config if config is not None else ValidatorConfig()
        self._input = ""
        self._stack = DelimiterStack()

    @property
    def config(self) -> ValidatorConfig:
        return self._config

    @property
    def input(self) -> str:
        """The logical input assembled from all lines since the last reset."""
        return self._input

    @property
    def stack(self) -> tuple[Entry, ...]:
        """Snapshot of the open entries, bottom first."""
        return tuple(self._stack)

    @property
    def expected_indent(self) -> int:
        """Number of open entries, used to indent continuation prompts."""
        return self._stack.depth

    @property
    def in_block_comment(self) -> bool:
        return self._stack.in_comment

    def validate(self, line: str) -> ValidationResult:
        """Scan *line*, append it to the input and classify the result.

        Args:
            line: One line of input without its trailing newline.

        Returns:
            MISMATCH if a closing bracket did not match the innermost open one,
            INCOMPLETE if anything is still open, COMPLETE otherwise.
        """
        continues_literal = isinstance(self._stack.top, OpenLiteral)

        if self._scan(line):
            result = ValidationResult.MISMATCH
        elif self._stack:
            result = ValidationResult.INCOMPLETE
        else:
            result = ValidationResult.COMPLETE

        if self._input:
            # A literal spanning lines must reach the compiler as a single line.
            if not continues_literal:
                self._input += "\n"
            elif _ends_with_splice(self._input):
                self._input = self._input[:-1]
            else:
                self._input += _ESCAPED_NEWLINE
        self._input += line
        return result

    def reset(self) -> None:
        """Forget the accumulated input and all open entries."""
        self._input = ""
        self._stack.clear()

    def take_input(self) -> str:
        """Return the accumulated input and reset the validator."""
        text = self._input
        self.reset()
        return text

    # ------------------------------------------------------------------
    # Line scan
    # ------------------------------------------------------------------

    def _scan(self, line: str) -> bool:
        """Update the stack from the tokens of *line*; return True on a mismatch."""
        pos = 0
        top = self._stack.top
        if isinstance(top, OpenLiteral):
            literal = skip_quoted_literal(line, 0, QUOTES[top.kind])
            if not literal.terminated:
                return False
            self._stack.pop()
            pos = literal.end

        in_comment = self._stack.in_comment
        marker = _CommentMarker.closing() if in_comment else _CommentMarker.opening()

        while True:
            token = lex_punctuator(line, pos)
            pos = token.end

            if marker.completes(token):
                if in_comment:
                    self._stack.unwind(IN_COMMENT)
                    marker = _CommentMarker.opening()
                else:
                    self._stack.push(IN_COMMENT)
                    marker = _CommentMarker.closing()
                in_comment = not in_comment
                continue

            kind = token.kind
            if kind is TokenKind.END_OF_LINE:
                if in_comment and find_nested_block_comments(line[token.start :]) is CommentTrend.CLOSES:
                    self._stack.unwind(IN_COMMENT)
                return False

            if in_comment and not self._config.comment_bracket_parity:
                continue

            if kind.is_open_bracket:
                self._stack.push(OpenBracket(kind))
            elif kind.is_close_bracket:
                if self._stack.top == OpenBracket(kind.opening):
                    self._stack.pop()
                elif not in_comment:
                    return True
            elif kind.is_literal_start:
                literal = skip_quoted_literal(line, token.start)
                pos = literal.end
                if not literal.terminated and not in_comment and self._config.continue_unterminated_literals:
                    self._stack.push(OpenLiteral(kind))


# ################
# Implementation
# ################

_ESCAPED_NEWLINE = "\\n"


def _ends_with_splice(text: str) -> bool:
    """Return True if *text* ends in an unescaped backslash, i.e. a line splice."""
    return (len(text) - len(text.rstrip("\\"))) % 2 == 1


@dataclass
class _CommentMarker:
    """Tracks a two-character comment marker split across two tokens.

    The second character only counts when it directly follows the first one.
    """

    first: TokenKind
    second: TokenKind
    pending_end: int | None = None

    @classmethod
    def opening(cls) -> _CommentMarker:
        return cls(TokenKind.SLASH, TokenKind.ASTERISK)

    @classmethod
    def closing(cls) -> _CommentMarker:
        return cls(TokenKind.ASTERISK, TokenKind.SLASH)

    def completes(self, token: Token) -> bool:
        if token.kind is self.second and token.start == self.pending_end:
            self.pending_end = None
            return True
        self.pending_end = token.end if token.kind is self.first else None
        return False
