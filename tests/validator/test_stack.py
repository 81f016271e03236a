# Copyright 2026 replcheck Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tests for the delimiter stack."""

import pytest

from replcheck.lexer.punctuators import TokenKind
from replcheck.validator.stack import (
    IN_COMMENT,
    DelimiterStack,
    DelimiterStackError,
    InComment,
    OpenBracket,
    OpenLiteral,
)

_PAREN = OpenBracket(TokenKind.L_PAREN)
_BRACE = OpenBracket(TokenKind.L_BRACE)
_SQUARE = OpenBracket(TokenKind.L_SQUARE)


def _stack(*entries) -> DelimiterStack:
    stack = DelimiterStack()
    for entry in entries:
        stack.push(entry)
    return stack


def test_new_stack_is_empty() -> None:
    stack = DelimiterStack()
    assert len(stack) == 0
    assert stack.depth == 0
    assert stack.top is None
    assert not stack.in_comment


def test_push_and_pop_are_lifo() -> None:
    stack = _stack(_PAREN, _BRACE)
    assert stack.top == _BRACE
    assert stack.pop() == _BRACE
    assert stack.pop() == _PAREN
    assert len(stack) == 0


def test_iterates_bottom_to_top() -> None:
    assert list(_stack(_PAREN, IN_COMMENT, _SQUARE)) == [_PAREN, IN_COMMENT, _SQUARE]


def test_pop_empty_raises() -> None:
    with pytest.raises(DelimiterStackError, match="empty"):
        DelimiterStack().pop()


def test_entries_compare_by_value() -> None:
    assert OpenBracket(TokenKind.L_PAREN) == _PAREN
    assert InComment() == IN_COMMENT
    assert OpenLiteral(TokenKind.STRING_LIT) != OpenLiteral(TokenKind.CHAR_LIT)
    assert _PAREN != IN_COMMENT


def test_in_comment_detects_sentinel_below_brackets() -> None:
    stack = _stack(_BRACE, IN_COMMENT, _PAREN, _SQUARE)
    assert stack.top == _SQUARE
    assert stack.in_comment
    assert stack.contains(IN_COMMENT)


def test_unwind_removes_entries_through_target() -> None:
    stack = _stack(_BRACE, IN_COMMENT, _PAREN, _SQUARE)
    stack.unwind(IN_COMMENT)
    assert list(stack) == [_BRACE]
    assert not stack.in_comment


def test_unwind_stops_at_topmost_match() -> None:
    stack = _stack(_PAREN, _BRACE, _PAREN, _SQUARE)
    stack.unwind(_PAREN)
    assert list(stack) == [_PAREN, _BRACE]


def test_unwind_target_on_top() -> None:
    stack = _stack(_PAREN, IN_COMMENT)
    stack.unwind(IN_COMMENT)
    assert list(stack) == [_PAREN]


def test_unwind_missing_target_raises_and_keeps_entries() -> None:
    stack = _stack(_PAREN, _BRACE)
    with pytest.raises(DelimiterStackError, match="not on the delimiter stack"):
        stack.unwind(IN_COMMENT)
    assert list(stack) == [_PAREN, _BRACE]


def test_unwind_empty_raises() -> None:
    with pytest.raises(DelimiterStackError):
        DelimiterStack().unwind(IN_COMMENT)


def test_clear() -> None:
    stack = _stack(_PAREN, IN_COMMENT)
    stack.clear()
    assert stack.depth == 0
    assert not stack.in_comment


def test_error_is_a_runtime_error() -> None:
    assert issubclass(DelimiterStackError, RuntimeError)
