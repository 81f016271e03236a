# Copyright 2026 replcheck Contributors
# SPDX-License-Identifier: Apache-2.0

"""Restricted single-line scanner used for input completeness checks.

Only the token classes that matter for bracket balancing, block comments and
quoted literals are recognised. Everything else collapses to OTHER.
"""

import enum
from dataclasses import dataclass

# ###############
# Public Interface
# ###############


class TokenKind(enum.IntEnum):
    """Token classes produced by the punctuator scanner.

    Every closing bracket is numbered exactly one above its opening bracket.
    """

    L_PAREN = 0
    R_PAREN = 1
    L_SQUARE = 2
    R_SQUARE = 3
    L_BRACE = 4
    R_BRACE = 5
    SLASH = 6
    ASTERISK = 7
    STRING_LIT = 8
    CHAR_LIT = 9
    HASH = 10
    IDENTIFIER = 11
    END_OF_LINE = 12
    OTHER = 13

    @property
    def is_open_bracket(self) -> bool:
        return self <= TokenKind.R_BRACE and self % 2 == 0

    @property
    def is_close_bracket(self) -> bool:
        return self <= TokenKind.R_BRACE and self % 2 == 1

    @property
    def is_literal_start(self) -> bool:
        return self in (TokenKind.STRING_LIT, TokenKind.CHAR_LIT)

    @property
    def opening(self) -> "TokenKind":
        """Return the opening bracket that this closing bracket matches."""
        if not self.is_close_bracket:
            raise ValueError(f"{self.name} is not a closing bracket")
        return TokenKind(self - 1)


@dataclass(frozen=True)
class Token:
    """A token with the half-open span ``[start, end)`` it covers in its line.

    Attributes:
        kind: The token class.
        value: The covered text. Empty for END_OF_LINE unless a line comment
            was swallowed.
        start: Offset of the first character.
        end: Offset one past the last character.
    """

    kind: TokenKind
    value: str
    start: int
    end: int


@dataclass(frozen=True)
class QuotedLiteral:
    """A string or character literal skipped in one step.

    Attributes:
        kind: STRING_LIT or CHAR_LIT.
        start: Offset of the opening quote, or of the first character when the
            literal was continued from a previous line.
        end: Offset one past the closing quote, or the line length.
        terminated: Whether the closing quote was found on this line.
    """

    kind: TokenKind
    start: int
    end: int
    terminated: bool


QUOTES: dict[TokenKind, str] = {
    TokenKind.STRING_LIT: '"',
    TokenKind.CHAR_LIT: "'",
}


def lex_punctuator(text: str, pos: int) -> Token:
    """Return the next token at or after *pos*.

    Whitespace is skipped. A ``//`` line comment swallows the rest of the line
    and is reported as END_OF_LINE starting at the first slash. The two
    characters of ``/*`` and ``*/`` always come back as separate tokens.

    Args:
        text: A single input line without its trailing newline.
        pos: Cursor into *text*.

    Returns:
        The next Token; its ``end`` is where scanning should resume.
    """
    length = len(text)
    while pos < length and text[pos].isspace():
        pos += 1

    if pos >= length:
        return Token(TokenKind.END_OF_LINE, "", length, length)

    ch = text[pos]
    if ch == "/" and pos + 1 < length and text[pos + 1] == "/":
        return Token(TokenKind.END_OF_LINE, text[pos:], pos, length)

    kind = _SINGLE_CHAR_TOKENS.get(ch)
    if kind is not None:
        return Token(kind, ch, pos, pos + 1)

    if ch.isalpha() or ch == "_":
        end = pos + 1
        while end < length and (text[end].isalnum() or text[end] == "_"):
            end += 1
        return Token(TokenKind.IDENTIFIER, text[pos:end], pos, end)

    return Token(TokenKind.OTHER, ch, pos, pos + 1)


def skip_quoted_literal(text: str, pos: int, quote: str | None = None) -> QuotedLiteral:
    """Advance past a whole quoted literal, honouring backslash escapes.

    Args:
        text: A single input line.
        pos: Offset of the opening quote. When *quote* is given, *pos* is
            instead the first character of a literal continued from a
            previous line and no opening quote is consumed.
        quote: The closing quote character of a continued literal.

    Returns:
        A QuotedLiteral describing the consumed span.

    Raises:
        ValueError: If *pos* is not on a quote and no *quote* was given.
    """
    if quote is None:
        quote = text[pos] if pos < len(text) else ""
        if quote not in _QUOTE_KINDS:
            raise ValueError(f"No quoted literal at offset {pos}")
        cursor = pos + 1
    else:
        cursor = pos
    kind = _QUOTE_KINDS[quote]

    escaped = False
    while cursor < len(text):
        ch = text[cursor]
        cursor += 1
        if escaped:
            escaped = False
        elif ch == "\\":
            escaped = True
        elif ch == quote:
            return QuotedLiteral(kind, pos, cursor, terminated=True)
    return QuotedLiteral(kind, pos, cursor, terminated=False)


# ################
# Implementation
# ################

_SINGLE_CHAR_TOKENS: dict[str, TokenKind] = {
    "(": TokenKind.L_PAREN,
    ")": TokenKind.R_PAREN,
    "[": TokenKind.L_SQUARE,
    "]": TokenKind.R_SQUARE,
    "{": TokenKind.L_BRACE,
    "}": TokenKind.R_BRACE,
    "/": TokenKind.SLASH,
    "*": TokenKind.ASTERISK,
    '"': TokenKind.STRING_LIT,
    "'": TokenKind.CHAR_LIT,
    "#": TokenKind.HASH,
}

_QUOTE_KINDS: dict[str, TokenKind] = {quote: kind for kind, quote in QUOTES.items()}
