# Copyright 2026 replcheck Contributors
# SPDX-License-Identifier: Apache-2.0

"""Stack of currently open delimiters, block comments and literals."""

from collections.abc import Iterator
from dataclasses import dataclass

from replcheck.lexer.punctuators import TokenKind

# ###############
# Public Interface
# ###############


class DelimiterStackError(RuntimeError):
    """Raised when the stack is popped or unwound past its bottom.

    This signals that the scanner and the stack went out of sync and is never
    expected during normal use.
    """


@dataclass(frozen=True)
class OpenBracket:
    """An opening parenthesis, square bracket or brace awaiting its partner."""

    kind: TokenKind


@dataclass(frozen=True)
class InComment:
    """Sentinel for an open block comment."""


@dataclass(frozen=True)
class OpenLiteral:
    """A string or character literal still open at the end of a line."""

    kind: TokenKind


Entry = OpenBracket | InComment | OpenLiteral

IN_COMMENT = InComment()


class DelimiterStack:
    """Last-in-first-out sequence of open entries.

    Entries only leave from the top, either one at a time via :meth:`pop` or
    in bulk via :meth:`unwind`.
    """

    def __init__(self) -> None:
        self._entries: list[Entry] = []

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[Entry]:
        """Iterate from bottom to top."""
        return iter(self._entries)

    def __repr__(self) -> str:
        return f"DelimiterStack({self._entries!r})"

    @property
    def depth(self) -> int:
        return len(self._entries)

    @property
    def top(self) -> Entry | None:
        """Return the most recently pushed entry, or None when empty."""
        return self._entries[-1] if self._entries else None

    @property
    def in_comment(self) -> bool:
        """Return True if a block comment is open anywhere in the stack.

        Brackets may have been pushed after the comment began, so the
        sentinel is not necessarily on top.
        """
        return self.contains(IN_COMMENT)

    def contains(self, entry: Entry) -> bool:
        return entry in self._entries

    def push(self, entry: Entry) -> None:
        self._entries.append(entry)

    def pop(self) -> Entry:
        """Remove and return the top entry.

        Raises:
            DelimiterStackError: If the stack is empty.
        """
        if not self._entries:
            raise DelimiterStackError("Cannot pop from an empty delimiter stack")
        return self._entries.pop()

    def unwind(self, target: Entry) -> None:
        """Pop entries until, and including, the topmost one equal to *target*.

        Raises:
            DelimiterStackError: If the stack runs empty before *target* is found.
                The stack is left untouched in that case.
        """
        if target not in self._entries:
            raise DelimiterStackError(f"Cannot unwind to {target!r}: not on the delimiter stack")
        while self._entries.pop() != target:
            pass

    def clear(self) -> None:
        self._entries.clear()
