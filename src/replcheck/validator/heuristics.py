# Copyright 2026 replcheck Contributors
# SPDX-License-Identifier: Apache-2.0

"""Line-end guess for block comment markers hidden behind a line comment.

The punctuator scanner swallows everything after ``//``. When that happens
inside a block comment, a ``*/`` in the swallowed text would go unnoticed and
the continuation prompt would stay open forever. The scan below is not
standard compliant; the real compiler reports any imbalance it misses.
"""

import enum

# ###############
# Public Interface
# ###############


class CommentTrend(enum.Enum):
    """Net effect of the trailing block comment markers on a line."""

    CLOSES = "closes"
    OPENS = "opens"
    NEUTRAL = "neutral"


def find_nested_block_comments(text: str) -> CommentTrend:
    """Classify the last block comment marker that follows a ``//``.

    A trailing ``*/`` means the comment has ended no matter how many ``/*``
    came before it. A trailing ``/*`` means a comment has begun no matter
    whether earlier ones ended.

    Args:
        text: The unscanned remainder of a line.

    Returns:
        CLOSES or OPENS for the last marker after the first ``//``, and
        NEUTRAL when there is no ``//`` or no marker after it.
    """
    start = text.find("//")
    if start < 0:
        return CommentTrend.NEUTRAL

    # Walking backwards, "/" then "*" spells "*/" and "*" then "/" spells "/*".
    expected = ""
    for ch in reversed(text[start + 2 :]):
        if ch == "*":
            if expected == "*":
                return CommentTrend.CLOSES
            expected = "/"
        elif ch == "/":
            if expected == "/":
                return CommentTrend.OPENS
            expected = "*"
        else:
            expected = ""
    return CommentTrend.NEUTRAL
