#!/usr/bin/env python3
"""
ANSI escape sequence helpers for measuring visible text width.
"""

import re

# ESC up to and including the terminating 'm'; an unterminated sequence runs
# to the end of the string
ANSI_ESCAPE_RE = re.compile(r"\x1b[^m]*(?:m|$)")


def strip_ansi_escape_codes(text: str) -> str:
    """Remove every ESC ... m sequence from text."""
    return ANSI_ESCAPE_RE.sub("", text)


def visible_width(text: str) -> int:
    """Number of characters text occupies on screen."""
    return len(strip_ansi_escape_codes(text))
