"""Word splitting and substring search over NUL-terminated style text."""

from __future__ import annotations

import re

_BLANKS = re.compile(r"[ \t]+")


def _c_string(text: str) -> str:
    """Return the text up to its first NUL character."""
    return text.split("\0", 1)[0]


def split_words(text: str) -> list[str]:
    """Split text into words separated by spaces and tabs only."""
    return [word for word in _BLANKS.split(_c_string(text)) if word]


def find(text: str, needle: str) -> int:
    """Return the position of the first occurrence of needle, or -1."""
    if not needle:
        raise ValueError("needle must not be empty")
    return _c_string(text).find(needle)


def find_unquoted(text: str, needle: str) -> int:
    """Return the first position of needle outside double quotes, or -1.

    Each double quote toggles the quoted state before the match at its own
    position is tried.
    """
    if not needle:
        raise ValueError("needle must not be empty")
    text = _c_string(text)
    if len(needle) > len(text):
        return -1
    quoted = False
    for pos, char in enumerate(text[: len(text) - len(needle) + 1]):
        if char == '"':
            quoted = not quoted
        if not quoted and text.startswith(needle, pos):
            return pos
    return -1