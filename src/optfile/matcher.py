"""Key-line matching for the key=value option file format.

A key line has its first '=' neither at the start nor at the end of the line,
and is not a comment ('#' as first character). Everything after the first
'=' is the value, including any further '=' characters.
"""

from __future__ import annotations

COMMENT_PREFIX = "#"
SEPARATOR = "="


def trim(text: str) -> str:
    return text.strip()


def is_comment(line: str) -> bool:
    return line.startswith(COMMENT_PREFIX)


def _separator_pos(line: str) -> int | None:
    """Position of the first '=' if it can separate a key from a value."""
    if is_comment(line):
        return None
    pos = line.find(SEPARATOR)
    if pos <= 0 or pos == len(line) - 1:
        return None
    return pos


def split_line(line: str) -> tuple[str, str] | None:
    """Return the trimmed (key, value) of a key line, or None."""
    pos = _separator_pos(line)
    if pos is None:
        return None
    return trim(line[:pos]), trim(line[pos + 1:])


def match_key(line: str, key: str) -> int | None:
    """Return the offset where the value starts if line holds key, else None.

    The value itself is line[offset:] and still has to be trimmed.
    """
    pos = _separator_pos(line)
    if pos is None or trim(line[:pos]) != key:
        return None
    return pos + 1
