"""Read / write / delete engines over the lines of an option file.

All functions are pure: they take lines (without trailing newlines) and
return a new result, leaving the input untouched.

    values = read_values(lines, ["host", "port"])
    lines = write_values(lines, [Assignment("port", "8080")])
    lines = remove_keys(lines, ["debug"])
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from optfile.errors import ConfigurationError
from optfile.matcher import trim
from optfile.models import Assignment, Mode, OptionLine, Request, parse_key

if TYPE_CHECKING:
    from collections.abc import Iterable

logger = logging.getLogger("optfile.engine")

# ---------------------------------------------------------------------------
# Request deduplication
# ---------------------------------------------------------------------------


def dedupe_keys(keys: Iterable[str]) -> list[str]:
    """Drop repeated keys, keeping the first occurrence in order."""
    return list(dict.fromkeys(keys))


def dedupe_assignments(assignments: Iterable[Assignment]) -> list[Assignment]:
    """Keep one assignment per key: the first one seen."""
    kept: dict[str, Assignment] = {}
    for assignment in assignments:
        if assignment.key in kept:
            logger.debug(
                "dropping duplicate assignment %s (keeping %s)",
                assignment.serialize(), kept[assignment.key].serialize(),
            )
            continue
        kept[assignment.key] = assignment
    return list(kept.values())


def build_request(mode: Mode, tokens: Iterable[str]) -> Request:
    """Validate command-line tokens for mode and build a deduplicated Request.

    Fails on the first malformed token.
    """
    if mode is Mode.UNDEFINED:
        msg = "Please specify a mode: READ, WRITE or DELETE"
        raise ConfigurationError(msg)

    if mode is Mode.WRITE:
        assignments = [Assignment.from_token(t) for t in tokens]
        request = Request(mode=mode, assignments=dedupe_assignments(assignments))
    else:
        keys = [parse_key(t) for t in tokens]
        request = Request(mode=mode, keys=dedupe_keys(keys))

    if request.is_empty:
        msg = "Specify at least one key to READ, WRITE or DELETE"
        raise ConfigurationError(msg)
    return request


# ---------------------------------------------------------------------------
# Engines
# ---------------------------------------------------------------------------


def read_values(lines: Iterable[str], keys: Iterable[str]) -> dict[str, str]:
    """Map each requested key to its value in lines.

    Single pass, so lines may be a lazily read file. When a key appears more
    than once the last occurrence wins. Keys not present are left out.
    """
    wanted = list(keys)
    found: dict[str, str] = {}
    for line in lines:
        option = OptionLine(line)
        if option.is_comment:
            continue
        for key in wanted:
            offset = option.value_offset(key)
            if offset is not None:
                found[key] = trim(line[offset:])
    return found


def resolve_values(found: dict[str, str], keys: Iterable[str]) -> list[str]:
    """Values for keys in request order; missing keys resolve to ""."""
    return [found.get(key, "") for key in keys]


def write_values(lines: Iterable[str], assignments: Iterable[Assignment]) -> list[str]:
    """Apply assignments: replace existing key lines, append the rest.

    Each assignment replaces at most one line, the first one carrying its key;
    later lines with the same key are kept as they are. Assignments whose key
    is not in the file are appended in request order.
    """
    pending = {a.key: a for a in dedupe_assignments(assignments)}
    result: list[str] = []
    for line in lines:
        option = OptionLine(line)
        for key in pending:
            if option.value_offset(key) is not None:
                line = pending.pop(key).serialize()
                break
        result.append(line)
    result.extend(a.serialize() for a in pending.values())
    return result


def remove_keys(lines: Iterable[str], keys: Iterable[str]) -> list[str]:
    """Drop every line carrying one of keys."""
    doomed = dedupe_keys(keys)
    return [
        line for line in lines
        if all(OptionLine(line).value_offset(key) is None for key in doomed)
    ]
