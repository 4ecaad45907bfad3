"""Data models for option files and the requests run against them."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field

from optfile.errors import ConfigurationError, MalformedArgumentError
from optfile.matcher import SEPARATOR, is_comment, match_key, split_line, trim


class Mode(enum.Enum):
    """Operating mode selected by the -r / -w / -d flags."""

    UNDEFINED = "undefined"
    READ = "read"
    WRITE = "write"
    DELETE = "delete"


def select_mode(current: Mode, requested: Mode) -> Mode:
    """Transition the mode state machine.

    UNDEFINED may move to any mode once; asking for the mode that is already
    selected is a no-op; anything else is a conflict.
    """
    if current in (Mode.UNDEFINED, requested):
        return requested
    msg = "READ, WRITE and DELETE can not be used together"
    raise ConfigurationError(msg)


@dataclass
class OptionLine:
    """A single line of an option file, without its trailing newline."""

    raw: str

    @property
    def is_comment(self) -> bool:
        return is_comment(self.raw)

    @property
    def pair(self) -> tuple[str, str] | None:
        return split_line(self.raw)

    @property
    def key(self) -> str | None:
        pair = self.pair
        return pair[0] if pair else None

    @property
    def value(self) -> str | None:
        pair = self.pair
        return pair[1] if pair else None

    def value_offset(self, key: str) -> int | None:
        """Where the value starts if this line holds key, else None."""
        return match_key(self.raw, key)


@dataclass(frozen=True)
class Assignment:
    """A key=value pair requested in WRITE mode."""

    key: str
    value: str

    @classmethod
    def from_token(cls, token: str) -> Assignment:
        pos = token.find(SEPARATOR)
        key = trim(token[:pos]) if pos > 0 else ""
        value = trim(token[pos + 1:]) if pos > 0 else ""
        # A blank key or value would serialize to a line that is not a key line.
        if not key or not value:
            msg = f"Wrong format to set key - Expected <key>=<value> | Got '{token}'"
            raise MalformedArgumentError(msg)
        return cls(key=key, value=value)

    def serialize(self) -> str:
        return f"{self.key}{SEPARATOR}{self.value}"


def parse_key(token: str) -> str:
    """Validate a READ/DELETE token and return the trimmed key."""
    if SEPARATOR in token:
        msg = f"Wrong format of options - Expected <key> | Got '{token}'"
        raise MalformedArgumentError(msg)
    key = trim(token)
    if not key:
        msg = f"Wrong format of options - Expected <key> | Got '{token}'"
        raise MalformedArgumentError(msg)
    return key


@dataclass
class Request:
    """What to do to an option file: a mode plus its keys or assignments.

    READ and DELETE requests carry keys, WRITE requests carry assignments.
    Built by build_request(), which also deduplicates.
    """

    mode: Mode
    keys: list[str] = field(default_factory=list)
    assignments: list[Assignment] = field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        if self.mode is Mode.WRITE:
            return not self.assignments
        return not self.keys
