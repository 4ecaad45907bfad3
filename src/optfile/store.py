"""Load and rewrite option files.

OptionFile is the public API:
    opts = OptionFile("/etc/app.conf")
    with opts.stream() as lines:
        values = read_values(lines, ["host"])
    opts.apply(request)          # WRITE / DELETE: load, edit, rewrite

WRITE and DELETE read the whole file and close it before reopening it for
writing. There is no locking and no temp-file rename: a concurrent writer
between load and save loses its changes.
"""

from __future__ import annotations

import contextlib
import logging
from pathlib import Path
from typing import TYPE_CHECKING

from optfile.engine import remove_keys, write_values
from optfile.errors import FileOpenError, OutputFileError
from optfile.models import Mode

if TYPE_CHECKING:
    from collections.abc import Iterator

    from optfile.models import Request

logger = logging.getLogger("optfile.store")

# Lines end at "\n" only and are written back untranslated, so "\r" and
# undecodable bytes in lines that are not rewritten survive byte for byte.
_ERRORS = "surrogateescape"


def _strip_eol(line: str) -> str:
    return line[:-1] if line.endswith("\n") else line


class OptionFile:
    """A key=value option file on disk."""

    def __init__(self, path: Path | str, encoding: str = "utf-8") -> None:
        self.path = Path(path)
        self.encoding = encoding

    def __repr__(self) -> str:
        return f"OptionFile({str(self.path)!r})"

    # ------------------------------------------------------------------
    # Read
    # ------------------------------------------------------------------

    @contextlib.contextmanager
    def stream(self) -> Iterator[Iterator[str]]:
        """Yield the file's lines lazily, trailing newline stripped."""
        try:
            f = self.path.open(encoding=self.encoding, errors=_ERRORS, newline="\n")
        except OSError as exc:
            msg = f"Failed to open file: '{self.path}'"
            raise FileOpenError(msg) from exc
        with f:
            yield (_strip_eol(line) for line in f)

    def load(self) -> list[str]:
        """Read every line into memory and close the file."""
        with self.stream() as lines:
            loaded = list(lines)
        logger.debug("loaded %d lines from %s", len(loaded), self.path)
        return loaded

    # ------------------------------------------------------------------
    # Write
    # ------------------------------------------------------------------

    def save(self, lines: list[str]) -> None:
        """Truncate the file and write lines, one per line."""
        try:
            f = self.path.open("w", encoding=self.encoding, errors=_ERRORS, newline="\n")
        except OSError as exc:
            msg = f"Failed to open output file: {self.path}"
            raise OutputFileError(msg) from exc
        with f:
            for line in lines:
                f.write(line + "\n")
        logger.debug("wrote %d lines to %s", len(lines), self.path)

    def apply(self, request: Request) -> list[str]:
        """Run a WRITE or DELETE request against the file and rewrite it."""
        if request.mode not in (Mode.WRITE, Mode.DELETE):
            msg = f"apply() needs a WRITE or DELETE request, got {request.mode.value}"
            raise ValueError(msg)

        lines = self.load()
        logger.debug("Mode: %s", request.mode.value.upper())
        if request.mode is Mode.WRITE:
            new_lines = write_values(lines, request.assignments)
        else:
            new_lines = remove_keys(lines, request.keys)
        self.save(new_lines)
        return new_lines
