"""Exceptions raised by the optfile core.

The CLI maps these onto exit statuses; library callers can catch
OptionFileError to handle all of them.
"""

from __future__ import annotations


class OptionFileError(Exception):
    """Base class for optfile errors."""


class ConfigurationError(OptionFileError):
    """Invalid invocation: conflicting or missing mode, missing file path, nothing to do."""


class MalformedArgumentError(OptionFileError):
    """A key or key=value token has the wrong shape."""


class FileOpenError(OptionFileError):
    """The option file could not be opened for reading."""


class OutputFileError(OptionFileError):
    """The option file could not be opened for writing."""
