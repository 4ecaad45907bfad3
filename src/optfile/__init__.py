"""Read and edit flat key=value option files.

File format:
    # comment lines start with '#' and are never matched
    host=example.org
    port=8080

A key line is split on its first '='; the key and value are trimmed. The
'=' may be neither the first nor the last character of the line.

    from optfile import OptionFile, Request, Mode, Assignment

    opts = OptionFile("app.conf")
    opts.apply(Request(Mode.WRITE, assignments=[Assignment("port", "9090")]))
"""

from optfile.config import OptfileConfig, load_config
from optfile.engine import (
    build_request,
    dedupe_assignments,
    dedupe_keys,
    read_values,
    remove_keys,
    resolve_values,
    write_values,
)
from optfile.errors import (
    ConfigurationError,
    FileOpenError,
    MalformedArgumentError,
    OptionFileError,
    OutputFileError,
)
from optfile.matcher import match_key, split_line, trim
from optfile.models import Assignment, Mode, OptionLine, Request, parse_key, select_mode
from optfile.store import OptionFile

__all__ = [
    "Assignment",
    "ConfigurationError",
    "FileOpenError",
    "MalformedArgumentError",
    "Mode",
    "OptfileConfig",
    "OptionFile",
    "OptionFileError",
    "OptionLine",
    "OutputFileError",
    "Request",
    "build_request",
    "dedupe_assignments",
    "dedupe_keys",
    "load_config",
    "match_key",
    "parse_key",
    "read_values",
    "remove_keys",
    "resolve_values",
    "select_mode",
    "split_line",
    "trim",
    "write_values",
]
