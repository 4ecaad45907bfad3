"""OptfileConfig: optional per-project defaults for the optfile command.

Looked up by walking upward from the working directory for optfile.toml.
Every key is optional:

    [optfile]
    encoding = "utf-8"                              # option file encoding
    verbose = false                                 # same as always passing -v
    log_format = "[OptionFileParser] %(message)s"   # stderr diagnostics format

Environment overrides (take precedence over optfile.toml):
    OPTFILE_ENCODING
    OPTFILE_VERBOSE     1 / true / yes / on
"""

from __future__ import annotations

import os
import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from optfile.errors import ConfigurationError

_CONFIG_FILENAME = "optfile.toml"
_DEFAULT_ENCODING = "utf-8"
_DEFAULT_LOG_FORMAT = "[OptionFileParser] %(message)s"
_TRUTHY = {"1", "true", "yes", "on"}


@dataclass
class OptfileConfig:
    """Resolved tool configuration."""

    root: Path                      # directory searched from (or holding optfile.toml)
    encoding: str = _DEFAULT_ENCODING
    verbose: bool = False
    log_format: str = _DEFAULT_LOG_FORMAT


def load_config(root: Path | str | None = None) -> OptfileConfig:
    """Load optfile.toml from root (or search upward from cwd if root is None)."""
    root_path = _find_root(Path(root) if root else Path.cwd())
    config_path = root_path / _CONFIG_FILENAME

    raw: dict[str, Any] = {}
    if config_path.exists():
        try:
            with config_path.open("rb") as f:
                raw = tomllib.load(f)
        except (tomllib.TOMLDecodeError, OSError) as exc:
            msg = f"Cannot read {config_path}: {exc}"
            raise ConfigurationError(msg) from exc

    section = raw.get("optfile", {})
    encoding = os.environ.get("OPTFILE_ENCODING") or str(section.get("encoding", _DEFAULT_ENCODING))
    env_verbose = os.environ.get("OPTFILE_VERBOSE")
    if env_verbose is not None:
        verbose = env_verbose.strip().lower() in _TRUTHY
    else:
        verbose = bool(section.get("verbose", False))

    return OptfileConfig(
        root=root_path,
        encoding=encoding,
        verbose=verbose,
        log_format=str(section.get("log_format", _DEFAULT_LOG_FORMAT)),
    )


def _find_root(start: Path) -> Path:
    """Walk upward from start looking for optfile.toml."""
    for directory in (start, *start.parents):
        if (directory / _CONFIG_FILENAME).exists():
            return directory
    return start
