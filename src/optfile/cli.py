"""optfile CLI: read, write and delete keys in a key=value option file.

Usage:
    optfile -f FILE -r KEY...          print each value (empty line if missing)
    optfile -f FILE -w KEY=VALUE...    replace existing keys in place, append new ones
    optfile -f FILE -d KEY...          remove every line holding one of the keys

Exactly one of -r / -w / -d. Diagnostics go to stderr, values to stdout.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

import click

from optfile.config import OptfileConfig, load_config
from optfile.engine import build_request, read_values, resolve_values
from optfile.errors import ConfigurationError, FileOpenError, MalformedArgumentError, OutputFileError
from optfile.models import Mode, Request, select_mode
from optfile.store import OptionFile

logger = logging.getLogger("optfile.cli")

# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _load_cfg() -> OptfileConfig:
    try:
        return load_config()
    except ConfigurationError as exc:
        raise click.UsageError(str(exc)) from exc


def _configure_logging(verbose: bool, fmt: str) -> None:
    """Send optfile.* records to stderr; DEBUG when verbose, else WARNING."""
    pkg_logger = logging.getLogger("optfile")
    for handler in list(pkg_logger.handlers):
        pkg_logger.removeHandler(handler)
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(fmt))
    pkg_logger.addHandler(handler)
    pkg_logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    pkg_logger.propagate = False


def _mode_from_flags(write: bool, read: bool, delete: bool) -> Mode:
    mode = Mode.UNDEFINED
    for enabled, flag_mode in ((write, Mode.WRITE), (read, Mode.READ), (delete, Mode.DELETE)):
        if enabled:
            mode = select_mode(mode, flag_mode)
    return mode


def _log_request(file_path: Path, request: Request) -> None:
    logger.debug("File to parse: %s", file_path)
    if request.assignments:
        logger.debug("Keys to set: [%s]", ", ".join(f"{a.key}: {a.value}" for a in request.assignments))
    if request.keys:
        logger.debug("Keys to read/delete: [%s]", ", ".join(request.keys))


def _print_values(opts: OptionFile, request: Request, verbose: bool) -> None:
    logger.debug("Mode: READ")
    with opts.stream() as lines:
        found = read_values(lines, request.keys)
    for key, value in zip(request.keys, resolve_values(found, request.keys)):
        if verbose:
            click.echo(f"{key}=", err=True, nl=False)
        # Back to the file's own bytes, undecodable ones included.
        click.echo(value.encode(opts.encoding, errors="surrogateescape"))


# ---------------------------------------------------------------------------
# Command
# ---------------------------------------------------------------------------


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(package_name="optfile")
@click.option("-v", "--verbose", is_flag=True, help="Show more detailed output on stderr")
@click.option(
    "-f", "--file", "file_path",
    type=click.Path(dir_okay=False, path_type=Path),
    help="File to parse; format has to be <key>=<value>",
)
@click.option("-w", "--write", is_flag=True, help="Set <key> to <value> for each KEY=VALUE")
@click.option("-r", "--read", is_flag=True, help="Print the value of each KEY")
@click.option("-d", "--delete", is_flag=True, help="Delete the key-value pair of each KEY")
@click.argument("tokens", nargs=-1, metavar="[KEY | KEY=VALUE]...")
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: bool,
    file_path: Path | None,
    write: bool,
    read: bool,
    delete: bool,
    tokens: tuple[str, ...],
) -> None:
    """Read, write or delete keys in a key=value option file.

    \b
      optfile -f app.conf -r host port
      optfile -f app.conf -w host=example.org port=8080
      optfile -f app.conf -d debug
    """
    if not (verbose or file_path or write or read or delete or tokens):
        click.echo(ctx.get_help())
        return

    cfg = _load_cfg()
    verbose = verbose or cfg.verbose
    _configure_logging(verbose, cfg.log_format)

    try:
        mode = _mode_from_flags(write, read, delete)
        if file_path is None:
            msg = "Please specify a file path"
            raise ConfigurationError(msg)
        request = build_request(mode, tokens)
    except (ConfigurationError, MalformedArgumentError) as exc:
        raise click.UsageError(str(exc), ctx) from exc

    _log_request(file_path, request)
    opts = OptionFile(file_path, encoding=cfg.encoding)
    try:
        if request.mode is Mode.READ:
            _print_values(opts, request, verbose)
        else:
            opts.apply(request)
    except FileOpenError as exc:
        # Not fatal: report and exit 0 without touching anything.
        logger.error("%s", exc)
    except OutputFileError as exc:
        raise click.ClickException(str(exc)) from exc
