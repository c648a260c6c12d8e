"""Shared infrastructure for uiconfig CLI commands.

Global options (``--json``, ``--manifest``) are parsed once by the app
callback and kept here for the duration of the invocation.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass
from pathlib import Path

import orjson
import typer

from uiconfig.flags import ConfigFlagReader, default_reader
from uiconfig.manifest import ManifestError, load_manifest


@dataclass
class _Invocation:
    json_output: bool = False
    manifest: Path | None = None


_state = _Invocation()


def set_global_options(*, json_output: bool, manifest: Path | None) -> None:
    """Record the global options for the current invocation."""
    _state.json_output = json_output
    _state.manifest = manifest


def is_json_output(local_flag: bool = False) -> bool:
    """Check if JSON output is enabled by the global or per-command flag.

    A per-command ``--json`` also switches ``echo_error`` to JSON.
    """
    if local_flag:
        _state.json_output = True
    return _state.json_output


def echo_error(message: str) -> None:
    """Write an error to stderr, as ``{"error": ...}`` in JSON mode."""
    if _state.json_output:
        sys.stderr.write(orjson.dumps({"error": message}).decode() + "\n")
    else:
        typer.echo(f"Error: {message}", err=True)


def get_reader() -> ConfigFlagReader:
    """Build a flag reader, exiting with status 1 if the manifest won't load."""
    try:
        if _state.manifest is not None:
            return ConfigFlagReader(load_manifest(_state.manifest))
        return default_reader()
    except ManifestError as e:
        echo_error(str(e))
        raise typer.Exit(1) from None


def status_text(enabled: bool) -> str:
    """Render an enabled/disabled status for plain output."""
    if enabled:
        return typer.style("enabled", fg="green")
    return typer.style("disabled", fg="bright_black")
