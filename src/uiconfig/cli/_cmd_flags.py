"""Flag inspection commands for uiconfig CLI."""

from __future__ import annotations

from collections.abc import Mapping

import orjson
import typer

from uiconfig.flags import UIFlag

from ._helpers import get_reader, is_json_output, status_text


def _string_or_none(value: object) -> str | None:
    return value if isinstance(value, str) else None


def register(app: typer.Typer) -> None:
    """Register flag commands."""

    @app.command("get")
    def get(
        key: str = typer.Argument(..., help="Manifest key to read"),
        group: str | None = typer.Option(
            None,
            "--group",
            "-g",
            help="Look the key up inside this group",
        ),
        json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
    ) -> None:
        """Print whether a flag is enabled."""
        reader = get_reader()
        enabled = reader.get_boolean(key, group)

        if is_json_output(json_output):
            output = {"key": key, "group": group, "enabled": enabled}
            typer.echo(orjson.dumps(output).decode())
        else:
            typer.echo("true" if enabled else "false")

    @app.command("flags")
    def flags(
        group: str | None = typer.Option(
            None,
            "--group",
            "-g",
            help="List the flags inside this group",
        ),
        json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
    ) -> None:
        """List string-valued manifest entries and known flags with their status."""
        reader = get_reader()
        scope = reader.store
        if group is not None and isinstance(reader.store.get(group), Mapping):
            scope = reader.store[group]

        named = {flag.value for flag in UIFlag}
        keys = [key for key, value in scope.items() if isinstance(value, str)]
        for flag in UIFlag:
            if flag.value not in keys:
                keys.append(flag.value)

        if is_json_output(json_output):
            output = [
                {
                    "key": key,
                    "value": _string_or_none(scope.get(key)),
                    "enabled": reader.get_boolean(key, group),
                    "named": key in named,
                }
                for key in keys
            ]
            typer.echo(orjson.dumps(output).decode())
            return

        for key in keys:
            value = _string_or_none(scope.get(key))
            shown = "(unset)" if value is None else repr(value)
            status = status_text(reader.get_boolean(key, group))
            typer.echo(f"  {key:<30s} {shown:<20s} {status}")

    @app.command("groups")
    def groups(
        json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
    ) -> None:
        """List the groups (nested tables) in the manifest."""
        reader = get_reader()
        names = [
            name for name, value in reader.store.items() if isinstance(value, Mapping)
        ]

        if is_json_output(json_output):
            typer.echo(orjson.dumps(names).decode())
        elif not names:
            typer.echo("No groups defined")
        else:
            for name in names:
                typer.echo(f"  {name}")
