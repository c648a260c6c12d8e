"""uiconfig CLI commands for inspecting manifest flags."""

from __future__ import annotations

from pathlib import Path

import typer

app = typer.Typer(
    help="uicfg - inspect the boolean UI flags in the application manifest",
    no_args_is_help=True,
)


@app.callback(invoke_without_command=True)
def _global_options(
    ctx: typer.Context,
    json_output: bool = typer.Option(
        False,
        "--json",
        help="Output as JSON for all commands",
    ),
    manifest: Path | None = typer.Option(
        None,
        "--manifest",
        help="Manifest file to read instead of the bundled one",
    ),
) -> None:
    from ._helpers import set_global_options

    set_global_options(json_output=json_output, manifest=manifest)
    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit(0)


from . import _cmd_flags  # noqa: E402

_cmd_flags.register(app)


def main() -> None:
    """Run the uiconfig CLI application."""
    app()
