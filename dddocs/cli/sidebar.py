"""Sidebar Typer app factory."""

import typer

from dddocs.api.sidebar.cmd_show import cmd_show
from dddocs.cli._handle_stage_result import _handle_stage_result


def sidebar() -> typer.Typer:
    """Create and configure the sidebar Typer app."""
    app = typer.Typer(
        name="sidebar",
        help="Inspect the generated sidebar",
        pretty_exceptions_show_locals=False,
        pretty_exceptions_enable=False,
        context_settings={"help_option_names": ["-h", "--help"]},
        invoke_without_command=True,
    )

    @app.callback(invoke_without_command=True)
    def callback(ctx: typer.Context) -> None:
        if ctx.invoked_subcommand is None:
            typer.echo(ctx.get_help(), err=True)
            raise typer.Exit()

    @app.command(name="show")
    def show_cmd() -> None:
        """Show the sidebar generated from the metadata tree."""
        _handle_stage_result(cmd_show)()

    return app
