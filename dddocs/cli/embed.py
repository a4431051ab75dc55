"""Embed Typer app factory."""

import typer

from dddocs.api.embed.cmd_detect import cmd_detect
from dddocs.cli._handle_stage_result import _handle_stage_result


def embed() -> typer.Typer:
    """Create and configure the embed Typer app."""
    app = typer.Typer(
        name="embed",
        help="Detect YouTube embeds",
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

    @app.command(name="detect")
    def detect_cmd(text: str = typer.Argument(..., help="Text to scan for YouTube URLs")) -> None:
        """Detect YouTube video and playlist URLs in text."""
        _handle_stage_result(cmd_detect)(text)

    return app
