"""Link Typer app factory."""

import typer

from dddocs.api.link.cmd_check import cmd_check
from dddocs.api.link.cmd_resolve import cmd_resolve
from dddocs.cli._handle_stage_result import _handle_stage_result


def link() -> typer.Typer:
    """Create and configure the link Typer app."""
    app = typer.Typer(
        name="link",
        help="Resolve Paper links to site pages",
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

    @app.command(name="resolve")
    def resolve_cmd(href: str = typer.Argument(..., help="Link target to resolve")) -> None:
        """Resolve a Paper link to its site path."""
        _handle_stage_result(cmd_resolve)(href)

    @app.command(name="check")
    def check_cmd(path: str = typer.Argument(..., help="Markdown file to check")) -> None:
        """Check every Paper link in a markdown file."""
        _handle_stage_result(cmd_check)(path)

    return app
