"""Create the main Typer CLI app."""

import typer

from dddocs.cli.config import config
from dddocs.cli.document import document
from dddocs.cli.embed import embed
from dddocs.cli.link import link
from dddocs.cli.page import page
from dddocs.cli.sidebar import sidebar
from dddocs.cli.site import site


def _create_app() -> typer.Typer:
    """Create and configure the main CLI Typer app."""
    app = typer.Typer(
        pretty_exceptions_show_locals=False,
        pretty_exceptions_enable=False,
        help="Digital Design Dictionary docs CLI",
        context_settings={"help_option_names": ["-h", "--help"]},
        invoke_without_command=True,
    )

    app.add_typer(config(), name="config")
    app.add_typer(document(), name="document")
    app.add_typer(link(), name="link")
    app.add_typer(embed(), name="embed")
    app.add_typer(page(), name="page")
    app.add_typer(sidebar(), name="sidebar")
    app.add_typer(site(), name="site")

    @app.callback(invoke_without_command=True)
    def main_callback(
        ctx: typer.Context,
        display: str = typer.Option("yaml", "--display", "-d", help="Output format: json or yaml"),
    ) -> None:
        if display not in ("json", "yaml"):
            typer.echo(f"Error: --display must be 'json' or 'yaml', got '{display}'", err=True)
            raise typer.Exit(1)

        ctx.ensure_object(dict)
        ctx.obj["display_format"] = display

        if ctx.invoked_subcommand is None:
            typer.echo(ctx.get_help())
            raise typer.Exit()

    return app
