"""Document Typer app factory."""

import typer

from dddocs.api.document.cmd_find import cmd_find
from dddocs.api.document.cmd_list import cmd_list
from dddocs.cli._handle_stage_result import _handle_stage_result


def document() -> typer.Typer:
    """Create and configure the document Typer app."""
    app = typer.Typer(
        name="document",
        help="Look up documents in the metadata tree",
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

    @app.command(name="find")
    def find_cmd(doc_id: str = typer.Argument(..., help="Paper document id")) -> None:
        """Find a document by id."""
        _handle_stage_result(cmd_find)(doc_id)

    @app.command(name="list")
    def list_cmd() -> None:
        """List all documents."""
        _handle_stage_result(cmd_list)()

    return app
