"""Database Typer app factory."""

import typer

from qcat.api.database.cmd_reset import cmd_reset
from qcat.api.database.cmd_seed import cmd_seed
from qcat.cli._handle_stage_result import _handle_stage_result


def database() -> typer.Typer:
    """Create and configure the database Typer app."""
    app = typer.Typer(
        name="database",
        help="Prepare the configured collection",
        pretty_exceptions_show_locals=False,
        pretty_exceptions_enable=False,
        context_settings={"help_option_names": ["-h", "--help"]},
        invoke_without_command=True,
    )

    @app.callback(invoke_without_command=True)
    def callback(ctx: typer.Context) -> None:
        """Show help when no subcommand is provided."""
        if ctx.invoked_subcommand is None:
            typer.echo(ctx.get_help(), err=False)
            raise typer.Exit()

    @app.command(name="seed")
    def seed_cmd(
        replace: bool = typer.Option(False, "--replace", help="Delete existing documents before inserting."),
    ) -> None:
        """Insert the sample bookstore documents."""
        _handle_stage_result(cmd_seed)(replace)

    @app.command(name="reset")
    def reset_cmd() -> None:
        """Delete every document in the collection."""
        _handle_stage_result(cmd_reset)()

    return app
