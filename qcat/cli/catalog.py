"""Catalog Typer app factory."""

import typer

from qcat.api.catalog.cmd_list import cmd_list
from qcat.api.catalog.cmd_run import cmd_run
from qcat.api.catalog.FaultPolicy import FaultPolicy
from qcat.cli._handle_stage_result import _handle_stage_result


def catalog() -> typer.Typer:
    """Create and configure the catalog Typer app."""
    app = typer.Typer(
        name="catalog",
        help="Run and inspect operation catalogs",
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

    @app.command(name="run")
    def run_cmd(
        catalog_path: str | None = typer.Option(
            None, "--catalog", "-c", help="Catalog file (.json, .yaml). Defaults to the built-in bookstore catalog."
        ),
        policy: FaultPolicy = typer.Option(
            FaultPolicy.CONTINUE, "--policy", "-p", help="Keep going after a failed operation, or abort the run."
        ),
    ) -> None:
        """Run every operation in the catalog against the configured collection."""
        _handle_stage_result(cmd_run)(catalog_path, policy.value)

    @app.command(name="list")
    def list_cmd(
        catalog_path: str | None = typer.Option(None, "--catalog", "-c", help="Catalog file (.json, .yaml)."),
    ) -> None:
        """List the operations in a catalog without connecting."""
        _handle_stage_result(cmd_list)(catalog_path)

    return app
