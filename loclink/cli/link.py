"""Link Typer app factory."""

import typer

from loclink.api.activation.cmd_check import cmd_check
from loclink.api.link.cmd_list import cmd_list
from loclink.api.navigate.cmd_follow import cmd_follow
from loclink.cli._handle_stage_result import _handle_stage_result


def link() -> typer.Typer:
    """Create and configure the link Typer app."""
    app = typer.Typer(
        name="link",
        help="Inspect and follow links in notes",
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

    @app.command(name="list")
    def list_cmd(
        path: str = typer.Argument(..., help="Note to scan"),
    ) -> None:
        """List the links in a note."""
        _handle_stage_result(cmd_list)(path=path)

    @app.command(name="check")
    def check_cmd(
        path: str = typer.Argument(..., help="Note to check"),
    ) -> None:
        """Check whether link decoration would be enabled for a note."""
        _handle_stage_result(cmd_check)(path=path)

    @app.command(name="follow")
    def follow_cmd(
        path: str = typer.Argument(..., help="Note containing the link"),
        line: int = typer.Argument(..., min=1, help="Line of the link (1-based)"),
        column: int = typer.Argument(..., min=1, help="Column inside the link (1-based)"),
    ) -> None:
        """Resolve the link at a position and print its target."""
        _handle_stage_result(cmd_follow)(path=path, line=line, column=column)

    return app
