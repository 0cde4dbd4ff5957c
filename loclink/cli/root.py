"""Root Typer app factory."""

import typer

from loclink.api.root.cmd_install import cmd_install
from loclink.api.root.cmd_show import cmd_show
from loclink.cli._handle_stage_result import _handle_stage_result


def root() -> typer.Typer:
    """Create and configure the root Typer app."""
    app = typer.Typer(
        name="root",
        help="Manage metalinks (project root declarations)",
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
    def show_cmd(
        path: str = typer.Argument(..., help="Note to inspect"),
    ) -> None:
        """Show the root declared by a note's metalink."""
        _handle_stage_result(cmd_show)(path=path)

    @app.command(name="install")
    def install_cmd(
        path: str = typer.Argument(..., help="Note to install the metalink into"),
        root_path: str = typer.Argument(..., metavar="ROOT", help="Project root directory"),
    ) -> None:
        """Append a metalink to a note that has none."""
        _handle_stage_result(cmd_install)(path=path, root=root_path)

    return app
