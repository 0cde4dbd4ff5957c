"""Location Typer app factory."""

import typer

from loclink.api.location.cmd_capture import cmd_capture
from loclink.api.location.cmd_paste import cmd_paste
from loclink.api.location.cmd_show import cmd_show
from loclink.cli._handle_stage_result import _handle_stage_result


def _confirm_metalink(root: str) -> bool:
    return typer.confirm(f"Note has no metalink. Install one for root {root}?", default=True, err=True)


def location() -> typer.Typer:
    """Create and configure the location Typer app."""
    app = typer.Typer(
        name="location",
        help="Capture and paste source locations",
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

    @app.command(name="capture")
    def capture_cmd(
        path: str = typer.Argument(..., help="File being read"),
        line: int = typer.Argument(..., min=1, help="Line number (1-based)"),
    ) -> None:
        """Capture a file and line into the clipboard."""
        _handle_stage_result(cmd_capture)(path=path, line=line)

    @app.command(name="paste")
    def paste_cmd(
        path: str = typer.Argument(..., help="Note to paste the link into"),
        offset: int | None = typer.Option(None, min=0, help="Character offset to insert at (default: end of note)"),
        metalink: bool | None = typer.Option(
            None, "--metalink/--no-metalink", help="Install a metalink if the note has none (default: config policy)"
        ),
    ) -> None:
        """Paste the captured location into a note as a link."""
        _handle_stage_result(cmd_paste)(path=path, offset=offset, metalink=metalink, confirm=_confirm_metalink)

    @app.command(name="show")
    def show_cmd() -> None:
        """Show the location held in the clipboard."""
        _handle_stage_result(cmd_show)()

    return app
