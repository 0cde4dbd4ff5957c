"""Create the main Typer CLI app."""

import typer

from loclink.api.config.LoclinkConfig import LoclinkConfig
from loclink.cli.config import config
from loclink.cli.link import link
from loclink.cli.location import location
from loclink.cli.root import root
from loclink.utils.configure_logging import configure_logging


def _configure_logging() -> None:
    try:
        level = LoclinkConfig.load().log.level
    except ValueError:
        # Commands report the configuration error themselves
        level = "INFO"
    configure_logging(LoclinkConfig.get_home_dir(), level)


def _create_app() -> typer.Typer:
    """Create and configure the main CLI Typer app."""
    app = typer.Typer(
        pretty_exceptions_show_locals=False,
        pretty_exceptions_enable=False,
        help="loclink - resolvable source-location links for plain-text notes",
        context_settings={"help_option_names": ["-h", "--help"]},
        invoke_without_command=True,
    )

    app.add_typer(location(), name="location")
    app.add_typer(link(), name="link")
    app.add_typer(root(), name="root")
    app.add_typer(config(), name="config")

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
        _configure_logging()

        if ctx.invoked_subcommand is None:
            typer.echo(ctx.get_help())
            raise typer.Exit()

    return app
