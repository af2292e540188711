"""Create the main Typer CLI app."""

import typer

from wikilink.api.resolver.cmd_list import cmd_list
from wikilink.api.resolver.cmd_resolve import cmd_resolve
from wikilink.cli._handle_stage_result import handle_stage_result
from wikilink.utils.configure_logging import configure_logging


def _create_app() -> typer.Typer:
    """Create and configure the main CLI Typer app."""
    app = typer.Typer(
        pretty_exceptions_show_locals=False,
        pretty_exceptions_enable=False,
        help="Wikilink resolver CLI",
        context_settings={"help_option_names": ["-h", "--help"]},
        invoke_without_command=True,
    )

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

        configure_logging()

    @app.command(name="resolve")
    def resolve_cmd(
        target: str = typer.Argument(..., help="Wikilink target, e.g. 'foo/Bar'"),
        fragment: str = typer.Option("", "--fragment", "-f", help="In-page anchor without '#'"),
        resolver_type: str | None = typer.Option(
            None, "--type", "-t", help="Resolver: default, pretty, relative or rooted (default: config file)"
        ),
        base: str | None = typer.Option(None, "--base", "-b", help="Base path for the rooted resolver"),
        escape: bool = typer.Option(False, "--escape", help="URL-escape the destination"),
    ) -> None:
        """Resolve a wikilink to its destination."""
        handle_stage_result(cmd_resolve)(target, fragment, resolver_type=resolver_type, base=base, escape=escape)

    @app.command(name="list")
    def list_cmd() -> None:
        """List available resolver types."""
        handle_stage_result(cmd_list)()

    return app
