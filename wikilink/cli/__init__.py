"""CLI - main entry point."""

import sys


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    import click

    from wikilink.cli._create_app import _create_app

    if argv is None:
        argv = sys.argv[1:]

    app = _create_app()
    try:
        rv = app(argv, standalone_mode=False)
    except click.exceptions.ClickException as e:
        e.show()
        return e.exit_code
    return rv if isinstance(rv, int) else 0
