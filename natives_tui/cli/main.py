"""Command-line entry point for natives-tui."""

import logging
import sys
from pathlib import Path
from typing import Optional

import click

from .. import __version__
from ..config import load_config
from .formatters import echo_error, echo_success, format_loader_status, format_result_row
from .helpers import get_search_service, get_source, require_catalog


@click.group(invoke_without_command=True)
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Path to config.toml.",
)
@click.option("--mock", is_flag=True, help="Use built-in sample natives instead of the API.")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging.")
@click.version_option(__version__, prog_name="natives-tui")
@click.pass_context
def main(ctx: click.Context, config_path: Optional[Path], mock: bool, verbose: bool) -> None:
    """natives-tui - search the alt:V natives reference.

    Run without a command to open the interactive search.
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        config = load_config(config_path)
    except ValueError as e:
        raise click.UsageError(str(e)) from e

    ctx.ensure_object(dict)
    ctx.obj["config"] = config
    ctx.obj["mock"] = mock

    if ctx.invoked_subcommand is None:
        ctx.invoke(tui)


@main.command()
@click.pass_context
def tui(ctx: click.Context) -> None:
    """Open the interactive search."""
    from ..tui.app import NativesApp

    service = get_search_service(ctx)
    app = NativesApp(service=service, is_mock=ctx.obj.get("mock", False))
    app.run()


@main.command()
@click.argument("terms", nargs=-1)
@click.option(
    "--limit", type=click.IntRange(min=0), default=None, help="Print at most N results."
)
@click.option("--no-color", is_flag=True, help="Disable highlighting.")
@click.pass_context
def search(ctx: click.Context, terms: tuple[str, ...], limit: Optional[int], no_color: bool) -> None:
    """Search natives by name, jhash or build hash."""
    service = get_search_service(ctx)
    if not require_catalog(service):
        sys.exit(1)

    rows = service.search(" ".join(terms))
    total = len(rows)
    if limit is not None:
        rows = rows[:limit]

    for row in rows:
        click.echo(format_result_row(row, color=not no_color))

    shown = f"{len(rows)} of {total}" if len(rows) != total else str(total)
    click.echo(f"\n{shown} match(es)")


@main.command()
@click.argument("key")
@click.pass_context
def link(ctx: click.Context, key: str) -> None:
    """Print the reference page URL for a native key."""
    from ..services.actions import detail_url

    service = get_search_service(ctx)
    if not require_catalog(service):
        sys.exit(1)

    if service.catalog.get(key) is None:
        echo_error(f"Unknown native: {key}")
        sys.exit(1)

    click.echo(detail_url(key, ctx.obj["config"].source.docs_url))


@main.command()
@click.pass_context
def status(ctx: click.Context) -> None:
    """Load the catalog and report its state."""
    service = get_search_service(ctx)
    source = get_source(ctx)

    click.echo(f"Source:  {getattr(source, 'url', '?')}")
    loader_status = service.loader.run()
    click.echo(f"State:   {format_loader_status(loader_status)}")
    if not loader_status.ready:
        sys.exit(1)
    echo_success(f"{len(service.catalog)} natives loaded")


if __name__ == "__main__":
    main()
