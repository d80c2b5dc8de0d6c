"""Shared CLI helpers for context management and service creation."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from click import Context

    from ..clients import CatalogSourceProtocol
    from ..config import Config
    from ..services import NativeSearchService


def get_source(ctx: Context) -> CatalogSourceProtocol:
    """Lazily create the catalog source.

    Args:
        ctx: Click context with config and mock flags.

    Returns:
        MockNativesClient in mock mode, otherwise NativesClient.
    """
    from ..clients import MockNativesClient, NativesClient

    if "source" not in ctx.obj:
        cfg: Config = ctx.obj["config"]
        if ctx.obj.get("mock", False):
            ctx.obj["source"] = MockNativesClient()
        else:
            ctx.obj["source"] = NativesClient(cfg.source)

    return ctx.obj["source"]


def get_search_service(ctx: Context) -> NativeSearchService:
    """Lazily create the search service with an unloaded catalog.

    Args:
        ctx: Click context with config and mock flags.

    Returns:
        NativeSearchService instance.
    """
    from ..services import Catalog, CatalogLoader, NativeSearchService

    if "search_service" not in ctx.obj:
        cfg: Config = ctx.obj["config"]
        catalog = Catalog()
        loader = CatalogLoader(
            catalog,
            get_source(ctx),
            max_retries=cfg.loader.max_retries,
            retry_delay=cfg.loader.retry_delay,
        )
        ctx.obj["search_service"] = NativeSearchService(
            catalog,
            loader,
            base_url=cfg.source.docs_url,
            max_results=cfg.search.max_results,
        )

    return ctx.obj["search_service"]


def require_catalog(service: NativeSearchService) -> bool:
    """Load the catalog, blocking through retries.

    Args:
        service: Search service whose loader to run.

    Returns:
        True if the catalog is ready, False otherwise (also prints message).
    """
    import click

    from ..services.presenter import status_row

    status = service.loader.run()
    if not status.ready:
        click.echo(click.style(status_row(status).title, fg="red"), err=True)
        return False
    return True
