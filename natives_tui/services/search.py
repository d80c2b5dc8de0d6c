"""Search facade shared by the TUI and the CLI."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Optional

from ..models import ResultRow
from . import actions
from .presenter import present, status_row
from .query_engine import DEFAULT_MAX_RESULTS, query

if TYPE_CHECKING:
    from .catalog import Catalog
    from .loader import CatalogLoader, LoaderStatus

logger = logging.getLogger(__name__)


class NativeSearchService:
    """Runs queries and dispatches row actions.

    While the catalog is not ready every search returns exactly one status
    row instead of raising.
    """

    def __init__(
        self,
        catalog: Catalog,
        loader: CatalogLoader,
        base_url: str = actions.DEFAULT_DOCS_URL,
        max_results: int = DEFAULT_MAX_RESULTS,
    ):
        self._catalog = catalog
        self._loader = loader
        self._base_url = base_url
        self._max_results = max_results

    @property
    def catalog(self) -> Catalog:
        return self._catalog

    @property
    def loader(self) -> CatalogLoader:
        return self._loader

    @property
    def status(self) -> LoaderStatus:
        return self._loader.status

    @property
    def is_ready(self) -> bool:
        return self._catalog.is_ready()

    def search(self, raw_query: str) -> list[ResultRow]:
        """Search for natives matching a raw query.

        Args:
            raw_query: Query text as typed.

        Returns:
            Result rows, or a single status row if not ready.
        """
        if not self._catalog.is_ready():
            return [status_row(self._loader.status)]
        matches = query(raw_query, self._catalog, self._max_results)
        logger.debug("Query %r matched %d natives", raw_query, len(matches))
        return [present(match) for match in matches]

    def detail_url(self, row: ResultRow) -> Optional[str]:
        """Reference page URL for a row, None for the status row."""
        if row.context is None:
            return None
        return actions.detail_url(row.context.key, self._base_url)

    def clipboard_payload(self, row: ResultRow, kind: actions.CopyKind) -> Optional[str]:
        """Clipboard text for a row, None for the status row."""
        if row.context is None:
            return None
        return actions.clipboard_payload(row.context, kind, self._base_url)

    def open(self, row: ResultRow) -> Optional[str]:
        """Open a row's reference page. Returns the URL, or None."""
        if row.context is None:
            return None
        return actions.open_detail(row.context.key, self._base_url)
