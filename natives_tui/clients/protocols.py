"""Protocol definitions for catalog sources.

Real and mock sources both implement this interface so the loader and
catalog can take either.
"""

from typing import Protocol

from ..models import Native


class CatalogSourceProtocol(Protocol):
    """Protocol defining the catalog source interface."""

    def fetch_snapshot(self) -> dict[str, Native]:
        """Fetch the full catalog keyed by lookup key.

        Raises:
            SourceError: If the snapshot cannot be fetched or parsed.
        """
        ...
