"""HTTP client for the alt:V natives reference.

The reference publishes one JSON document grouping natives by namespace::

    {"ENTITY": {"0x...": {"jhash": ..., "comment": ..., "hashes": {...}, "altName": ...}}}

which is flattened into a single lookup-key -> Native mapping.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Optional

import httpx

from ..exceptions import SourceError
from ..models import Native

if TYPE_CHECKING:
    from ..config import SourceConfig

logger = logging.getLogger(__name__)


def parse_snapshot(document: Any) -> dict[str, Native]:
    """Flatten a decoded natives document into a lookup-key mapping.

    Duplicate keys across namespaces resolve last-write-wins.

    Args:
        document: Decoded JSON (namespace -> key -> raw record).

    Returns:
        Mapping of lookup key to Native, in document order.

    Raises:
        SourceError: If the document or any record has the wrong shape.
    """
    if not isinstance(document, dict):
        raise SourceError("Natives document must be an object of namespaces")

    natives: dict[str, Native] = {}
    for namespace, entries in document.items():
        if not isinstance(entries, dict):
            raise SourceError(f"Namespace {namespace!r} must be an object")
        for key, raw in entries.items():
            if key in natives:
                logger.debug("Duplicate native key %s in %s, replacing", key, namespace)
            natives[key] = Native.from_raw(key, raw, namespace=namespace)
    return natives


class NativesClient:
    """Fetches the natives snapshot over HTTP."""

    def __init__(
        self,
        config: "SourceConfig",
        transport: Optional[httpx.BaseTransport] = None,
    ):
        """Initialize the client.

        Args:
            config: Source URL and timeout settings.
            transport: Optional httpx transport (used by tests).
        """
        self._url = config.url
        self._timeout = config.timeout
        self._transport = transport

    @property
    def url(self) -> str:
        """URL the snapshot is fetched from."""
        return self._url

    def fetch_snapshot(self) -> dict[str, Native]:
        """Download and parse the full natives snapshot.

        Raises:
            SourceError: On a bad URL, HTTP failure, timeout or malformed JSON.
        """
        logger.debug("Fetching natives from %s", self._url)
        try:
            with httpx.Client(timeout=self._timeout, transport=self._transport) as client:
                resp = client.get(self._url)
                resp.raise_for_status()
                document = resp.json()
        except httpx.InvalidURL as e:
            raise SourceError(f"Invalid natives URL {self._url!r}: {e}") from e
        except httpx.HTTPError as e:
            raise SourceError(f"Failed to fetch natives: {e}") from e
        except ValueError as e:
            raise SourceError(f"Natives response is not valid JSON: {e}") from e

        natives = parse_snapshot(document)
        logger.debug("Parsed %d natives from %d namespaces", len(natives), len(document))
        return natives
