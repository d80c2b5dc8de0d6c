"""In-memory natives catalog.

The catalog holds one immutable snapshot. Rebuilding swaps the whole
snapshot reference under a lock, so a reader that grabbed the old snapshot
keeps seeing it in full and never a half-replaced mapping.
"""

from __future__ import annotations

import logging
import threading
from types import MappingProxyType
from typing import TYPE_CHECKING, Iterable, Mapping, Optional

from ..exceptions import SourceError
from ..models import Native

if TYPE_CHECKING:
    from ..clients import CatalogSourceProtocol

logger = logging.getLogger(__name__)

_EMPTY: Mapping[str, Native] = MappingProxyType({})


class Catalog:
    """Lookup-key -> Native mapping, read-only between rebuilds."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._snapshot: Mapping[str, Native] = _EMPTY
        self._ready = False

    def build(self, snapshot: Mapping[str, Native]) -> None:
        """Replace the catalog contents with a full snapshot.

        Args:
            snapshot: Every native keyed by its lookup key.

        Raises:
            SourceError: If an entry is not a Native or is filed under a key
                other than its own. The current snapshot is left untouched.
        """
        frozen: dict[str, Native] = {}
        for key, native in snapshot.items():
            if not isinstance(native, Native):
                raise SourceError(f"Catalog entry {key!r} is not a Native")
            if native.key != key:
                raise SourceError(f"Catalog entry {key!r} carries key {native.key!r}")
            frozen[key] = native

        with self._lock:
            self._snapshot = MappingProxyType(frozen)
            self._ready = True
        logger.debug("Catalog built with %d natives", len(frozen))

    def load(self, source: "CatalogSourceProtocol") -> None:
        """Fetch a snapshot from a source and build from it."""
        self.build(source.fetch_snapshot())

    def is_ready(self) -> bool:
        """Check if at least one build has succeeded."""
        return self._ready

    def snapshot(self) -> Mapping[str, Native]:
        """Return the current immutable snapshot."""
        with self._lock:
            return self._snapshot

    def all(self) -> Iterable[tuple[str, Native]]:
        """All (key, native) pairs of the current snapshot.

        The returned view is lazy and can be iterated again; it keeps
        referring to the same snapshot even after a later build.
        """
        return self.snapshot().items()

    def get(self, key: str) -> Optional[Native]:
        """Look up a native by key."""
        return self.snapshot().get(key)

    def __len__(self) -> int:
        return len(self.snapshot())
