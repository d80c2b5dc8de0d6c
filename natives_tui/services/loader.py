"""Catalog initialization with retries.

State machine::

    UNINITIALIZED -> INITIALIZING(attempt) -> READY
                                           -> FAILED

A failed fetch is retried ``max_retries`` times with a fixed delay. After
that the loader stays FAILED for good.
"""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Callable, Optional

from ..exceptions import SourceError

if TYPE_CHECKING:
    from ..clients import CatalogSourceProtocol
    from .catalog import Catalog

logger = logging.getLogger(__name__)


class LoaderState(Enum):
    """Catalog initialization state."""

    UNINITIALIZED = "uninitialized"
    INITIALIZING = "initializing"
    READY = "ready"
    FAILED = "failed"


@dataclass(frozen=True)
class LoaderStatus:
    """Snapshot of the loader state.

    ``attempt`` counts failed fetches so far.
    """

    state: LoaderState = LoaderState.UNINITIALIZED
    attempt: int = 0

    @property
    def ready(self) -> bool:
        return self.state is LoaderState.READY

    @property
    def failed(self) -> bool:
        return self.state is LoaderState.FAILED


class CatalogLoader:
    """Builds a catalog from a source, retrying on SourceError."""

    def __init__(
        self,
        catalog: "Catalog",
        source: "CatalogSourceProtocol",
        max_retries: int = 5,
        retry_delay: float = 2.0,
        sleep: Optional[Callable[[float], None]] = None,
        on_change: Optional[Callable[[LoaderStatus], None]] = None,
    ):
        """Initialize the loader.

        Args:
            catalog: Catalog to build.
            source: Where snapshots come from.
            max_retries: Extra attempts after the first failure.
            retry_delay: Seconds to wait between attempts.
            sleep: Sleep function, replaceable in tests. Defaults to a wait
                that stop() interrupts.
            on_change: Called with the new status after every transition.
        """
        self._catalog = catalog
        self._source = source
        self._max_retries = max_retries
        self._retry_delay = retry_delay
        self._stop_event = threading.Event()
        self._sleep = sleep or self._stop_event.wait
        self._listeners: list[Callable[[LoaderStatus], None]] = []
        if on_change:
            self._listeners.append(on_change)
        self._lock = threading.Lock()
        self._status = LoaderStatus()

    @property
    def status(self) -> LoaderStatus:
        """Current loader status."""
        return self._status

    @property
    def catalog(self) -> "Catalog":
        return self._catalog

    def stop(self) -> None:
        """Ask a running load to give up at the next attempt boundary.

        Interrupts the default retry wait. A fetch already in flight runs
        until it completes or times out.
        """
        self._stop_event.set()

    @property
    def stopped(self) -> bool:
        return self._stop_event.is_set()

    def subscribe(self, callback: Callable[[LoaderStatus], None]) -> None:
        """Register a callback for status changes.

        Callbacks run on the thread that calls run().
        """
        self._listeners.append(callback)

    def _set_status(self, state: LoaderState, attempt: int) -> None:
        self._status = LoaderStatus(state=state, attempt=attempt)
        for callback in list(self._listeners):
            callback(self._status)

    def run(self) -> LoaderStatus:
        """Load the catalog, retrying on failure.

        Blocks until the catalog is ready, every attempt has failed, or
        stop() is called. A stopped load keeps its INITIALIZING status.
        Calling it again after it finished returns the final status.

        Returns:
            The final LoaderStatus.
        """
        with self._lock:
            if self._status.state in (LoaderState.READY, LoaderState.FAILED):
                return self._status

            attempt = self._status.attempt
            self._set_status(LoaderState.INITIALIZING, attempt)

            while not self._stop_event.is_set():
                try:
                    self._catalog.load(self._source)
                except SourceError as e:
                    attempt += 1
                    if attempt > self._max_retries:
                        logger.error("Giving up loading natives after %d attempts: %s", attempt, e)
                        self._set_status(LoaderState.FAILED, attempt)
                        return self._status
                    logger.warning(
                        "Loading natives failed (attempt %d), retrying in %.1fs: %s",
                        attempt,
                        self._retry_delay,
                        e,
                    )
                    self._set_status(LoaderState.INITIALIZING, attempt)
                    self._sleep(self._retry_delay)
                    continue

                logger.info("Loaded %d natives", len(self._catalog))
                self._set_status(LoaderState.READY, attempt)
                return self._status

            logger.info("Loading natives stopped after %d failed attempt(s)", attempt)
            return self._status
