"""Tests for catalog initialization and retries."""

import threading

from natives_tui.clients import MockNativesClient, NativesClient
from natives_tui.config import SourceConfig
from natives_tui.services import Catalog, CatalogLoader, LoaderState, LoaderStatus


class TestLoaderStatus:
    """Tests for the LoaderStatus value object."""

    def test_defaults(self):
        """Test a new status is uninitialized with no attempts."""
        status = LoaderStatus()
        assert status.state is LoaderState.UNINITIALIZED
        assert status.attempt == 0
        assert status.ready is False
        assert status.failed is False

    def test_flags(self):
        """Test ready and failed helpers."""
        assert LoaderStatus(LoaderState.READY).ready is True
        assert LoaderStatus(LoaderState.FAILED, 6).failed is True


class TestCatalogLoader:
    """Tests for CatalogLoader.run()."""

    def test_success_first_try(self, no_sleep):
        """Test a healthy source loads on the first attempt without sleeping."""
        sleep, delays = no_sleep
        cat = Catalog()
        loader = CatalogLoader(cat, MockNativesClient(), sleep=sleep)

        status = loader.run()

        assert status == LoaderStatus(LoaderState.READY, 0)
        assert cat.is_ready()
        assert delays == []

    def test_recovers_after_failures(self, no_sleep):
        """Test two failures then success ends READY with attempt 2."""
        sleep, delays = no_sleep
        source = MockNativesClient(fail_times=2)
        loader = CatalogLoader(Catalog(), source, sleep=sleep)

        status = loader.run()

        assert status.ready
        assert status.attempt == 2
        assert source.fetch_count == 3
        assert delays == [2.0, 2.0]

    def test_gives_up_after_max_retries(self, no_sleep):
        """Test a dead source is tried six times and then FAILED for good."""
        sleep, delays = no_sleep
        source = MockNativesClient(fail_times=-1)
        cat = Catalog()
        loader = CatalogLoader(cat, source, sleep=sleep)

        status = loader.run()

        assert status == LoaderStatus(LoaderState.FAILED, 6)
        assert source.fetch_count == 6
        assert delays == [2.0] * 5
        assert cat.is_ready() is False

    def test_invalid_url_ends_failed(self, no_sleep):
        """Test a malformed source URL is retried and then FAILED."""
        sleep, delays = no_sleep
        source = NativesClient(SourceConfig(url="http://[::1"))
        loader = CatalogLoader(Catalog(), source, sleep=sleep)

        assert loader.run() == LoaderStatus(LoaderState.FAILED, 6)
        assert delays == [2.0] * 5

    def test_failed_is_permanent(self, no_sleep):
        """Test running again after giving up does not fetch again."""
        sleep, _ = no_sleep
        source = MockNativesClient(fail_times=-1)
        loader = CatalogLoader(Catalog(), source, sleep=sleep)
        loader.run()

        assert loader.run().failed
        assert source.fetch_count == 6

    def test_ready_is_final(self, no_sleep):
        """Test running again after success does not refetch."""
        sleep, _ = no_sleep
        source = MockNativesClient()
        loader = CatalogLoader(Catalog(), source, sleep=sleep)
        loader.run()
        loader.run()
        assert source.fetch_count == 1

    def test_custom_retry_policy(self, no_sleep):
        """Test max_retries and retry_delay are honored."""
        sleep, delays = no_sleep
        source = MockNativesClient(fail_times=-1)
        loader = CatalogLoader(Catalog(), source, max_retries=1, retry_delay=0.5, sleep=sleep)

        assert loader.run() == LoaderStatus(LoaderState.FAILED, 2)
        assert delays == [0.5]

    def test_notifies_every_transition(self, no_sleep):
        """Test listeners see INITIALIZING with rising attempts, then READY."""
        sleep, _ = no_sleep
        seen = []
        loader = CatalogLoader(
            Catalog(), MockNativesClient(fail_times=1), sleep=sleep, on_change=seen.append
        )
        extra = []
        loader.subscribe(extra.append)

        loader.run()

        assert seen == [
            LoaderStatus(LoaderState.INITIALIZING, 0),
            LoaderStatus(LoaderState.INITIALIZING, 1),
            LoaderStatus(LoaderState.READY, 1),
        ]
        assert extra == seen

    def test_stop_during_retry_wait(self):
        """Test stop() during the retry wait ends the run without fetching again."""
        source = MockNativesClient(fail_times=-1)
        loader = CatalogLoader(Catalog(), source, sleep=lambda delay: loader.stop())

        status = loader.run()

        assert status == LoaderStatus(LoaderState.INITIALIZING, 1)
        assert loader.stopped
        assert source.fetch_count == 1

    def test_stop_before_run(self, no_sleep):
        """Test a loader stopped up front never fetches."""
        sleep, _ = no_sleep
        source = MockNativesClient()
        loader = CatalogLoader(Catalog(), source, sleep=sleep)
        loader.stop()

        assert loader.run() == LoaderStatus(LoaderState.INITIALIZING, 0)
        assert source.fetch_count == 0

    def test_stop_interrupts_default_wait(self):
        """Test stop() from another thread cuts the built-in retry wait short."""
        source = MockNativesClient(fail_times=-1)
        loader = CatalogLoader(Catalog(), source, retry_delay=60.0)
        waiting = threading.Event()
        loader.subscribe(lambda status: status.attempt and waiting.set())

        worker = threading.Thread(target=loader.run)
        worker.start()
        assert waiting.wait(5)
        loader.stop()
        worker.join(5)

        assert not worker.is_alive()
        assert source.fetch_count == 1
