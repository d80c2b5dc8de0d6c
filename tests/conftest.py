"""Shared pytest fixtures for natives-tui tests."""

import pytest

from natives_tui.clients import MockNativesClient
from natives_tui.config import Config
from natives_tui.models import Native
from natives_tui.services import Catalog, CatalogLoader, NativeSearchService


def make_native(key, name, jhash="", comment=None, hashes=None, namespace=None):
    """Build a Native with defaults for the fields a test does not care about."""
    return Native(
        key=key,
        name=name,
        jhash=jhash,
        comment=comment,
        hashes=hashes or {},
        namespace=namespace,
    )


@pytest.fixture
def native_factory():
    """Factory for Natives with test defaults."""
    return make_native


@pytest.fixture
def sample_natives():
    """A handful of natives covering names, jhashes and build hashes."""
    natives = [
        make_native(
            "0xEA1C610A04DB6BBB",
            "setEntityVisible",
            jhash="0xD3A183A3",
            comment="Sets the visibility of an entity.",
            hashes={"1604": "0x1794B4FCC84D812F"},
            namespace="ENTITY",
        ),
        make_native(
            "0x47D6F43D77935C75",
            "isEntityVisible",
            jhash="0x72C0C4A8",
            comment="",
            namespace="ENTITY",
        ),
        make_native(
            "0x3FEF770D40960D5A",
            "getEntityCoords",
            jhash="0x742A7CB0",
            hashes={"1604": "0xA6BA9D7EB8A4F10E"},
            namespace="ENTITY",
        ),
        make_native(
            "0xAF35D0D2583051B0",
            "createVehicle",
            jhash="0xABC123",
            comment="Creates a vehicle.",
            hashes={"1604": "0x7F1A7A1A3D4B6C21", "2189": "0xBEEF"},
            namespace="VEHICLE",
        ),
    ]
    return {native.key: native for native in natives}


@pytest.fixture
def catalog(sample_natives):
    """A catalog built from sample_natives."""
    cat = Catalog()
    cat.build(sample_natives)
    return cat


@pytest.fixture
def no_sleep():
    """Sleep replacement that records requested delays."""
    delays = []
    return delays.append, delays


@pytest.fixture
def mock_client():
    """Mock source with the built-in sample document."""
    return MockNativesClient()


@pytest.fixture
def sample_config():
    """Default configuration."""
    return Config()


@pytest.fixture
def search_service(mock_client, no_sleep):
    """Search service backed by the mock source, not loaded yet."""
    sleep, _ = no_sleep
    cat = Catalog()
    loader = CatalogLoader(cat, mock_client, sleep=sleep)
    return NativeSearchService(cat, loader)


@pytest.fixture
def loaded_search_service(search_service):
    """Search service with the mock catalog loaded."""
    search_service.loader.run()
    return search_service
