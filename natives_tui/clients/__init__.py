"""Catalog sources for natives-tui."""

from .mock_natives_client import MockNativesClient
from .natives_client import NativesClient, parse_snapshot
from .protocols import CatalogSourceProtocol

__all__ = [
    "CatalogSourceProtocol",
    "MockNativesClient",
    "NativesClient",
    "parse_snapshot",
]
