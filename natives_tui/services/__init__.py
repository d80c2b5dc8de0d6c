"""Search services for natives-tui."""

from .catalog import Catalog
from .loader import CatalogLoader, LoaderState, LoaderStatus
from .query_engine import DEFAULT_MAX_RESULTS, query
from .search import NativeSearchService
from .tokenizer import tokenize

__all__ = [
    "Catalog",
    "CatalogLoader",
    "DEFAULT_MAX_RESULTS",
    "LoaderState",
    "LoaderStatus",
    "NativeSearchService",
    "query",
    "tokenize",
]
