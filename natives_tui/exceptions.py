"""Exception types shared across clients and services."""


class NativesError(Exception):
    """Base class for natives-tui errors."""


class SourceError(NativesError):
    """The catalog snapshot could not be fetched or parsed."""


class CatalogNotReadyError(NativesError):
    """A query was issued before the catalog was built."""
