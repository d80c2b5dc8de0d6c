"""Multi-term matching over the catalog.

A native is accepted when every query token is satisfied by one of:

- a case-insensitive substring of the name (highlighted), or
- case-insensitive equality with the jhash, or
- case-insensitive equality with any of the per-build hashes.

Known quirks, kept on purpose:

- An empty query accepts every native.
- The result cap is soft. It is checked after each token and only stops
  scanning the current native's remaining tokens. Single-token queries are
  therefore never capped, while queries with two or more tokens stop at
  exactly ``max_results``. Every native is still visited.
- Highlight ranges index into ``name.lower()``, which lines up with the
  displayed name only for ASCII names.
"""

from ..exceptions import CatalogNotReadyError
from ..models import MatchResult
from .catalog import Catalog
from .tokenizer import tokenize

DEFAULT_MAX_RESULTS = 200


def query(
    raw_query: str,
    catalog: Catalog,
    max_results: int = DEFAULT_MAX_RESULTS,
) -> list[MatchResult]:
    """Search the catalog.

    Args:
        raw_query: Query text as typed.
        catalog: Built catalog to search.
        max_results: Soft cap on accepted results.

    Returns:
        Accepted matches in catalog order.

    Raises:
        CatalogNotReadyError: If the catalog was never built.
    """
    if not catalog.is_ready():
        raise CatalogNotReadyError("Catalog has not been built yet")

    tokens = tokenize(raw_query)
    entries = catalog.all()

    if not tokens:
        return [MatchResult(native=native, key=key) for key, native in entries]

    results: list[MatchResult] = []
    for key, native in entries:
        name = native.name.lower()
        jhash = native.jhash.lower()
        highlights: list[tuple[int, int]] = []
        found = 0

        for token in tokens:
            index = name.find(token)
            if index != -1:
                found += 1
                highlights.append((index, index + len(token)))
            elif jhash == token:
                found += 1
            elif any(value.lower() == token for value in native.hashes.values()):
                found += 1

            # found can only reach len(tokens) on the last token
            if found == len(tokens):
                results.append(
                    MatchResult(native=native, key=key, title_highlights=tuple(highlights))
                )
                break

            if len(results) >= max_results:
                break

    return results
