"""Query tokenization."""

import re

_SEPARATORS = re.compile(r"[ _]+")


def tokenize(raw_query: str) -> list[str]:
    """Split a raw query into lower-cased search terms.

    Splits on runs of spaces and underscores, so ``set_entity`` and
    ``set entity`` search the same terms.

    Args:
        raw_query: Text as typed by the user.

    Returns:
        Non-empty lower-case tokens in input order.
    """
    pieces = (piece.strip().lower() for piece in _SEPARATORS.split(raw_query))
    return [piece for piece in pieces if piece]
