"""Display row handed to the UI layers."""

from dataclasses import dataclass
from typing import Optional

from .native import MatchResult


@dataclass(frozen=True)
class ResultRow:
    """A single rendered search result.

    ``context`` carries the match for later action dispatch. It is None for
    the synthetic status row shown while the catalog is loading.
    """

    title: str
    subtitle: str
    title_highlights: tuple[tuple[int, int], ...] = ()
    subtitle_highlights: tuple[tuple[int, int], ...] = ()
    tooltip_title: str = ""
    tooltip_text: str = ""
    query_text: str = ""
    context: Optional[MatchResult] = None

    @property
    def is_status(self) -> bool:
        """Check if this is the synthetic status row."""
        return self.context is None

    @property
    def key(self) -> Optional[str]:
        """Lookup key of the underlying native, if any."""
        return self.context.key if self.context else None
