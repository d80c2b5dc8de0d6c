"""Turns matches and loader state into display rows."""

from ..models import MatchResult, ResultRow
from .loader import LoaderStatus

NO_DESCRIPTION = "no description"
STATUS_SUBTITLE = "alt:V natives"


def present(match: MatchResult) -> ResultRow:
    """Build the display row for a match."""
    native = match.native
    subtitle = native.comment if native.comment else NO_DESCRIPTION
    tooltip = f"{subtitle}\n[{native.namespace}]" if native.namespace else subtitle
    return ResultRow(
        title=native.name,
        subtitle=subtitle,
        title_highlights=match.title_highlights,
        subtitle_highlights=match.subtitle_highlights,
        tooltip_title=f"Native {native.name}",
        tooltip_text=tooltip,
        query_text=native.name,
        context=match,
    )


def status_row(status: LoaderStatus) -> ResultRow:
    """Build the single placeholder row shown until the catalog is ready."""
    if status.failed:
        title = f"Failed to initialize (attempt {status.attempt})"
    else:
        title = f"Initializing natives... (attempt {status.attempt})"
    return ResultRow(title=title, subtitle=STATUS_SUBTITLE, query_text=" ")
