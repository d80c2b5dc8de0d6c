"""Actions available on a selected native."""

import webbrowser
from typing import Literal

from ..models import MatchResult

DEFAULT_DOCS_URL = "https://natives.altv.mp"

CopyKind = Literal["link", "name", "capitalized"]


def detail_url(key: str, base_url: str = DEFAULT_DOCS_URL) -> str:
    """Build the reference page URL for a native."""
    return f"{base_url.rstrip('/')}/#/{key}"


def capitalize_name(name: str) -> str:
    """Upper-case the first character, leaving the rest unchanged.

    Turns ``setEntityVisible`` into ``SetEntityVisible``.
    """
    return name[:1].upper() + name[1:]


def clipboard_payload(
    match: MatchResult,
    kind: CopyKind,
    base_url: str = DEFAULT_DOCS_URL,
) -> str:
    """Text to put on the clipboard for a copy action.

    Args:
        match: The selected match.
        kind: "link", "name" or "capitalized".
        base_url: Reference site used for links.

    Raises:
        ValueError: For an unknown kind.
    """
    if kind == "link":
        return detail_url(match.key, base_url)
    if kind == "name":
        return match.native.name
    if kind == "capitalized":
        return capitalize_name(match.native.name)
    raise ValueError(f"Unknown copy kind: {kind}")


def open_detail(key: str, base_url: str = DEFAULT_DOCS_URL) -> str:
    """Open the native's reference page in the default browser.

    Returns:
        The URL that was opened.
    """
    url = detail_url(key, base_url)
    webbrowser.open(url)
    return url
