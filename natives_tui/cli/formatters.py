"""CLI output formatters."""

from __future__ import annotations

from typing import TYPE_CHECKING, Sequence

import click

if TYPE_CHECKING:
    from ..models import ResultRow
    from ..services import LoaderStatus


def highlight_text(text: str, ranges: Sequence[tuple[int, int]], color: bool = True) -> str:
    """Render text with highlighted ranges in bold.

    Overlapping ranges are merged.

    Args:
        text: Text to render.
        ranges: Half-open (start, end) ranges into text.
        color: Whether to emit ANSI styling.

    Returns:
        The styled string.
    """
    if not color or not ranges:
        return text

    merged: list[list[int]] = []
    for start, end in sorted(ranges):
        if merged and start <= merged[-1][1]:
            merged[-1][1] = max(merged[-1][1], end)
        else:
            merged.append([start, end])

    parts = []
    pos = 0
    for start, end in merged:
        parts.append(text[pos:start])
        parts.append(click.style(text[start:end], fg="yellow", bold=True))
        pos = end
    parts.append(text[pos:])
    return "".join(parts)


def format_result_row(row: ResultRow, color: bool = True) -> str:
    """Format a result row for CLI display.

    Args:
        row: Row to format.
        color: Whether to emit ANSI styling.

    Returns:
        Two-line string: name and key, then the subtitle.
    """
    title = highlight_text(row.title, row.title_highlights, color)
    key = row.key or ""
    subtitle = click.style(row.subtitle, dim=True) if color else row.subtitle
    return f"{title}  {key}\n    {subtitle}"


def format_loader_status(status: LoaderStatus) -> str:
    """Format loader state for the status command."""
    label = status.state.value.capitalize()
    if status.attempt:
        return f"{label} ({status.attempt} failed attempt(s))"
    return label


def echo_success(message: str) -> None:
    """Echo a success message in green."""
    click.echo(click.style(f"✓ {message}", fg="green"))


def echo_error(message: str) -> None:
    """Echo an error message in red."""
    click.echo(click.style(f"✗ {message}", fg="red"), err=True)
