"""TUI screens for natives-tui."""

from .help import HelpScreen

__all__ = ["HelpScreen"]
