"""Textual user interface for natives-tui."""
