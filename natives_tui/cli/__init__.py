"""Command-line interface for natives-tui."""
