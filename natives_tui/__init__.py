"""natives-tui: interactive search over the alt:V natives reference."""

__version__ = "0.1.0"
