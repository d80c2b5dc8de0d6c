"""Help screen listing the search screen's key bindings."""

from typing import Iterable

from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import VerticalScroll
from textual.screen import Screen
from textual.widgets import Footer, Static

SEARCH_HELP = """\
[b]Searching:[/b]
  Space or _ separates terms. Every term must match a name substring,
  the jhash, or one of the build hashes exactly. Matched parts of a
  name are shown in [bold yellow]bold yellow[/bold yellow]; hash matches are not highlighted.
"""


def key_label(key: str) -> str:
    """Format a Textual key name for display, e.g. ctrl+l -> Ctrl+L."""
    return "+".join(part.capitalize() for part in key.split("+"))


def format_bindings(bindings: Iterable[Binding]) -> str:
    """Render one line per binding: key column, then description."""
    lines = ["[b]Keys:[/b]"]
    for binding in bindings:
        lines.append(f"  {key_label(binding.key):<10}{binding.description}")
    return "\n".join(lines)


class HelpScreen(Screen):
    """Shows how searching works and the keys of the screen below it."""

    CSS = """
    #help-box {
        padding: 1 2;
        border: solid $primary;
    }
    """

    BINDINGS = [
        Binding("f1", "close", "Close", show=False),
        Binding("escape", "close", "Close"),
    ]

    def __init__(self, bindings: Iterable[Binding]) -> None:
        """Initialize with the bindings to describe.

        Args:
            bindings: Key bindings of the search screen.
        """
        super().__init__()
        self._help_bindings = list(bindings)

    def compose(self) -> ComposeResult:
        yield VerticalScroll(
            Static(SEARCH_HELP),
            Static(format_bindings(self._help_bindings), id="help-keys"),
            id="help-box",
        )
        yield Footer()

    def action_close(self) -> None:
        self.app.pop_screen()
