"""Main TUI application for natives-tui.

Built with Textual: type to search, results update on every keystroke.
"""

from typing import Optional

from rich.text import Text
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.widgets import Footer, Input, ListItem, ListView, Static

from .. import __version__
from ..models import ResultRow
from ..services import LoaderStatus, NativeSearchService
from .screens import HelpScreen

# Rows rendered per keystroke; matches beyond this are only counted.
MAX_DISPLAYED_ROWS = 100

# Actions bound with priority on the search screen
SEARCH_ACTIONS = {"open_detail", "cursor_down", "cursor_up", "autocomplete", "copy"}

COPY_LABELS = {
    "link": "link",
    "name": "name",
    "capitalized": "capitalized name",
}


class NativeListItem(ListItem):
    """A list item displaying one search result."""

    def __init__(self, row: ResultRow) -> None:
        """Initialize with a result row.

        Args:
            row: The row to display.
        """
        super().__init__()
        self.row = row
        if row.is_status:
            self.add_class("-status")
        self.tooltip = f"{row.tooltip_title}\n{row.tooltip_text}" if row.tooltip_title else None

    def compose(self) -> ComposeResult:
        """Compose the list item content."""
        yield Static(self.render_row(self.row), classes="row-content")

    @staticmethod
    def render_row(row: ResultRow) -> Text:
        """Render title (with highlights), key and subtitle."""
        text = Text(row.title)
        for start, end in row.title_highlights:
            text.stylize("bold yellow", start, end)
        if row.key:
            text.append(f"  {row.key}", style="dim cyan")
        text.append("\n")
        text.append(row.subtitle, style="dim")
        return text


class NativesApp(App):
    """Interactive natives search."""

    TITLE = "natives-tui"
    ENABLE_COMMAND_PALETTE = False
    CSS = """
    Screen {
        background: $surface;
    }

    #app-header {
        dock: top;
        height: 1;
        background: $primary;
        padding: 0 1;
        text-align: center;
        text-style: bold;
    }

    #search-input {
        height: 3;
        margin: 1 1 0 1;
    }

    #results-list {
        height: 1fr;
        margin: 0 1;
        border: solid $primary;
    }

    NativeListItem {
        height: auto;
        padding: 0 1;
        background: $surface;
    }

    NativeListItem.-highlight {
        background: $primary-background;
    }

    NativeListItem.-status {
        color: $warning;
    }

    #status-bar {
        dock: bottom;
        height: 1;
        background: $primary-background;
        padding: 0 1;
    }
    """

    BINDINGS = [
        # Priority so they work while the search input has focus
        Binding("enter", "open_detail", "Open", priority=True),
        Binding("down", "cursor_down", "Next result", show=False, priority=True),
        Binding("up", "cursor_up", "Previous result", show=False, priority=True),
        Binding("tab", "autocomplete", "Complete", priority=True),
        Binding("ctrl+l", "copy('link')", "Copy link", priority=True),
        Binding("ctrl+n", "copy('name')", "Copy name", priority=True),
        Binding("ctrl+t", "copy('capitalized')", "Copy capitalized", priority=True),
        Binding("f1", "show_help", "Help"),
        Binding("escape", "clear_or_quit", "Clear query, quit when empty", show=False),
        Binding("ctrl+q", "quit", "Quit", show=False),
    ]

    def __init__(self, service: NativeSearchService, is_mock: bool = False):
        """Initialize the app.

        Args:
            service: Search service; its catalog is loaded on mount.
            is_mock: Whether running against the mock source.
        """
        super().__init__()
        self._service = service
        self._is_mock = is_mock
        self._rows: list[ResultRow] = []

    def _build_header_text(self) -> str:
        """Build the header text with program name, version and catalog state."""
        status = self._service.status
        if status.ready:
            state = f"[green]{len(self._service.catalog)} natives[/green]"
        elif status.failed:
            state = "[red]failed to load[/red]"
        else:
            state = "[yellow]loading...[/yellow]"
        return f"natives-tui v{__version__} │ {state}"

    def _build_status_bar_text(self) -> str:
        """Build the status bar text with match counts."""
        parts = []
        if self._is_mock:
            parts.append("[yellow]MOCK[/yellow]")

        if self._service.is_ready:
            total = len(self._rows)
            if total > MAX_DISPLAYED_ROWS:
                parts.append(f"{total} matches (showing {MAX_DISPLAYED_ROWS})")
            else:
                parts.append(f"{total} match{'es' if total != 1 else ''}")
        else:
            parts.append("Waiting for catalog")

        return " │ ".join(parts)

    def compose(self) -> ComposeResult:
        """Compose the UI."""
        yield Static(self._build_header_text(), id="app-header")
        yield Input(placeholder="Search natives (name, jhash or hash)...", id="search-input")
        yield ListView(id="results-list")
        yield Static(self._build_status_bar_text(), id="status-bar")
        yield Footer()

    def on_mount(self) -> None:
        """Show the status row and start loading the catalog."""
        self._get_input().focus()
        self._refresh_results()
        if not self._service.is_ready:
            self._service.loader.subscribe(self._on_loader_change)
            self.run_worker(self._service.loader.run, thread=True, exclusive=True, group="loader")

    def check_action(self, action: str, parameters: tuple[object, ...]) -> bool | None:
        """Disable search bindings while another screen is on top."""
        if action in SEARCH_ACTIONS and len(self.screen_stack) > 1:
            return False
        return True

    def on_unmount(self) -> None:
        """Stop a load still retrying so exit does not wait on it."""
        self._service.loader.stop()

    def _on_loader_change(self, status: LoaderStatus) -> None:
        """Loader callback, runs on the worker thread."""
        if not self.is_running or self._service.loader.stopped:
            return
        self.call_from_thread(self._refresh_results)

    def on_input_changed(self, event: Input.Changed) -> None:
        """Re-run the search on every keystroke."""
        self._refresh_results()

    def _refresh_results(self) -> None:
        """Run the current query and repopulate the list."""
        query = self._get_input().value
        self._rows = self._service.search(query)

        list_view = self._get_list_view()
        list_view.clear()
        list_view.extend(NativeListItem(row) for row in self._rows[:MAX_DISPLAYED_ROWS])
        if self._rows:
            self.call_after_refresh(self._select_first)

        self.screen_stack[0].query_one("#app-header", Static).update(self._build_header_text())
        self.screen_stack[0].query_one("#status-bar", Static).update(self._build_status_bar_text())

    def _get_input(self) -> Input:
        """Get the search input from the main screen."""
        return self.screen_stack[0].query_one("#search-input", Input)

    def _get_list_view(self) -> ListView:
        """Get the results ListView from the main screen."""
        return self.screen_stack[0].query_one("#results-list", ListView)

    def _select_first(self) -> None:
        list_view = self._get_list_view()
        if len(list_view) > 0:
            list_view.index = 0

    def _get_selected_row(self) -> Optional[ResultRow]:
        """Return the highlighted result row, if any."""
        list_view = self._get_list_view()
        item = list_view.highlighted_child
        if isinstance(item, NativeListItem):
            return item.row
        return None

    def _get_selected_native_row(self) -> Optional[ResultRow]:
        """Return the highlighted row if it refers to a native."""
        row = self._get_selected_row()
        if row is None or row.is_status:
            self.notify("No native selected", severity="warning", timeout=2)
            return None
        return row

    def action_cursor_down(self) -> None:
        self._get_list_view().action_cursor_down()

    def action_cursor_up(self) -> None:
        self._get_list_view().action_cursor_up()

    def action_open_detail(self) -> None:
        """Open the selected native's reference page."""
        row = self._get_selected_native_row()
        if row is None:
            return
        url = self._service.open(row)
        self.notify(f"Opened {url}", timeout=2)

    def on_list_view_selected(self, event: ListView.Selected) -> None:
        """Mouse selection opens the reference page too."""
        self.action_open_detail()

    def action_copy(self, kind: str) -> None:
        """Copy the link, name or capitalized name of the selection."""
        row = self._get_selected_native_row()
        if row is None:
            return
        payload = self._service.clipboard_payload(row, kind)
        self.copy_to_clipboard(payload)
        self.notify(f"Copied {COPY_LABELS[kind]}: {payload}", timeout=2)

    def action_autocomplete(self) -> None:
        """Replace the query with the selected native's name."""
        row = self._get_selected_native_row()
        if row is None:
            return
        search_input = self._get_input()
        search_input.value = row.query_text
        search_input.cursor_position = len(row.query_text)

    def action_clear_or_quit(self) -> None:
        """Clear the query, or quit when it is already empty."""
        search_input = self._get_input()
        if search_input.value:
            search_input.value = ""
        else:
            self.exit()

    def action_show_help(self) -> None:
        """Show the help screen."""
        self.push_screen(HelpScreen(self.BINDINGS))
