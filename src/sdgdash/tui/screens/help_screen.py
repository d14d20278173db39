"""Modal screen showing keyboard shortcuts."""

from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Vertical
from textual.screen import ModalScreen
from textual.widgets import Label


class HelpScreen(ModalScreen):
    """Modal screen showing keyboard shortcuts."""

    BINDINGS = [
        Binding("escape", "dismiss", "Close"),
        Binding("q", "dismiss", "Close"),
        Binding("?", "dismiss", "Close"),
    ]

    DEFAULT_CSS = """
    HelpScreen {
        align: center middle;
    }

    #help-dialog {
        width: 60;
        height: auto;
        max-height: 80%;
        background: $surface;
        border: solid $primary;
        padding: 1 2;
    }

    #help-title {
        text-style: bold;
        text-align: center;
        margin-bottom: 1;
        width: 100%;
    }

    .help-section {
        margin-top: 1;
        height: auto;
    }

    .help-section-title {
        text-style: bold;
        color: $primary;
    }

    .help-binding {
        margin-left: 2;
    }
    """

    def compose(self) -> ComposeResult:
        """Create help dialog content."""
        with Vertical(id="help-dialog"):
            yield Label("sdgdash - Keyboard Shortcuts", id="help-title")

            with Vertical(classes="help-section"):
                yield Label("Navigation", classes="help-section-title")
                yield Label("↑/k     Move cursor up", classes="help-binding")
                yield Label("↓/j     Move cursor down", classes="help-binding")
                yield Label("Tab     Next search/filter/table", classes="help-binding")

            with Vertical(classes="help-section"):
                yield Label("Filtering", classes="help-section-title")
                yield Label("/       Focus search", classes="help-binding")
                yield Label("Space   Toggle focused checkbox", classes="help-binding")
                yield Label("Esc     Clear search, then back to table", classes="help-binding")
                yield Label("x       Clear all filters", classes="help-binding")

            with Vertical(classes="help-section"):
                yield Label("General", classes="help-section-title")
                yield Label("Enter   Show project details", classes="help-binding")
                yield Label("r       Reload projects", classes="help-binding")
                yield Label("?       Show this help", classes="help-binding")
                yield Label("q       Quit", classes="help-binding")

            yield Label("")
            yield Label("Press Esc to close", id="help-footer")
