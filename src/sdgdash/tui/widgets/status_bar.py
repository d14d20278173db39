"""Status bar widget for TUI dashboard."""

from __future__ import annotations

from rich.text import Text
from textual.widgets import Static

from sdgdash.tui.data.types import QueryState


class StatusBar(Static):
    """Bottom bar showing match counts, active filters, and messages.

    Renders: 3 of 12 projects | search: "river" | policies: Water Conservation
    """

    DEFAULT_CSS = """
    StatusBar {
        dock: bottom;
        height: 1;
        background: $surface;
        color: $text-muted;
        padding: 0 1;
    }
    """

    def __init__(self) -> None:
        super().__init__(id="status-bar")
        self._shown = 0
        self._total = 0
        self._query = QueryState.empty()
        self._message: str | None = None

    def on_mount(self) -> None:
        self._refresh_display()

    def set_counts(self, shown: int, total: int) -> None:
        """Update the number of displayed and total projects."""
        self._shown = shown
        self._total = total
        self._refresh_display()

    def set_query(self, query: QueryState) -> None:
        """Update the active filter summary."""
        self._query = query
        self._refresh_display()

    def set_message(self, message: str | None) -> None:
        """Show a transient message, or clear it with None."""
        self._message = message
        self._refresh_display()

    @property
    def message(self) -> str | None:
        """Current transient message, if any."""
        return self._message

    def _refresh_display(self) -> None:
        text = Text()
        text.append(f"{self._shown} of {self._total} projects", style="bold")
        for part in describe_query(self._query):
            text.append(" | ")
            text.append(part)
        if self._message is not None:
            text.append(" | ")
            text.append(self._message, style="yellow")
        self.update(text)


def describe_query(query: QueryState) -> list[str]:
    """Summarize the active parts of a query for display.

    Selected labels are listed alphabetically.
    """
    if not query.is_active:
        return []
    parts: list[str] = []
    if query.search_text.strip():
        parts.append(f'search: "{query.search_text.strip()}"')
    if query.selected_policies:
        parts.append("policies: " + ", ".join(sorted(query.selected_policies)))
    if query.selected_sdgs:
        parts.append("sdgs: " + ", ".join(sorted(query.selected_sdgs)))
    return parts
