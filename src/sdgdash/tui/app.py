"""Main Textual application for sdgdash interactive mode."""

import asyncio
import logging
import time
from pathlib import Path

from textual import on
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Container, Horizontal
from textual.reactive import reactive
from textual.widgets import Header, Input, Label

from sdgdash.tui.data.provider import ProjectDataProvider, ProjectLoadError
from sdgdash.tui.data.types import LabelVocabulary, Project, QueryState
from sdgdash.tui.filtering.logic import collect_labels, filter_projects
from sdgdash.tui.filtering.types import LabelKind
from sdgdash.tui.screens.help_screen import HelpScreen
from sdgdash.tui.screens.project_detail_screen import ProjectDetailScreen
from sdgdash.tui.widgets.label_filter import LabelFilterPanel
from sdgdash.tui.widgets.project_table import ProjectDataTable
from sdgdash.tui.widgets.status_bar import StatusBar

logger = logging.getLogger(__name__)


class SdgDashApp(App):
    """Interactive TUI for browsing the project catalog.

    Displays projects in a navigable table narrowed by a search box and
    policy/SDG checkboxes. The visible rows are always recomputed from the
    full catalog and the current query.
    """

    CSS_PATH = Path(__file__).parent / "styles" / "dash.tcss"

    BINDINGS = [
        Binding("q", "exit_app", "Quit"),
        Binding("escape", "escape", "Clear/Back", show=False),
        Binding("slash", "focus_search", "Search"),
        Binding("x", "clear_filters", "Clear Filters"),
        Binding("r", "refresh", "Reload"),
        Binding("?", "help", "Help"),
        Binding("j", "cursor_down", "Down", show=False),
        Binding("k", "cursor_up", "Up", show=False),
    ]

    query_state: reactive[QueryState] = reactive(QueryState.empty, init=False)

    def __init__(self, provider: ProjectDataProvider, vocabulary: LabelVocabulary) -> None:
        """Initialize the dashboard app.

        Args:
            provider: Data provider for fetching the project catalog
            vocabulary: Policy and SDG labels offered as checkboxes
        """
        super().__init__()
        self._provider = provider
        self._vocabulary = vocabulary
        self._all_projects: list[Project] = []
        self._rows: list[Project] = []
        self._table: ProjectDataTable | None = None
        self._status_bar: StatusBar | None = None
        self._loading = True

    def compose(self) -> ComposeResult:
        """Create the application layout."""
        yield Header()
        yield Input(placeholder="Search name, description, policies, SDGs", id="search-input")
        with Horizontal(id="filters"):
            yield LabelFilterPanel(
                kind=LabelKind.POLICY, title="Policies", labels=self._vocabulary.policies
            )
            yield LabelFilterPanel(kind=LabelKind.SDG, title="SDGs", labels=self._vocabulary.sdgs)
        with Container(id="main-container"):
            yield Label("Loading projects...", id="loading-message")
            yield Label("No projects found", id="empty-message")
            yield ProjectDataTable()
        yield StatusBar()

    def on_mount(self) -> None:
        """Initialize app after mounting."""
        self._table = self.query_one(ProjectDataTable)
        self._status_bar = self.query_one(StatusBar)
        self._loading_label = self.query_one("#loading-message", Label)
        self._empty_label = self.query_one("#empty-message", Label)

        # Hide table until loaded
        self._table.display = False
        self._empty_label.display = False

        self.run_worker(self._load_data(), exclusive=True)

    async def _load_data(self) -> None:
        """Load the project catalog in a background thread."""
        start_time = time.monotonic()

        loop = asyncio.get_running_loop()
        try:
            projects = await loop.run_in_executor(None, self._provider.fetch_projects)
        except ProjectLoadError as e:
            logger.warning("Failed to load projects: %s", e)
            self._set_projects([])
            if self._status_bar is not None:
                self._status_bar.set_message(f"Load failed: {e}")
            return

        duration = time.monotonic() - start_time
        logger.debug("Fetched %d projects in %.3fs", len(projects), duration)
        self._set_projects(projects)

    def _set_projects(self, projects: list[Project]) -> None:
        """Replace the catalog and re-filter it with the current query.

        Args:
            projects: Full project catalog
        """
        self._all_projects = projects
        self._loading = False
        self._loading_label.display = False

        policies, sdgs = collect_labels(projects)
        extended = self._vocabulary.extended_with(policies, sdgs)
        if extended != self._vocabulary:
            self._vocabulary = extended
            self._panel(LabelKind.POLICY).add_labels(extended.policies)
            self._panel(LabelKind.SDG).add_labels(extended.sdgs)

        self._apply_filter()

    def watch_query_state(self, query_state: QueryState) -> None:
        """Recompute visible projects whenever the query changes."""
        self._apply_filter()

    def _apply_filter(self) -> None:
        """Filter the full catalog with the current query and refresh the view."""
        if self._loading:
            return

        self._rows = filter_projects(self._all_projects, self.query_state)
        logger.debug(
            "Query %r matched %d of %d projects",
            self.query_state,
            len(self._rows),
            len(self._all_projects),
        )

        if self._table is not None:
            has_rows = bool(self._rows)
            self._table.display = has_rows
            self._empty_label.display = not has_rows
            self._table.populate(self._rows)

        if self._status_bar is not None:
            self._status_bar.set_counts(len(self._rows), len(self._all_projects))
            self._status_bar.set_query(self.query_state)

    @property
    def all_projects(self) -> list[Project]:
        """The full catalog as last loaded."""
        return self._all_projects

    @property
    def filtered_projects(self) -> list[Project]:
        """Projects currently displayed."""
        return self._rows

    @property
    def vocabulary(self) -> LabelVocabulary:
        """Labels currently offered as checkboxes."""
        return self._vocabulary

    def _panel(self, kind: LabelKind) -> LabelFilterPanel:
        return self.query_one(f"#{kind.value}-filter", LabelFilterPanel)

    @on(Input.Changed, "#search-input")
    def on_search_changed(self, event: Input.Changed) -> None:
        """Update search text as the user types."""
        self.query_state = self.query_state.with_search_text(event.value)

    @on(Input.Submitted, "#search-input")
    def on_search_submitted(self, event: Input.Submitted) -> None:
        """Return focus to the table on Enter."""
        if self._table is not None:
            self._table.focus()

    @on(LabelFilterPanel.LabelToggled)
    def on_label_toggled(self, event: LabelFilterPanel.LabelToggled) -> None:
        """Sync the query with a checkbox change.

        Checkbox changes made by clearing filters arrive after the query
        already matches them and are ignored.
        """
        if event.kind == LabelKind.POLICY:
            if (event.label in self.query_state.selected_policies) != event.selected:
                self.query_state = self.query_state.toggle_policy(event.label)
        else:
            if (event.label in self.query_state.selected_sdgs) != event.selected:
                self.query_state = self.query_state.toggle_sdg(event.label)

    @on(ProjectDataTable.RowSelected)
    def on_row_selected(self, event: ProjectDataTable.RowSelected) -> None:
        """Handle Enter/double-click on row - show project details."""
        self.action_show_detail()

    def action_exit_app(self) -> None:
        """Quit the application."""
        self.exit()

    def action_help(self) -> None:
        """Show help screen."""
        self.push_screen(HelpScreen())

    def action_refresh(self) -> None:
        """Reload the project catalog, keeping the current query."""
        self.run_worker(self._load_data(), exclusive=True)

    def action_focus_search(self) -> None:
        """Move focus to the search input."""
        self.query_one("#search-input", Input).focus()

    def action_escape(self) -> None:
        """Clear search text first, then return focus to the table."""
        search_input = self.query_one("#search-input", Input)
        if search_input.value:
            search_input.value = ""
            return
        if self._table is not None:
            self._table.focus()

    def action_clear_filters(self) -> None:
        """Remove the search text and every label selection."""
        self.query_state = self.query_state.cleared()
        self.query_one("#search-input", Input).value = ""
        self._panel(LabelKind.POLICY).set_selected(frozenset())
        self._panel(LabelKind.SDG).set_selected(frozenset())
        if self._status_bar is not None:
            self._status_bar.set_message(None)

    def action_cursor_down(self) -> None:
        """Move cursor down (vim j key)."""
        if self._table is not None:
            self._table.action_cursor_down()

    def action_cursor_up(self) -> None:
        """Move cursor up (vim k key)."""
        if self._table is not None:
            self._table.action_cursor_up()

    def action_show_detail(self) -> None:
        """Show the selected project in a modal."""
        if self._table is None:
            return
        project = self._table.get_selected_row_data()
        if project is None:
            return
        self.push_screen(ProjectDetailScreen(project))
