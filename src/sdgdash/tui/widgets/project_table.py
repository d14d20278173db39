"""Project table widget for TUI dashboard."""

from rich.text import Text
from textual.widgets import DataTable

from sdgdash.tui.data.types import Project

DESCRIPTION_WIDTH = 50


class ProjectDataTable(DataTable):
    """DataTable subclass for displaying projects.

    Manages column configuration and row population from Project.
    Uses row selection mode (not cell selection) for simpler navigation.
    """

    def __init__(self) -> None:
        """Initialize table in row cursor mode."""
        super().__init__(cursor_type="row", id="project-table")
        self._rows: list[Project] = []

    def action_cursor_left(self) -> None:
        """Disable left arrow navigation (row mode only)."""
        pass

    def action_cursor_right(self) -> None:
        """Disable right arrow navigation (row mode only)."""
        pass

    def on_mount(self) -> None:
        """Configure columns when widget is mounted."""
        self.add_column("id", key="id")
        self.add_column("name", key="name")
        self.add_column("description", key="description")
        self.add_column("policies", key="policies")
        self.add_column("sdgs", key="sdgs")

    def populate(self, rows: list[Project]) -> None:
        """Populate table with project data, preserving cursor position.

        If the selected project still exists, cursor stays on it.
        If the selected project was filtered out, cursor stays at the same
        row index.

        Args:
            rows: List of Project to display
        """
        # Save current selection by project id (row key)
        selected_id: int | None = None
        if self._rows and self.cursor_row is not None and 0 <= self.cursor_row < len(self._rows):
            selected_id = self._rows[self.cursor_row].id

        saved_cursor_row = self.cursor_row

        self._rows = rows
        self.clear()

        for row in rows:
            self.add_row(*_row_to_values(row), key=str(row.id))

        if rows:
            if selected_id is not None:
                for idx, row in enumerate(rows):
                    if row.id == selected_id:
                        self.move_cursor(row=idx)
                        return

            if saved_cursor_row is not None and saved_cursor_row >= 0:
                self.move_cursor(row=min(saved_cursor_row, len(rows) - 1))

    def get_selected_row_data(self) -> Project | None:
        """Get the Project for the currently selected row.

        Returns:
            Project for selected row, or None if no selection
        """
        cursor_row = self.cursor_row
        if cursor_row is None or cursor_row < 0 or cursor_row >= len(self._rows):
            return None
        return self._rows[cursor_row]


def _row_to_values(row: Project) -> tuple[Text, ...]:
    """Convert Project to table cell values in column order.

    Cells are Text so catalog strings are never parsed as markup.
    """
    description = row.description
    if len(description) > DESCRIPTION_WIDTH:
        description = description[: DESCRIPTION_WIDTH - 3] + "..."

    return (
        Text(str(row.id)),
        Text(row.name),
        Text(description),
        Text(", ".join(row.policies) or "-"),
        Text(", ".join(row.sdgs) or "-"),
    )
