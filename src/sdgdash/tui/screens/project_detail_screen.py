"""Modal screen showing a single project."""

from __future__ import annotations

from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, Vertical
from textual.screen import ModalScreen
from textual.widgets import Label

from sdgdash.tui.data.types import Project


class ProjectDetailScreen(ModalScreen):
    """Modal with a project's full description and label chips."""

    BINDINGS = [
        Binding("escape", "dismiss", "Close"),
        Binding("q", "dismiss", "Close"),
        Binding("enter", "dismiss", "Close", show=False),
    ]

    DEFAULT_CSS = """
    ProjectDetailScreen {
        align: center middle;
    }

    #detail-dialog {
        width: 80;
        height: auto;
        max-height: 80%;
        background: $surface;
        border: solid $primary;
        padding: 1 2;
    }

    #detail-name {
        text-style: bold;
        width: 100%;
        margin-bottom: 1;
    }

    .detail-section-title {
        text-style: bold;
        color: $primary;
        margin-top: 1;
    }

    .detail-chips {
        height: auto;
    }

    .detail-chip {
        background: $boost;
        padding: 0 1;
        margin-right: 1;
    }

    #detail-footer {
        margin-top: 1;
        text-align: center;
        color: $text-muted;
    }
    """

    def __init__(self, project: Project) -> None:
        super().__init__()
        self._project = project

    @property
    def project(self) -> Project:
        return self._project

    def compose(self) -> ComposeResult:
        project = self._project
        with Vertical(id="detail-dialog"):
            yield Label(f"#{project.id} {project.name}", id="detail-name", markup=False)
            yield Label(
                project.description or "(no description)",
                id="detail-description",
                markup=False,
            )

            yield Label("Policies", classes="detail-section-title")
            with Horizontal(classes="detail-chips", id="detail-policies"):
                for policy in project.policies:
                    yield Label(policy, classes="detail-chip", markup=False)

            yield Label("SDGs", classes="detail-section-title")
            with Horizontal(classes="detail-chips", id="detail-sdgs"):
                for sdg in project.sdgs:
                    yield Label(sdg, classes="detail-chip", markup=False)

            yield Label("Press Esc to close", id="detail-footer")
