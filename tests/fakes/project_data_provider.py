"""Fake project data provider for testing TUI components."""

from sdgdash.tui.data.provider import ProjectDataProvider, ProjectLoadError
from sdgdash.tui.data.types import Project


def make_project(
    project_id: int,
    name: str,
    *,
    description: str = "...",
    policies: tuple[str, ...] = (),
    sdgs: tuple[str, ...] = (),
) -> Project:
    """Build a Project with defaults for fields a test does not care about."""
    return Project(
        id=project_id,
        name=name,
        description=description,
        policies=policies,
        sdgs=sdgs,
    )


class FakeProjectDataProvider(ProjectDataProvider):
    """Fake implementation of ProjectDataProvider for testing.

    Returns canned data without touching the filesystem.
    """

    def __init__(
        self,
        *,
        projects: list[Project] | None = None,
        fetch_error: str | None = None,
    ) -> None:
        """Initialize with optional canned project data.

        Args:
            projects: List of Project to return, or None for empty list
            fetch_error: If set, fetch_projects() raises ProjectLoadError with
                this message.
        """
        self._projects = projects or []
        self._fetch_error = fetch_error
        self._fetch_count = 0

    def fetch_projects(self) -> list[Project]:
        """Return canned project data.

        Raises:
            ProjectLoadError: If fetch_error is set
        """
        self._fetch_count += 1
        if self._fetch_error is not None:
            raise ProjectLoadError(self._fetch_error)
        return self._projects

    @property
    def fetch_count(self) -> int:
        """Number of times fetch_projects was called."""
        return self._fetch_count

    def set_projects(self, projects: list[Project]) -> None:
        """Update the canned project data."""
        self._projects = projects
