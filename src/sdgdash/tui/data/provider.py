"""Data provider for TUI project table."""

import json
import logging
from abc import ABC, abstractmethod
from pathlib import Path

from sdgdash.tui.data.types import Project

logger = logging.getLogger(__name__)


class ProjectLoadError(Exception):
    """Raised when a project catalog cannot be read or is malformed."""


class ProjectDataProvider(ABC):
    """Abstract base class for project data providers.

    Defines the interface for supplying the project catalog to the TUI.
    """

    @abstractmethod
    def fetch_projects(self) -> list[Project]:
        """Fetch the full project catalog.

        Returns:
            List of Project objects in catalog order

        Raises:
            ProjectLoadError: If the catalog cannot be loaded
        """
        ...


class JsonFileProjectProvider(ProjectDataProvider):
    """Production implementation that reads projects from a JSON file.

    The file holds either a list of project objects or an object with a
    "projects" list:

        [
          {"id": 1, "name": "Clean River", "description": "...",
           "policies": ["Water Conservation"], "sdgs": ["SDG 1"]}
        ]
    """

    def __init__(self, path: Path) -> None:
        """Initialize with the catalog path.

        Args:
            path: Path to the JSON catalog file
        """
        self._path = path

    def fetch_projects(self) -> list[Project]:
        """Read and validate the catalog file.

        Returns:
            List of Project objects in file order

        Raises:
            ProjectLoadError: If the file is missing, not JSON, or malformed
        """
        try:
            text = self._path.read_text(encoding="utf-8")
        except OSError as e:
            raise ProjectLoadError(f"Cannot read {self._path}: {e.strerror or e}") from e
        except UnicodeDecodeError as e:
            raise ProjectLoadError(f"Cannot read {self._path}: not UTF-8 text ({e.reason})") from e

        try:
            data = json.loads(text)
        except json.JSONDecodeError as e:
            raise ProjectLoadError(f"{self._path} is not valid JSON: {e}") from e

        projects = parse_projects(data, source=str(self._path))
        logger.debug("Loaded %d projects from %s", len(projects), self._path)
        return projects


def parse_projects(data: object, *, source: str) -> list[Project]:
    """Convert decoded JSON into Project objects.

    Args:
        data: Decoded JSON, either a list of entries or {"projects": [...]}
        source: Name of the data source, used in error messages

    Returns:
        List of Project objects in input order

    Raises:
        ProjectLoadError: If the data has the wrong shape or ids repeat
    """
    if isinstance(data, dict):
        if "projects" not in data:
            raise ProjectLoadError(f'{source}: expected a list or an object with a "projects" key')
        data = data["projects"]

    if not isinstance(data, list):
        raise ProjectLoadError(f"{source}: projects must be a list")

    projects: list[Project] = []
    seen_ids: set[int] = set()
    for index, entry in enumerate(data):
        project = _parse_entry(entry, source=source, index=index)
        if project.id in seen_ids:
            raise ProjectLoadError(f"{source}: entry {index} repeats project id {project.id}")
        seen_ids.add(project.id)
        projects.append(project)

    return projects


def _parse_entry(entry: object, *, source: str, index: int) -> Project:
    """Validate a single catalog entry."""
    where = f"{source}: entry {index}"
    if not isinstance(entry, dict):
        raise ProjectLoadError(f"{where} must be an object")

    project_id = entry.get("id")
    # bool is an int subclass but never a valid id
    if not isinstance(project_id, int) or isinstance(project_id, bool):
        raise ProjectLoadError(f'{where} needs an integer "id"')

    name = entry.get("name")
    if not isinstance(name, str):
        raise ProjectLoadError(f'{where} needs a string "name"')

    description = entry.get("description", "")
    if not isinstance(description, str):
        raise ProjectLoadError(f'{where}: "description" must be a string')

    return Project(
        id=project_id,
        name=name,
        description=description,
        policies=_parse_labels(entry.get("policies", []), field="policies", where=where),
        sdgs=_parse_labels(entry.get("sdgs", []), field="sdgs", where=where),
    )


def _parse_labels(value: object, *, field: str, where: str) -> tuple[str, ...]:
    if not isinstance(value, list) or not all(isinstance(label, str) for label in value):
        raise ProjectLoadError(f'{where}: "{field}" must be a list of strings')
    return tuple(value)
