"""Shared fixtures for catalog command tests."""

import json
from pathlib import Path

import pytest

SAMPLE_PROJECTS = [
    {
        "id": 1,
        "name": "Clean River",
        "description": "Restores river banks",
        "policies": ["Water Conservation"],
        "sdgs": ["SDG 1"],
    },
    {
        "id": 2,
        "name": "Solar Grid",
        "description": "Community solar",
        "policies": ["Policy 2"],
        "sdgs": ["SDG 2"],
    },
]


@pytest.fixture
def projects_file(tmp_path: Path) -> Path:
    """Write the sample catalog to a JSON file."""
    path = tmp_path / "projects.json"
    path.write_text(json.dumps(SAMPLE_PROJECTS), encoding="utf-8")
    return path
