"""Tests for browse command routing."""

from pathlib import Path

from click.testing import CliRunner

from sdgdash.cli.cli import cli
from sdgdash.cli.config import CatalogConfig
from sdgdash.tui.context import SdgDashContext
from sdgdash.tui.data.provider import JsonFileProjectProvider
from sdgdash.tui.data.types import LabelVocabulary
from sdgdash.tui.runner import FakeTuiRunner


def test_browse_runs_app_with_file_provider(projects_file: Path) -> None:
    """browse builds the dashboard without starting the event loop."""
    tui_runner = FakeTuiRunner()
    ctx = SdgDashContext.for_test(tui_runner=tui_runner)

    result = CliRunner().invoke(cli, ["browse", str(projects_file)], obj=ctx)

    assert result.exit_code == 0
    assert len(tui_runner.apps_run) == 1
    app = tui_runner.apps_run[0]
    assert app.vocabulary == LabelVocabulary.default()
    assert isinstance(app._provider, JsonFileProjectProvider)
    assert [p.name for p in app._provider.fetch_projects()] == ["Clean River", "Solar Grid"]


def test_browse_passes_configured_vocabulary(projects_file: Path) -> None:
    tui_runner = FakeTuiRunner()
    vocabulary = LabelVocabulary(policies=("Clean Energy",), sdgs=("SDG 7",))
    config = CatalogConfig(vocabulary=vocabulary, projects_path=projects_file)
    ctx = SdgDashContext.for_test(config=config, tui_runner=tui_runner)

    result = CliRunner().invoke(cli, ["browse"], obj=ctx)

    assert result.exit_code == 0
    assert tui_runner.apps_run[0].vocabulary == vocabulary


def test_browse_missing_file_does_not_start_app(tmp_path: Path) -> None:
    tui_runner = FakeTuiRunner()
    ctx = SdgDashContext.for_test(tui_runner=tui_runner)

    result = CliRunner().invoke(cli, ["browse", str(tmp_path / "nope.json")], obj=ctx)

    assert result.exit_code == 1
    assert "Projects file not found" in result.output
    assert tui_runner.apps_run == []
