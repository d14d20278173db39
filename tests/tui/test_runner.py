"""Tests for TuiRunner implementations."""

from sdgdash.tui.app import SdgDashApp
from sdgdash.tui.data.types import LabelVocabulary
from sdgdash.tui.runner import FakeTuiRunner
from tests.fakes.project_data_provider import FakeProjectDataProvider


def _make_app() -> SdgDashApp:
    return SdgDashApp(provider=FakeProjectDataProvider(), vocabulary=LabelVocabulary.default())


def test_apps_run_starts_empty() -> None:
    """FakeTuiRunner starts with empty app list."""
    runner = FakeTuiRunner()
    assert runner.apps_run == []


def test_run_captures_apps_in_order() -> None:
    runner = FakeTuiRunner()
    app1 = _make_app()
    app2 = _make_app()

    runner.run(app1)
    runner.run(app2)

    assert runner.apps_run == [app1, app2]


def test_run_does_not_start_event_loop() -> None:
    """run() returns immediately; the provider is never asked for data."""
    runner = FakeTuiRunner()
    provider = FakeProjectDataProvider()
    app = SdgDashApp(provider=provider, vocabulary=LabelVocabulary.default())

    runner.run(app)

    assert provider.fetch_count == 0
