"""TUI runner abstraction for testability.

This module provides an ABC for running Textual TUI applications, enabling
CLI routing tests without starting the Textual event loop.
"""

from abc import ABC, abstractmethod

from sdgdash.tui.app import SdgDashApp


class TuiRunner(ABC):
    """Abstract interface for running TUI applications."""

    @abstractmethod
    def run(self, app: SdgDashApp) -> None:
        """Run the TUI application.

        Args:
            app: The SdgDashApp instance to run
        """
        ...


class RealTuiRunner(TuiRunner):
    """Production implementation that runs the Textual event loop."""

    def run(self, app: SdgDashApp) -> None:
        app.run()


class FakeTuiRunner(TuiRunner):
    """Test implementation that captures apps without running the event loop."""

    def __init__(self) -> None:
        self._apps_run: list[SdgDashApp] = []

    def run(self, app: SdgDashApp) -> None:
        """Capture app without running event loop."""
        self._apps_run.append(app)

    @property
    def apps_run(self) -> list[SdgDashApp]:
        """Apps that were passed to run(). For test assertions only."""
        return self._apps_run
