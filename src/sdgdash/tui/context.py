"""Context for sdgdash commands.

SdgDashContext bundles the loaded configuration with the TUI runner so
commands can be invoked from tests without starting Textual.
"""

from dataclasses import dataclass
from pathlib import Path

from sdgdash.cli.config import CatalogConfig, load_config
from sdgdash.tui.data.types import LabelVocabulary
from sdgdash.tui.runner import FakeTuiRunner, RealTuiRunner, TuiRunner


@dataclass(frozen=True)
class SdgDashContext:
    """Dependencies shared by sdgdash commands.

    Follows the same Real/Fake pattern as the runner:
    - for_production() loads config from disk and runs Textual for real
    - for_test() takes an in-memory config and captures apps instead
    """

    config: CatalogConfig
    tui_runner: TuiRunner

    @classmethod
    def for_production(cls, config_dir: Path) -> "SdgDashContext":
        """Create production context from a config directory.

        Args:
            config_dir: Directory holding config.toml

        Returns:
            SdgDashContext configured for production use
        """
        return cls(config=load_config(config_dir), tui_runner=RealTuiRunner())

    @classmethod
    def for_test(
        cls,
        *,
        config: CatalogConfig | None = None,
        tui_runner: TuiRunner | None = None,
    ) -> "SdgDashContext":
        """Create test context with injectable fakes.

        Args:
            config: Optional config. If None, uses the default vocabulary
                and no default projects file.
            tui_runner: Optional TuiRunner. If None, creates FakeTuiRunner.

        Example:
            tui_runner = FakeTuiRunner()
            ctx = SdgDashContext.for_test(tui_runner=tui_runner)
            result = CliRunner().invoke(cli, ["browse", "projects.json"], obj=ctx)
            assert len(tui_runner.apps_run) == 1
        """
        if config is None:
            config = CatalogConfig(vocabulary=LabelVocabulary.default(), projects_path=None)
        return cls(config=config, tui_runner=tui_runner or FakeTuiRunner())
