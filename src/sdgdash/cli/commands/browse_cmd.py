import logging
from pathlib import Path

import click

from sdgdash.cli.commands.shared import projects_file_argument, resolve_projects_path
from sdgdash.tui.app import SdgDashApp
from sdgdash.tui.context import SdgDashContext
from sdgdash.tui.data.provider import JsonFileProjectProvider

logger = logging.getLogger(__name__)


@click.command("browse")
@projects_file_argument
@click.pass_obj
def browse_cmd(ctx: SdgDashContext, projects_file: Path | None) -> None:
    """Browse projects interactively with search and label filters.

    Examples:
        sdgdash browse projects.json
        sdgdash browse            # uses [projects] path from config.toml
    """
    path = resolve_projects_path(ctx, projects_file)
    logger.debug("Browsing %s", path)
    app = SdgDashApp(provider=JsonFileProjectProvider(path), vocabulary=ctx.config.vocabulary)
    ctx.tui_runner.run(app)
