"""Helpers shared by commands that read the project catalog."""

from pathlib import Path

import click

from sdgdash.tui.context import SdgDashContext


def resolve_projects_path(ctx: SdgDashContext, projects_file: Path | None) -> Path:
    """Pick the catalog file from the argument or the configured default.

    Raises:
        click.ClickException: If neither is set or the file does not exist
    """
    path = projects_file if projects_file is not None else ctx.config.projects_path
    if path is None:
        raise click.ClickException(
            "No projects file given. Pass PROJECTS_FILE or set [projects] path in config.toml."
        )
    if not path.exists():
        raise click.ClickException(f"Projects file not found: {path}")
    return path


projects_file_argument = click.argument(
    "projects_file",
    type=click.Path(dir_okay=False, path_type=Path),
    required=False,
)
