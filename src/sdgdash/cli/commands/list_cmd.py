from pathlib import Path

import click
from rich.console import Console
from rich.table import Table
from rich.text import Text

from sdgdash.cli.commands.shared import projects_file_argument, resolve_projects_path
from sdgdash.cli.output import user_output
from sdgdash.tui.context import SdgDashContext
from sdgdash.tui.data.provider import JsonFileProjectProvider, ProjectLoadError
from sdgdash.tui.data.types import Project, QueryState
from sdgdash.tui.filtering.logic import filter_projects

DESCRIPTION_WIDTH = 60


def _build_projects_table(projects: list[Project]) -> Table:
    """Build a Rich table with one row per project."""
    table = Table(show_header=True, header_style="bold")
    table.add_column("id", style="cyan", no_wrap=True)
    table.add_column("name", no_wrap=True)
    table.add_column("description")
    table.add_column("policies")
    table.add_column("sdgs")

    for project in projects:
        description = project.description
        if len(description) > DESCRIPTION_WIDTH:
            description = description[: DESCRIPTION_WIDTH - 3] + "..."
        # Catalog text is data, not markup
        table.add_row(
            str(project.id),
            Text(project.name),
            Text(description),
            Text(", ".join(project.policies) or "-"),
            Text(", ".join(project.sdgs) or "-"),
        )
    return table


@click.command("list")
@projects_file_argument
@click.option("-s", "--search", default="", help="Whitespace-separated terms; all must match")
@click.option(
    "-p",
    "--policy",
    "policies",
    multiple=True,
    help="Show projects with this policy label (repeatable, any may match)",
)
@click.option(
    "-g",
    "--sdg",
    "sdgs",
    multiple=True,
    help="Show projects with this SDG label (repeatable, any may match)",
)
@click.pass_obj
def list_cmd(
    ctx: SdgDashContext,
    projects_file: Path | None,
    search: str,
    policies: tuple[str, ...],
    sdgs: tuple[str, ...],
) -> None:
    """List projects matching search text and label filters.

    Examples:
        sdgdash list projects.json
        sdgdash list projects.json --search "river clean"
        sdgdash list projects.json -p "Water Conservation" -p "Policy 2"
        sdgdash list projects.json -g "SDG 1" -s solar
    """
    path = resolve_projects_path(ctx, projects_file)
    try:
        projects = JsonFileProjectProvider(path).fetch_projects()
    except ProjectLoadError as e:
        raise click.ClickException(str(e)) from e

    query = QueryState(
        search_text=search,
        selected_policies=frozenset(policies),
        selected_sdgs=frozenset(sdgs),
    )
    matches = filter_projects(projects, query)

    if not matches:
        user_output("No projects found.")
        return

    user_output(f"\nFound {len(matches)} project(s):\n")

    console = Console(stderr=True, width=200)
    console.print(_build_projects_table(matches))
    console.print()
