import logging
from pathlib import Path

import click

from sdgdash.cli.commands.browse_cmd import browse_cmd
from sdgdash.cli.commands.labels_cmd import labels_cmd
from sdgdash.cli.commands.list_cmd import list_cmd
from sdgdash.cli.config import DEFAULT_CONFIG_DIR
from sdgdash.tui.context import SdgDashContext

CONTEXT_SETTINGS = dict(help_option_names=["-h", "--help"])  # terse help flags


@click.group(context_settings=CONTEXT_SETTINGS)
@click.version_option(package_name="sdgdash")
@click.option("--debug", is_flag=True, help="Enable debug logging")
@click.option(
    "--config-dir",
    type=click.Path(file_okay=False, path_type=Path),
    default=DEFAULT_CONFIG_DIR,
    envvar="SDGDASH_CONFIG_DIR",
    show_default=True,
    help="Directory holding config.toml",
)
@click.pass_context
def cli(ctx: click.Context, debug: bool, config_dir: Path) -> None:
    """Browse and filter projects by policy and SDG labels."""
    if debug:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s - %(levelname)s - %(message)s")

    # Only create context if not already provided (e.g., by tests)
    if ctx.obj is None:
        ctx.obj = SdgDashContext.for_production(config_dir)


cli.add_command(browse_cmd)
cli.add_command(labels_cmd)
cli.add_command(list_cmd)


def main() -> None:
    """CLI entry point used by the `sdgdash` console script."""
    cli()
