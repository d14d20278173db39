import click

from sdgdash.tui.context import SdgDashContext


@click.command("labels")
@click.pass_obj
def labels_cmd(ctx: SdgDashContext) -> None:
    """Show the policy and SDG labels offered as filters."""
    vocabulary = ctx.config.vocabulary
    click.echo("Policies:")
    for policy in vocabulary.policies:
        click.echo(f"  {policy}")
    click.echo("SDGs:")
    for sdg in vocabulary.sdgs:
        click.echo(f"  {sdg}")
