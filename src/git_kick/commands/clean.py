import click

from ._shared import get_kicker, report_errors


@click.command()
@click.pass_context
def clean(ctx: click.Context) -> None:
    """Delete all fallback branches."""
    kicker = get_kicker(ctx)

    with report_errors("clean"):
        deleted = kicker.clean()

    for branch in deleted:
        click.echo(f"Deleted {branch}")
    click.echo(f"Removed {len(deleted)} fallback branch(es)")
