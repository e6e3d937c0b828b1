import click

from ._shared import get_kicker, report_errors


@click.command()
@click.pass_context
def commit(ctx: click.Context) -> None:
    """Stage all changes and commit with a message derived from the branch."""
    kicker = get_kicker(ctx)

    with report_errors("commit"):
        message = kicker.commit()

    click.echo(f"Committed: {message}")


@click.command()
@click.pass_context
def push(ctx: click.Context) -> None:
    """Push the current branch, committing pending changes first."""
    kicker = get_kicker(ctx)

    with report_errors("push"):
        branch = kicker.push()

    click.echo(f"Pushed {branch}")
