import click

from ._shared import get_kicker, report_errors


@click.command()
@click.option(
    "-c",
    "--compare",
    metavar="BRANCH",
    help="Branch to compare against (default: develop)",
)
@click.option("-m", "--message", help="Commit message (default: derived from branch)")
@click.option(
    "--push-force", is_flag=True, help="Force push the squashed branch afterwards"
)
@click.pass_context
def squash(
    ctx: click.Context, compare: str | None, message: str | None, push_force: bool
) -> None:
    """Squash all commits ahead of BRANCH into one.

    The original branch is saved as a kk-fallback-* branch first.
    """
    kicker = get_kicker(ctx)

    with report_errors("squash"):
        result = kicker.squash(compare, message, push=push_force)

    if not result.squashed:
        click.echo(
            f"Nothing to squash: {result.branch} is {result.commits} "
            f"commit(s) ahead of {result.compare}"
        )
        return

    click.echo(
        f"Squashed {result.commits} commits on {result.branch}: {result.message}"
    )
    click.echo(f"Fallback branch: {result.fallback_branch}")
    if result.pushed:
        click.echo(f"Force pushed {result.branch}")
