"""CLI entry point for git-kick."""

import sys

import click

from . import __version__
from .logging_config import setup_logging


@click.group(invoke_without_command=True)
@click.option("-v", "--verbose", is_flag=True, help="Show every git command run")
@click.option("-q", "--quiet", is_flag=True, help="Only report warnings and errors")
@click.version_option(__version__, prog_name="git-kick")
@click.pass_context
def cli(ctx: click.Context, verbose: bool, quiet: bool) -> None:
    """Git-kick: squash feature branches with a safety net.

    Squash a branch's commits relative to a base branch, keeping a
    fallback branch for recovery, and commit or push using a message
    derived from the branch name.
    """
    if ctx.invoked_subcommand is None:
        raise click.UsageError("Missing command.", ctx)

    ctx.ensure_object(dict)
    setup_logging(verbose=verbose, quiet=quiet)


# Import and register commands
from .commands.squash import squash
from .commands.clean import clean
from .commands.commit import commit, push

cli.add_command(squash)
cli.add_command(clean)
cli.add_command(commit)
cli.add_command(push)


def main(argv: list[str] | None = None) -> int:
    """Run the CLI and return the process exit status.

    Usage errors go to stdout and exit with 1, like every other failure.
    """
    try:
        rv = cli.main(args=argv, prog_name="git-kick", standalone_mode=False)
    except click.UsageError as e:
        e.show(file=sys.stdout)
        return 1
    except click.ClickException as e:
        e.show()
        return e.exit_code
    except click.Abort:
        click.echo("Aborted!", err=True)
        return 1
    return rv if isinstance(rv, int) else 0
