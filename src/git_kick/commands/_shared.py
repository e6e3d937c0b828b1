"""Shared utilities for commands."""

import logging
from contextlib import contextmanager
from typing import Iterator

import click

from ..errors import KickError
from ..operations import GitExecutor, GitKicker

logger = logging.getLogger(__name__)


def get_kicker(ctx: click.Context) -> GitKicker:
    """Return the workflow runner for this invocation, creating it once."""
    obj = ctx.ensure_object(dict)
    if "kicker" not in obj:
        obj["kicker"] = GitKicker(obj.get("executor") or GitExecutor())
    return obj["kicker"]


@contextmanager
def report_errors(action: str) -> Iterator[None]:
    """Log a failed workflow and turn it into a click error."""
    try:
        yield
    except KickError as e:
        logger.error(
            "%s failed: %s", action, e, exc_info=logger.isEnabledFor(logging.DEBUG)
        )
        exc = click.ClickException(str(e))
        exc.exit_code = e.exit_code
        raise exc from e
