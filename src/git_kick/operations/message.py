"""Naming conventions for commit messages and fallback branches."""

import re

# e.g. "ccs-123-fix-login-bug" or "ccs/123-fix-login-bug"
TICKET_BRANCH_RE = re.compile(r"(?P<prefix>[A-Za-z]+)[/-](?P<number>\d+)-(?P<rest>.+)")


def derive_commit_message(branch: str) -> str:
    """Build a commit message from a ticket-style branch name.

    ``ccs-123-fix-login-bug`` becomes ``[ccs-123] fix login bug``. Branch
    names that do not follow the ticket pattern are returned unchanged.
    """
    match = TICKET_BRANCH_RE.fullmatch(branch)
    if match is None:
        return branch

    summary = match["rest"].replace("-", " ")
    return f"[{match['prefix']}-{match['number']}] {summary}"


def fallback_branch_name(prefix: str, branch: str, timestamp: int) -> str:
    """Name of the safety branch saved before squashing ``branch``."""
    return f"{prefix}-{branch}-{timestamp}"
