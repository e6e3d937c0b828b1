"""Workflows built on top of the git gateway."""

import logging
import time
from dataclasses import dataclass
from typing import Callable

from git_kick.errors import DetachedHeadError, DirtyWorkingTreeError, SameBranchError
from git_kick.operations.config import KickConfig
from git_kick.operations.executor import GitGateway
from git_kick.operations.message import derive_commit_message, fallback_branch_name

module_logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class SquashResult:
    """Outcome of a squash run."""

    branch: str
    compare: str
    commits: int
    fallback_branch: str | None = None
    message: str | None = None
    pushed: bool = False

    @property
    def squashed(self) -> bool:
        return self.fallback_branch is not None


class GitKicker:
    """Squash, clean up, commit and push the current branch."""

    def __init__(
        self,
        executor: GitGateway,
        config: KickConfig | None = None,
        logger: logging.Logger | None = None,
        now: Callable[[], float] = time.time,
    ):
        self.executor = executor
        self.config = config or KickConfig()
        self.logger = logger or module_logger
        self.now = now

    def squash(
        self,
        compare: str | None = None,
        message: str | None = None,
        push: bool = False,
    ) -> SquashResult:
        """Squash every commit ahead of ``compare`` into a single commit.

        A fallback branch pointing at the original HEAD is created before
        anything is rewritten. It is never removed automatically; run
        ``clean`` once the squash has been verified.

        Raises:
            DirtyWorkingTreeError: If there are uncommitted changes
            DetachedHeadError: If HEAD is not on a branch
            SameBranchError: If ``compare`` is the current branch
            GitCommandError: If any git step fails
        """
        compare = compare or self.config.default_compare

        status = self.executor.get_status()
        if status:
            raise DirtyWorkingTreeError(status)

        branch = self.executor.get_current_branch()
        if not branch:
            raise DetachedHeadError()
        self.logger.info("Current branch: %s", branch)
        if branch == compare:
            raise SameBranchError(branch)

        commits = self.executor.count_commits_ahead(compare)
        self.logger.info("%s is %d commit(s) ahead of %s", branch, commits, compare)
        if commits <= 1:
            self.logger.info("Nothing to squash on %s", branch)
            return SquashResult(branch=branch, compare=compare, commits=commits)

        fallback = fallback_branch_name(
            self.config.fallback_prefix, branch, int(self.now())
        )
        self.executor.create_branch(fallback)
        self.logger.info("Saved %s as %s", branch, fallback)

        self.executor.reset_soft(commits)
        self.logger.info("Soft reset %d commit(s)", commits)

        self.executor.add_all()
        self.logger.info("Staged all changes")

        message = message or derive_commit_message(branch)
        self.executor.commit(message)
        self.logger.info("Committed: %s", message)

        if push:
            self.executor.push_force(branch, self.config.remote)
            self.logger.info("Force pushed %s to %s", branch, self.config.remote)

        return SquashResult(
            branch=branch,
            compare=compare,
            commits=commits,
            fallback_branch=fallback,
            message=message,
            pushed=push,
        )

    def clean(self) -> list[str]:
        """Force-delete every fallback branch. Returns the deleted names."""
        branches = self.executor.list_branches(self.config.fallback_prefix)
        for branch in branches:
            self.executor.delete_branch(branch, force=True)
            self.logger.info("Deleted %s", branch)

        self.logger.info("Deleted %d fallback branch(es)", len(branches))
        return branches

    def commit(self) -> str:
        """Stage everything and commit with a message derived from the branch."""
        self.executor.add_all()
        self.logger.info("Staged all changes")

        message = derive_commit_message(self.executor.get_current_branch())
        self.executor.commit(message)
        self.logger.info("Committed: %s", message)
        return message

    def push(self) -> str:
        """Push the current branch upstream, committing pending changes first."""
        if not self.executor.is_clean_working_tree():
            self.logger.info("Working tree is dirty, committing before push")
            self.commit()

        branch = self.executor.get_current_branch()
        self.executor.push(branch, self.config.remote)
        self.logger.info("Pushed %s to %s", branch, self.config.remote)
        return branch
