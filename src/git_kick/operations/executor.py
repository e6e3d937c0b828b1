"""Git command gateway for git-kick."""

import logging
import subprocess
from pathlib import Path
from typing import Protocol, runtime_checkable

from git_kick.errors import GitCommandError

logger = logging.getLogger(__name__)


@runtime_checkable
class GitGateway(Protocol):
    """Git operations the workflows depend on."""

    def get_current_branch(self) -> str: ...

    def create_branch(self, branch: str) -> None: ...

    def switch_branch(self, branch: str) -> None: ...

    def count_commits_ahead(self, target: str) -> int: ...

    def reset_soft(self, commits: int) -> None: ...

    def add_all(self) -> None: ...

    def commit(self, message: str) -> None: ...

    def push(self, branch: str, remote: str = "origin") -> None: ...

    def push_force(self, branch: str, remote: str = "origin") -> None: ...

    def delete_branch(self, branch: str, force: bool = True) -> None: ...

    def list_branches(self, prefix: str) -> list[str]: ...

    def get_status(self) -> str: ...

    def is_clean_working_tree(self) -> bool: ...


class GitExecutor:
    """Execute git commands with proper error handling."""

    def __init__(self, cwd: Path | None = None):
        self.cwd = cwd

    def run(self, args: list[str]) -> str:
        """Run a git command and return its trimmed combined output.

        stdout and stderr are captured as a single stream so that a failure
        carries everything git printed.

        Raises:
            GitCommandError: If git exits with a non-zero status
        """
        cmd = ["git"] + args
        logger.debug("Running git command: %s", " ".join(cmd))
        result = subprocess.run(
            cmd,
            cwd=self.cwd,
            stdout=subprocess.PIPE,
            stderr=subprocess.STDOUT,
            text=True,
        )
        output = (result.stdout or "").strip()

        if result.returncode != 0:
            raise GitCommandError(args, result.returncode, output)

        return output

    def run_lines(self, args: list[str]) -> list[str]:
        """Run a git command and return its non-empty output lines."""
        output = self.run(args)
        return [line.strip() for line in output.split("\n") if line.strip()]

    def get_current_branch(self) -> str:
        """Get current branch name."""
        return self.run(["branch", "--show-current"])

    def create_branch(self, branch: str) -> None:
        """Create a branch at HEAD without switching to it."""
        self.run(["branch", branch])

    def switch_branch(self, branch: str) -> None:
        """Switch to an existing branch."""
        self.run(["switch", branch])

    def count_commits_ahead(self, target: str) -> int:
        """Count commits on HEAD that are not upstream in ``target``."""
        return len(self.run_lines(["cherry", "-v", target]))

    def reset_soft(self, commits: int) -> None:
        """Move HEAD back ``commits`` commits, keeping index and working tree."""
        self.run(["reset", "--soft", f"HEAD~{commits}"])

    def add_all(self) -> None:
        """Stage every change in the working tree."""
        self.run(["add", "-A"])

    def commit(self, message: str) -> None:
        """Commit staged changes."""
        self.run(["commit", "-m", message])

    def push(self, branch: str, remote: str = "origin") -> None:
        """Push a branch, setting its upstream tracking ref."""
        self.run(["push", "--set-upstream", remote, branch])

    def push_force(self, branch: str, remote: str = "origin") -> None:
        """Force-push a branch, overwriting the remote history."""
        self.run(["push", "--force", remote, branch])

    def delete_branch(self, branch: str, force: bool = True) -> None:
        """Delete a branch."""
        self.run(["branch", "-D" if force else "-d", branch])

    def list_branches(self, prefix: str) -> list[str]:
        """List local branches whose name starts with ``prefix``."""
        lines = self.run_lines(["branch", "--list", f"{prefix}*"])
        # "*" marks the current branch, "+" a branch checked out in a worktree
        return [line.lstrip("*+").strip() for line in lines]

    def get_status(self) -> str:
        """Get porcelain working tree status."""
        return self.run(["status", "--porcelain"])

    def is_clean_working_tree(self) -> bool:
        """Check if working tree has uncommitted changes."""
        return not self.get_status()
