"""Custom exceptions for git-kick."""


class KickError(Exception):
    """Base exception for all kick errors."""

    exit_code: int = 1


class GitCommandError(KickError):
    """Raised when a git invocation exits with a non-zero status."""

    def __init__(self, args: list[str], returncode: int, output: str):
        self.git_args = list(args)
        self.returncode = returncode
        self.output = output
        super().__init__(
            f"git {' '.join(args)} failed with exit status {returncode}: {output}"
        )


class DirtyWorkingTreeError(KickError):
    """Raised when operation requires clean working tree."""

    def __init__(self, status: str):
        self.status = status
        super().__init__(f"Working tree has uncommitted changes:\n{status}")


class SameBranchError(KickError):
    """Raised when the comparison branch is the current branch."""

    def __init__(self, branch: str):
        self.branch = branch
        super().__init__(
            f"Comparison branch '{branch}' is the current branch, nothing to compare against"
        )


class DetachedHeadError(KickError):
    """Raised when HEAD is not on a branch."""

    def __init__(self):
        super().__init__("HEAD is detached, check out a branch before squashing")
