import logging
import subprocess
from pathlib import Path
from typing import Generator

import pytest
from click.testing import CliRunner

from git_kick.errors import GitCommandError

FEATURE_BRANCH = "ccs-123-fix-login-bug"


def git(repo: Path, *args: str) -> str:
    """Run git in ``repo`` and return trimmed stdout."""
    result = subprocess.run(
        ["git", *args], cwd=repo, check=True, capture_output=True, text=True
    )
    return result.stdout.strip()


def add_commit(repo: Path, filename: str, content: str, message: str) -> None:
    (repo / filename).write_text(content)
    git(repo, "add", ".")
    git(repo, "commit", "-m", message)


@pytest.fixture
def temp_git_repo(tmp_path: Path) -> Generator[Path, None, None]:
    """Create a temporary git repository with a develop branch."""
    repo = tmp_path / "repo"
    repo.mkdir()
    git(repo, "init")
    git(repo, "config", "user.name", "Test User")
    git(repo, "config", "user.email", "test@example.com")
    git(repo, "config", "commit.gpgsign", "false")

    add_commit(repo, "README.md", "# Test Repo", "Initial commit")

    cur = git(repo, "symbolic-ref", "--short", "HEAD")
    if cur != "develop":
        git(repo, "branch", "-m", cur, "develop")

    yield repo


@pytest.fixture
def temp_feature_repo(temp_git_repo: Path) -> Path:
    """Create a repo checked out on a feature branch three commits ahead of develop."""
    git(temp_git_repo, "checkout", "-b", FEATURE_BRANCH)
    for i in range(1, 4):
        add_commit(temp_git_repo, f"file{i}.txt", f"content {i}", f"WIP {i}")
    return temp_git_repo


@pytest.fixture
def temp_remote(temp_feature_repo: Path, tmp_path: Path) -> Path:
    """Attach a bare repository as ``origin`` of the feature repo."""
    remote = tmp_path / "remote.git"
    subprocess.run(["git", "init", "--bare", str(remote)], check=True, capture_output=True)
    git(temp_feature_repo, "remote", "add", "origin", str(remote))
    return remote


@pytest.fixture
def runner():
    """Create a Click test runner."""
    return CliRunner()


@pytest.fixture(autouse=True)
def restore_root_logger():
    """Undo handlers installed by the CLI's logging setup."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


class FakeGitExecutor:
    """In-memory stand-in for GitExecutor that records every call."""

    MUTATIONS = {
        "create_branch",
        "switch_branch",
        "reset_soft",
        "add_all",
        "commit",
        "push",
        "push_force",
        "delete_branch",
    }

    def __init__(
        self,
        branch: str = FEATURE_BRANCH,
        status: str = "",
        ahead: int = 3,
        branches: list[str] | None = None,
        failures: dict[str, Exception] | None = None,
    ):
        self.branch = branch
        self.status = status
        self.ahead = ahead
        self.branches = list(branches or [])
        self.failures = dict(failures or {})
        self.calls: list[tuple] = []

    @property
    def call_names(self) -> list[str]:
        return [call[0] for call in self.calls]

    @property
    def mutations(self) -> list[tuple]:
        return [call for call in self.calls if call[0] in self.MUTATIONS]

    def _record(self, name: str, *args) -> None:
        self.calls.append((name, *args))
        if name in self.failures:
            raise self.failures[name]

    def get_current_branch(self) -> str:
        self._record("get_current_branch")
        return self.branch

    def create_branch(self, branch: str) -> None:
        self._record("create_branch", branch)
        self.branches.append(branch)

    def switch_branch(self, branch: str) -> None:
        self._record("switch_branch", branch)
        self.branch = branch

    def count_commits_ahead(self, target: str) -> int:
        self._record("count_commits_ahead", target)
        return self.ahead

    def reset_soft(self, commits: int) -> None:
        self._record("reset_soft", commits)
        self.status = "A  squashed.txt"

    def add_all(self) -> None:
        self._record("add_all")

    def commit(self, message: str) -> None:
        self._record("commit", message)
        self.status = ""

    def push(self, branch: str, remote: str = "origin") -> None:
        self._record("push", branch, remote)

    def push_force(self, branch: str, remote: str = "origin") -> None:
        self._record("push_force", branch, remote)

    def delete_branch(self, branch: str, force: bool = True) -> None:
        self._record("delete_branch", branch, force)
        self.branches.remove(branch)

    def list_branches(self, prefix: str) -> list[str]:
        self._record("list_branches", prefix)
        return [b for b in self.branches if b.startswith(prefix)]

    def get_status(self) -> str:
        self._record("get_status")
        return self.status

    def is_clean_working_tree(self) -> bool:
        return not self.get_status()


@pytest.fixture
def fake_git() -> FakeGitExecutor:
    return FakeGitExecutor()


@pytest.fixture
def git_failure():
    """Build a GitCommandError the way the executor raises it."""

    def _make(*args: str, output: str = "fatal: something went wrong") -> GitCommandError:
        return GitCommandError(list(args), 128, output)

    return _make
