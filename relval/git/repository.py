"""Git repository abstraction.

All commands run with ``git -C <path>`` so the caller never has to change the
process working directory. Every operation returns a Result.

Usage:
    match Repository.clone(url, Path("/tmp/release-validator/proj-1.0")):
        case Ok(repo):
            repo.checkout("master")
        case Err(e):
            print(f"Clone failed: {e.message}")
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING

from relval.core.result import Err, Ok, Result
from relval.platform.process import ProcessError
from relval.platform.process import run as run_process

if TYPE_CHECKING:
    from collections.abc import Callable

_GIT_TIMEOUT_SECONDS = 30.0
_GIT_NETWORK_TIMEOUT_SECONDS = 10 * 60.0

__all__ = [
    "GitError",
    "Repository",
]


@dataclass(frozen=True, slots=True)
class GitError:
    """Error from a git operation.

    Attributes:
        command: The git command that failed
        message: Error message (git's own stderr when available)
        returncode: Process return code
    """

    command: str
    message: str
    returncode: int = 1


def _git_error(command: str, fallback: str) -> Callable[[ProcessError], GitError]:
    def convert(e: ProcessError) -> GitError:
        return GitError(
            command=command,
            message=e.stderr.strip() or e.stdout.strip() or fallback,
            returncode=e.returncode,
        )

    return convert


class Repository:
    """A local working copy.

    Attributes:
        path: Path to the repository root
    """

    def __init__(self, path: Path) -> None:
        self.path = path

    @classmethod
    def clone(cls, url: str, dest: Path) -> Result[Repository, GitError]:
        """Clone ``url`` into ``dest``.

        ``dest`` must not exist; its parent must.
        """
        result = run_process(
            ["git", "clone", url, str(dest)],
            cwd=dest.parent,
            timeout=_GIT_NETWORK_TIMEOUT_SECONDS,
        )
        match result:
            case Err(e):
                return Err(_git_error("clone", "clone failed")(e))
            case Ok(_):
                return Ok(cls(dest))

    def checkout(self, branch: str) -> Result[str, GitError]:
        result = self._run(["checkout", branch])
        match result:
            case Err(e):
                return Err(_git_error("checkout", f"checkout of {branch} failed")(e))
            case Ok(stdout):
                return Ok(stdout.strip())

    def fetch_tags(self) -> Result[str, GitError]:
        """Fetch all tags from the remote so tag refs can start a range."""
        result = self._run(["fetch", "--tags"])
        match result:
            case Err(e):
                return Err(_git_error("fetch --tags", "fetch failed")(e))
            case Ok(stdout):
                return Ok(stdout.strip())

    def log_oneline(self, start: str, end: str) -> Result[list[str], GitError]:
        """One-line summaries of commits in ``start..end``, most recent first."""
        result = self._run(["log", "--oneline", "--no-decorate", f"{start}..{end}"])
        match result:
            case Err(e):
                return Err(_git_error("log", f"log {start}..{end} failed")(e))
            case Ok(stdout):
                return Ok([ln for ln in stdout.splitlines() if ln.strip()])

    def _run(self, args: list[str]) -> Result[str, ProcessError]:
        """Run a git command in this repository."""
        command = args[0] if args else ""
        timeout = (
            _GIT_NETWORK_TIMEOUT_SECONDS
            if command in {"fetch", "pull", "push", "clone"}
            else _GIT_TIMEOUT_SECONDS
        )
        return run_process(["git", "-C", str(self.path), *args], cwd=self.path, timeout=timeout)
