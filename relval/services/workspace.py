"""Workspace preparation: a fresh clone of the repository per release version."""

from __future__ import annotations

import os
import shutil
import stat
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path
from typing import Literal

from relval.core.options import ValidationOptions
from relval.core.result import Err, Ok, Result
from relval.git.repository import GitError, Repository
from relval.output.console import ConsoleProtocol

__all__ = ["WorkspaceError", "WorkspaceService", "workspace_path"]


@dataclass(frozen=True, slots=True)
class WorkspaceError:
    kind: Literal["declined", "no_prompt", "io"]
    message: str
    hint: str | None = None


def workspace_path(temp_root: Path, project: str, version: str) -> Path:
    """``<temp_root>/<project>-<version>``, e.g. /tmp/release-validator/proj-1.0."""
    safe_version = version.replace("/", "-").replace(os.sep, "-")
    return temp_root / f"{project.lower()}-{safe_version}"


def _remove_readonly(_func: Callable[[str], object], path: str, exc: BaseException) -> None:
    # git marks pack files read-only, which breaks rmtree on Windows.
    if isinstance(exc, PermissionError):
        os.chmod(path, stat.S_IWRITE)
        os.unlink(path)
    else:
        raise exc


class WorkspaceService:
    def __init__(
        self,
        *,
        console: ConsoleProtocol,
        confirm: Callable[[str], bool] | None = None,
    ) -> None:
        self._console = console
        self._confirm = confirm

    def prepare(
        self, path: Path, options: ValidationOptions
    ) -> Result[Repository, WorkspaceError | GitError]:
        """Recreate ``path`` as a clone of ``options.repo`` at ``options.branch``.

        An existing ``path`` is only removed after confirmation (or with
        ``assume_yes``). Declining leaves it untouched.
        """
        if path.exists():
            allowed = self._allow_overwrite(path, assume_yes=options.assume_yes)
            if isinstance(allowed, Err):
                return allowed
            removed = self._remove(path)
            if isinstance(removed, Err):
                return removed

        try:
            path.parent.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            return Err(WorkspaceError(kind="io", message=f"Cannot create {path.parent}: {e}"))

        self._console.status(f"Cloning {options.repo} into {path}")
        cloned = Repository.clone(options.repo, path)
        if isinstance(cloned, Err):
            return cloned
        repo = cloned.value

        self._console.status(f"Checking out {options.branch}")
        checkout = repo.checkout(options.branch)
        if isinstance(checkout, Err):
            return checkout

        self._console.status("Fetching tags")
        tags = repo.fetch_tags()
        if isinstance(tags, Err):
            return tags

        return Ok(repo)

    def _allow_overwrite(self, path: Path, *, assume_yes: bool) -> Result[None, WorkspaceError]:
        if assume_yes:
            return Ok(None)
        if self._confirm is None:
            return Err(
                WorkspaceError(
                    kind="no_prompt",
                    message=f"Workspace already exists: {path}",
                    hint="Re-run with --yes to overwrite it",
                )
            )
        if not self._confirm(f"{path} already exists. Overwrite?"):
            return Err(WorkspaceError(kind="declined", message="Aborted: workspace not overwritten"))
        return Ok(None)

    def _remove(self, path: Path) -> Result[None, WorkspaceError]:
        try:
            if path.is_dir() and not path.is_symlink():
                shutil.rmtree(path, onexc=_remove_readonly)
            else:
                path.unlink()
        except OSError as e:
            return Err(WorkspaceError(kind="io", message=f"Cannot remove {path}: {e}"))
        return Ok(None)
