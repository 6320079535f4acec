"""The release validation pipeline.

prepare workspace -> one-line log of start..end -> extract issue ids
-> look each one up and print its row immediately.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from relval.core.config import Config
from relval.core.options import ValidationOptions
from relval.core.result import Err, Ok, Result
from relval.git.repository import GitError, Repository
from relval.output.console import ConsoleProtocol, Style
from relval.release.issues import extract_issue_ids
from relval.release.report import build_row, format_header
from relval.services.workspace import WorkspaceError, WorkspaceService, workspace_path
from relval.tracker.http import HttpClient
from relval.tracker.jira import IssueTracker

__all__ = ["ReleaseValidationService", "ValidationSummary"]


@dataclass(frozen=True, slots=True)
class ValidationSummary:
    checked: int
    needing_fix: int

    @property
    def is_clean(self) -> bool:
        return self.needing_fix == 0


class ReleaseValidationService:
    def __init__(
        self,
        *,
        config: Config,
        console: ConsoleProtocol,
        http: HttpClient,
        confirm: Callable[[str], bool] | None = None,
    ) -> None:
        self._config = config
        self._console = console
        self._tracker = IssueTracker(config.tracker.url, http)
        self._workspace = WorkspaceService(console=console, confirm=confirm)

    def run(self, options: ValidationOptions) -> Result[ValidationSummary, WorkspaceError | GitError]:
        path = workspace_path(
            self._config.workspace.temp_root,
            self._config.tracker.project,
            options.version,
        )
        prepared = self._workspace.prepare(path, options)
        if isinstance(prepared, Err):
            return prepared
        return self.report(prepared.value, options)

    def report(
        self, repo: Repository, options: ValidationOptions
    ) -> Result[ValidationSummary, GitError]:
        """Print the table for ``options.start..options.end`` of an existing clone."""
        log = repo.log_oneline(options.start, options.end)
        if isinstance(log, Err):
            return log

        self._console.print(format_header())

        checked = 0
        needing_fix = 0
        for identifier in extract_issue_ids(log.value, self._config.tracker.project):
            record = self._tracker.lookup(identifier)
            row = build_row(record, options.version, self._tracker.browse_url(identifier))
            self._console.print(row.format())
            checked += 1
            if row.needs_fix:
                needing_fix += 1

        summary = ValidationSummary(checked=checked, needing_fix=needing_fix)
        self._console.status(
            f"{checked} issue(s) checked, {needing_fix} need(s) fixing",
            Style.BOLD if summary.is_clean else Style.WARNING,
        )
        return Ok(summary)
