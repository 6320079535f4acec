"""Fixed-width release report.

    ISSUE           STATUS          FIX VERSION     ASSIGNEE                  FIX
    PROJ-42         Done            1.0             Jane Doe
    PROJ-43         In Progress     1.1             John Roe                  https://tracker.example/browse/PROJ-43
"""

from __future__ import annotations

from dataclasses import dataclass

from relval.release.issues import IssueRecord, needs_fix

__all__ = ["COLUMNS", "ReportRow", "build_row", "format_header"]

# (label, width); the last column is unpadded.
COLUMNS: tuple[tuple[str, int], ...] = (
    ("ISSUE", 15),
    ("STATUS", 15),
    ("FIX VERSION", 15),
    ("ASSIGNEE", 25),
    ("FIX", 0),
)


def _format(cells: tuple[str, ...]) -> str:
    parts = [cell.ljust(width) for cell, (_, width) in zip(cells, COLUMNS)]
    return " ".join(parts).rstrip()


def format_header() -> str:
    return _format(tuple(label for label, _ in COLUMNS))


@dataclass(frozen=True, slots=True)
class ReportRow:
    issue: str
    status: str
    fix_version: str
    assignee: str
    fix_link: str

    @property
    def needs_fix(self) -> bool:
        return bool(self.fix_link)

    def format(self) -> str:
        return _format((self.issue, self.status, self.fix_version, self.assignee, self.fix_link))


def build_row(record: IssueRecord, target_version: str, browse_url: str) -> ReportRow:
    """Row for one issue; ``browse_url`` becomes the fix link when the issue needs fixing."""
    return ReportRow(
        issue=record.identifier,
        status=record.status or "",
        fix_version=record.fix_version or "",
        assignee=record.assignee or "",
        fix_link=browse_url if needs_fix(record, target_version) else "",
    )
