"""Issue identifiers, issue records and the "needs fix" rule."""

from __future__ import annotations

import re
from collections.abc import Iterable, Iterator
from dataclasses import dataclass

__all__ = [
    "DONE_STATUS",
    "IssueRecord",
    "extract_issue_ids",
    "issue_id_pattern",
    "needs_fix",
]

DONE_STATUS = "Done"


@dataclass(frozen=True, slots=True)
class IssueRecord:
    """What the tracker says about one issue.

    Each field is None when the tracker response did not contain it, including
    when the response could not be fetched or parsed at all.
    """

    identifier: str
    status: str | None = None
    assignee: str | None = None
    fix_version: str | None = None

    @classmethod
    def empty(cls, identifier: str) -> IssueRecord:
        return cls(identifier=identifier)


def issue_id_pattern(project: str) -> re.Pattern[str]:
    """``<KEY>``, an optional ``-`` or ``_`` separator, then digits.

    Case-sensitive, with no left boundary: ``XPROJ-5`` matches as ``PROJ-5``.
    """
    return re.compile(rf"{re.escape(project)}[-_]?(\d+)")


def extract_issue_ids(lines: Iterable[str], project: str) -> Iterator[str]:
    """Yield one normalised ``<KEY>-<digits>`` per match, in line order.

    Duplicates are yielded each time they occur.
    """
    pattern = issue_id_pattern(project)
    for line in lines:
        for match in pattern.finditer(line):
            yield f"{project}-{match.group(1)}"


def needs_fix(record: IssueRecord, target_version: str) -> bool:
    """True unless the issue is Done and slated for exactly the target version."""
    return record.fix_version != target_version or record.status != DONE_STATUS
