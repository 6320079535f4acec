"""Issue lookups against the tracker's per-issue XML export.

The export is an RSS document with one ``<item>`` per issue:

    <rss><channel><item>
      <key>PROJ-42</key>
      <status>Done</status>
      <assignee username="jdoe">Jane Doe</assignee>
      <fixVersion>1.0</fixVersion>
    </item></channel></rss>
"""

from __future__ import annotations

import xml.etree.ElementTree as ET
from dataclasses import dataclass

from relval.core.result import Err, Ok, Result
from relval.release.issues import IssueRecord
from relval.tracker.http import HttpClient, HttpError

__all__ = ["ExportParseError", "IssueTracker", "parse_issue_export"]


@dataclass(frozen=True, slots=True)
class ExportParseError:
    identifier: str
    message: str


def _field(item: ET.Element, tag: str) -> str | None:
    # Repeated fields (several fixVersion entries) keep the first one.
    text = item.findtext(tag)
    if text is None:
        return None
    return text.strip() or None


def parse_issue_export(identifier: str, xml_text: str) -> Result[IssueRecord, ExportParseError]:
    """Parse one XML export into an IssueRecord.

    A well-formed document lacking a field yields None for that field.
    A malformed document is an error.
    """
    try:
        root = ET.fromstring(xml_text)
    except ET.ParseError as e:
        return Err(ExportParseError(identifier=identifier, message=f"Invalid XML: {e}"))

    item = root if root.tag == "item" else root.find(".//item")
    if item is None:
        return Ok(IssueRecord.empty(identifier))

    return Ok(
        IssueRecord(
            identifier=identifier,
            status=_field(item, "status"),
            assignee=_field(item, "assignee"),
            fix_version=_field(item, "fixVersion"),
        )
    )


class IssueTracker:
    """Read-only view of the issue tracker.

    Attributes:
        base_url: Tracker root URL, without trailing slash
    """

    def __init__(self, base_url: str, http: HttpClient) -> None:
        self.base_url = base_url.rstrip("/")
        self._http = http

    def export_url(self, identifier: str) -> str:
        return f"{self.base_url}/si/jira.issueviews:issue-xml/{identifier}/{identifier}.xml"

    def browse_url(self, identifier: str) -> str:
        return f"{self.base_url}/browse/{identifier}"

    def fetch(self, identifier: str) -> Result[IssueRecord, HttpError | ExportParseError]:
        """Fetch and parse a single issue. One GET, no retry."""
        result = self._http.get_text(self.export_url(identifier))
        if isinstance(result, Err):
            return result
        return parse_issue_export(identifier, result.value)

    def lookup(self, identifier: str) -> IssueRecord:
        """Like fetch(), but any failure yields a record with no fields."""
        return self.fetch(identifier).unwrap_or(IssueRecord.empty(identifier))
