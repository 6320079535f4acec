"""Issue tracker access: HTTP transport and XML export parsing."""

from .http import HttpClient, HttpError, MockHttpClient, RealHttpClient
from .jira import ExportParseError, IssueTracker, parse_issue_export

__all__ = [
    "ExportParseError",
    "HttpClient",
    "HttpError",
    "IssueTracker",
    "MockHttpClient",
    "RealHttpClient",
    "parse_issue_export",
]
