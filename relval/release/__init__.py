"""Release checks: issue extraction, fix rule and report rows."""

from .issues import DONE_STATUS, IssueRecord, extract_issue_ids, issue_id_pattern, needs_fix
from .report import COLUMNS, ReportRow, build_row, format_header

__all__ = [
    "COLUMNS",
    "DONE_STATUS",
    "IssueRecord",
    "ReportRow",
    "build_row",
    "extract_issue_ids",
    "format_header",
    "issue_id_pattern",
    "needs_fix",
]
