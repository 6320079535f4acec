"""Tests for relval.release.issues module."""

from __future__ import annotations

import pytest

from relval.release.issues import IssueRecord, extract_issue_ids, issue_id_pattern, needs_fix

LOG = [
    "a1b2c3d PROJ-12 Add widget (#40)",
    "b2c3d4e PROJ_7 and PROJ-12 follow-up",
    "c3d4e5f Bump version, no issue",
    "d4e5f6a proj-99 lower case is not an issue",
    "e5f6a7b PROJ15 closes #3",
]


class TestExtractIssueIds:
    def test_order_and_duplicates(self) -> None:
        assert list(extract_issue_ids(LOG, "PROJ")) == [
            "PROJ-12",
            "PROJ-7",
            "PROJ-12",
            "PROJ-15",
        ]

    def test_is_lazy_and_single_pass(self) -> None:
        ids = extract_issue_ids(iter(LOG), "PROJ")

        assert next(ids) == "PROJ-12"
        assert list(ids) == ["PROJ-7", "PROJ-12", "PROJ-15"]
        assert list(ids) == []

    def test_other_project_key(self) -> None:
        lines = ["abc METRON-1234 fix parser", "def PROJ-1 not ours"]
        assert list(extract_issue_ids(lines, "METRON")) == ["METRON-1234"]

    def test_empty_log(self) -> None:
        assert list(extract_issue_ids([], "PROJ")) == []

    def test_key_embedded_in_longer_word_still_matches(self) -> None:
        # no left boundary on the key
        assert list(extract_issue_ids(["a1 XPROJ-5 rename"], "PROJ")) == ["PROJ-5"]

    def test_key_is_literal(self) -> None:
        assert issue_id_pattern("A.B").fullmatch("AXB-1") is None
        assert issue_id_pattern("A.B").fullmatch("A.B-1") is not None


class TestNeedsFix:
    def test_done_and_matching_version(self) -> None:
        record = IssueRecord("PROJ-42", status="Done", assignee="jdoe", fix_version="1.0")
        assert needs_fix(record, "1.0") is False

    def test_wrong_version(self) -> None:
        record = IssueRecord("PROJ-42", status="Done", fix_version="1.1")
        assert needs_fix(record, "1.0") is True

    @pytest.mark.parametrize("fix_version", ["1.0", "1.1", None])
    def test_not_done(self, fix_version: str | None) -> None:
        record = IssueRecord("PROJ-42", status="In Progress", fix_version=fix_version)
        assert needs_fix(record, "1.0") is True

    def test_status_match_is_exact(self) -> None:
        record = IssueRecord("PROJ-42", status="done", fix_version="1.0")
        assert needs_fix(record, "1.0") is True

    def test_empty_record(self) -> None:
        assert needs_fix(IssueRecord.empty("PROJ-42"), "1.0") is True
