"""Tests for relval.cli.argv module."""

from __future__ import annotations

from relval.cli.argv import normalize_argv


def test_short_flag_with_equals_is_split() -> None:
    assert normalize_argv(["-v=1.0", "-s=v0.9"]) == ["-v", "1.0", "-s", "v0.9"]


def test_empty_short_value_kept_empty() -> None:
    assert normalize_argv(["-e="]) == ["-e", ""]


def test_value_may_contain_equals() -> None:
    assert normalize_argv(["-r=https://git.example/x.git?a=b"]) == [
        "-r",
        "https://git.example/x.git?a=b",
    ]


def test_long_flags_untouched() -> None:
    argv = ["--version=1.0", "--start", "v0.9"]
    assert normalize_argv(argv) == argv


def test_unknown_short_flag_untouched() -> None:
    assert normalize_argv(["-x=1"]) == ["-x=1"]


def test_stops_at_double_dash() -> None:
    assert normalize_argv(["-v=1.0", "--", "-s=x"]) == ["-v", "1.0", "--", "-s=x"]


def test_trailing_value_flag_becomes_empty() -> None:
    assert normalize_argv(["--start=v0.9", "--version"]) == ["--start=v0.9", "--version="]
    assert normalize_argv(["-s", "v0.9", "-v"]) == ["-s", "v0.9", "--version="]


def test_value_flag_followed_by_option_becomes_empty() -> None:
    assert normalize_argv(["--version", "--start=v0.9"]) == ["--version=", "--start=v0.9"]
    assert normalize_argv(["-e", "-y"]) == ["--end=", "-y"]


def test_value_flag_with_separate_value_untouched() -> None:
    argv = ["--version", "1.0", "-s", "v0.9"]
    assert normalize_argv(argv) == argv


def test_flag_without_value_untouched() -> None:
    assert normalize_argv(["-v=1.0", "-y"]) == ["-v", "1.0", "-y"]
