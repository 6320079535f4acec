"""Tests for services/workspace.py."""

from __future__ import annotations

import subprocess
from dataclasses import replace
from pathlib import Path
from unittest.mock import MagicMock, patch

from relval.core.options import ValidationOptions
from relval.core.result import Err, Ok
from relval.git.repository import GitError
from relval.output.console import MockConsole
from relval.services.workspace import WorkspaceError, WorkspaceService, workspace_path

OPTIONS = ValidationOptions(
    version="1.0",
    start="v0.9",
    end="HEAD",
    repo="https://git.example/proj.git",
    branch="master",
)


def _ok(*_args: object, **_kwargs: object) -> subprocess.CompletedProcess[str]:
    return subprocess.CompletedProcess(args=["git"], returncode=0, stdout="", stderr="")


def _commands(mock_run: MagicMock) -> list[list[str]]:
    return [call.args[0] for call in mock_run.call_args_list]


def test_workspace_path(tmp_path: Path) -> None:
    assert workspace_path(tmp_path, "PROJ", "1.0") == tmp_path / "proj-1.0"
    assert workspace_path(tmp_path, "PROJ", "release/1.0") == tmp_path / "proj-release-1.0"


class TestPrepare:
    @patch("subprocess.run")
    def test_fresh_clone(self, mock_run: MagicMock, tmp_path: Path) -> None:
        mock_run.side_effect = _ok
        path = tmp_path / "root" / "proj-1.0"
        asked: list[str] = []

        def confirm(msg: str) -> bool:
            asked.append(msg)
            return True

        console = MockConsole()
        result = WorkspaceService(console=console, confirm=confirm).prepare(path, OPTIONS)

        assert isinstance(result, Ok)
        assert result.value.path == path
        assert console.stdout == []
        assert console.find("Cloning")[0].stderr
        assert asked == []
        assert path.parent.is_dir()
        assert _commands(mock_run) == [
            ["git", "clone", "https://git.example/proj.git", str(path)],
            ["git", "-C", str(path), "checkout", "master"],
            ["git", "-C", str(path), "fetch", "--tags"],
        ]

    @patch("subprocess.run")
    def test_existing_confirmed_is_recreated(self, mock_run: MagicMock, tmp_path: Path) -> None:
        mock_run.side_effect = _ok
        path = tmp_path / "proj-1.0"
        path.mkdir()
        (path / "stale.txt").write_text("old", encoding="utf-8")

        service = WorkspaceService(console=MockConsole(), confirm=lambda _msg: True)
        result = service.prepare(path, OPTIONS)

        assert isinstance(result, Ok)
        assert not (path / "stale.txt").exists()
        assert len(mock_run.call_args_list) == 3

    @patch("subprocess.run")
    def test_existing_declined_aborts_untouched(self, mock_run: MagicMock, tmp_path: Path) -> None:
        path = tmp_path / "proj-1.0"
        path.mkdir()
        (path / "keep.txt").write_text("mine", encoding="utf-8")
        asked: list[str] = []

        def confirm(msg: str) -> bool:
            asked.append(msg)
            return False

        result = WorkspaceService(console=MockConsole(), confirm=confirm).prepare(path, OPTIONS)

        assert isinstance(result, Err)
        assert isinstance(result.error, WorkspaceError)
        assert result.error.kind == "declined"
        assert str(path) in asked[0]
        assert (path / "keep.txt").read_text(encoding="utf-8") == "mine"
        mock_run.assert_not_called()

    @patch("subprocess.run")
    def test_assume_yes_skips_prompt(self, mock_run: MagicMock, tmp_path: Path) -> None:
        mock_run.side_effect = _ok
        path = tmp_path / "proj-1.0"
        path.mkdir()

        def confirm(_msg: str) -> bool:
            raise AssertionError("should not prompt")

        options = replace(OPTIONS, assume_yes=True)
        result = WorkspaceService(console=MockConsole(), confirm=confirm).prepare(path, options)

        assert isinstance(result, Ok)
        assert not path.exists()

    def test_existing_without_prompt_fails(self, tmp_path: Path) -> None:
        path = tmp_path / "proj-1.0"
        path.mkdir()

        result = WorkspaceService(console=MockConsole()).prepare(path, OPTIONS)

        assert isinstance(result, Err)
        assert isinstance(result.error, WorkspaceError)
        assert result.error.kind == "no_prompt"
        assert result.error.hint is not None
        assert path.exists()

    @patch("subprocess.run")
    def test_clone_failure_stops(self, mock_run: MagicMock, tmp_path: Path) -> None:
        mock_run.return_value = subprocess.CompletedProcess(
            args=["git"], returncode=128, stdout="", stderr="fatal: unable to access\n"
        )

        result = WorkspaceService(console=MockConsole()).prepare(tmp_path / "x", OPTIONS)

        assert isinstance(result, Err)
        assert result.error == GitError(
            command="clone", message="fatal: unable to access", returncode=128
        )
        assert len(mock_run.call_args_list) == 1

    @patch("subprocess.run")
    def test_checkout_failure_stops(self, mock_run: MagicMock, tmp_path: Path) -> None:
        def fake(cmd: list[str], **_kwargs: object) -> subprocess.CompletedProcess[str]:
            if "checkout" in cmd:
                return subprocess.CompletedProcess(
                    args=cmd, returncode=1, stdout="", stderr="error: pathspec 'nope'\n"
                )
            return _ok()

        mock_run.side_effect = fake

        result = WorkspaceService(console=MockConsole()).prepare(tmp_path / "x", OPTIONS)

        assert isinstance(result, Err)
        assert isinstance(result.error, GitError)
        assert result.error.command == "checkout"
        assert not any("fetch" in cmd for cmd in _commands(mock_run))
