"""Tests for CLI argument parsing and command output."""

from __future__ import annotations

import argparse
import json
from pathlib import Path

import pytest

from folio.browser.models import DirectoryEntry
from folio.cli import (
    _build_parser,
    _format_row,
    _run_ls,
    _run_parent,
    format_size,
)


@pytest.fixture(autouse=True)
def _default_directory(
    monkeypatch: pytest.MonkeyPatch, home_dir: Path
) -> None:
    """Point Settings() at the fake home for every CLI test."""
    monkeypatch.setenv("DEFAULT_DIRECTORY", str(home_dir))


class TestArgParser:
    def test_version_flag(self) -> None:
        args = _build_parser().parse_args(["--version"])
        assert args.version is True

    def test_ls_defaults(self) -> None:
        args = _build_parser().parse_args(["ls"])
        assert args.command == "ls"
        assert args.path is None
        assert args.json is False

    def test_ls_with_path_and_json(self) -> None:
        args = _build_parser().parse_args(["ls", "/tmp", "--json"])
        assert args.path == "/tmp"
        assert args.json is True

    def test_parent_requires_path(self) -> None:
        with pytest.raises(SystemExit):
            _build_parser().parse_args(["parent"])

    def test_mcp_defaults(self) -> None:
        args = _build_parser().parse_args(["mcp"])
        assert args.transport == "stdio"
        assert args.port == 8001

    def test_mcp_rejects_unknown_transport(self) -> None:
        with pytest.raises(SystemExit):
            _build_parser().parse_args(["mcp", "--transport", "grpc"])

    def test_serve_defaults_come_from_settings(self) -> None:
        args = _build_parser().parse_args(["serve"])
        assert args.host is None
        assert args.port is None

    def test_no_command(self) -> None:
        args = _build_parser().parse_args([])
        assert args.command is None


class TestFormatSize:
    @pytest.mark.parametrize(
        ("size", "expected"),
        [
            (0, "0 B"),
            (1023, "1023 B"),
            (1024, "1.0 KB"),
            (1536, "1.5 KB"),
            (1024 * 1024 - 1, "1.0 MB"),
            (1024 * 1024 - 52, "1023.9 KB"),
            (5 * 1024 * 1024, "5.0 MB"),
            (3 * 1024**3, "3.0 GB"),
            (2048 * 1024**4, "2048.0 TB"),
        ],
    )
    def test_units(self, size: int, expected: str) -> None:
        assert format_size(size) == expected

    def test_row_marks_directories(self) -> None:
        row = _format_row(DirectoryEntry("Zebra", "/x/Zebra", True, 4096))
        assert row.startswith("d ")
        assert row.endswith("  Zebra")
        assert "4.0 KB" in row


class TestRunLs:
    def test_table_output(
        self, sample_dir: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        _run_ls(argparse.Namespace(path=str(sample_dir), json=False))
        lines = capsys.readouterr().out.splitlines()
        assert len(lines) == 2
        assert lines[0].startswith("d") and lines[0].endswith("Zebra")
        assert lines[1].startswith("-") and lines[1].endswith("apple.txt")

    def test_json_output(
        self, sample_dir: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        _run_ls(argparse.Namespace(path=str(sample_dir), json=True))
        records = json.loads(capsys.readouterr().out)
        assert [r["name"] for r in records] == ["Zebra", "apple.txt"]

    def test_no_path_uses_configured_default(
        self, capsys: pytest.CaptureFixture[str]
    ) -> None:
        _run_ls(argparse.Namespace(path=None, json=True))
        records = json.loads(capsys.readouterr().out)
        assert [r["name"] for r in records] == ["notes.md"]

    def test_read_failure_exits_1(
        self, capsys: pytest.CaptureFixture[str]
    ) -> None:
        with pytest.raises(SystemExit) as exc_info:
            _run_ls(
                argparse.Namespace(
                    path="/definitely/nonexistent/path", json=False
                )
            )
        assert exc_info.value.code == 1
        captured = capsys.readouterr()
        assert captured.out == ""
        assert "Failed to read directory" in captured.err


class TestRunParent:
    def test_prints_parent(
        self, capsys: pytest.CaptureFixture[str]
    ) -> None:
        _run_parent(argparse.Namespace(path="/a/b/c"))
        assert capsys.readouterr().out == "/a/b\n"

    def test_root_exits_1_silently(
        self, capsys: pytest.CaptureFixture[str]
    ) -> None:
        with pytest.raises(SystemExit) as exc_info:
            _run_parent(argparse.Namespace(path="/"))
        assert exc_info.value.code == 1
        assert capsys.readouterr().out == ""
