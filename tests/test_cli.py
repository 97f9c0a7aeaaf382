"""Tests for the CLI entry point."""

import io
from pathlib import Path

import pytest
from rich.console import Console
from typer.testing import CliRunner

from fsaudit import cli
from fsaudit.cli import app
from fsaudit.config import loader
from fsaudit.config.identity import IdentityError
from fsaudit.config.schema import PlatformPaths

runner = CliRunner()


def _report_lines(output: str) -> list[str]:
    return [line for line in output.splitlines() if " # " in line]


@pytest.fixture
def single_root(tmp_path: Path, monkeypatch) -> Path:
    """Point the CLI at a platform whose only drive root is tmp_path."""
    platform = PlatformPaths(
        separator="/", system_root="SystemRoot", user_home="/home/t",
        app_data="/home/t/.local/share", temp_dir="TempRoot", os_name="posix",
    )
    monkeypatch.setattr(PlatformPaths, "drive_roots", lambda self: [str(tmp_path)])
    monkeypatch.setattr(loader, "resolve_platform", lambda: platform)
    return tmp_path


class TestVersion:
    def test_version_flag(self):
        result = runner.invoke(app, ["--version"])
        assert result.exit_code == 0
        assert "fsaudit" in result.output


class TestScan:
    def test_reports_interesting_entries(self, single_root: Path):
        (single_root / "secrets.env").write_text("A=1\n")
        (single_root / "notes.txt").write_text("plain\n")
        (single_root / "data.csv").write_text("a;b;c\n1;2;3\n")
        result = runner.invoke(app, [])
        assert result.exit_code == 0
        assert f"{single_root / 'data.csv'} # csv(';')" in result.output
        assert f"{single_root / 'secrets.env'} # dotenv" in result.output
        assert "notes.txt" not in result.output

    def test_empty_root(self, single_root: Path):
        result = runner.invoke(app, [])
        assert result.exit_code == 0
        assert " # " not in result.output

    def test_verbose_summary(self, single_root: Path, monkeypatch):
        (single_root / "report.pdf").write_text("%PDF")
        (single_root / "book.xlsx").write_text("")
        err = io.StringIO()
        monkeypatch.setattr(cli, "console", Console(file=err, width=200))

        quiet = runner.invoke(app, [])
        assert quiet.exit_code == 0
        assert err.getvalue() == ""

        loud = runner.invoke(app, ["--verbose"])
        assert loud.exit_code == 0
        summary = err.getvalue()
        assert f"Roots: {single_root}" in summary
        assert "fsaudit Summary" in summary
        assert "Entries visited" in summary
        assert "fsaudit Summary" not in loud.output

        assert _report_lines(loud.output) == _report_lines(quiet.output) == [
            f"{single_root / 'book.xlsx'} # excel",
            f"{single_root / 'report.pdf'} # pdf",
        ]


class TestExitCodes:
    def test_identity_failure_aborts(self, tmp_path: Path, monkeypatch):
        (tmp_path / "report.pdf").write_text("%PDF")
        monkeypatch.setattr(PlatformPaths, "drive_roots", lambda self: [str(tmp_path)])

        def fail():
            raise IdentityError("Failed to get user name: no login")

        monkeypatch.setattr(loader, "resolve_platform", fail)
        result = runner.invoke(app, [])
        assert result.exit_code == 2
        assert " # pdf" not in result.output
