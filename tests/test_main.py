"""
Tests for the gitcal entry point.
"""

import argparse
import io
from datetime import date
from unittest.mock import MagicMock

import pytest
from rich.console import Console

from gitcal.git_client import GitClientError
from gitcal.main import _parse_as_of, build_parser, main

SAMPLE_LOG = "abc123 2024-06-01\ndef456 2024-06-01\nbad-line\nghi789 2024-06-02"


@pytest.fixture
def config_file(tmp_path):
    path = tmp_path / "gitcal.conf"
    path.write_text("author: alice\n", encoding="utf-8")
    return path


@pytest.fixture
def console():
    return Console(file=io.StringIO(), width=200, color_system=None)


def _client(output=SAMPLE_LOG):
    client = MagicMock()
    client.run_log.return_value = output
    return client


class TestMain:
    """Tests for the main pipeline."""

    def test_renders_calendar(self, config_file, console, capsys):
        """Successful run prints the title, calendar and summary."""
        client = _client()

        exit_code = main(
            ["--config", str(config_file), "--as-of", "2024-06-10"],
            client=client,
            console=console,
        )

        assert exit_code == 0
        client.run_log.assert_called_once_with("alice")
        assert "Git Contribution Calendar:" in capsys.readouterr().out
        output = console.file.getvalue()
        assert "┌" in output
        assert "3 contributions in the year before 2024-06-10" in output

    def test_piped_output_keeps_full_grid(self, config_file, capsys):
        """An 80-column console still gets every week of the calendar."""
        console = Console(file=io.StringIO(), width=80, color_system=None)

        exit_code = main(
            ["--config", str(config_file), "--as-of", "2024-06-10"],
            client=_client(),
            console=console,
        )

        assert exit_code == 0
        lines = console.file.getvalue().splitlines()
        assert lines[1].startswith("┌")
        assert len(lines[1]) == 161
        assert console.width == 80

    def test_missing_config_file(self, tmp_path, console, capsys):
        client = _client()

        exit_code = main(
            ["--config", str(tmp_path / "missing.conf")], client=client, console=console
        )

        assert exit_code == 1
        assert "Error reading config file" in capsys.readouterr().out
        client.run_log.assert_not_called()

    def test_missing_author_skips_extraction(self, tmp_path, console, capsys):
        """No author: message printed, git never run, nothing rendered."""
        path = tmp_path / "gitcal.conf"
        path.write_text("author: ''\n", encoding="utf-8")
        client = _client()

        exit_code = main(["--config", str(path)], client=client, console=console)

        assert exit_code == 1
        assert "No author specified in config file" in capsys.readouterr().out
        client.run_log.assert_not_called()
        assert console.file.getvalue() == ""

    def test_git_failure(self, config_file, console, capsys):
        client = MagicMock()
        client.run_log.side_effect = GitClientError("git log failed: fatal: not a git repository")

        exit_code = main(["--config", str(config_file)], client=client, console=console)

        assert exit_code == 1
        assert "not a git repository" in capsys.readouterr().out
        assert console.file.getvalue() == ""

    def test_no_contributions(self, config_file, console, capsys):
        """Empty log output: no grid is produced."""
        exit_code = main(
            ["--config", str(config_file)], client=_client(""), console=console
        )

        assert exit_code == 1
        assert "no contributions found" in capsys.readouterr().out
        assert console.file.getvalue() == ""


class TestBuildParser:
    """Tests for command line parsing."""

    def test_defaults(self):
        args = build_parser().parse_args([])

        assert args.repo == "."
        assert args.as_of is None
        assert args.verbose is False

    def test_as_of_parsed_as_date(self):
        args = build_parser().parse_args(["--as-of", "2024-06-10"])

        assert args.as_of == date(2024, 6, 10)

    def test_invalid_as_of_chains_value_error(self):
        with pytest.raises(argparse.ArgumentTypeError) as exc_info:
            _parse_as_of("2024-02-30")

        assert isinstance(exc_info.value.__cause__, ValueError)

    def test_invalid_as_of_rejected(self):
        with pytest.raises(SystemExit):
            build_parser().parse_args(["--as-of", "June"])
