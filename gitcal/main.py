"""
gitcal: a terminal contribution calendar for one git author.

Entry point for the application.
"""

import argparse
import logging
import sys
from datetime import date, datetime

from rich.console import Console

from gitcal.cli import CalendarStyle, display_calendar, display_summary
from gitcal.commit_parser import DATE_FORMAT, NoContributionsError, extract_history
from gitcal.config import CONFIG_PATH, ConfigError, load_config
from gitcal.git_client import GitClientError, GitLogClient
from gitcal.history_calculator import calculate_history
from gitcal.streak_calculator import calculate_streak

logger = logging.getLogger(__name__)


def _parse_as_of(value: str) -> date:
    try:
        return datetime.strptime(value, DATE_FORMAT).date()
    except ValueError as e:
        raise argparse.ArgumentTypeError(
            f"invalid date {value!r}, expected YYYY-MM-DD"
        ) from e


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="gitcal",
        description="Show a contribution calendar of your git commits for the last year.",
    )
    parser.add_argument(
        "--config",
        default=CONFIG_PATH,
        help=f"config file naming the author (default: {CONFIG_PATH})",
    )
    parser.add_argument(
        "--repo", default=".", help="repository to read history from (default: .)"
    )
    parser.add_argument(
        "--as-of",
        type=_parse_as_of,
        default=None,
        help="last day of the calendar, YYYY-MM-DD (default: today)",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    return parser


def main(
    argv: list[str] | None = None,
    client: GitLogClient | None = None,
    console: Console | None = None,
) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s: %(message)s",
    )

    if console is None:
        console = Console()

    print("Git Contribution Calendar:")

    try:
        config = load_config(args.config)
    except ConfigError as e:
        print(e)
        return 1

    if client is None:
        client = GitLogClient(args.repo)

    try:
        history = extract_history(config.author, client)
    except (GitClientError, NoContributionsError) as e:
        print(f"Error running git log: {e}")
        return 1

    as_of = args.as_of or date.today()
    grid = calculate_history(history, as_of)
    logger.debug("Counted %d commits since %s", grid.total, grid.start_date)

    streak_info = calculate_streak(
        [d for d in history.commit_dates if grid.start_date < d <= as_of], today=as_of
    )

    style = CalendarStyle()
    display_calendar(grid, style, console)
    display_summary(grid, streak_info, console)
    return 0


def run() -> None:
    """Console script entry point."""
    sys.exit(main())


if __name__ == "__main__":
    run()
