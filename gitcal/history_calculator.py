"""
History calculator for the contribution calendar.

Buckets commits by calendar day into a fixed 7 x 52 grid covering the
trailing 364 days, GitHub contribution-graph style.
"""

from dataclasses import dataclass
from datetime import date, timedelta

from gitcal.commit_parser import CommitHistory

ROWS = 7  # Days of the week
COLUMNS = 52  # Weeks of the year
MAX_LEVEL = 5  # Number of colour tiers


@dataclass
class CalendarGrid:
    """Per-day commit counts laid out as ROWS x COLUMNS cells."""

    start_date: date
    end_date: date
    counts: list[list[int]]

    @property
    def columns(self) -> int:
        return len(self.counts[0]) if self.counts else 0

    @property
    def total(self) -> int:
        """Total commits counted in the grid."""
        return sum(sum(row) for row in self.counts)

    def levels(self, max_level: int = MAX_LEVEL) -> list[list[int]]:
        """Return the counts capped to colour tier indexes."""
        return [
            [contribution_level(count, max_level) for count in row]
            for row in self.counts
        ]


def calculate_start_date(as_of: date) -> date:
    """Return the first date of the calendar ending at as_of."""
    return as_of - timedelta(days=ROWS * COLUMNS - 1)


def calculate_history(history: CommitHistory, as_of: date | None = None) -> CalendarGrid:
    """
    Count commits per day for the trailing 364 days.

    Commits on the start date and on as_of itself fall outside the window
    and are not counted.

    Args:
        history: Parsed commit history
        as_of: Reference "today" (defaults to the current date)

    Returns:
        CalendarGrid with raw per-day counts; cell (row, col) is
        start_date + row * COLUMNS + col days
    """
    if as_of is None:
        as_of = date.today()

    start_date = calculate_start_date(as_of)

    # Build a mapping of date -> commit count for commits inside the window
    commits_by_date: dict[date, int] = {}
    for commit in history.commits:
        if start_date < commit.timestamp < as_of:
            commits_by_date[commit.timestamp] = commits_by_date.get(commit.timestamp, 0) + 1

    counts = []
    for row in range(ROWS):
        row_counts = []
        for col in range(COLUMNS):
            cell_date = start_date + timedelta(days=row * COLUMNS + col)
            row_counts.append(commits_by_date.get(cell_date, 0))
        counts.append(row_counts)

    return CalendarGrid(start_date=start_date, end_date=as_of, counts=counts)


def contribution_level(count: int, max_level: int = MAX_LEVEL) -> int:
    """
    Cap a commit count to a colour tier index.

    Args:
        count: Number of commits for the day
        max_level: Number of colour tiers

    Returns:
        Level from 0 to max_level - 1
    """
    return min(count, max_level - 1)
