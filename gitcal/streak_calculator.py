"""
Calculate coding streaks from commit dates.
"""

from datetime import date, timedelta
from typing import Iterable


def calculate_streak(commit_dates: Iterable[date], today: date | None = None) -> dict:
    """
    Calculate streak information from commit dates.

    Args:
        commit_dates: Dates of individual commits, in any order, duplicates allowed
        today: Override today's date for testing. Defaults to current date.

    Returns:
        Dictionary with streak statistics:
        - current_streak: Consecutive days ending today (or yesterday)
        - longest_streak: Longest streak found in the data
        - streak_active: Whether there is a commit on today
        - last_commit_date: Most recent commit date (or None)
    """
    if today is None:
        today = date.today()

    unique_dates = sorted(set(commit_dates), reverse=True)  # Most recent first

    if not unique_dates:
        return {
            "current_streak": 0,
            "longest_streak": 0,
            "streak_active": False,
            "last_commit_date": None,
        }

    current_streak = _calculate_current_streak(unique_dates, today)
    longest_streak = max(_calculate_longest_streak(unique_dates), current_streak)

    return {
        "current_streak": current_streak,
        "longest_streak": longest_streak,
        "streak_active": unique_dates[0] == today,
        "last_commit_date": unique_dates[0],
    }


def _calculate_current_streak(commit_dates: list[date], today: date) -> int:
    """
    Count consecutive days back from the most recent commit.

    The streak must start from today or yesterday (grace period).

    Args:
        commit_dates: Unique dates, sorted descending

    Returns:
        Current streak count
    """
    most_recent = commit_dates[0]
    if most_recent not in (today, today - timedelta(days=1)):
        return 0

    streak = 1
    for previous, current in zip(commit_dates, commit_dates[1:]):
        if previous - current != timedelta(days=1):
            break
        streak += 1

    return streak


def _calculate_longest_streak(commit_dates: list[date]) -> int:
    """Return the longest run of consecutive days (dates sorted descending)."""
    longest = 1
    current_streak = 1

    for previous, current in zip(commit_dates, commit_dates[1:]):
        if previous - current == timedelta(days=1):
            current_streak += 1
            longest = max(longest, current_streak)
        else:
            current_streak = 1

    return longest
