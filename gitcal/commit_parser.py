"""
Parse commit history from git log output.
"""

import logging
import re
from dataclasses import dataclass, field
from datetime import date, datetime

from gitcal.git_client import GitLogClient

logger = logging.getLogger(__name__)

# git log --date=short emits zero-padded ISO dates
DATE_PATTERN = re.compile(r"^[0-9]{4}-[0-9]{2}-[0-9]{2}$")
DATE_FORMAT = "%Y-%m-%d"


class NoContributionsError(Exception):
    """Raised when git log succeeds but lists no commits."""

    pass


@dataclass(frozen=True)
class Commit:
    """A single commit, bucketed to its calendar day."""

    hash: str
    author: str
    timestamp: date


@dataclass
class CommitHistory:
    """All commits found for one author, in git log order."""

    author: str
    commits: list[Commit] = field(default_factory=list)

    @property
    def commit_dates(self) -> list[date]:
        """Return the date of every commit."""
        return [commit.timestamp for commit in self.commits]


def parse_commit_date(value: str) -> date:
    """
    Parse a strict YYYY-MM-DD date.

    Raises:
        ValueError: If the value is not a valid zero-padded ISO date
    """
    value = value.strip()
    if not DATE_PATTERN.match(value):
        raise ValueError(f"expected YYYY-MM-DD, got {value!r}")
    return datetime.strptime(value, DATE_FORMAT).date()


def parse_git_log(output: str, author: str) -> CommitHistory:
    """
    Parse git log output into a commit history.

    Lines with fewer than two fields are skipped silently. Lines whose
    date cannot be parsed are logged and skipped.

    Args:
        output: Raw output of git log --pretty=format:"%h %ad" --date=short
        author: Author the log was filtered to

    Returns:
        CommitHistory preserving the order of the log output
    """
    commits = []

    for line in output.splitlines():
        parts = line.split(None, 1)
        if len(parts) < 2:
            continue

        commit_hash, date_str = parts
        try:
            timestamp = parse_commit_date(date_str)
        except ValueError as e:
            logger.warning("Failed to parse date %s: %s", date_str.strip(), e)
            continue

        commits.append(Commit(hash=commit_hash, author=author, timestamp=timestamp))

    logger.debug("Parsed %d commits for %s", len(commits), author)
    return CommitHistory(author=author, commits=commits)


def extract_history(author: str, runner: GitLogClient) -> CommitHistory:
    """
    Fetch and parse the commit history for an author.

    Args:
        author: Author identity to filter on
        runner: Source of git log output; anything with run_log(author)

    Returns:
        CommitHistory for the author

    Raises:
        GitClientError: If the runner fails
        NoContributionsError: If the log is empty
    """
    output = runner.run_log(author)
    if not output.strip():
        raise NoContributionsError("no contributions found")
    return parse_git_log(output, author)
