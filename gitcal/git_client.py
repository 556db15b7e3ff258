"""
Git client for reading an author's commit log.
"""

import logging
import subprocess
from pathlib import Path

logger = logging.getLogger(__name__)


class GitClientError(Exception):
    """Raised when git log cannot be run or exits with an error."""

    pass


class GitLogClient:
    """Runs git log in a working tree and returns its raw output."""

    GIT_EXECUTABLE = "git"
    LOG_FORMAT = "%h %ad"

    def __init__(self, repo_path: str | Path = "."):
        """
        Initialize the git client.

        Args:
            repo_path: Working directory git is run in (must be inside a repository)
        """
        self.repo_path = Path(repo_path)

    def build_command(self, author: str) -> list[str]:
        """Build the git log command line for an author."""
        return [
            self.GIT_EXECUTABLE,
            "log",
            f"--author={author}",
            f"--pretty=format:{self.LOG_FORMAT}",
            "--date=short",
        ]

    def run_log(self, author: str) -> str:
        """
        Run git log filtered to an author.

        Each output line holds a short hash and a YYYY-MM-DD date.

        Args:
            author: Author identity passed to --author

        Returns:
            Raw stdout of git log

        Raises:
            GitClientError: If git cannot be started or returns a failure status
        """
        command = self.build_command(author)
        logger.debug("Running %s in %s", " ".join(command), self.repo_path)

        try:
            result = subprocess.run(
                command,
                cwd=str(self.repo_path),
                capture_output=True,
                text=True,
                encoding="utf-8",
                errors="replace",
                check=True,
            )
        except FileNotFoundError as e:
            raise GitClientError(f"git executable not found: {e}") from e
        except subprocess.CalledProcessError as e:
            detail = (e.stderr or "").strip() or f"exit status {e.returncode}"
            raise GitClientError(f"git log failed: {detail}") from e
        except OSError as e:
            raise GitClientError(f"Failed to run git log: {e}") from e

        return result.stdout
