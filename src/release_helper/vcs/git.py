"""Local git history access.

Commits and tags are read by running git as a subprocess and parsing
its output with explicit field and record separators.
"""

from __future__ import annotations

import logging
import subprocess
from pathlib import Path

from release_helper.core.commits import RawCommit
from release_helper.exceptions import GitError

logger = logging.getLogger(__name__)

# Unit and record separators, never present in commit text
_FIELD_SEP = "\x1f"
_RECORD_SEP = "\x1e"
_LOG_FORMAT = f"%H{_FIELD_SEP}%an{_FIELD_SEP}%B{_RECORD_SEP}"


class GitRepository:
    """A git work tree on the local filesystem."""

    def __init__(self, path: Path | str | None = None) -> None:
        """Open the repository containing ``path``.

        Raises:
            GitError: If ``path`` is not inside a git work tree
        """
        start = Path(path) if path else Path.cwd()
        top_level = self._git("rev-parse", "--show-toplevel", cwd=start)
        self.path = Path(top_level)

    def _run(self, *args: str, strip: bool = True) -> str:
        return self._git(*args, cwd=self.path, strip=strip)

    @staticmethod
    def _git(*args: str, cwd: Path, strip: bool = True) -> str:
        try:
            result = subprocess.run(
                ["git", *args],
                capture_output=True,
                text=True,
                check=True,
                cwd=cwd,
            )
        except FileNotFoundError as e:
            raise GitError("git executable not found") from e
        except subprocess.CalledProcessError as e:
            raise GitError(
                f"git {' '.join(args)} failed with exit code {e.returncode}",
                stderr=e.stderr,
            ) from e
        # Separator characters count as whitespace for str.strip
        return result.stdout.strip() if strip else result.stdout

    def get_latest_tag(self, pattern: str | None = None) -> str | None:
        """Return the most recent tag reachable from HEAD.

        Args:
            pattern: Optional glob passed to ``git describe --match``

        Returns:
            Tag name, or None when the history has no matching tag
        """
        args = ["describe", "--tags", "--abbrev=0"]
        if pattern:
            args.extend(["--match", pattern])
        try:
            tag = self._run(*args)
        except GitError:
            logger.debug("No tag matching %r found", pattern)
            return None
        return tag or None

    def get_commits_since_tag(self, tag: str | None) -> list[RawCommit]:
        """List non-merge commits after ``tag``, newest first.

        Args:
            tag: Baseline tag; None lists the whole history

        Returns:
            Raw commit records
        """
        revision = f"{tag}..HEAD" if tag else "HEAD"
        output = self._run(
            "log", "--no-merges", f"--format={_LOG_FORMAT}", revision, strip=False
        )

        commits = []
        for record in output.split(_RECORD_SEP):
            record = record.strip("\n")
            if not record:
                continue
            sha, author, message = record.split(_FIELD_SEP, 2)
            commits.append(RawCommit(sha=sha, message=message.strip(), author_name=author))

        logger.info("Found %d commits since %s", len(commits), tag or "the first commit")
        return commits
