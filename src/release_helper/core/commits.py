"""Conventional commit parsing.

Turns raw commit records into structured ``ParsedCommit`` objects.
Parsing never fails: headers that do not follow the
``type(scope)!: description`` shape degrade to the ``other`` type with
the whole header kept as the description.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

# Header pattern: type(scope)!: description
# The scope stops at the first ")" so "!" and ":" are never swallowed,
# while path-like scopes such as "api/v2/auth" are accepted.
HEADER_PATTERN = re.compile(
    r"^(?P<type>\w+)"
    r"(?:\((?P<scope>[^)]*)\))?"
    r"(?P<breaking>!)?"
    r":\s*(?P<description>.*)$"
)

BREAKING_MARKER = "BREAKING CHANGE"

OTHER_TYPE = "other"

SHORT_SHA_LENGTH = 7

KNOWN_TYPES: frozenset[str] = frozenset(
    {
        "feat",
        "fix",
        "perf",
        "docs",
        "build",
        "ci",
        "test",
        "refactor",
        "style",
        "chore",
    }
)

DEFAULT_SKIP_RELEASE_PATTERNS: tuple[str, ...] = (
    "[skip release]",
    "[release skip]",
    "[no release]",
)


@dataclass(frozen=True)
class RawCommit:
    """A commit as delivered by a history collaborator."""

    sha: str
    message: str
    author_name: str = ""


@dataclass(frozen=True)
class ParsedCommit:
    """A commit parsed into conventional commit parts."""

    sha: str
    commit_type: str
    scope: str
    description: str
    body: str
    is_breaking: bool
    author: str = ""
    full_message: str = ""

    @classmethod
    def from_commit(cls, commit: RawCommit) -> ParsedCommit:
        """Parse a raw commit record.

        Args:
            commit: Raw commit with sha, message and author name

        Returns:
            ParsedCommit instance
        """
        return parse_commit(commit.message, sha=commit.sha, author=commit.author_name)

    @property
    def is_conventional(self) -> bool:
        """True when the type comes from the known vocabulary."""
        return is_known_type(self.commit_type)


def is_known_type(commit_type: str) -> bool:
    """Check whether a commit type belongs to the conventional vocabulary."""
    return commit_type in KNOWN_TYPES


def short_sha(sha: str) -> str:
    """Truncate a commit identifier to its short form.

    Identifiers shorter than the short length are returned unchanged.
    """
    return sha[:SHORT_SHA_LENGTH]


def parse_commit(message: str, sha: str = "", author: str = "") -> ParsedCommit:
    """Parse a single commit message.

    Args:
        message: Full commit message, first line is the header
        sha: Commit identifier, truncated to 7 characters
        author: Author display name

    Returns:
        ParsedCommit instance
    """
    header, _, rest = message.partition("\n")
    body = rest.strip()

    match = HEADER_PATTERN.match(header)
    if match:
        commit_type = match.group("type")
        scope = match.group("scope") or ""
        description = match.group("description").strip()
        is_breaking = match.group("breaking") is not None
    else:
        commit_type = OTHER_TYPE
        scope = ""
        description = header
        is_breaking = False

    # Body marker upgrades, never downgrades
    if BREAKING_MARKER in body:
        is_breaking = True

    return ParsedCommit(
        sha=short_sha(sha),
        commit_type=commit_type,
        scope=scope,
        description=description,
        body=body,
        is_breaking=is_breaking,
        author=author,
        full_message=message,
    )


def parse_commits(commits: Iterable[RawCommit]) -> list[ParsedCommit]:
    """Parse a sequence of raw commits, keeping their order."""
    return [ParsedCommit.from_commit(commit) for commit in commits]


def get_breaking_changes(commits: Sequence[ParsedCommit]) -> list[ParsedCommit]:
    """Return only the commits flagged as breaking."""
    return [pc for pc in commits if pc.is_breaking]


def filter_skip_release_commits(
    commits: Sequence[RawCommit],
    skip_patterns: Sequence[str],
) -> list[RawCommit]:
    """Drop commits whose message carries a skip-release marker.

    Markers are matched case-insensitively anywhere in the message.

    Args:
        commits: Raw commits to filter
        skip_patterns: Literal markers such as "[skip release]"

    Returns:
        Commits without any skip marker, in their original order
    """
    if not skip_patterns:
        return list(commits)

    lowered = [pattern.lower() for pattern in skip_patterns]
    return [
        commit
        for commit in commits
        if not any(pattern in commit.message.lower() for pattern in lowered)
    ]
