"""Semantic version handling and next-version resolution.

Versions are plain MAJOR.MINOR.PATCH tuples. The bump decision is an
early-exit scan over the parsed commits in fixed priority order:
breaking, then feat, then fix. Nothing else moves the version.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

from release_helper.exceptions import InvalidVersionError

if TYPE_CHECKING:
    from collections.abc import Sequence

    from release_helper.core.commits import ParsedCommit

logger = logging.getLogger(__name__)

VERSION_PATTERN = re.compile(r"^[vV]?(?P<major>\d+)\.(?P<minor>\d+)\.(?P<patch>\d+)$")
# Release tags may carry pre-release and build suffixes after the core
TAG_PATTERN = re.compile(
    r"^[vV]?(?P<major>\d+)\.(?P<minor>\d+)\.(?P<patch>\d+)"
    r"(?:-[0-9A-Za-z.-]+)?(?:\+[0-9A-Za-z.-]+)?$"
)


class BumpType(str, Enum):
    """Kind of version increment."""

    MAJOR = "major"
    MINOR = "minor"
    PATCH = "patch"
    NONE = "none"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True, order=True)
class Version:
    """A MAJOR.MINOR.PATCH version, ordered as a tuple."""

    major: int
    minor: int
    patch: int

    @classmethod
    def parse(cls, version_str: str) -> Version:
        """Parse a version string, tolerating a leading "v".

        Args:
            version_str: String such as "1.2.3" or "v1.2.3"

        Returns:
            Version instance

        Raises:
            InvalidVersionError: If the string is not MAJOR.MINOR.PATCH
        """
        match = VERSION_PATTERN.match(version_str.strip())
        if not match:
            raise InvalidVersionError(f"Invalid version: {version_str!r}")
        return cls(
            major=int(match.group("major")),
            minor=int(match.group("minor")),
            patch=int(match.group("patch")),
        )

    @classmethod
    def from_tag(cls, tag: str) -> Version:
        """Read the MAJOR.MINOR.PATCH core of a release tag.

        Pre-release and build suffixes are dropped, so "v1.3.0-rc.1"
        gives 1.3.0.

        Raises:
            InvalidVersionError: If the tag has no version core
        """
        match = TAG_PATTERN.match(tag.strip())
        if not match:
            raise InvalidVersionError(f"Invalid version tag: {tag!r}")
        return cls(
            major=int(match.group("major")),
            minor=int(match.group("minor")),
            patch=int(match.group("patch")),
        )

    def bump(self, bump_type: BumpType) -> Version:
        """Return the version incremented by ``bump_type``.

        Lower-order components are reset to zero.
        """
        if bump_type == BumpType.MAJOR:
            return Version(self.major + 1, 0, 0)
        if bump_type == BumpType.MINOR:
            return Version(self.major, self.minor + 1, 0)
        if bump_type == BumpType.PATCH:
            return Version(self.major, self.minor, self.patch + 1)
        return self

    def __str__(self) -> str:
        return f"{self.major}.{self.minor}.{self.patch}"


def parse_version(version: str | Version) -> Version:
    """Coerce a string or Version into a Version."""
    if isinstance(version, Version):
        return version
    return Version.parse(version)


def calculate_bump(commits: Sequence[ParsedCommit]) -> BumpType:
    """Decide the bump for a set of commits.

    The highest level found wins and lower levels are ignored. Commit
    order does not matter.

    Args:
        commits: Parsed commits since the last release

    Returns:
        BumpType.NONE when no commit affects the version
    """
    for pc in commits:
        if pc.is_breaking:
            logger.info("Breaking change found: %s", pc.sha)
            return BumpType.MAJOR

    for pc in commits:
        if pc.commit_type == "feat":
            logger.info("Feature commit found: %s", pc.sha)
            return BumpType.MINOR

    for pc in commits:
        if pc.commit_type == "fix":
            logger.info("Fix commit found: %s", pc.sha)
            return BumpType.PATCH

    logger.debug("No version-relevant commits among %d commit(s)", len(commits))
    return BumpType.NONE


def calculate_next_version(
    commits: Sequence[ParsedCommit],
    current_version: str | Version,
) -> str:
    """Resolve the next version string.

    Args:
        commits: Parsed commits since the last release
        current_version: Baseline version, optionally "v"-prefixed

    Returns:
        Next version without prefix; equal to the baseline when nothing
        warrants a release
    """
    current = parse_version(current_version)
    next_version = current.bump(calculate_bump(commits))
    logger.info("Next version determined to be: %s", next_version)
    return str(next_version)


def should_release(current_version: str | Version, next_version: str | Version) -> bool:
    """True iff the next version differs from the current one."""
    return parse_version(current_version) != parse_version(next_version)
