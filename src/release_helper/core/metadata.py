"""Composition of the parse, resolve and render stages."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from release_helper.core.commits import ParsedCommit, parse_commits
from release_helper.core.notes import generate_release_notes
from release_helper.core.version import BumpType, calculate_bump, parse_version

if TYPE_CHECKING:
    from collections.abc import Iterable

    from release_helper.core.commits import RawCommit
    from release_helper.core.version import Version


@dataclass(frozen=True)
class ReleaseMetadata:
    """Everything a release step needs to know."""

    current_version: str
    next_version: str
    bump: BumpType
    should_release: bool
    release_notes: str
    commits: tuple[ParsedCommit, ...] = ()

    def as_outputs(self) -> dict[str, str]:
        """Flatten into string outputs keyed the way workflow steps read them."""
        return {
            "current-version": self.current_version,
            "next-version": self.next_version,
            "should-release": "true" if self.should_release else "false",
            "release-notes": self.release_notes,
        }


def build_release_metadata(
    commits: Iterable[RawCommit],
    current_version: str | Version,
) -> ReleaseMetadata:
    """Parse commits, resolve the next version and render release notes.

    Args:
        commits: Raw commits since the last release
        current_version: Baseline version, optionally "v"-prefixed

    Returns:
        ReleaseMetadata with normalized version strings
    """
    parsed = tuple(parse_commits(commits))
    current = parse_version(current_version)
    bump = calculate_bump(parsed)
    next_version = current.bump(bump)

    return ReleaseMetadata(
        current_version=str(current),
        next_version=str(next_version),
        bump=bump,
        should_release=next_version != current,
        release_notes=generate_release_notes(parsed, str(next_version)),
        commits=parsed,
    )
