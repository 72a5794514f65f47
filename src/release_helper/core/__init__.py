"""Core business logic for release-helper.

This module contains the fundamental building blocks:
- Conventional commit parsing
- Version parsing and next-version resolution
- Categorized release notes generation
"""

from __future__ import annotations

from release_helper.core.commits import (
    KNOWN_TYPES,
    ParsedCommit,
    RawCommit,
    filter_skip_release_commits,
    get_breaking_changes,
    is_known_type,
    parse_commit,
    parse_commits,
)
from release_helper.core.metadata import ReleaseMetadata, build_release_metadata
from release_helper.core.notes import (
    NO_CHANGES_LINE,
    Category,
    categorize,
    format_commit,
    generate_release_notes,
    group_commits,
)
from release_helper.core.version import (
    BumpType,
    Version,
    calculate_bump,
    calculate_next_version,
    parse_version,
    should_release,
)

__all__ = [
    # Commits
    "KNOWN_TYPES",
    # Notes
    "NO_CHANGES_LINE",
    # Version
    "BumpType",
    "Category",
    "ParsedCommit",
    "RawCommit",
    # Metadata
    "ReleaseMetadata",
    "Version",
    "build_release_metadata",
    "calculate_bump",
    "calculate_next_version",
    "categorize",
    "filter_skip_release_commits",
    "format_commit",
    "generate_release_notes",
    "get_breaking_changes",
    "group_commits",
    "is_known_type",
    "parse_commit",
    "parse_commits",
    "parse_version",
    "should_release",
]
