"""Release notes generation.

Commits are grouped into a fixed, ordered set of categories and
rendered as markdown. Breaking commits go to the Breaking Changes
section only, whatever their declared type. Output is deterministic:
no timestamps, and commits keep their input order inside a section.
"""

from __future__ import annotations

from enum import Enum
from types import MappingProxyType
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Mapping, Sequence

    from release_helper.core.commits import ParsedCommit

NO_CHANGES_LINE = "No significant changes in this release."


class Category(Enum):
    """Release notes sections, in rendering order."""

    BREAKING = ("breaking", "💥 Breaking Changes")
    FEAT = ("feat", "✨ New Features")
    FIX = ("fix", "🐛 Bug Fixes")
    PERF = ("perf", "⚡ Performance Improvements")
    DOCS = ("docs", "📚 Documentation")
    BUILD = ("build", "📦 Build System")
    CI = ("ci", "👷 CI/CD")
    TEST = ("test", "🧪 Tests")
    REFACTOR = ("refactor", "♻️ Code Refactoring")
    STYLE = ("style", "💄 Code Style")
    CHORE = ("chore", "🧹 Chores")
    OTHER = ("other", "🔧 Other Changes")

    def __init__(self, key: str, heading: str) -> None:
        self.key = key
        self.heading = heading


# Declared commit types that own a section of their own
_TYPE_CATEGORIES: Mapping[str, Category] = MappingProxyType(
    {
        category.key: category
        for category in Category
        if category not in (Category.BREAKING, Category.OTHER)
    }
)


def categorize(commit: ParsedCommit) -> Category:
    """Map a commit to exactly one release notes section."""
    if commit.is_breaking:
        return Category.BREAKING
    return _TYPE_CATEGORIES.get(commit.commit_type, Category.OTHER)


def group_commits(
    commits: Sequence[ParsedCommit],
) -> Mapping[Category, tuple[ParsedCommit, ...]]:
    """Group commits by category.

    Args:
        commits: Parsed commits in input order

    Returns:
        Read-only mapping from every category (in rendering order) to
        the commits that belong to it, in input order
    """
    grouped: dict[Category, tuple[ParsedCommit, ...]] = {category: () for category in Category}
    for pc in commits:
        category = categorize(pc)
        grouped[category] = (*grouped[category], pc)
    return MappingProxyType(grouped)


def format_commit(commit: ParsedCommit) -> str:
    """Format one commit as a markdown bullet.

    Example: ``- **auth**: add login (abc1234)``
    """
    scope = f"**{commit.scope}**: " if commit.scope else ""
    return f"- {scope}{commit.description} ({commit.sha})"


def generate_release_notes(commits: Sequence[ParsedCommit], version: str) -> str:
    """Render markdown release notes.

    Args:
        commits: Parsed commits since the last release
        version: Version being released

    Returns:
        Markdown document starting with a "# Release <version>" title
    """
    lines = [f"# Release {version}", ""]

    grouped = group_commits(commits)
    for category, members in grouped.items():
        if not members:
            continue
        lines.append(f"## {category.heading}")
        lines.append("")
        lines.extend(format_commit(pc) for pc in members)
        lines.append("")

    if not any(grouped.values()):
        lines.append(NO_CHANGES_LINE)

    return "\n".join(lines).rstrip("\n") + "\n"
