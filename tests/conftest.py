"""Shared test fixtures."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from release_helper.core.commits import RawCommit

if TYPE_CHECKING:
    from pathlib import Path


@pytest.fixture(autouse=True)
def _clean_github_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep the runner's GitHub environment out of the tests."""
    for name in ("GITHUB_TOKEN", "GITHUB_REPOSITORY", "GITHUB_API_URL", "GITHUB_OUTPUT"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def feat_commit() -> RawCommit:
    """A feature commit."""
    return RawCommit(
        sha="feat1234567890",
        message="feat: add user authentication",
        author_name="Test",
    )


@pytest.fixture
def fix_commit() -> RawCommit:
    """A scoped fix commit."""
    return RawCommit(
        sha="fix12345678901",
        message="fix(core): handle edge case",
        author_name="Test",
    )


@pytest.fixture
def breaking_commit() -> RawCommit:
    """A breaking change announced with "!"."""
    return RawCommit(
        sha="break123456789",
        message="feat(api)!: change response format",
        author_name="Test",
    )


@pytest.fixture
def sample_commits() -> list[RawCommit]:
    """A mixed history since the last release."""
    return [
        RawCommit("1234567890abcdef", "feat(auth): add OAuth 2.0 support", "John Doe"),
        RawCommit("abcdef1234567890", "fix: resolve memory leak", "Jane Smith"),
        RawCommit("fedcba0987654321", "docs: update README", "Alice Brown"),
        RawCommit("0987654321fedcba", "chore(deps): bump httpx", "Bob Wilson"),
        RawCommit(
            "aaaa1111bbbb2222",
            "refactor: split client\n\nBREAKING CHANGE: GitHubClient moved",
            "Carol White",
        ),
    ]


@pytest.fixture
def temp_git_repo_with_pyproject(tmp_path: Path) -> Path:
    """A project directory with a release-helper configuration."""
    (tmp_path / "pyproject.toml").write_text(
        """\
[project]
name = "test-project"
version = "1.0.0"

[tool.release-helper]
default_version = "0.1.0"
tag_prefix = "v"
source = "git"

[tool.release-helper.github]
owner = "octo"
repo = "project"

[tool.release-helper.release]
draft = true
"""
    )
    return tmp_path
