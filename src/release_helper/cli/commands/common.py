"""Shared steps for CLI commands: load config, collect commits, resolve."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING

from release_helper.config import load_config
from release_helper.core.commits import filter_skip_release_commits
from release_helper.core.metadata import build_release_metadata
from release_helper.core.version import Version
from release_helper.exceptions import ConfigValidationError, InvalidVersionError
from release_helper.vcs import GitHubClient, GitRepository

if TYPE_CHECKING:
    from rich.console import Console

    from release_helper.config.models import ReleaseHelperConfig
    from release_helper.core.commits import RawCommit
    from release_helper.core.metadata import ReleaseMetadata

logger = logging.getLogger(__name__)


def load_project_config(
    path: str | None,
    source: str | None = None,
    default_version: str | None = None,
) -> tuple[Path, ReleaseHelperConfig]:
    """Load configuration and apply command line overrides."""
    project_path = Path(path) if path else Path.cwd()
    config = load_config(project_path)

    overrides: dict[str, str] = {}
    if source:
        overrides["source"] = source
    if default_version:
        try:
            overrides["default_version"] = str(Version.parse(default_version))
        except InvalidVersionError as e:
            raise ConfigValidationError(f"Invalid --default-version: {e}") from e
    if overrides:
        config = config.model_copy(update=overrides)

    return project_path, config


def github_client(config: ReleaseHelperConfig) -> GitHubClient:
    """Build a GitHub client, failing clearly when the repository is unknown."""
    if not config.github.is_configured:
        raise ConfigValidationError(
            "GitHub repository is not configured. Set GITHUB_REPOSITORY=owner/repo "
            "or [tool.release-helper.github] owner and repo."
        )
    return GitHubClient.from_config(config.github)


def _collect_from_git(
    project_path: Path, config: ReleaseHelperConfig
) -> tuple[str, list[RawCommit]]:
    repo = GitRepository(project_path)
    tag = repo.get_latest_tag(f"{config.tag_prefix}*")

    current_version = config.default_version
    if tag is None:
        logger.warning("No previous tag found, starting from %s", current_version)
    else:
        try:
            current_version = str(Version.from_tag(tag.removeprefix(config.tag_prefix)))
        except InvalidVersionError:
            logger.warning("Tag %r is not a version, using %s", tag, current_version)

    return current_version, repo.get_commits_since_tag(tag)


def _collect_from_github(config: ReleaseHelperConfig) -> tuple[str, list[RawCommit]]:
    with github_client(config) as client:
        baseline = client.get_latest_release(config.default_version)
        return baseline.version, client.list_commits(baseline.since)


def collect_release_metadata(
    project_path: Path,
    config: ReleaseHelperConfig,
) -> ReleaseMetadata:
    """Fetch history from the configured source and resolve the release.

    Raises:
        ReleaseHelperError: If configuration or a collaborator fails
    """
    if config.source == "git":
        current_version, commits = _collect_from_git(project_path, config)
    else:
        current_version, commits = _collect_from_github(config)

    logger.info("Current version set to: %s", current_version)

    kept = filter_skip_release_commits(commits, config.commits.skip_release_patterns)
    if len(kept) != len(commits):
        logger.info("Skipped %d commit(s) with skip release markers", len(commits) - len(kept))

    return build_release_metadata(kept, current_version)


def print_plain(console: Console, text: str) -> None:
    """Print text exactly as given: no markup, emoji codes or wrapping."""
    console.print(text, markup=False, highlight=False, emoji=False, soft_wrap=True)
