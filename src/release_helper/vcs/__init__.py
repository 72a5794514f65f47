"""Version control collaborators: local git and the GitHub API."""

from __future__ import annotations

from release_helper.vcs.git import GitRepository
from release_helper.vcs.github import GitHubClient, ReleaseBaseline

__all__ = ["GitHubClient", "GitRepository", "ReleaseBaseline"]
