"""Exception hierarchy for release-helper.

The core (parser, resolver, notes generator) never raises for bad commit
data. Everything here belongs to configuration, version parsing of
untrusted tags, and the git/GitHub collaborators.
"""

from __future__ import annotations


class ReleaseHelperError(Exception):
    """Base class for all release-helper errors."""


# Configuration


class ConfigError(ReleaseHelperError):
    """Configuration could not be loaded."""


class ConfigNotFoundError(ConfigError):
    """pyproject.toml could not be found."""


class ConfigValidationError(ConfigError):
    """Configuration values are invalid."""


# Versions


class VersionError(ReleaseHelperError):
    """Version handling failed."""


class InvalidVersionError(VersionError):
    """A version string is not MAJOR.MINOR.PATCH."""


# Version control


class VCSError(ReleaseHelperError):
    """A version control collaborator failed."""


class GitError(VCSError):
    """A git command failed."""

    def __init__(self, message: str, stderr: str | None = None) -> None:
        super().__init__(message)
        self.stderr = stderr


class GitHubError(VCSError):
    """A GitHub API call failed."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class ReleaseLookupError(GitHubError):
    """The latest release could not be fetched."""


class CommitFetchError(GitHubError):
    """The commit history could not be fetched."""


class ReleaseCreateError(GitHubError):
    """The release could not be created."""
