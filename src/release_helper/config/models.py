"""Configuration models for release-helper.

Settings live under ``[tool.release-helper]`` in pyproject.toml. Every
field has a default, so an absent section yields a usable configuration.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

from release_helper.core.commits import DEFAULT_SKIP_RELEASE_PATTERNS
from release_helper.core.version import Version
from release_helper.exceptions import InvalidVersionError


class GitHubConfig(BaseModel):
    """GitHub API settings."""

    model_config = ConfigDict(extra="forbid")

    owner: str | None = None
    repo: str | None = None
    token: str | None = Field(default=None, repr=False)
    api_url: str = "https://api.github.com"
    timeout: float = Field(default=30.0, gt=0)

    @property
    def is_configured(self) -> bool:
        """True when owner and repo are both known."""
        return bool(self.owner and self.repo)


class ReleaseConfig(BaseModel):
    """How the GitHub release is created."""

    model_config = ConfigDict(extra="forbid")

    draft: bool = False
    prerelease: bool = False
    dry_run: bool = False


class CommitsConfig(BaseModel):
    """Commit filtering settings."""

    model_config = ConfigDict(extra="forbid")

    skip_release_patterns: list[str] = Field(
        default_factory=lambda: list(DEFAULT_SKIP_RELEASE_PATTERNS)
    )


class ReleaseHelperConfig(BaseModel):
    """Root configuration."""

    model_config = ConfigDict(extra="forbid")

    default_version: str = "0.0.0"
    tag_prefix: str = "v"
    source: Literal["github", "git"] = "github"
    github: GitHubConfig = Field(default_factory=GitHubConfig)
    release: ReleaseConfig = Field(default_factory=ReleaseConfig)
    commits: CommitsConfig = Field(default_factory=CommitsConfig)

    @field_validator("default_version")
    @classmethod
    def _check_default_version(cls, value: str) -> str:
        try:
            return str(Version.parse(value))
        except InvalidVersionError as e:
            raise ValueError(str(e)) from e

    def tag_for(self, version: str) -> str:
        """Tag name for a released version."""
        return f"{self.tag_prefix}{version}"
