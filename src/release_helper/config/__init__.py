"""Configuration management for release-helper."""

from __future__ import annotations

from release_helper.config.loader import load_config
from release_helper.config.models import (
    CommitsConfig,
    GitHubConfig,
    ReleaseConfig,
    ReleaseHelperConfig,
)

__all__ = [
    "CommitsConfig",
    "GitHubConfig",
    "ReleaseConfig",
    "ReleaseHelperConfig",
    "load_config",
]
