"""Configuration loading from pyproject.toml and the environment."""

from __future__ import annotations

import logging
import os
import tomllib
from pathlib import Path
from typing import TYPE_CHECKING, Any

from pydantic import ValidationError

from release_helper.config.models import ReleaseHelperConfig
from release_helper.exceptions import ConfigNotFoundError, ConfigValidationError

if TYPE_CHECKING:
    from collections.abc import Mapping

logger = logging.getLogger(__name__)

TOOL_SECTION = "release-helper"


def find_pyproject_toml(start: Path | None = None) -> Path:
    """Search upward from ``start`` for pyproject.toml.

    Raises:
        ConfigNotFoundError: If no pyproject.toml exists up to the root
    """
    current = (start or Path.cwd()).resolve()
    for directory in (current, *current.parents):
        candidate = directory / "pyproject.toml"
        if candidate.is_file():
            return candidate
    raise ConfigNotFoundError(f"No pyproject.toml found in {current} or its parents")


def load_pyproject_toml(path: Path) -> dict[str, Any]:
    """Read and parse a pyproject.toml file.

    Raises:
        ConfigNotFoundError: If the file does not exist
        ConfigValidationError: If the file is not valid TOML
    """
    if not path.is_file():
        raise ConfigNotFoundError(f"Configuration file not found: {path}")
    try:
        with path.open("rb") as f:
            return tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigValidationError(f"Invalid TOML in {path}: {e}") from e


def extract_release_helper_config(pyproject: Mapping[str, Any]) -> dict[str, Any]:
    """Return the ``[tool.release-helper]`` table, or an empty dict."""
    return dict(pyproject.get("tool", {}).get(TOOL_SECTION, {}))


def apply_environment(data: dict[str, Any], env: Mapping[str, str]) -> dict[str, Any]:
    """Overlay GitHub settings from environment variables.

    GITHUB_TOKEN, GITHUB_REPOSITORY ("owner/repo") and GITHUB_API_URL
    take precedence over file values.
    """
    github = dict(data.get("github", {}))

    if token := env.get("GITHUB_TOKEN"):
        github["token"] = token

    if repository := env.get("GITHUB_REPOSITORY"):
        owner, sep, repo = repository.partition("/")
        if not sep or not owner or not repo:
            raise ConfigValidationError(
                f"GITHUB_REPOSITORY must look like 'owner/repo', got {repository!r}"
            )
        github["owner"] = owner
        github["repo"] = repo

    if api_url := env.get("GITHUB_API_URL"):
        github["api_url"] = api_url

    return {**data, "github": github}


def load_config(
    path: Path | None = None,
    env: Mapping[str, str] | None = None,
) -> ReleaseHelperConfig:
    """Load configuration for the project at ``path``.

    A missing pyproject.toml is not an error: defaults are used and the
    environment is still applied.

    Args:
        path: Project directory or pyproject.toml path (defaults to cwd)
        env: Environment mapping (defaults to os.environ)

    Returns:
        Validated configuration

    Raises:
        ConfigValidationError: If values fail validation
    """
    if env is None:
        env = os.environ

    data: dict[str, Any] = {}
    try:
        if path is not None and path.is_file():
            pyproject_path = path
        else:
            pyproject_path = find_pyproject_toml(path)
    except ConfigNotFoundError:
        logger.debug("No pyproject.toml found, using default configuration")
    else:
        logger.debug("Loading configuration from %s", pyproject_path)
        data = extract_release_helper_config(load_pyproject_toml(pyproject_path))

    data = apply_environment(data, env)

    try:
        return ReleaseHelperConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigValidationError(f"Invalid release-helper configuration:\n{e}") from e
