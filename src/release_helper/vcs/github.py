"""GitHub REST API access.

Looks up the latest release, lists commits since a point in time and
creates releases. Requests go through a single ``httpx.Client``; one
page of results is read per call.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import UTC, datetime, timedelta
from typing import TYPE_CHECKING, Any

import httpx

from release_helper.core.commits import RawCommit
from release_helper.core.version import Version
from release_helper.exceptions import (
    CommitFetchError,
    InvalidVersionError,
    ReleaseCreateError,
    ReleaseLookupError,
)

if TYPE_CHECKING:
    from types import TracebackType

    from release_helper.config.models import GitHubConfig

logger = logging.getLogger(__name__)

DEFAULT_API_URL = "https://api.github.com"


@dataclass(frozen=True)
class ReleaseBaseline:
    """Where the next release starts from."""

    version: str
    tag: str | None = None
    since: datetime | None = None


def _error_detail(error: httpx.HTTPError) -> str:
    if isinstance(error, httpx.HTTPStatusError):
        response = error.response
        try:
            data = response.json()
        except ValueError:
            data = None
        message = data.get("message") if isinstance(data, dict) else None
        return f"{response.status_code} {message or response.reason_phrase}"
    return str(error)


def _status_code(error: httpx.HTTPError) -> int | None:
    if isinstance(error, httpx.HTTPStatusError):
        return error.response.status_code
    return None


def format_since(moment: datetime) -> str:
    """Render a datetime as the ISO-8601 UTC form GitHub expects."""
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=UTC)
    return moment.astimezone(UTC).isoformat(timespec="milliseconds").replace("+00:00", "Z")


class GitHubClient:
    """Minimal client for the release endpoints of one repository."""

    def __init__(
        self,
        owner: str,
        repo: str,
        token: str | None = None,
        api_url: str = DEFAULT_API_URL,
        timeout: float = 30.0,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self.owner = owner
        self.repo = repo

        headers = {
            "Accept": "application/vnd.github+json",
            "X-GitHub-Api-Version": "2022-11-28",
        }
        if token:
            headers["Authorization"] = f"Bearer {token}"

        self._client = httpx.Client(
            base_url=api_url.rstrip("/"),
            headers=headers,
            timeout=timeout,
            transport=transport,
        )

    @classmethod
    def from_config(
        cls, config: GitHubConfig, transport: httpx.BaseTransport | None = None
    ) -> GitHubClient:
        """Build a client from configuration.

        Raises:
            ValueError: If owner or repo is not configured
        """
        if not config.owner or not config.repo:
            raise ValueError("GitHub owner and repo must be configured")
        return cls(
            owner=config.owner,
            repo=config.repo,
            token=config.token,
            api_url=config.api_url,
            timeout=config.timeout,
            transport=transport,
        )

    @property
    def _repo_path(self) -> str:
        return f"/repos/{self.owner}/{self.repo}"

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> GitHubClient:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

    def get_latest_release(self, default_version: str = "0.0.0") -> ReleaseBaseline:
        """Find the baseline version from the latest published release.

        A missing release, a release without a creation date, or a tag
        that is not a version all fall back to ``default_version``.
        Pre-release tags count as their MAJOR.MINOR.PATCH core.

        Args:
            default_version: Version used when no usable release exists

        Returns:
            ReleaseBaseline; ``since`` is one second after the release
            was created so the release commit itself is excluded

        Raises:
            ReleaseLookupError: If the API call fails for any other reason
        """
        try:
            response = self._client.get(f"{self._repo_path}/releases/latest")
            if response.status_code == 404:
                logger.warning("No previous releases found, starting from %s", default_version)
                return ReleaseBaseline(version=default_version)
            response.raise_for_status()
            data: dict[str, Any] = response.json()
        except httpx.HTTPError as e:
            raise ReleaseLookupError(
                f"Failed to get latest release: {_error_detail(e)}",
                status_code=_status_code(e),
            ) from e
        except ValueError as e:
            raise ReleaseLookupError(f"Failed to get latest release: invalid JSON ({e})") from e
        if not isinstance(data, dict):
            raise ReleaseLookupError("Failed to get latest release: unexpected response body")

        tag = data.get("tag_name")
        created_at = data.get("created_at")
        if not created_at:
            logger.warning("Latest release has no creation date, using %s", default_version)
            return ReleaseBaseline(version=default_version, tag=tag)

        try:
            created = datetime.fromisoformat(str(created_at).replace("Z", "+00:00"))
        except ValueError as e:
            raise ReleaseLookupError(
                f"Failed to get latest release: invalid created_at {created_at!r}"
            ) from e
        since = created + timedelta(seconds=1)

        try:
            version = str(Version.from_tag(tag or ""))
        except InvalidVersionError:
            logger.warning("Release tag %r is not a version, using %s", tag, default_version)
            version = default_version

        logger.info("Latest release: %s at %s", tag, created_at)
        return ReleaseBaseline(version=version, tag=tag, since=since)

    def list_commits(self, since: datetime | None = None) -> list[RawCommit]:
        """List commits on the default branch, newest first.

        Args:
            since: Only commits after this moment; None lists from the start

        Returns:
            Raw commit records

        Raises:
            CommitFetchError: If the API call fails
        """
        params = {"since": format_since(since)} if since else {}
        try:
            response = self._client.get(f"{self._repo_path}/commits", params=params)
            response.raise_for_status()
            items: list[dict[str, Any]] = response.json()
        except httpx.HTTPError as e:
            raise CommitFetchError(
                f"Failed to get commits: {_error_detail(e)}",
                status_code=_status_code(e),
            ) from e
        except ValueError as e:
            raise CommitFetchError(f"Failed to get commits: invalid JSON ({e})") from e
        if not isinstance(items, list):
            raise CommitFetchError("Failed to get commits: unexpected response body")

        commits = []
        for item in items:
            details = item.get("commit") or {}
            author = details.get("author") or {}
            commits.append(
                RawCommit(
                    sha=item.get("sha", ""),
                    message=details.get("message") or "",
                    author_name=author.get("name") or "",
                )
            )

        logger.info("Found %d commits since last release", len(commits))
        return commits

    def create_release(
        self,
        tag: str,
        name: str,
        body: str,
        *,
        draft: bool = False,
        prerelease: bool = False,
    ) -> dict[str, Any]:
        """Create a release and its tag.

        Returns:
            The release object returned by GitHub

        Raises:
            ReleaseCreateError: If the API call fails
        """
        payload = {
            "tag_name": tag,
            "name": name,
            "body": body,
            "draft": draft,
            "prerelease": prerelease,
        }
        try:
            response = self._client.post(f"{self._repo_path}/releases", json=payload)
            response.raise_for_status()
            release: dict[str, Any] = response.json()
        except httpx.HTTPError as e:
            raise ReleaseCreateError(
                f"Failed to create release {tag}: {_error_detail(e)}",
                status_code=_status_code(e),
            ) from e
        except ValueError as e:
            raise ReleaseCreateError(f"Failed to create release {tag}: invalid JSON ({e})") from e

        logger.info("Created release %s", tag)
        return release
