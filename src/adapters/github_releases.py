"""GitHub release feed.

Reads the repository's release list from the JSON API and hands the core a
validated `ReleaseFeedEntry`, or raises `TransportError` / `MalformedFeedError`.
"""

from __future__ import annotations

import logging
from typing import Any

import httpx
from pydantic import ValidationError

from core.domain.models import ReleaseFeedEntry
from core.errors import MalformedFeedError, TransportError

logger = logging.getLogger(__name__)

REPO_OWNER = "khakers"
REPO_NAME = "modmail-viewer"
GITHUB_API_URL = "https://api.github.com"
GITHUB_JSON_MEDIA_TYPE = "application/vnd.github+json"


def releases_url(owner: str = REPO_OWNER, repo: str = REPO_NAME) -> str:
    return f"{GITHUB_API_URL}/repos/{owner}/{repo}/releases"


def _entry_from(item: Any, index: int) -> ReleaseFeedEntry:
    if not isinstance(item, dict):
        raise MalformedFeedError(
            f"Release #{index} is not an object",
            details=type(item).__name__,
        )
    try:
        return ReleaseFeedEntry.model_validate(item)
    except ValidationError as exc:
        fields = ", ".join(".".join(str(p) for p in err["loc"]) for err in exc.errors())
        raise MalformedFeedError(
            f"Release #{index} is missing tag_name/html_url",
            details=fields,
        ) from exc


def parse_latest_release(payload: Any) -> ReleaseFeedEntry:
    """Pick the newest entry from a decoded feed document.

    The feed is trusted to be newest-first; it is not re-sorted.
    """

    if not isinstance(payload, list):
        raise MalformedFeedError(
            "Release feed is not a JSON array",
            details=type(payload).__name__,
        )
    if not payload:
        raise MalformedFeedError("Release feed is empty")
    return _entry_from(payload[0], 0)


class GitHubReleaseFeed:
    """`ReleaseFeed` backed by `GET /repos/{owner}/{repo}/releases`."""

    def __init__(
        self,
        client: httpx.Client,
        *,
        owner: str = REPO_OWNER,
        repo: str = REPO_NAME,
    ) -> None:
        self._client = client
        self._url = releases_url(owner, repo)

    @property
    def url(self) -> str:
        return self._url

    def _fetch(self) -> Any:
        logger.debug("request: GET %s", self._url)
        try:
            resp = self._client.get(self._url, headers={"accept": GITHUB_JSON_MEDIA_TYPE})
            logger.debug("Got github release data with status %s", resp.status_code)
            resp.raise_for_status()
        except httpx.HTTPError as exc:
            raise TransportError(
                f"Could not fetch releases from {self._url}",
                details=str(exc) or type(exc).__name__,
            ) from exc

        try:
            return resp.json()
        except ValueError as exc:
            raise MalformedFeedError("Release feed is not valid JSON", details=str(exc)) from exc

    def latest_release(self) -> ReleaseFeedEntry:
        return parse_latest_release(self._fetch())

