"""Update availability check.

Fetches the newest entry of the release feed, parses its tag and the running
version, and decides whether the running build is out of date.

Failure policy: every failure (network, feed shape, version grammar) ends as a
`CheckFailed` result and a `False` from `check_for_update`. `False` means "no
confirmed newer version", never "you are up to date".
"""

from __future__ import annotations

import logging

import httpx

from adapters.github_releases import GitHubReleaseFeed
from core.domain.models import (
    BuildInfo,
    CheckFailed,
    NoUpdate,
    UpdateAvailable,
    UpdateCheckResult,
)
from core.domain.version import Ordering, Version, compare
from core.errors import MalformedFeedError, MalformedVersionError, TransportError
from core.interfaces.release_feed import ReleaseFeed

logger = logging.getLogger(__name__)


class UpdateChecker:
    """Compares the running version against the newest published release.

    Holds no mutable state; one instance can be shared across threads as long
    as the underlying feed (and its HTTP client) is thread-safe.
    """

    def __init__(self, feed: ReleaseFeed) -> None:
        self._feed = feed

    @classmethod
    def from_client(cls, client: httpx.Client) -> "UpdateChecker":
        """Check against the project's GitHub releases using a caller-owned client."""

        return cls(GitHubReleaseFeed(client))

    def check(self, current_version: str) -> UpdateCheckResult:
        try:
            entry = self._feed.latest_release()
            latest = Version.parse(entry.tag_name)
            current = Version.parse(current_version)
        except TransportError as exc:
            logger.error("Update check failed: %s", exc.format_full())
            return CheckFailed(reason=exc.format_full(), error="transport")
        except MalformedFeedError as exc:
            logger.warning("Update check failed, unexpected release feed: %s", exc.format_full())
            return CheckFailed(reason=exc.format_full(), error="feed")
        except MalformedVersionError as exc:
            logger.warning("Update check failed: %s", exc.format_full())
            return CheckFailed(reason=exc.format_full(), error="version")
        except Exception as exc:
            logger.exception("Update check failed unexpectedly")
            return CheckFailed(reason=str(exc) or type(exc).__name__, error="unexpected")

        logger.debug(
            "found version %s from github API. Current version is %s",
            latest,
            current,
        )

        if compare(current, latest) is Ordering.LESS:
            logger.warning(
                "An update is available! Version v%s can be downloaded at %s. "
                "Out of date versions are not supported.",
                latest.to_canonical_string(),
                entry.html_url,
            )
            return UpdateAvailable(
                current=current.to_canonical_string(),
                latest=latest.to_canonical_string(),
                url=entry.html_url,
            )

        return NoUpdate(
            current=current.to_canonical_string(),
            latest=latest.to_canonical_string(),
        )

    def check_for_update(self, current_version: str) -> bool:
        """True only when a newer release was confirmed. Never raises."""

        return self.check(current_version).update_available

    def check_build(self, build: BuildInfo) -> UpdateCheckResult | None:
        """Run the check only for tagged release builds; `None` means skipped."""

        if build.is_semver_release:
            return self.check(build.tag)
        if build.is_development:
            logger.info("You're running on a development build.")
        return None

    def is_update_available(self, build: BuildInfo) -> bool:
        result = self.check_build(build)
        return result is not None and result.update_available
