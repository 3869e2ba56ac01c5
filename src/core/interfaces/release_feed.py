"""Release feed contract.

The update checker only asks for the newest release. `GitHubReleaseFeed` is the
production implementation; tests supply their own.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from core.domain.models import ReleaseFeedEntry


@runtime_checkable
class ReleaseFeed(Protocol):
    """Minimal contract for a newest-first release source.

    Design rules:
    - `latest_release` is blocking; one call is one round trip, no retry.
    - Failures are reported as `TransportError` or `MalformedFeedError`.
    """

    def latest_release(self) -> ReleaseFeedEntry:
        """Return the newest published release."""

        ...
