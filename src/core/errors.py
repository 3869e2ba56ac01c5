"""Error taxonomy for the update check.

Adapters raise these; the `UpdateChecker` boundary turns every one of them
into a `CheckFailed` result, so callers never see them from `check_for_update`.
"""

from __future__ import annotations


class UpdateCheckError(Exception):
    """Base error with an optional details line for diagnostics."""

    def __init__(self, message: str, details: str | None = None) -> None:
        self.message = message
        self.details = details
        super().__init__(message)

    def format_full(self) -> str:
        if self.details:
            return f"{self.message} ({self.details})"
        return self.message


class TransportError(UpdateCheckError):
    """The release feed could not be fetched (connection, timeout, HTTP status)."""


class MalformedFeedError(UpdateCheckError):
    """The release feed did not have the expected JSON shape."""


class MalformedVersionError(UpdateCheckError, ValueError):
    """A version string does not match the semantic version grammar."""

    def __init__(self, text: str, reason: str) -> None:
        self.text = text
        self.reason = reason
        super().__init__(f"Malformed version {text!r}", details=reason)


__all__ = [
    "UpdateCheckError",
    "TransportError",
    "MalformedFeedError",
    "MalformedVersionError",
]
