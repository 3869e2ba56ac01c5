"""Domain models (Pydantic v2).

These describe *what* an update check consumes and produces; the feed
adapter and the CLI decide *how* the data is fetched and shown.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, StrictStr

from core.domain.version import ParsedVersion, parse_version

if TYPE_CHECKING:
    from core.config import AppSettings


class ReleaseFeedEntry(BaseModel):
    """One published release, as read from the newest-first feed.

    Only the two fields the check relies on are kept; everything else GitHub
    returns for a release is ignored.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    tag_name: StrictStr = Field(
        ...,
        description="Git tag of the release, expected to be a semantic version.",
    )
    html_url: StrictStr = Field(
        ...,
        description="Public release page.",
    )


class BuildInfo(BaseModel):
    """Identity of the running build (tag and branch it was produced from)."""

    model_config = ConfigDict(frozen=True)

    tag: str | None = None
    branch: str | None = None

    @property
    def is_semver_release(self) -> bool:
        """True when the build was produced from a semantic-version tag."""

        return bool(self.tag) and isinstance(parse_version(self.tag), ParsedVersion)

    @property
    def is_development(self) -> bool:
        return bool(self.branch) and self.branch.lower() == "develop"

    @classmethod
    def from_settings(cls, settings: AppSettings) -> "BuildInfo":
        return cls(tag=settings.build_tag, branch=settings.build_branch)


class UpdateAvailable(BaseModel):
    status: Literal["available"] = "available"
    current: str
    latest: str
    url: str

    @property
    def update_available(self) -> bool:
        return True


class NoUpdate(BaseModel):
    status: Literal["up_to_date"] = "up_to_date"
    current: str
    latest: str

    @property
    def update_available(self) -> bool:
        return False


class CheckFailed(BaseModel):
    """The check could not complete; this is *not* a statement of currency."""

    status: Literal["failed"] = "failed"
    reason: str
    error: Literal["transport", "feed", "version", "unexpected"]

    @property
    def update_available(self) -> bool:
        return False


UpdateCheckResult = Union[UpdateAvailable, NoUpdate, CheckFailed]
