"""Semantic version value object.

Grammar accepted by `parse_version` (whole string, case-sensitive):

    version    := major "." minor "." patch ["-" prerelease] ["+" buildmetadata]
    prerelease := ident ("." ident)*     ident := numeric-ident | alnum-ident
    buildmetadata := alnum-ident ("." alnum-ident)*

Numeric identifiers (including major/minor/patch) have no leading zeros;
alphanumeric identifiers use `[0-9A-Za-z-]` and contain at least one non-digit.
This holds for build metadata too, so `+001` is rejected and every canonical
rendering parses back.

Ordering notes:
- Build metadata never participates in ordering.
- A pre-release is *not* ordered below its release: `1.0.0` and
  `1.0.0-alpha` compare EQUAL.
- When both sides carry a pre-release, the result is the string comparison of
  the other side's pre-release against this side's, so
  `compare(1.0.0-alpha, 1.0.0-beta)` is GREATER. Update decisions for
  pre-release builds depend on this direction.
"""

from __future__ import annotations

import string
from dataclasses import dataclass
from enum import IntEnum

from pydantic import BaseModel, ConfigDict, Field, field_validator

from core.errors import MalformedVersionError

_DIGITS = frozenset(string.digits)
_IDENT_CHARS = _DIGITS | frozenset(string.ascii_letters) | {"-"}


class Ordering(IntEnum):
    """Result of `compare(a, b)`, read as "a relative to b"."""

    LESS = -1
    EQUAL = 0
    GREATER = 1


def _is_numeric_identifier(part: str) -> bool:
    if not part or any(ch not in _DIGITS for ch in part):
        return False
    return part == "0" or part[0] != "0"


def _is_alphanumeric_identifier(part: str) -> bool:
    if not part or any(ch not in _IDENT_CHARS for ch in part):
        return False
    return any(ch not in _DIGITS for ch in part)


def _prerelease_problem(value: str) -> str | None:
    for ident in value.split("."):
        if _is_numeric_identifier(ident) or _is_alphanumeric_identifier(ident):
            continue
        if ident and all(ch in _DIGITS for ch in ident):
            return f"numeric pre-release identifier {ident!r} has a leading zero"
        return f"invalid pre-release identifier {ident!r}"
    return None


def _build_metadata_problem(value: str) -> str | None:
    for ident in value.split("."):
        if not _is_alphanumeric_identifier(ident):
            return f"invalid build metadata identifier {ident!r}"
    return None


class Version(BaseModel):
    """Parsed `MAJOR.MINOR.PATCH[-PRERELEASE][+BUILD]` identifier."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    major: int = Field(..., ge=0)
    minor: int = Field(..., ge=0)
    patch: int = Field(..., ge=0)
    prerelease: str | None = None
    build_metadata: str | None = None

    @field_validator("prerelease")
    @classmethod
    def check_prerelease(cls, value: str | None) -> str | None:
        if value is not None:
            problem = _prerelease_problem(value)
            if problem:
                raise ValueError(problem)
        return value

    @field_validator("build_metadata")
    @classmethod
    def check_build_metadata(cls, value: str | None) -> str | None:
        if value is not None:
            problem = _build_metadata_problem(value)
            if problem:
                raise ValueError(problem)
        return value

    @classmethod
    def parse(cls, text: str) -> "Version":
        """Parse `text` or raise `MalformedVersionError`."""

        result = parse_version(text)
        if isinstance(result, ParseFailure):
            raise MalformedVersionError(result.text, result.reason)
        return result.version

    def to_canonical_string(self) -> str:
        """Render as text; build metadata is joined with "-", not "+"."""

        out = f"{self.major}.{self.minor}.{self.patch}"
        if self.prerelease and self.prerelease.strip():
            out += f"-{self.prerelease}"
        if self.build_metadata and self.build_metadata.strip():
            out += f"-{self.build_metadata}"
        return out

    def compare_to(self, other: "Version") -> Ordering:
        return compare(self, other)

    def is_older_than(self, other: "Version") -> bool:
        return compare(self, other) is Ordering.LESS

    def __str__(self) -> str:
        return self.to_canonical_string()


@dataclass(frozen=True)
class ParsedVersion:
    version: Version


@dataclass(frozen=True)
class ParseFailure:
    text: str
    reason: str


def parse_version(text: str) -> ParsedVersion | ParseFailure:
    """Parse `text` into a tagged result. Never raises."""

    if not isinstance(text, str):
        return ParseFailure(text=repr(text), reason="version must be a string")
    if not text:
        return ParseFailure(text=text, reason="empty version string")

    head, plus, build = text.partition("+")
    if plus:
        if not build:
            return ParseFailure(text=text, reason="empty build metadata after '+'")
        problem = _build_metadata_problem(build)
        if problem:
            return ParseFailure(text=text, reason=problem)

    core, dash, prerelease = head.partition("-")
    if dash:
        if not prerelease:
            return ParseFailure(text=text, reason="empty pre-release after '-'")
        problem = _prerelease_problem(prerelease)
        if problem:
            return ParseFailure(text=text, reason=problem)

    parts = core.split(".")
    if len(parts) != 3:
        return ParseFailure(
            text=text,
            reason=f"expected MAJOR.MINOR.PATCH, got {len(parts)} dot-separated part(s)",
        )
    for name, part in zip(("major", "minor", "patch"), parts):
        if not _is_numeric_identifier(part):
            return ParseFailure(text=text, reason=f"invalid {name} component {part!r}")

    major, minor, patch = (int(p) for p in parts)
    return ParsedVersion(
        version=Version(
            major=major,
            minor=minor,
            patch=patch,
            prerelease=prerelease if dash else None,
            build_metadata=build if plus else None,
        )
    )


def compare(a: Version, b: Version) -> Ordering:
    """Order `a` relative to `b` (LESS means `a` is the older version)."""

    if a == b:
        return Ordering.EQUAL

    for mine, theirs in ((a.major, b.major), (a.minor, b.minor), (a.patch, b.patch)):
        if theirs > mine:
            return Ordering.LESS
        if theirs < mine:
            return Ordering.GREATER

    if a.prerelease is not None and b.prerelease is not None:
        if b.prerelease > a.prerelease:
            return Ordering.GREATER
        if b.prerelease < a.prerelease:
            return Ordering.LESS

    return Ordering.EQUAL
