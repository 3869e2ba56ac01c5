"""Domain layer: version model and update-check data structures.

Pure data and algorithms; nothing here performs I/O.
"""

from core.domain.models import (
    BuildInfo,
    CheckFailed,
    NoUpdate,
    ReleaseFeedEntry,
    UpdateAvailable,
    UpdateCheckResult,
)
from core.domain.version import (
    Ordering,
    ParsedVersion,
    ParseFailure,
    Version,
    compare,
    parse_version,
)

__all__ = [
    "BuildInfo",
    "CheckFailed",
    "NoUpdate",
    "Ordering",
    "ParseFailure",
    "ParsedVersion",
    "ReleaseFeedEntry",
    "UpdateAvailable",
    "UpdateCheckResult",
    "Version",
    "compare",
    "parse_version",
]
