"""Core contracts.

Concrete adapters implement these protocols so the core depends on
abstractions, not on HTTP.
"""

from core.interfaces.release_feed import ReleaseFeed

__all__ = ["ReleaseFeed"]
