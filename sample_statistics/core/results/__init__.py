"""Result objects produced from samples."""

from .summary import Summary, UNKNOWN

__all__ = ["Summary", "UNKNOWN"]
