"""Exception hierarchy shared across the Capy package."""

from __future__ import annotations


class CapyError(Exception):
    """Base class for errors raised by Capy."""


class AssetError(CapyError):
    """Raised when a startup asset is missing or cannot be decoded."""

    def __init__(self, path: object, reason: str) -> None:
        super().__init__(f"Unable to load asset '{path}': {reason}")
        self.path = path
        self.reason = reason


class HistoryIndexError(CapyError, IndexError):
    """Raised when a history entry is removed by an index that does not exist."""

    def __init__(self, index: int, length: int) -> None:
        super().__init__(f"History index {index} out of range (history has {length} entries)")
        self.index = index
        self.length = length


__all__ = ["AssetError", "CapyError", "HistoryIndexError"]
