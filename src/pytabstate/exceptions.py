"""Custom exception hierarchy for pytabstate."""

from __future__ import annotations


class TabStateError(Exception):
    """Base exception for all pytabstate errors."""


class TabStateConfigError(TabStateError):
    """Invalid or missing configuration."""


class EventValidationError(TabStateError):
    """An incoming event dict could not be parsed into a known event."""

    def __init__(self, message: str, *, kind: str = "") -> None:
        self.kind = kind
        super().__init__(message)


class SnapshotItemError(TabStateError):
    """A persisted snapshot record is malformed.

    Raised by :func:`pytabstate.snapshot.parse_snapshot_item`.  The tab
    store catches it per item while restoring, so a single bad record never
    aborts the rest of the batch.
    """

    def __init__(self, message: str, *, tab: str | None = None) -> None:
        self.tab = tab
        super().__init__(message)
