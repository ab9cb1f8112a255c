"""Shared constants."""

from __future__ import annotations

# TabData buckets merged one level deeper than a plain overwrite.
DEFAULT_DEEP_FIELDS: frozenset[str] = frozenset({"users", "games", "collections", "web", "toast"})

# Tab id given to the tab every new window starts with.
BOOTSTRAP_TAB_ID = "initial-tab"

INTERNAL_SCHEME = "itch"
COLLECTION_RESOURCE_PREFIX = "collections/"

# Runtime-only TabInstance fields that never end up in a persisted snapshot.
SNAPSHOT_EXCLUDED_FIELDS: frozenset[str] = frozenset({"data", "sleepy", "web_contents_id"})
