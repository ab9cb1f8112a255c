"""Persisted session snapshot shape.

A snapshot is an ordered list of records, one per tab, shaped like a
:class:`~pytabstate.models.TabInstance` plus an ``id``::

    [
        {"id": "initial-tab", "history": [{"url": "itch://library"}], "currentIndex": 0},
        {"id": "tab-2", "history": [...], "currentIndex": 3, "pinned": true},
    ]

Fetched data, the sleepy flag and web contents ids are runtime-only and are
never persisted.  Unknown fields pass through verbatim.  Reading and writing
the snapshot is left to the caller.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pydantic import ValidationError

from pytabstate._constants import SNAPSHOT_EXCLUDED_FIELDS
from pytabstate.exceptions import SnapshotItemError
from pytabstate.models.tab import TabInstance


def build_snapshot(tab_instances: Mapping[str, TabInstance]) -> list[dict[str, Any]]:
    """Serialize a window's tabs into snapshot records, in tab order.

    Placeholders (web contents attached to a tab that was never opened)
    have no history and are skipped.
    """
    records: list[dict[str, Any]] = []
    for tab, instance in tab_instances.items():
        if instance.is_placeholder:
            continue
        dumped = instance.model_dump(by_alias=True, mode="json", exclude=set(SNAPSHOT_EXCLUDED_FIELDS))
        records.append({"id": tab, **dumped})
    return records


def parse_snapshot_item(item: Any) -> tuple[str, TabInstance]:
    """Validate one snapshot record into ``(tab_id, instance)``.

    The restored instance always starts sleepy with empty data, whatever the
    record says: fetched data is never trusted across sessions.

    Raises
    ------
    SnapshotItemError
        If *item* is not a mapping, has no ``id``, or its fields do not
        form a valid tab instance.
    """
    if not isinstance(item, Mapping):
        raise SnapshotItemError(f"snapshot item is not a record: {type(item).__name__}")

    tab = item.get("id")
    if not tab:
        raise SnapshotItemError("snapshot item has no id")
    if not isinstance(tab, str):
        raise SnapshotItemError(f"snapshot item id must be a string, got {type(tab).__name__}", tab=str(tab))

    fields = {key: value for key, value in item.items() if key != "id"}
    fields["data"] = {}
    fields["sleepy"] = True
    try:
        instance = TabInstance.model_validate(fields)
    except ValidationError as exc:
        raise SnapshotItemError(f"invalid snapshot item {tab!r}: {exc}", tab=tab) from exc
    if instance.is_placeholder:
        raise SnapshotItemError("snapshot item has no history", tab=tab)
    return tab, instance
