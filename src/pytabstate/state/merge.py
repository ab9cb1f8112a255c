"""Tab data merge policy.

Fetchers deliver partial :data:`~pytabstate.models.TabData` updates: a game
page fetch may only know about ``games``, a web view only about
``web.loading``.  This module decides how such a partial update is folded
into what the tab already holds.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pytabstate.models.tab import TabData

_EMPTY: Mapping[str, Any] = {}


def _bucket(data: Mapping[str, Any], name: str) -> Mapping[str, Any]:
    # A bucket replaced by a shallow update may hold anything; only mappings merge.
    value = data.get(name)
    return value if isinstance(value, Mapping) else _EMPTY


def merge_tab_data(
    current: Mapping[str, Any],
    incoming: Mapping[str, Any] | None,
    *,
    shallow: bool,
    deep_fields: frozenset[str],
) -> TabData:
    """Merge *incoming* into *current* and return a new dict.

    Policy:
    - Top-level keys of *incoming* replace those of *current*; keys only in
      *current* are kept.
    - Unless *shallow*, every name in *deep_fields* is merged one level
      deeper, so ``{"web": {"loading": True}}`` keeps ``web.title``.

    Neither input is mutated.
    """
    incoming = incoming or _EMPTY
    result: TabData = {**current, **incoming}
    if shallow:
        return result

    for name in sorted(deep_fields):
        result[name] = {**_bucket(current, name), **_bucket(incoming, name)}
    return result
