"""Base model for pytabstate state and event objects.

Every model inherits from :class:`TabStateBaseModel` which provides:

* ``alias_generator=to_camel`` so the camelCase keys used by persisted
  snapshots and wire events (``currentIndex``, ``webContentsId``) map to
  snake_case fields.
* ``frozen=True`` so state snapshots can be shared between transitions.
  Derived states are built with ``model_copy(update=...)``.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class TabStateBaseModel(BaseModel):
    """Base for immutable state and event models."""

    model_config = ConfigDict(
        frozen=True,
        extra="ignore",
        populate_by_name=True,
        alias_generator=to_camel,
    )
