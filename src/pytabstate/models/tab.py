"""Tab instance models."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, TypeAlias

from pydantic import ConfigDict, Field, model_validator

from pytabstate.models._base import TabStateBaseModel

TabData: TypeAlias = dict[str, Any]
"""Named data buckets fetched for a tab (``games``, ``web``, ``toast``...)."""


class NavigationEntry(TabStateBaseModel):
    """One step in a tab's navigation history.

    Unknown persisted fields (scroll position, titles) are kept verbatim.
    """

    model_config = ConfigDict(extra="allow")

    url: str
    resource: str | None = None


class TabInstance(TabStateBaseModel):
    """Navigation history, fetched data and lifecycle flags of one tab.

    Unknown fields coming from a persisted snapshot are kept verbatim
    (``extra="allow"``) so they survive a save/restore cycle.

    An instance with an empty ``history`` is a placeholder created when web
    contents attach before the tab itself was opened; it only carries
    ``web_contents_id``.
    """

    model_config = ConfigDict(extra="allow")

    history: tuple[NavigationEntry, ...] = ()
    current_index: int = 0
    sleepy: bool = False
    data: TabData = Field(default_factory=dict)
    web_contents_id: int | None = None

    @model_validator(mode="after")
    def _check_index(self) -> TabInstance:
        if not self.history:
            if self.current_index != 0:
                raise ValueError("placeholder tab must have currentIndex 0")
            return self
        if not 0 <= self.current_index < len(self.history):
            raise ValueError(f"currentIndex {self.current_index} out of range for history of {len(self.history)}")
        return self

    @property
    def is_placeholder(self) -> bool:
        return not self.history

    @property
    def current(self) -> NavigationEntry | None:
        """Entry at ``current_index``, ``None`` for placeholders."""
        if not self.history:
            return None
        return self.history[self.current_index]

    @property
    def can_go_back(self) -> bool:
        return self.current_index > 0

    @property
    def can_go_forward(self) -> bool:
        return self.current_index < len(self.history) - 1


TabInstances: TypeAlias = Mapping[str, TabInstance]
