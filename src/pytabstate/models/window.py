"""Per-window state models."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, TypeAlias

from pydantic import Field

from pytabstate.models._base import TabStateBaseModel
from pytabstate.models.tab import TabInstance


class ContextMenuData(TabStateBaseModel):
    client_x: float = 0
    client_y: float = 0
    template: tuple[Any, ...] = ()


class ContextMenuState(TabStateBaseModel):
    """Context menu currently shown in a window, if any."""

    open: bool = False
    data: ContextMenuData = Field(default_factory=ContextMenuData)


class WindowState(TabStateBaseModel):
    """Everything owned by one top-level window.

    Destroyed atomically with its window.
    """

    tab_instances: Mapping[str, TabInstance] = Field(default_factory=dict)
    context_menu: ContextMenuState = Field(default_factory=ContextMenuState)


WindowsState: TypeAlias = Mapping[str, WindowState]
