"""Immutable state models."""

from pytabstate.models._base import TabStateBaseModel
from pytabstate.models.tab import NavigationEntry, TabData, TabInstance, TabInstances
from pytabstate.models.window import ContextMenuData, ContextMenuState, WindowState, WindowsState

__all__ = [
    "ContextMenuData",
    "ContextMenuState",
    "NavigationEntry",
    "TabData",
    "TabInstance",
    "TabInstances",
    "TabStateBaseModel",
    "WindowState",
    "WindowsState",
]
