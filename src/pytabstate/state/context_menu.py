"""Context menu sub-state of a window."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from pytabstate.config import SessionConfig
from pytabstate.models.window import ContextMenuData, ContextMenuState
from pytabstate.state.events import CloseContextMenu, Event, EventKind, PopupContextMenu, require_exhaustive


def _on_popup(state: ContextMenuState, event: PopupContextMenu, config: SessionConfig) -> ContextMenuState:
    data = ContextMenuData(client_x=event.client_x, client_y=event.client_y, template=tuple(event.template))
    return state.model_copy(update={"data": data, "open": True})


def _on_close(state: ContextMenuState, event: CloseContextMenu, config: SessionConfig) -> ContextMenuState:
    if not state.open:
        return state
    return state.model_copy(update={"open": False})


def _unchanged(state: ContextMenuState, event: Any, config: SessionConfig) -> ContextMenuState:
    return state


_Handler = Callable[[ContextMenuState, Any, SessionConfig], ContextMenuState]

_HANDLERS: dict[EventKind, _Handler] = require_exhaustive(
    {kind: _unchanged for kind in EventKind}
    | {
        EventKind.POPUP_CONTEXT_MENU: _on_popup,
        EventKind.CLOSE_CONTEXT_MENU: _on_close,
    },
    "context menu",
)


def reduce_context_menu(state: ContextMenuState | None, event: Event | None, config: SessionConfig) -> ContextMenuState:
    if state is None:
        state = ContextMenuState()
    if event is None:
        return state
    return _HANDLERS[EventKind(event.type)](state, event, config)
