"""Window state composer.

Combines the per-window sub-states (tab instances, context menu) into one
:class:`~pytabstate.models.WindowState`.  When no sub-state changed, the
input window state is returned as-is.
"""

from __future__ import annotations

from pytabstate.config import SessionConfig
from pytabstate.models.window import WindowState
from pytabstate.state.context_menu import reduce_context_menu
from pytabstate.state.events import Event
from pytabstate.state.tab_instances import reduce_tab_instances


def initial_window_state(config: SessionConfig) -> WindowState:
    return WindowState(
        tab_instances=reduce_tab_instances(None, None, config),
        context_menu=reduce_context_menu(None, None, config),
    )


def reduce_window(state: WindowState | None, event: Event | None, config: SessionConfig) -> WindowState:
    if state is None:
        state = initial_window_state(config)
    if event is None:
        return state

    tab_instances = reduce_tab_instances(state.tab_instances, event, config)
    context_menu = reduce_context_menu(state.context_menu, event, config)
    if tab_instances is state.tab_instances and context_menu is state.context_menu:
        return state
    return state.model_copy(update={"tab_instances": tab_instances, "context_menu": context_menu})
