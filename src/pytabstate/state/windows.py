"""Window multiplexer.

Owns the mapping from window id to :class:`~pytabstate.models.WindowState`
and routes events:

- ``windowOpened`` builds a fresh window state,
- ``windowClosed`` drops the window and every tab in it,
- events naming an existing window only reach that window,
- anything else (``logout``, or a window that no longer exists) is
  broadcast to every window.

Windows an event does not touch keep their exact state object.
"""

from __future__ import annotations

import logging

from pytabstate.config import DEFAULT_CONFIG, SessionConfig
from pytabstate.models.window import WindowsState
from pytabstate.state.events import Event, WindowClosed, WindowOpened, event_window
from pytabstate.state.window import reduce_window

_logger = logging.getLogger(__name__)


def reduce_windows(
    state: WindowsState | None,
    event: Event | None,
    config: SessionConfig = DEFAULT_CONFIG,
) -> WindowsState:
    """Apply *event* to all windows and return the new windows mapping."""
    if state is None:
        state = {}
    if event is None:
        return state

    if isinstance(event, WindowOpened):
        window_state = reduce_window(None, None, config)
        window_state = reduce_window(window_state, event, config)
        return {**state, event.window: window_state}

    if isinstance(event, WindowClosed):
        if event.window not in state:
            return state
        return {key: value for key, value in state.items() if key != event.window}

    window = event_window(event)
    if window is not None and window in state:
        window_state = reduce_window(state[window], event, config)
        if window_state is state[window]:
            return state
        return {**state, window: window_state}

    if window is not None:
        _logger.debug("%s names unknown window %s; broadcasting", event.type, window)

    changed = False
    new_state = {}
    for key, window_state in state.items():
        new_state[key] = reduce_window(window_state, event, config)
        changed = changed or new_state[key] is not window_state
    return new_state if changed else state
