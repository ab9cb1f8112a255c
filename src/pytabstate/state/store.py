"""Session store.

Holds the current windows state and applies events to it, one at a time,
in submission order.  This is the only component that replaces the state;
producers fire events at it and never read the result back at the call
site.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from typing import Any

from pytabstate._redact import redact_for_log
from pytabstate.config import DEFAULT_CONFIG, SessionConfig
from pytabstate.models.tab import TabInstance
from pytabstate.models.window import WindowState, WindowsState
from pytabstate.snapshot import build_snapshot
from pytabstate.state.events import Event, parse_event
from pytabstate.state.windows import reduce_windows

_logger = logging.getLogger(__name__)

StateListener = Callable[[WindowsState, WindowsState, Event], None]


class SessionStore:
    """In-memory store for the window/tab session.

    Given the same sequence of events, the store always reaches the same
    state.  Every state it exposes is an immutable snapshot; windows and tabs
    an event did not touch keep their identity across transitions, so
    listeners can detect changes with ``is``.
    """

    def __init__(
        self,
        config: SessionConfig | None = None,
        *,
        initial: WindowsState | None = None,
    ) -> None:
        self._config = config or DEFAULT_CONFIG
        self._state: WindowsState = dict(initial) if initial is not None else {}
        self._listeners: list[StateListener] = []

    @property
    def config(self) -> SessionConfig:
        return self._config

    @property
    def state(self) -> WindowsState:
        return self._state

    def subscribe(self, listener: StateListener) -> Callable[[], None]:
        """Register *listener*, called as ``listener(previous, current, event)``.

        Listeners only run when an event actually changed the state.
        Returns a callable that unregisters the listener.
        """
        self._listeners.append(listener)

        def _unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return _unsubscribe

    def apply(self, event: Event | Mapping[str, Any]) -> None:
        """Apply an event (or a wire dict describing one)."""
        if isinstance(event, Mapping):
            event = parse_event(event)

        if _logger.isEnabledFor(logging.DEBUG):
            _logger.debug("Applying %s: %s", event.type, redact_for_log(event))

        previous = self._state
        self._state = reduce_windows(previous, event, self._config)
        if self._state is previous:
            return

        for listener in list(self._listeners):
            try:
                listener(previous, self._state, event)
            except Exception:
                _logger.debug("State listener failed for %s", event.type, exc_info=True)

    def get_window(self, window: str) -> WindowState | None:
        return self._state.get(window)

    def get_tab(self, window: str, tab: str) -> TabInstance | None:
        window_state = self._state.get(window)
        if window_state is None:
            return None
        return window_state.tab_instances.get(tab)

    def snapshot(self, window: str) -> list[dict[str, Any]]:
        """Persistable records for every tab of *window* (empty if unknown)."""
        window_state = self._state.get(window)
        if window_state is None:
            return []
        return build_snapshot(window_state.tab_instances)
