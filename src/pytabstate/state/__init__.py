"""State/reducer layer.

This package is the single source of truth for how session events
(navigation, fetch completions, web contents notifications, restore) turn
into a new windows/tabs snapshot.
"""

from pytabstate.state.events import Event, EventKind, parse_event
from pytabstate.state.merge import merge_tab_data
from pytabstate.state.store import SessionStore
from pytabstate.state.tab_instances import reduce_tab_instances
from pytabstate.state.window import reduce_window
from pytabstate.state.windows import reduce_windows

__all__ = [
    "Event",
    "EventKind",
    "SessionStore",
    "merge_tab_data",
    "parse_event",
    "reduce_tab_instances",
    "reduce_window",
    "reduce_windows",
]
