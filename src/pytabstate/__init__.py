"""pytabstate - Window and tab session state machine."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("pytabstate")
except PackageNotFoundError:
    __version__ = "0+local"
from pytabstate.config import DEFAULT_CONFIG, SessionConfig
from pytabstate.exceptions import (
    EventValidationError,
    SnapshotItemError,
    TabStateConfigError,
    TabStateError,
)
from pytabstate.models import (
    ContextMenuData,
    ContextMenuState,
    NavigationEntry,
    TabData,
    TabInstance,
    TabInstances,
    WindowsState,
    WindowState,
)
from pytabstate.snapshot import build_snapshot, parse_snapshot_item
from pytabstate.state import (
    Event,
    EventKind,
    SessionStore,
    merge_tab_data,
    parse_event,
    reduce_tab_instances,
    reduce_window,
    reduce_windows,
)
from pytabstate.state.events import (
    CloseContextMenu,
    CloseTab,
    EvolveTab,
    FocusTab,
    Logout,
    OpenTab,
    PopupContextMenu,
    TabDataFetched,
    TabGoBack,
    TabGoForward,
    TabGotWebContents,
    TabsRestored,
    WindowClosed,
    WindowOpened,
)

__all__ = [
    "__version__",
    "CloseContextMenu",
    "CloseTab",
    "ContextMenuData",
    "ContextMenuState",
    "DEFAULT_CONFIG",
    "Event",
    "EventKind",
    "EventValidationError",
    "EvolveTab",
    "FocusTab",
    "Logout",
    "NavigationEntry",
    "OpenTab",
    "PopupContextMenu",
    "SessionConfig",
    "SessionStore",
    "SnapshotItemError",
    "TabData",
    "TabDataFetched",
    "TabGoBack",
    "TabGoForward",
    "TabGotWebContents",
    "TabInstance",
    "TabInstances",
    "TabStateConfigError",
    "TabStateError",
    "TabsRestored",
    "WindowClosed",
    "WindowOpened",
    "WindowState",
    "WindowsState",
    "build_snapshot",
    "merge_tab_data",
    "parse_event",
    "parse_snapshot_item",
    "reduce_tab_instances",
    "reduce_window",
    "reduce_windows",
]
