"""Session events.

Every producer (navigation requests, fetch completions, web contents
notifications, snapshot restore) converts its input into one of these
events.  Only the reducers in :mod:`pytabstate.state` are allowed to
apply them.

The set of events is closed: :data:`Event` is a tagged union discriminated
by ``type``, and every reducer declares a handler for each
:class:`EventKind` (see :func:`require_exhaustive`).
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from enum import StrEnum
from typing import Annotated, Any, Literal, TypeAlias, TypeVar

from pydantic import ConfigDict, Field, TypeAdapter, ValidationError

from pytabstate.exceptions import EventValidationError, TabStateError
from pytabstate.models._base import TabStateBaseModel


class EventKind(StrEnum):
    WINDOW_OPENED = "windowOpened"
    WINDOW_CLOSED = "windowClosed"
    OPEN_TAB = "openTab"
    CLOSE_TAB = "closeTab"
    FOCUS_TAB = "focusTab"
    TAB_GOT_WEB_CONTENTS = "tabGotWebContents"
    TAB_DATA_FETCHED = "tabDataFetched"
    EVOLVE_TAB = "evolveTab"
    TAB_GO_BACK = "tabGoBack"
    TAB_GO_FORWARD = "tabGoForward"
    LOGOUT = "logout"
    TABS_RESTORED = "tabsRestored"
    POPUP_CONTEXT_MENU = "popupContextMenu"
    CLOSE_CONTEXT_MENU = "closeContextMenu"


class BaseEvent(TabStateBaseModel):
    """Common configuration for all events: immutable, exact field sets."""

    model_config = ConfigDict(extra="forbid")


class WindowOpened(BaseEvent):
    type: Literal["windowOpened"] = "windowOpened"
    window: str
    initial_url: str = Field(alias="initialURL")


class WindowClosed(BaseEvent):
    type: Literal["windowClosed"] = "windowClosed"
    window: str


class OpenTab(BaseEvent):
    type: Literal["openTab"] = "openTab"
    window: str
    tab: str | None
    url: str
    resource: str | None = None
    data: dict[str, Any] | None = None


class CloseTab(BaseEvent):
    type: Literal["closeTab"] = "closeTab"
    window: str
    tab: str


class FocusTab(BaseEvent):
    type: Literal["focusTab"] = "focusTab"
    window: str
    tab: str


class TabGotWebContents(BaseEvent):
    type: Literal["tabGotWebContents"] = "tabGotWebContents"
    window: str
    tab: str
    web_contents_id: int


class TabDataFetched(BaseEvent):
    type: Literal["tabDataFetched"] = "tabDataFetched"
    window: str
    tab: str
    data: dict[str, Any]
    shallow: bool = False


class EvolveTab(BaseEvent):
    """Navigate a tab, or update its current entry in place."""

    type: Literal["evolveTab"] = "evolveTab"
    window: str
    tab: str
    url: str | None = None
    resource: str | None = None
    data: dict[str, Any] | None = None
    replace: bool = False


class TabGoBack(BaseEvent):
    type: Literal["tabGoBack"] = "tabGoBack"
    window: str
    tab: str


class TabGoForward(BaseEvent):
    type: Literal["tabGoForward"] = "tabGoForward"
    window: str
    tab: str


class Logout(BaseEvent):
    type: Literal["logout"] = "logout"


class TabsRestored(BaseEvent):
    """Persisted snapshot records to recreate as tabs.

    ``items`` is deliberately loose: malformed records are skipped one by
    one by the tab store rather than rejecting the whole event.
    """

    type: Literal["tabsRestored"] = "tabsRestored"
    window: str
    items: list[Any] = Field(default_factory=list)


class PopupContextMenu(BaseEvent):
    type: Literal["popupContextMenu"] = "popupContextMenu"
    window: str
    client_x: float
    client_y: float
    template: list[Any] = Field(default_factory=list)


class CloseContextMenu(BaseEvent):
    type: Literal["closeContextMenu"] = "closeContextMenu"
    window: str


Event: TypeAlias = Annotated[
    WindowOpened
    | WindowClosed
    | OpenTab
    | CloseTab
    | FocusTab
    | TabGotWebContents
    | TabDataFetched
    | EvolveTab
    | TabGoBack
    | TabGoForward
    | Logout
    | TabsRestored
    | PopupContextMenu
    | CloseContextMenu,
    Field(discriminator="type"),
]

_EVENT_ADAPTER: TypeAdapter[Event] = TypeAdapter(Event)


def parse_event(payload: Mapping[str, Any]) -> Event:
    """Validate a wire dict (``{"type": "openTab", "window": ...}``) into an event."""
    kind = str(payload.get("type", "")) if isinstance(payload, Mapping) else ""
    try:
        return _EVENT_ADAPTER.validate_python(payload)
    except ValidationError as exc:
        raise EventValidationError(f"Invalid {kind or 'untyped'} event: {exc}", kind=kind) from exc


def event_window(event: Event) -> str | None:
    """Window an event is scoped to, ``None`` for global events."""
    return getattr(event, "window", None)


H = TypeVar("H", bound=Callable[..., Any])


def require_exhaustive(handlers: Mapping[EventKind, H], owner: str) -> dict[EventKind, H]:
    """Check that a dispatch table covers every :class:`EventKind`.

    Reducers call this at import time, so adding an event kind without a
    handler fails as soon as the module is loaded.
    """
    missing = [kind.value for kind in EventKind if kind not in handlers]
    if missing:
        raise TabStateError(f"{owner} has no handler for: {', '.join(missing)}")
    return dict(handlers)
