"""Tab instance store.

Owns the mapping from tab id to :class:`~pytabstate.models.TabInstance` for
one window and implements every per-tab transition.

Transitions are pure: the input mapping is never mutated, and an event that
changes nothing returns the very same mapping object.  Events addressed to a
tab that does not exist (most often a fetch completing after the tab was
closed) are dropped that way instead of resurrecting the tab.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any

from pytabstate.config import SessionConfig
from pytabstate.exceptions import SnapshotItemError
from pytabstate.models.tab import NavigationEntry, TabInstance, TabInstances
from pytabstate.snapshot import parse_snapshot_item
from pytabstate.state.events import (
    CloseTab,
    Event,
    EventKind,
    EvolveTab,
    FocusTab,
    OpenTab,
    TabDataFetched,
    TabGoBack,
    TabGoForward,
    TabGotWebContents,
    TabsRestored,
    WindowOpened,
    require_exhaustive,
)
from pytabstate.state.merge import merge_tab_data

_logger = logging.getLogger(__name__)


def _with_tab(state: TabInstances, tab: str, instance: TabInstance) -> dict[str, TabInstance]:
    return {**state, tab: instance}


def _without_tab(state: TabInstances, tab: str) -> dict[str, TabInstance]:
    return {key: value for key, value in state.items() if key != tab}


def _on_window_opened(state: TabInstances, event: WindowOpened, config: SessionConfig) -> TabInstances:
    bootstrap = TabInstance(
        history=(NavigationEntry(url=event.initial_url),),
        current_index=0,
        sleepy=True,
        data={},
    )
    return _with_tab(state, config.bootstrap_tab_id, bootstrap)


def _on_open_tab(state: TabInstances, event: OpenTab, config: SessionConfig) -> TabInstances:
    if not event.tab:
        return state

    # Web contents may have attached before the tab was opened.
    existing = state.get(event.tab)
    web_contents_id = existing.web_contents_id if existing is not None and existing.is_placeholder else None

    instance = TabInstance(
        history=(NavigationEntry(url=event.url, resource=event.resource),),
        current_index=0,
        sleepy=True,
        data=dict(event.data or {}),
        web_contents_id=web_contents_id,
    )
    return _with_tab(state, event.tab, instance)


def _on_close_tab(state: TabInstances, event: CloseTab, config: SessionConfig) -> TabInstances:
    if event.tab not in state:
        return state
    return _without_tab(state, event.tab)


def _on_focus_tab(state: TabInstances, event: FocusTab, config: SessionConfig) -> TabInstances:
    instance = state.get(event.tab)
    # Wake up sleepy tabs.
    if instance is None or not instance.sleepy:
        return state
    return _with_tab(state, event.tab, instance.model_copy(update={"sleepy": False}))


def _on_tab_got_web_contents(state: TabInstances, event: TabGotWebContents, config: SessionConfig) -> TabInstances:
    instance = state.get(event.tab)
    if instance is None:
        _logger.debug("Web contents %s attached before tab %s was opened", event.web_contents_id, event.tab)
        return _with_tab(state, event.tab, TabInstance(web_contents_id=event.web_contents_id))
    if instance.web_contents_id == event.web_contents_id:
        return state
    return _with_tab(state, event.tab, instance.model_copy(update={"web_contents_id": event.web_contents_id}))


def _on_tab_data_fetched(state: TabInstances, event: TabDataFetched, config: SessionConfig) -> TabInstances:
    instance = state.get(event.tab)
    if instance is None:
        _logger.debug("Ignoring fresh data for closed tab %s", event.tab)
        return state

    data = merge_tab_data(instance.data, event.data, shallow=event.shallow, deep_fields=config.deep_fields)
    # Data arriving also wakes the tab up.
    return _with_tab(state, event.tab, instance.model_copy(update={"data": data, "sleepy": False}))


def _on_evolve_tab(state: TabInstances, event: EvolveTab, config: SessionConfig) -> TabInstances:
    instance = state.get(event.tab)
    if instance is None or instance.current is None:
        _logger.debug("Ignoring navigation for missing tab %s", event.tab)
        return state

    current = instance.current
    url = event.url
    resource = event.resource
    replace = event.replace

    if resource is not None and config.is_collection_resource(resource):
        url = config.internal_url(resource)
    if resource is None:
        resource = current.resource
    if url is None:
        url = current.url
    if url == current.url:
        replace = True

    entry = NavigationEntry(url=url, resource=resource)
    history = instance.history
    current_index = instance.current_index
    if replace:
        history = (*history[:current_index], entry, *history[current_index + 1 :])
    else:
        history = (*history[: current_index + 1], entry)
        current_index = len(history) - 1

    data = merge_tab_data(instance.data, event.data, shallow=False, deep_fields=config.deep_fields)
    return _with_tab(
        state,
        event.tab,
        instance.model_copy(update={"history": history, "current_index": current_index, "data": data}),
    )


def _on_tab_go_back(state: TabInstances, event: TabGoBack, config: SessionConfig) -> TabInstances:
    instance = state.get(event.tab)
    if instance is None or not instance.can_go_back:
        return state
    return _with_tab(state, event.tab, instance.model_copy(update={"current_index": instance.current_index - 1}))


def _on_tab_go_forward(state: TabInstances, event: TabGoForward, config: SessionConfig) -> TabInstances:
    instance = state.get(event.tab)
    if instance is None or not instance.can_go_forward:
        return state
    return _with_tab(state, event.tab, instance.model_copy(update={"current_index": instance.current_index + 1}))


def _on_logout(state: TabInstances, event: Any, config: SessionConfig) -> TabInstances:
    if not state:
        return state
    return {}


def _on_tabs_restored(state: TabInstances, event: TabsRestored, config: SessionConfig) -> TabInstances:
    restored = state
    for position, item in enumerate(event.items):
        try:
            tab, instance = parse_snapshot_item(item)
        except SnapshotItemError as exc:
            _logger.warning("Skipping snapshot item #%d: %s", position, exc)
            continue
        restored = _with_tab(restored, tab, instance)
    return restored


def _unchanged(state: TabInstances, event: Any, config: SessionConfig) -> TabInstances:
    return state


_Handler = Callable[[TabInstances, Any, SessionConfig], TabInstances]

_HANDLERS: dict[EventKind, _Handler] = require_exhaustive(
    {
        EventKind.WINDOW_OPENED: _on_window_opened,
        EventKind.WINDOW_CLOSED: _unchanged,
        EventKind.OPEN_TAB: _on_open_tab,
        EventKind.CLOSE_TAB: _on_close_tab,
        EventKind.FOCUS_TAB: _on_focus_tab,
        EventKind.TAB_GOT_WEB_CONTENTS: _on_tab_got_web_contents,
        EventKind.TAB_DATA_FETCHED: _on_tab_data_fetched,
        EventKind.EVOLVE_TAB: _on_evolve_tab,
        EventKind.TAB_GO_BACK: _on_tab_go_back,
        EventKind.TAB_GO_FORWARD: _on_tab_go_forward,
        EventKind.LOGOUT: _on_logout,
        EventKind.TABS_RESTORED: _on_tabs_restored,
        EventKind.POPUP_CONTEXT_MENU: _unchanged,
        EventKind.CLOSE_CONTEXT_MENU: _unchanged,
    },
    "tab instance store",
)


def reduce_tab_instances(state: TabInstances | None, event: Event | None, config: SessionConfig) -> TabInstances:
    """Apply *event* to a window's tab instances."""
    if state is None:
        state = {}
    if event is None:
        return state
    return _HANDLERS[EventKind(event.type)](state, event, config)
