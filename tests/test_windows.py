from __future__ import annotations

from pytabstate.config import SessionConfig
from pytabstate.models.window import WindowState, WindowsState
from pytabstate.state.events import (
    CloseContextMenu,
    CloseTab,
    EvolveTab,
    FocusTab,
    Logout,
    OpenTab,
    PopupContextMenu,
    TabDataFetched,
    WindowClosed,
    WindowOpened,
)
from pytabstate.state.window import reduce_window
from pytabstate.state.windows import reduce_windows

CONFIG = SessionConfig()


def _two_windows() -> WindowsState:
    state = reduce_windows({}, WindowOpened(window="w1", initial_url="itch://library"), CONFIG)
    return reduce_windows(state, WindowOpened(window="w2", initial_url="itch://featured"), CONFIG)


def test_window_opened_bootstraps_initial_tab() -> None:
    state = reduce_windows({}, WindowOpened(window="w1", initial_url="itch://library"), CONFIG)

    window = state["w1"]
    assert isinstance(window, WindowState)
    assert list(window.tab_instances) == ["initial-tab"]
    assert window.tab_instances["initial-tab"].history[0].url == "itch://library"
    assert window.context_menu.open is False


def test_bootstrap_tab_id_is_configurable() -> None:
    config = SessionConfig(bootstrap_tab_id="home")
    state = reduce_windows({}, WindowOpened(window="w1", initial_url="u"), config)
    assert list(state["w1"].tab_instances) == ["home"]


def test_window_scoped_event_only_touches_its_window() -> None:
    state = _two_windows()

    new_state = reduce_windows(state, OpenTab(window="w1", tab="A", url="u1"), CONFIG)

    assert "A" in new_state["w1"].tab_instances
    assert new_state["w2"] is state["w2"]
    assert new_state["w1"].context_menu is state["w1"].context_menu
    assert new_state["w1"].tab_instances["initial-tab"] is state["w1"].tab_instances["initial-tab"]


def test_window_closed_removes_only_that_window() -> None:
    state = _two_windows()

    new_state = reduce_windows(state, WindowClosed(window="w1"), CONFIG)

    assert list(new_state) == ["w2"]
    assert new_state["w2"] is state["w2"]


def test_window_closed_for_unknown_window_is_noop() -> None:
    state = _two_windows()
    assert reduce_windows(state, WindowClosed(window="nope"), CONFIG) is state


def test_logout_is_broadcast_to_every_window() -> None:
    state = _two_windows()

    new_state = reduce_windows(state, Logout(), CONFIG)

    assert set(new_state) == {"w1", "w2"}
    assert all(not window.tab_instances for window in new_state.values())


def test_unknown_window_event_is_broadcast() -> None:
    state = _two_windows()

    new_state = reduce_windows(state, OpenTab(window="gone", tab="A", url="u1"), CONFIG)

    assert set(new_state) == {"w1", "w2"}
    assert "A" in new_state["w1"].tab_instances
    assert "A" in new_state["w2"].tab_instances


def test_broadcast_without_changes_returns_same_state() -> None:
    state = _two_windows()
    assert reduce_windows(state, CloseTab(window="gone", tab="missing"), CONFIG) is state


def test_noop_event_in_known_window_returns_same_state() -> None:
    state = _two_windows()
    assert reduce_windows(state, TabDataFetched(window="w1", tab="missing", data={}), CONFIG) is state


def test_no_event_returns_same_state() -> None:
    state = _two_windows()
    assert reduce_windows(state, None, CONFIG) is state


def test_tabs_are_isolated_between_windows() -> None:
    state = _two_windows()
    state = reduce_windows(state, OpenTab(window="w1", tab="A", url="u1"), CONFIG)
    state = reduce_windows(state, OpenTab(window="w2", tab="A", url="u1"), CONFIG)

    new_state = reduce_windows(state, EvolveTab(window="w1", tab="A", url="u2"), CONFIG)

    assert len(new_state["w1"].tab_instances["A"].history) == 2
    assert new_state["w2"].tab_instances["A"] is state["w2"].tab_instances["A"]


def test_context_menu_popup_and_close() -> None:
    window = reduce_window(None, None, CONFIG)

    opened = reduce_window(
        window,
        PopupContextMenu(window="w1", client_x=10, client_y=20, template=[{"label": "Close tab"}]),
        CONFIG,
    )
    assert opened.context_menu.open is True
    assert opened.context_menu.data.client_x == 10
    assert opened.context_menu.data.template == ({"label": "Close tab"},)
    assert opened.tab_instances is window.tab_instances

    closed = reduce_window(opened, CloseContextMenu(window="w1"), CONFIG)
    assert closed.context_menu.open is False
    assert closed.context_menu.data == opened.context_menu.data
    assert reduce_window(closed, CloseContextMenu(window="w1"), CONFIG) is closed


def test_focus_in_one_window_keeps_other_window() -> None:
    state = _two_windows()

    new_state = reduce_windows(state, FocusTab(window="w2", tab="initial-tab"), CONFIG)

    assert new_state["w1"] is state["w1"]
    assert new_state["w2"].tab_instances["initial-tab"].sleepy is False
