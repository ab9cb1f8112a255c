from __future__ import annotations

import pytest

from pytabstate.config import SessionConfig
from pytabstate.exceptions import TabStateConfigError


def test_defaults() -> None:
    config = SessionConfig()
    assert config.deep_fields == frozenset({"users", "games", "collections", "web", "toast"})
    assert config.bootstrap_tab_id == "initial-tab"
    assert config.internal_url("collections/3") == "itch://collections/3"
    assert config.is_collection_resource("collections/3")
    assert not config.is_collection_resource("games/3")


def test_deep_fields_are_frozen() -> None:
    config = SessionConfig(deep_fields={"games"})  # type: ignore[arg-type]
    assert config.deep_fields == frozenset({"games"})
    assert isinstance(config.deep_fields, frozenset)


def test_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("TABSTATE_DEEP_FIELDS", "games, web,")
    monkeypatch.setenv("TABSTATE_BOOTSTRAP_TAB_ID", "home")
    monkeypatch.setenv("TABSTATE_INTERNAL_SCHEME", "app")

    config = SessionConfig.from_env(bootstrap_tab_id="start")

    assert config.deep_fields == frozenset({"games", "web"})
    assert config.bootstrap_tab_id == "start"
    assert config.internal_url("collections/1") == "app://collections/1"


def test_empty_bootstrap_tab_rejected() -> None:
    with pytest.raises(TabStateConfigError):
        SessionConfig(bootstrap_tab_id="")
