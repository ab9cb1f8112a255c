from __future__ import annotations

from pytabstate._constants import DEFAULT_DEEP_FIELDS
from pytabstate.state.merge import merge_tab_data


def test_deep_field_keeps_sibling_keys() -> None:
    current = {"games": {"g1": 1}}
    incoming = {"games": {"g2": 2}}

    result = merge_tab_data(current, incoming, shallow=False, deep_fields=DEFAULT_DEEP_FIELDS)

    assert result["games"] == {"g1": 1, "g2": 2}


def test_web_loading_update_keeps_title() -> None:
    current = {"web": {"title": "itch.io", "loading": False}, "games": {"g1": 1}}

    result = merge_tab_data(current, {"web": {"loading": True}}, shallow=False, deep_fields=DEFAULT_DEEP_FIELDS)

    assert result["web"] == {"title": "itch.io", "loading": True}
    assert result["games"] == {"g1": 1}


def test_shallow_merge_replaces_whole_bucket() -> None:
    current = {"games": {"g1": 1}, "label": "old"}

    result = merge_tab_data(current, {"games": {"g2": 2}}, shallow=True, deep_fields=DEFAULT_DEEP_FIELDS)

    assert result["games"] == {"g2": 2}
    assert result["label"] == "old"


def test_non_deep_field_is_replaced_even_when_not_shallow() -> None:
    current = {"location": {"path": "/a", "size": 3}}

    result = merge_tab_data(current, {"location": {"path": "/b"}}, shallow=False, deep_fields=DEFAULT_DEEP_FIELDS)

    assert result["location"] == {"path": "/b"}


def test_inputs_are_not_mutated() -> None:
    current = {"games": {"g1": 1}}
    incoming = {"games": {"g2": 2}}

    merge_tab_data(current, incoming, shallow=False, deep_fields=DEFAULT_DEEP_FIELDS)

    assert current == {"games": {"g1": 1}}
    assert incoming == {"games": {"g2": 2}}


def test_custom_deep_fields() -> None:
    current = {"games": {"g1": 1}, "extra": {"a": 1}}
    incoming = {"games": {"g2": 2}, "extra": {"b": 2}}

    result = merge_tab_data(current, incoming, shallow=False, deep_fields=frozenset({"extra"}))

    assert result["extra"] == {"a": 1, "b": 2}
    assert result["games"] == {"g2": 2}


def test_none_incoming_keeps_current() -> None:
    result = merge_tab_data({"label": "x"}, None, shallow=True, deep_fields=DEFAULT_DEEP_FIELDS)
    assert result == {"label": "x"}


def test_non_mapping_deep_bucket_is_treated_as_empty() -> None:
    current = {"games": [1, 2], "web": "stale"}
    incoming = {"web": {"loading": True}, "toast": "oops"}

    result = merge_tab_data(current, incoming, shallow=False, deep_fields=DEFAULT_DEEP_FIELDS)

    assert result["games"] == {}
    assert result["web"] == {"loading": True}
    assert result["toast"] == {}
