from __future__ import annotations

from pytabstate._redact import redact_for_log
from pytabstate.state.events import TabDataFetched


def test_redact_for_log_redacts_sensitive_keys() -> None:
    payload = {
        "users": {"1": {"username": "leafo", "email": "leafo@example.com"}},
        "credentials": {"key": "APIKEY", "token": "TOKEN"},
        "password": "pw",
        "web": {"url": "https://itch.io"},
    }

    redacted = redact_for_log(payload)
    assert redacted["users"]["1"]["email"] == "<redacted>"
    assert redacted["users"]["1"]["username"] == "leafo"
    assert redacted["credentials"]["key"] == "<redacted>"
    assert redacted["credentials"]["token"] == "<redacted>"
    assert redacted["password"] == "<redacted>"
    assert redacted["web"]["url"] == "https://itch.io"


def test_redact_for_log_truncates_long_strings() -> None:
    long_value = "x" * 600
    redacted = redact_for_log({"value": long_value}, max_string=10)
    assert redacted["value"].startswith("x" * 10)
    assert "<truncated>" in redacted["value"]


def test_redact_for_log_caps_long_lists() -> None:
    redacted = redact_for_log(list(range(10)), max_items=3)
    assert redacted == [0, 1, 2, "<7 more>"]


def test_redact_for_log_dumps_models_by_alias() -> None:
    event = TabDataFetched(window="root", tab="A", data={"token": "T"})

    redacted = redact_for_log(event)
    assert redacted["type"] == "tabDataFetched"
    assert redacted["data"]["token"] == "<redacted>"
