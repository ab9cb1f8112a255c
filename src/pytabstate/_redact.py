"""Event summaries for DEBUG logs.

Events carry tab data exactly as the fetchers produced it: profile records
with e-mail addresses, download keys, API credentials.  :func:`redact_for_log`
turns an event (or any payload) into a log-safe structure: credential-like
keys are masked, long strings are cut and long lists are capped.
"""

from __future__ import annotations

import dataclasses
from collections.abc import Mapping, Sequence
from typing import Any

_MASK = "<redacted>"

# Compared against lowercased keys.
_SENSITIVE_VALUE_KEYS: frozenset[str] = frozenset(
    {
        "password",
        "apikey",
        "key",
        "token",
        "accesstoken",
        "refreshtoken",
        "authorization",
        "cookie",
        "cookies",
        "sessionid",
        "secret",
        "email",
    }
)


@dataclasses.dataclass(frozen=True)
class _Summarizer:
    max_string: int
    max_items: int
    max_depth: int = 20

    def summarize(self, value: Any, depth: int = 0) -> Any:
        if depth > self.max_depth:
            return "<max-depth>"
        if value is None or isinstance(value, (bool, int, float)):
            return value
        if isinstance(value, str):
            return self._cut(value)
        if isinstance(value, (bytes, bytearray)):
            return f"<bytes:{len(value)}b>"
        if isinstance(value, Mapping):
            return self._mapping(value, depth)
        if isinstance(value, Sequence):
            return self._sequence(value, depth)
        # Events and tab instances log as their wire (camelCase) form.
        dump = getattr(value, "model_dump", None)
        if callable(dump):
            return self.summarize(dump(by_alias=True), depth + 1)
        return repr(value)

    def _cut(self, text: str) -> str:
        if len(text) <= self.max_string:
            return text
        return f"{text[: self.max_string]}…<truncated>"

    def _mapping(self, value: Mapping[Any, Any], depth: int) -> dict[str, Any]:
        return {
            str(key): _MASK if str(key).lower() in _SENSITIVE_VALUE_KEYS else self.summarize(item, depth + 1)
            for key, item in value.items()
        }

    def _sequence(self, value: Sequence[Any], depth: int) -> list[Any]:
        items = [self.summarize(item, depth + 1) for item in value[: self.max_items]]
        hidden = len(value) - self.max_items
        if hidden > 0:
            items.append(f"<{hidden} more>")
        return items


def redact_for_log(value: Any, *, max_string: int = 256, max_items: int = 50) -> Any:
    """Return a log-safe copy of *value*."""
    return _Summarizer(max_string=max_string, max_items=max_items).summarize(value)
