"""Session configuration for pytabstate."""

from __future__ import annotations

import dataclasses
import os
from typing import Any

from pytabstate._constants import (
    BOOTSTRAP_TAB_ID,
    COLLECTION_RESOURCE_PREFIX,
    DEFAULT_DEEP_FIELDS,
    INTERNAL_SCHEME,
)
from pytabstate.exceptions import TabStateConfigError


def _env_fields(value: str | None) -> frozenset[str] | None:
    if value is None:
        return None
    return frozenset(part.strip() for part in value.split(",") if part.strip())


@dataclasses.dataclass(frozen=True)
class SessionConfig:
    """Reducer configuration.

    Parameters
    ----------
    deep_fields : frozenset of str
        TabData buckets merged one level deeper than a plain top-level
        overwrite.  Updating ``web.loading`` then keeps ``web.title``.
    bootstrap_tab_id : str
        Id of the tab inserted when a window is opened.
    internal_scheme : str
        Scheme used for internal URLs (``itch://collections/12``).
    collection_resource_prefix : str
        Resources starting with this prefix have their URL rewritten to the
        internal scheme form when a tab navigates to them.
    """

    deep_fields: frozenset[str] = DEFAULT_DEEP_FIELDS
    bootstrap_tab_id: str = BOOTSTRAP_TAB_ID
    internal_scheme: str = INTERNAL_SCHEME
    collection_resource_prefix: str = COLLECTION_RESOURCE_PREFIX

    def __post_init__(self) -> None:
        # Accept any iterable of names but always store an immutable set.
        if not isinstance(self.deep_fields, frozenset):
            object.__setattr__(self, "deep_fields", frozenset(self.deep_fields))
        if not self.bootstrap_tab_id:
            raise TabStateConfigError("bootstrap_tab_id must be non-empty")
        if not self.internal_scheme:
            raise TabStateConfigError("internal_scheme must be non-empty")

    def internal_url(self, resource: str) -> str:
        """Return the internal-scheme URL for *resource*."""
        return f"{self.internal_scheme}://{resource}"

    def is_collection_resource(self, resource: str) -> bool:
        return resource.startswith(self.collection_resource_prefix)

    @classmethod
    def from_env(cls, **overrides: Any) -> SessionConfig:
        """Create configuration from environment variables.

        Reads ``TABSTATE_DEEP_FIELDS`` (comma-separated),
        ``TABSTATE_BOOTSTRAP_TAB_ID``, ``TABSTATE_INTERNAL_SCHEME`` and
        ``TABSTATE_COLLECTION_PREFIX``.  Explicit keyword arguments override
        environment values.
        """
        env = os.environ

        config_kwargs: dict[str, Any] = {}

        deep_fields = _env_fields(env.get("TABSTATE_DEEP_FIELDS"))
        if deep_fields is not None and "deep_fields" not in overrides:
            config_kwargs["deep_fields"] = deep_fields

        _ENV_CONFIG_MAP = {
            "TABSTATE_BOOTSTRAP_TAB_ID": "bootstrap_tab_id",
            "TABSTATE_INTERNAL_SCHEME": "internal_scheme",
            "TABSTATE_COLLECTION_PREFIX": "collection_resource_prefix",
        }
        for env_key, field_name in _ENV_CONFIG_MAP.items():
            val = env.get(env_key)
            if val is not None:
                config_kwargs[field_name] = val

        config_kwargs.update(overrides)

        return cls(**config_kwargs)


DEFAULT_CONFIG = SessionConfig()
