"""Boolean flag lookups over the application manifest.

A flag is a string entry in the manifest, optionally inside a group
(a nested table). ``true``, ``yes`` or ``1`` (case-insensitive) enable
it. Anything else, including a missing key or a non-string value,
reads as disabled.

The UIFlag enum lists the flags the application knows by name.
"""

from __future__ import annotations

import threading
from collections.abc import Mapping
from enum import Enum
from typing import Any

from uiconfig.constants import SHOW_REGISTER_BUTTON_KEY, TRUTHY_VALUES
from uiconfig.manifest import ConfigurationStore, resolve_manifest


class UIFlag(str, Enum):
    """Registry of named UI flags.

    Each member's value is its manifest key.
    """

    SHOW_REGISTER_BUTTON = SHOW_REGISTER_BUTTON_KEY


def parse_bool(value: Any) -> bool:
    """Return True if *value* is a string spelling an enabled flag."""
    if not isinstance(value, str):
        return False
    return value.lower() in TRUTHY_VALUES


class ConfigFlagReader:
    """Read boolean flags from a loaded configuration store."""

    def __init__(self, store: ConfigurationStore) -> None:
        self._store = store

    @property
    def store(self) -> ConfigurationStore:
        return self._store

    def _scope(self, group: str | None) -> Mapping[str, Any]:
        if group is not None:
            sub = self._store.get(group)
            if isinstance(sub, Mapping):
                return sub
        # Unknown or scalar groups fall back to the top level
        return self._store

    def get_boolean(self, key: str, group: str | None = None) -> bool:
        """Check whether *key* is enabled, optionally inside *group*.

        Never raises: missing keys, non-string values and unrecognised
        strings are all False.
        """
        return parse_bool(self._scope(group).get(key))

    def enabled(self, flag: UIFlag, group: str | None = None) -> bool:
        """Check a named flag."""
        return self.get_boolean(flag.value, group)

    @property
    def show_register_button(self) -> bool:
        return self.get_boolean(SHOW_REGISTER_BUTTON_KEY)


_default_reader: ConfigFlagReader | None = None
_default_lock = threading.Lock()


def default_reader() -> ConfigFlagReader:
    """Return the process-wide reader, loading the manifest on first use.

    Raises:
        ManifestError: If the manifest cannot be loaded
    """
    global _default_reader  # noqa: PLW0603
    reader = _default_reader
    if reader is not None:
        return reader
    with _default_lock:
        if _default_reader is None:
            _default_reader = ConfigFlagReader(resolve_manifest())
        return _default_reader


def reset_default_reader() -> None:
    """Forget the process-wide reader so the next access reloads."""
    global _default_reader  # noqa: PLW0603
    with _default_lock:
        _default_reader = None


def get_boolean(key: str, group: str | None = None) -> bool:
    """Look up *key* with the process-wide reader."""
    return default_reader().get_boolean(key, group)


def show_register_button() -> bool:
    """Whether the registration button should be shown."""
    return default_reader().show_register_button
