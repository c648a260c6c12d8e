"""uiconfig - boolean UI feature flags read from the bundled app manifest."""

from uiconfig.flags import (
    ConfigFlagReader,
    UIFlag,
    default_reader,
    get_boolean,
    show_register_button,
)
from uiconfig.manifest import ConfigurationStore, ManifestError

__all__ = [
    "ConfigFlagReader",
    "ConfigurationStore",
    "ManifestError",
    "UIFlag",
    "default_reader",
    "get_boolean",
    "show_register_button",
]
