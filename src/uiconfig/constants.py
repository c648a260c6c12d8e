"""Constants for uiconfig."""

from __future__ import annotations

# Environment variable pointing at a manifest that replaces the bundled one
MANIFEST_ENV_VAR = "UICFG_MANIFEST"

# Manifest shipped as package data
BUNDLED_MANIFEST = "manifest.toml"

# Manifest formats by file suffix
MANIFEST_FORMATS = {
    ".toml": "toml",
    ".json": "json",
}

# Lowercased string values that read as enabled
TRUTHY_VALUES = frozenset({"true", "yes", "1"})

SHOW_REGISTER_BUTTON_KEY = "SHOW_REGISTER_BUTTON"
