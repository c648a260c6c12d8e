"""Bundled manifest loading for uiconfig.

The manifest is a static key/value blob that ships with the application.
Top-level values are either scalars or nested tables ("groups"). Once
loaded it is frozen into read-only mappings and never reloaded.
"""

from __future__ import annotations

import logging
import os
import sys
from importlib import resources
from pathlib import Path
from types import MappingProxyType
from typing import Any

import orjson

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

from uiconfig.constants import BUNDLED_MANIFEST, MANIFEST_ENV_VAR, MANIFEST_FORMATS

logger = logging.getLogger(__name__)

ConfigurationStore = MappingProxyType  # MappingProxyType[str, Any]


class ManifestError(ValueError):
    """Raised when a manifest cannot be located or parsed."""


def _freeze_value(value: Any) -> Any:
    if isinstance(value, dict):
        return freeze(value)
    if isinstance(value, list):
        return tuple(_freeze_value(item) for item in value)
    return value


def freeze(data: dict[str, Any]) -> ConfigurationStore:
    """Return a read-only copy of *data*, freezing nested tables too."""
    return MappingProxyType({key: _freeze_value(val) for key, val in data.items()})


def parse_manifest(raw: bytes, fmt: str) -> ConfigurationStore:
    """Parse manifest bytes in the given format.

    Args:
        raw: File contents
        fmt: ``"toml"`` or ``"json"``

    Returns:
        Frozen configuration store

    Raises:
        ManifestError: If the content does not parse or the top level is
            not a mapping
    """
    if fmt == "toml":
        try:
            data = tomllib.loads(raw.decode("utf-8"))
        except (tomllib.TOMLDecodeError, UnicodeDecodeError) as e:
            msg = f"Invalid TOML manifest: {e}"
            raise ManifestError(msg) from e
    elif fmt == "json":
        try:
            data = orjson.loads(raw)
        except orjson.JSONDecodeError as e:
            msg = f"Invalid JSON manifest: {e}"
            raise ManifestError(msg) from e
    else:
        msg = f"Unsupported manifest format: {fmt}"
        raise ManifestError(msg)

    if not isinstance(data, dict):
        msg = f"Manifest top level must be a mapping, got {type(data).__name__}"
        raise ManifestError(msg)

    return freeze(data)


def load_manifest(path: str | Path) -> ConfigurationStore:
    """Load a manifest file, picking the format from its suffix.

    Args:
        path: Path to a ``.toml`` or ``.json`` manifest

    Returns:
        Frozen configuration store

    Raises:
        ManifestError: If the file is missing, unreadable, of an unknown
            type, or malformed
    """
    path = Path(path)
    fmt = MANIFEST_FORMATS.get(path.suffix.lower())
    if fmt is None:
        msg = f"Unsupported manifest file type: {path}"
        raise ManifestError(msg)

    try:
        raw = path.read_bytes()
    except OSError as e:
        msg = f"Cannot read manifest {path}: {e}"
        raise ManifestError(msg) from e

    logger.debug("Loading manifest from %s", path)
    return parse_manifest(raw, fmt)


def load_bundled_manifest() -> ConfigurationStore:
    """Load the manifest shipped inside the uiconfig package."""
    resource = resources.files("uiconfig").joinpath(BUNDLED_MANIFEST)
    try:
        raw = resource.read_bytes()
    except OSError as e:
        msg = f"Bundled manifest {BUNDLED_MANIFEST} is missing: {e}"
        raise ManifestError(msg) from e

    logger.debug("Loading bundled manifest %s", BUNDLED_MANIFEST)
    return parse_manifest(raw, "toml")


def resolve_manifest() -> ConfigurationStore:
    """Load the manifest named by ``UICFG_MANIFEST``, else the bundled one."""
    override = os.environ.get(MANIFEST_ENV_VAR, "").strip()
    if override:
        if not Path(override).exists():
            logger.warning(
                "%s points at a missing file: %s", MANIFEST_ENV_VAR, override
            )
        return load_manifest(override)
    return load_bundled_manifest()
