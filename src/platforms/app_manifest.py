"""Readers for the app manifest (``app.json``)."""

from __future__ import annotations

import logging
import os
from typing import Any, Dict, Mapping, Optional

from common.errors import SigningConfigError
from common.fs import FileSystem, DEFAULT_FS, find_nearest, read_json_file
from constants import Constants

logger = logging.getLogger(__name__)


def find_app_manifest(start_dir: str, fs: Optional[FileSystem] = None) -> Optional[str]:
    """Return the path of the closest ``app.json``, or None."""
    found = find_nearest(Constants.APP_MANIFEST_FILE, start_dir, fs)
    if found is None:
        return None
    return os.path.join(found, Constants.APP_MANIFEST_FILE)


def read_app_manifest(start_dir: str, fs: Optional[FileSystem] = None) -> Optional[Dict[str, Any]]:
    """Read the closest ``app.json``.

    Malformed JSON propagates to the caller.
    """
    path = find_app_manifest(start_dir, fs)
    if path is None:
        return None
    manifest = read_json_file(path, fs)
    return manifest if isinstance(manifest, dict) else {}


def _android_section(manifest: Optional[Mapping[str, Any]]) -> Mapping[str, Any]:
    android = (manifest or {}).get("android")
    return android if isinstance(android, dict) else {}


def get_package_name(manifest: Optional[Mapping[str, Any]]) -> Optional[str]:
    """Return ``android.package`` if it is a string."""
    package = _android_section(manifest).get("package")
    return package if isinstance(package, str) else None


def get_app_name(manifest: Optional[Mapping[str, Any]]) -> str:
    """Return ``displayName``, falling back to ``name`` and then the default."""
    manifest = manifest or {}
    for key in ("displayName", "name"):
        value = manifest.get(key)
        if isinstance(value, str) and value:
            return value
    return Constants.DEFAULT_APP_NAME


def get_application_id(manifest: Optional[Mapping[str, Any]]) -> str:
    """Return the Android application id, defaulting to the test app's."""
    return get_package_name(manifest) or Constants.DEFAULT_APPLICATION_ID


def get_signing_configs(
    manifest: Optional[Mapping[str, Any]],
    project_root: str,
    fs: Optional[FileSystem] = None,
) -> Dict[str, Dict[str, str]]:
    """Validate and complete ``android.signingConfigs``.

    Only ``debug`` and ``release`` are considered. ``storeFile`` is required
    and resolved against ``project_root``; the remaining fields default to
    the standard Android debug keystore values.

    Raises:
        SigningConfigError: If ``storeFile`` is missing or does not exist.
    """
    fs = fs or DEFAULT_FS
    configs = _android_section(manifest).get("signingConfigs")
    if not isinstance(configs, dict):
        return {}

    result: Dict[str, Dict[str, str]] = {}
    for name in Constants.SIGNING_CONFIG_NAMES:
        config = configs.get(name)
        if not isinstance(config, dict):
            continue

        store_file = config.get("storeFile")
        if not isinstance(store_file, str) or not store_file:
            raise SigningConfigError(f"storeFile for signing config '{name}' is missing")
        store_path = os.path.normpath(os.path.join(project_root, store_file))
        if not fs.exists(store_path):
            raise SigningConfigError(f"storeFile '{store_path}' for signing config '{name}' is missing")

        result[name] = {
            "keyAlias": config.get("keyAlias") or Constants.DEFAULT_KEY_ALIAS,
            "keyPassword": config.get("keyPassword") or Constants.DEFAULT_KEY_PASSWORD,
            "storePassword": config.get("storePassword") or Constants.DEFAULT_STORE_PASSWORD,
            "storeFile": store_path,
        }
        logger.debug("Using %s signing config with %s", name, store_path)
    return result
