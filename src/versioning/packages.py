"""Installed npm package version lookup."""

from __future__ import annotations

import logging
import os
from typing import Optional

from common.fs import FileSystem, find_nearest, read_json_file
from constants import Constants

logger = logging.getLogger(__name__)


def package_manifest_path(package_name: str) -> str:
    """Return ``node_modules/<package>/package.json`` for ``package_name``."""
    return os.path.join(Constants.NODE_MODULES_DIR, *package_name.split("/"), Constants.PACKAGE_JSON_FILE)


def find_package_dir(package_name: str, start_dir: str, fs: Optional[FileSystem] = None) -> Optional[str]:
    """Resolve the installed directory of ``package_name`` the way Node does.

    Walks up from ``start_dir`` looking for ``node_modules/<package_name>``.
    """
    relative = package_manifest_path(package_name)
    base = find_nearest(relative, start_dir, fs)
    if base is None:
        return None
    return os.path.dirname(os.path.join(base, relative))


def get_package_version(package_name: str, start_dir: str, fs: Optional[FileSystem] = None) -> Optional[str]:
    """Return the ``version`` field of an installed package.

    Args:
        package_name: npm package name, scoped names included.
        start_dir: Directory to resolve the package from.
        fs: Filesystem to probe.

    Returns:
        The version string, or None if the package is not installed or its
        manifest carries no version.
    """
    package_dir = find_package_dir(package_name, start_dir, fs)
    if package_dir is None:
        logger.debug("Package %s not found from %s", package_name, start_dir)
        return None
    manifest = read_json_file(os.path.join(package_dir, Constants.PACKAGE_JSON_FILE), fs)
    version = manifest.get("version") if isinstance(manifest, dict) else None
    return version if isinstance(version, str) else None
