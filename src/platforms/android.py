"""Android project resolution."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Any, List, Mapping, Optional

from common.fs import FileSystem, read_json_file
from constants import Constants
from platforms.app_manifest import find_app_manifest, get_package_name
from platforms.models import AndroidConfig
from versioning.cache import PackageVersionCache
from versioning.codec import v

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class VersionRange:
    """Half-open range ``[lower, upper)`` of encoded versions."""

    lower: int
    upper: int
    reason: str

    def __contains__(self, version: int) -> bool:
        return self.lower <= version < self.upper


# Versions of cli-platform-android that cannot read the package name from
# app.json. First match wins.
PACKAGE_NAME_UNSUPPORTED: List[VersionRange] = [
    VersionRange(0, v(12, 3, 7), "react-native 0.72 and older"),
    VersionRange(v(13, 0, 0), v(13, 6, 9), "react-native 0.73"),
]


def supports_package_name(cli_android_version: int) -> bool:
    """Return True if this cli-platform-android version honors ``packageName``."""
    for unsupported in PACKAGE_NAME_UNSUPPORTED:
        if cli_android_version in unsupported:
            logger.debug("Skipping package name: cli-platform-android for %s", unsupported.reason)
            return False
    return True


def get_android_package_name(
    source_dir: str,
    versions: PackageVersionCache,
    fs: Optional[FileSystem] = None,
) -> Optional[str]:
    """Derive the Android package name from ``android.package`` in ``app.json``.

    Returns None when there is no app manifest, when the installed
    cli-platform-android cannot use the value, or when the field is unset.
    """
    manifest_path = find_app_manifest(source_dir, fs)
    if manifest_path is None:
        return None

    if not supports_package_name(versions.get(Constants.CLI_PLATFORM_ANDROID_PACKAGE)):
        return None

    return get_package_name(read_json_file(manifest_path, fs))


def android_manifest_path(source_dir: str, tool_root: str) -> str:
    """Return the generated ``AndroidManifest.xml`` path relative to ``source_dir``."""
    return os.path.relpath(os.path.join(tool_root, Constants.ANDROID_MANIFEST), source_dir)


def resolve_android(
    config: Mapping[str, Any],
    project_root: str,
    tool_root: str,
    versions: PackageVersionCache,
    fs: Optional[FileSystem] = None,
) -> AndroidConfig:
    """Build the Android config record.

    Args:
        config: Caller-supplied ``android`` section (``sourceDir``, optional
            ``packageName``).
        project_root: Directory containing ``react-native.config.js``.
        tool_root: Installation directory of the test app.
        versions: Package version cache.
        fs: Filesystem to use.
    """
    source_dir = config["sourceDir"]
    resolved_source_dir = os.path.normpath(os.path.join(project_root, source_dir))
    package_name = config.get("packageName") or get_android_package_name(resolved_source_dir, versions, fs)
    return AndroidConfig(
        source_dir=source_dir,
        manifest_path=android_manifest_path(resolved_source_dir, tool_root),
        package_name=package_name,
    )
