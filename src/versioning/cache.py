"""Memoized lookup of installed React Native package versions."""

from __future__ import annotations

import logging
from typing import Dict, Optional

from common.fs import FileSystem
from constants import Constants
from versioning.codec import to_version_number
from versioning.packages import find_package_dir, get_package_version

logger = logging.getLogger(__name__)


class PackageVersionCache:
    """Per-invocation cache of encoded package versions.

    Packages are resolved from the ``react-native`` package directory, the
    same way ``react-native`` itself would load its CLI plugins. Not
    thread-safe; construct one per configuration run.
    """

    def __init__(self, project_root: str, fs: Optional[FileSystem] = None):
        """Initialize the cache.

        Args:
            project_root: Directory to resolve ``react-native`` from.
            fs: Filesystem to probe.
        """
        self._project_root = project_root
        self._fs = fs
        self._versions: Dict[str, int] = {}
        self._react_native_dir: Optional[str] = None

    def _resolve_base(self) -> str:
        if self._react_native_dir is None:
            rn_dir = find_package_dir(Constants.REACT_NATIVE_PACKAGE, self._project_root, self._fs)
            self._react_native_dir = rn_dir or self._project_root
        return self._react_native_dir

    def get(self, package_name: str) -> int:
        """Return the encoded installed version of ``package_name``.

        A package that is not installed encodes as 0.
        """
        if package_name not in self._versions:
            base = self._resolve_base()
            version_string = get_package_version(package_name, base, self._fs)
            self._versions[package_name] = to_version_number(version_string)
            logger.debug("Resolved %s@%s from %s", package_name, version_string or "<not installed>", base)
        return self._versions[package_name]

    def clear(self) -> None:
        """Forget every memoized version."""
        self._versions.clear()
        self._react_native_dir = None

    def __contains__(self, package_name: str) -> bool:
        return package_name in self._versions
