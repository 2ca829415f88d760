"""Resolve per-platform project configuration for the test app.

Consumed by the native config generator: ``configure_projects`` anchors the
project root, then resolves each requested platform.
"""

from __future__ import annotations

import logging
import os
from typing import Any, Dict, Mapping, Optional, Sequence

from common.errors import ProjectRootNotFoundError
from common.fs import FileSystem, find_nearest
from common.logging_utils import is_debug_enabled
from constants import Constants, Platforms, load_yaml_config
from platforms.android import resolve_android
from platforms.gradle_wrapper import configure_gradle_wrapper
from platforms.ios import resolve_ios
from platforms.models import PlatformConfig
from platforms.windows import resolve_windows
from versioning.cache import PackageVersionCache

logger = logging.getLogger(__name__)

# Installation directory of the test app: the parent of this source tree
TOOL_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))


def find_project_root(start_dir: Optional[str] = None, fs: Optional[FileSystem] = None) -> str:
    """Return the directory containing ``react-native.config.js``.

    Raises:
        ProjectRootNotFoundError: If no ancestor of ``start_dir`` has one.
    """
    start_dir = start_dir or os.getcwd()
    project_root = find_nearest(Constants.SENTINEL_FILE, start_dir, fs)
    if project_root is None:
        raise ProjectRootNotFoundError(Constants.SENTINEL_FILE, start_dir)
    return project_root


def configure_projects(
    configs: Mapping[str, Mapping[str, Any]],
    fs: Optional[FileSystem] = None,
    cwd: Optional[str] = None,
    argv: Optional[Sequence[str]] = None,
    env: Optional[Mapping[str, str]] = None,
    tool_root: Optional[str] = None,
    versions: Optional[PackageVersionCache] = None,
) -> Dict[str, PlatformConfig]:
    """Resolve the configuration of every requested platform.

    Platforms missing from ``configs`` are missing from the result, as is
    ``windows`` when its solution file does not exist.

    Args:
        configs: Caller-supplied sections keyed by ``android``/``ios``/``windows``.
        fs: Filesystem to use.
        cwd: Directory to search for the project root from.
        argv: Process arguments, used to decide on Gradle wrapper normalization.
        env: Environment mapping.
        tool_root: Test app installation directory.
        versions: Package version cache; a fresh one is created if omitted.

    Raises:
        ProjectRootNotFoundError: If ``react-native.config.js`` cannot be found.

    Returns:
        Mapping of platform name to its config record.
    """
    project_root = find_project_root(cwd, fs)
    tool_root = tool_root or TOOL_ROOT
    versions = versions or PackageVersionCache(project_root, fs)
    if is_debug_enabled(logger):
        logger.debug("Project root: %s", project_root)

    result: Dict[str, PlatformConfig] = {}

    if configs.get(Platforms.ANDROID.value) is not None:
        android = configs[Platforms.ANDROID.value]
        result[Platforms.ANDROID.value] = resolve_android(android, project_root, tool_root, versions, fs)
        configure_gradle_wrapper(
            os.path.normpath(os.path.join(project_root, android["sourceDir"])),
            fs,
            argv=argv,
            env=env,
            settings=load_yaml_config(project_root, env, fs),
        )

    if configs.get(Platforms.IOS.value) is not None:
        result[Platforms.IOS.value] = resolve_ios(configs[Platforms.IOS.value])

    if configs.get(Platforms.WINDOWS.value) is not None:
        windows_config = resolve_windows(configs[Platforms.WINDOWS.value], project_root, fs)
        if windows_config is not None:
            result[Platforms.WINDOWS.value] = windows_config

    logger.debug("Configured platforms: %s", ", ".join(result) or "<none>")
    return result


def to_dict(configs: Mapping[str, PlatformConfig]) -> Dict[str, Dict[str, Any]]:
    """Convert resolved configs to the plain mapping written into generated files."""
    return {platform: config.to_dict() for platform, config in configs.items()}
