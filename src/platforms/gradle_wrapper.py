"""Gradle wrapper normalization for Android builds.

Older Gradle wrappers do not work with newer React Native releases (and vice
versa), so the pinned wrapper version is bumped before an Android build
when it falls outside what the installed ``react-native`` supports.
"""

from __future__ import annotations

import logging
import os
import re
import sys
from dataclasses import dataclass
from typing import Callable, List, Mapping, Optional, Sequence

from common.fs import FileSystem, DEFAULT_FS
from constants import Constants, gradle_wrapper_enabled
from versioning.codec import to_version_number, v
from versioning.packages import get_package_version

logger = logging.getLogger(__name__)

WRAPPER_DISTRIBUTION = re.compile(r"gradle-([.0-9]*?)-.*?\.zip")


@dataclass(frozen=True)
class GradleWrapperRule:
    """One row of the wrapper compatibility table.

    ``applies`` is tested against the encoded React Native version; the first
    row that applies decides. ``outdated`` is then tested against the
    encoded wrapper version.
    """

    description: str
    applies: Callable[[int], bool]
    outdated: Callable[[int], bool]
    version: str


GRADLE_WRAPPER_RULES: List[GradleWrapperRule] = [
    GradleWrapperRule(
        "react-native >= 0.74 or unknown",
        lambda rn: rn == 0 or rn >= v(0, 74, 0),
        lambda gradle: gradle < v(8, 6, 0),
        "8.6",
    ),
    GradleWrapperRule(
        "react-native 0.73",
        lambda rn: rn >= v(0, 73, 0),
        lambda gradle: gradle < v(8, 3, 0),
        "8.3",
    ),
    GradleWrapperRule(
        "react-native 0.72",
        lambda rn: rn >= v(0, 72, 0),
        lambda gradle: gradle < v(8, 1, 1),
        "8.1.1",
    ),
    GradleWrapperRule(
        "react-native < 0.72",
        lambda rn: True,
        lambda gradle: gradle < v(7, 5, 1) or gradle >= v(8, 0, 0),
        "7.6.4",
    ),
]


def required_gradle_version(
    react_native_version: int,
    gradle_version: int,
    rules: Sequence[GradleWrapperRule] = GRADLE_WRAPPER_RULES,
) -> Optional[str]:
    """Return the wrapper version to switch to, or None if no change is needed."""
    for rule in rules:
        if rule.applies(react_native_version):
            return rule.version if rule.outdated(gradle_version) else None
    return None


def should_configure(argv: Sequence[str], env: Optional[Mapping[str, str]] = None, settings=None) -> bool:
    """Return True when an Android command is running and the feature is enabled."""
    if not gradle_wrapper_enabled(settings, env):
        return False
    return any(arg in Constants.ANDROID_COMMANDS for arg in argv)


def configure_gradle_wrapper(
    source_dir: str,
    fs: Optional[FileSystem] = None,
    argv: Optional[Sequence[str]] = None,
    env: Optional[Mapping[str, str]] = None,
    settings=None,
) -> Optional[str]:
    """Bump the pinned Gradle wrapper version if it is too old or too new.

    Best effort: failures are logged as a warning and never raised.

    Args:
        source_dir: Android project directory.
        fs: Filesystem to use.
        argv: Process arguments; defaults to ``sys.argv``.
        env: Environment mapping; defaults to ``os.environ``.
        settings: Optional YAML settings.

    Returns:
        The version written, or None if the file was left untouched.
    """
    fs = fs or DEFAULT_FS
    argv = sys.argv if argv is None else argv
    if not should_configure(argv, env, settings):
        return None

    properties_path = os.path.join(source_dir, Constants.GRADLE_WRAPPER_PROPERTIES)
    if not fs.exists(properties_path):
        return None

    try:
        props = fs.read_text(properties_path)
        m = WRAPPER_DISTRIBUTION.search(props)
        if not m:
            return None

        react_native_version = get_package_version(Constants.REACT_NATIVE_PACKAGE, source_dir, fs)
        if react_native_version is None:
            raise FileNotFoundError(f"Cannot find module '{Constants.REACT_NATIVE_PACKAGE}'")

        gradle_version = required_gradle_version(
            to_version_number(react_native_version),
            to_version_number(m.group(1)),
        )
        if gradle_version:
            logger.warning("Setting Gradle version %s", gradle_version)
            fs.write_text(
                properties_path,
                WRAPPER_DISTRIBUTION.sub(f"gradle-{gradle_version}-bin.zip", props, count=1),
            )
        return gradle_version
    except (OSError, ValueError) as e:
        logger.warning("Failed to determine Gradle version")
        logger.debug("Gradle wrapper normalization failed: %s", e)
        return None
