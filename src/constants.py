"""Constants used in the project."""

from __future__ import annotations

import logging
import os
from enum import Enum
from typing import Any, Dict, Mapping, Optional

import yaml

from common.fs import DEFAULT_FS, FileSystem

logger = logging.getLogger(__name__)

TOOL_NAME = "react-native-test-app"
TOOL_VERSION = "0.0.1-dev"


class Platforms(Enum):
    """Platforms supported by the configuration engine.

    Args:
        Enum (string): Platform keys as they appear in the app manifest.
    """

    ANDROID = "android"
    IOS = "ios"
    WINDOWS = "windows"


class Constants:  # pylint: disable=too-few-public-methods
    """General constants used in the project.
    Data holder for configuration constants; not intended to provide behavior.
    """

    SUPPORTED_PLATFORMS = [
        Platforms.ANDROID.value,
        Platforms.IOS.value,
        Platforms.WINDOWS.value,
    ]

    # Files
    SENTINEL_FILE = "react-native.config.js"
    APP_MANIFEST_FILE = "app.json"
    PACKAGE_JSON_FILE = "package.json"
    NODE_MODULES_DIR = "node_modules"
    GRADLE_WRAPPER_PROPERTIES = os.path.join("gradle", "wrapper", "gradle-wrapper.properties")
    ANDROID_MANIFEST = os.path.join("android", "app", "src", "main", "AndroidManifest.xml")
    YAML_CONFIG_FILE = "rnta.yaml"

    # Packages
    REACT_NATIVE_PACKAGE = "react-native"
    CLI_PLATFORM_ANDROID_PACKAGE = "@react-native-community/cli-platform-android"

    # Manifest patching
    DEV_DEPENDENCIES = {
        "@rnx-kit/metro-config": "^2.0.0",
        TOOL_NAME: f"^{TOOL_VERSION}",
    }

    # Android defaults
    DEFAULT_APP_NAME = "ReactTestApp"
    DEFAULT_APPLICATION_ID = "com.microsoft.reacttestapp"
    SIGNING_CONFIG_NAMES = ["debug", "release"]
    DEFAULT_KEY_ALIAS = "androiddebugkey"
    DEFAULT_KEY_PASSWORD = "android"
    DEFAULT_STORE_PASSWORD = "android"

    # Gradle wrapper normalization
    ANDROID_COMMANDS = ["build-android", "run-android"]
    CONFIGURE_GRADLE_WRAPPER = True

    # Environment keys
    ENV_CONFIGURE_GRADLE_WRAPPER = "RNTA_CONFIGURE_GRADLE_WRAPPER"
    ENV_LOG_LEVEL = "RNTA_LOG_LEVEL"
    ENV_CONFIG = "RNTA_CONFIG"

    LOG_FORMAT = "[%(levelname)s] %(message)s"
    DEFAULT_LOG_LEVEL = "INFO"


def load_yaml_config(
    project_root: Optional[str] = None,
    env: Optional[Mapping[str, str]] = None,
    fs: Optional[FileSystem] = None,
) -> Dict[str, Any]:
    """Load optional YAML settings.

    Looks at the path named by ``RNTA_CONFIG`` first, then ``rnta.yaml`` in
    the project root. Never raises; unreadable or malformed files yield an
    empty dict.

    Args:
        project_root: Directory containing ``react-native.config.js``.
        env: Environment mapping, defaults to ``os.environ``.
        fs: Filesystem to read from.

    Returns:
        Parsed settings mapping.
    """
    env = os.environ if env is None else env
    fs = fs or DEFAULT_FS
    candidates = []
    explicit = env.get(Constants.ENV_CONFIG)
    if explicit and explicit.strip():
        candidates.append(explicit.strip())
    if project_root:
        candidates.append(os.path.join(project_root, Constants.YAML_CONFIG_FILE))

    for path in candidates:
        if not fs.is_file(path):
            continue
        try:
            data = yaml.safe_load(fs.read_text(path)) or {}
        except OSError as e:
            logger.warning("Failed to read config %s: %s", path, e)
            return {}
        except yaml.YAMLError as e:
            logger.warning("Failed to parse config %s: %s", path, e)
            return {}
        if isinstance(data, dict):
            logger.debug("Loaded settings from %s", path)
            return data
        logger.warning("Ignoring config %s: expected a mapping", path)
        return {}
    return {}


def apply_env_overrides(
    settings: Optional[Mapping[str, Any]] = None,
    env: Optional[Mapping[str, str]] = None,
) -> Dict[str, Any]:
    """Return ``settings`` with environment overrides applied.

    ``RNTA_CONFIGURE_GRADLE_WRAPPER=0`` turns wrapper normalization off and
    any other value turns it on.
    """
    env = os.environ if env is None else env
    result: Dict[str, Any] = dict(settings or {})
    flag = env.get(Constants.ENV_CONFIGURE_GRADLE_WRAPPER)
    if flag is not None:
        result["configure_gradle_wrapper"] = flag != "0"
    return result


def gradle_wrapper_enabled(settings: Optional[Mapping[str, Any]] = None, env: Optional[Mapping[str, str]] = None) -> bool:
    """Return whether Gradle wrapper normalization is enabled.

    The environment flag wins over YAML settings, which win over the default.
    """
    effective = apply_env_overrides(settings, env)
    return bool(effective.get("configure_gradle_wrapper", Constants.CONFIGURE_GRADLE_WRAPPER))
