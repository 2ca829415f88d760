"""Filesystem access and file location helpers.

Every function that touches the disk accepts an optional ``fs`` object so
callers (and tests) can substitute another implementation of the
``FileSystem`` protocol.
"""

from __future__ import annotations

import json
import os
from typing import Optional, Protocol


class FileSystem(Protocol):
    """Minimal filesystem capability used by the resolver."""

    def exists(self, path: str) -> bool: ...

    def is_file(self, path: str) -> bool: ...

    def read_text(self, path: str) -> str: ...

    def write_text(self, path: str, content: str) -> None: ...

    def remove(self, path: str) -> None: ...

    def makedirs(self, path: str) -> None: ...


class LocalFileSystem:
    """FileSystem backed by the real disk."""

    def exists(self, path: str) -> bool:
        return os.path.exists(path)

    def is_file(self, path: str) -> bool:
        return os.path.isfile(path)

    def read_text(self, path: str) -> str:
        with open(path, "r", encoding="utf-8") as fh:
            return fh.read()

    def write_text(self, path: str, content: str) -> None:
        # newline="" keeps line endings exactly as given
        with open(path, "w", encoding="utf-8", newline="") as fh:
            fh.write(content)

    def remove(self, path: str) -> None:
        os.remove(path)

    def makedirs(self, path: str) -> None:
        os.makedirs(path, exist_ok=True)


DEFAULT_FS = LocalFileSystem()


def find_nearest(filename: str, start_dir: Optional[str] = None, fs: Optional[FileSystem] = None) -> Optional[str]:
    """Find the closest directory containing ``filename``.

    Searches ``start_dir`` and then each of its ancestors, stopping at the
    filesystem root. ``filename`` may be a relative path such as
    ``node_modules/react-native/package.json``.

    Args:
        filename: File (or relative path) to look for.
        start_dir: Directory to start from; defaults to the current directory.
        fs: Filesystem to probe.

    Returns:
        The directory containing the match, or None if not found.
    """
    fs = fs or DEFAULT_FS
    current = os.path.abspath(start_dir or os.getcwd())
    while True:
        if fs.exists(os.path.join(current, filename)):
            return current
        parent = os.path.dirname(current)
        if parent == current:
            return None
        current = parent


def find_file(filename: str, directory: str, fs: Optional[FileSystem] = None) -> Optional[str]:
    """Return the path of ``filename`` directly inside ``directory``, if present."""
    fs = fs or DEFAULT_FS
    candidate = os.path.join(directory, filename)
    return candidate if fs.is_file(candidate) else None


def read_json_file(path: str, fs: Optional[FileSystem] = None):
    """Read and parse a JSON file.

    Parse errors propagate as ``json.JSONDecodeError``.
    """
    fs = fs or DEFAULT_FS
    return json.loads(fs.read_text(path))
