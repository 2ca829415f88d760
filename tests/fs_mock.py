"""In-memory FileSystem double for hermetic tests."""

import json
import os
from typing import Dict, Optional


class MemoryFileSystem:
    """Dict-backed implementation of ``common.fs.FileSystem``.

    Paths are normalized to absolute paths; directories exist implicitly
    when a file lives under them.
    """

    def __init__(self, files: Optional[Dict[str, str]] = None, root: str = "/project"):
        self.root = root
        self.files: Dict[str, str] = {}
        self.dirs = set()
        for path, content in (files or {}).items():
            self.write_text(os.path.join(root, path), content)

    @staticmethod
    def _norm(path: str) -> str:
        return os.path.normpath(os.path.abspath(path))

    def exists(self, path: str) -> bool:
        path = self._norm(path)
        if path in self.files or path in self.dirs:
            return True
        prefix = path.rstrip(os.sep) + os.sep
        return any(f.startswith(prefix) for f in self.files)

    def is_file(self, path: str) -> bool:
        return self._norm(path) in self.files

    def read_text(self, path: str) -> str:
        path = self._norm(path)
        if path not in self.files:
            raise FileNotFoundError(path)
        return self.files[path]

    def write_text(self, path: str, content: str) -> None:
        self.files[self._norm(path)] = content

    def remove(self, path: str) -> None:
        path = self._norm(path)
        if path not in self.files:
            raise FileNotFoundError(path)
        del self.files[path]

    def makedirs(self, path: str) -> None:
        self.dirs.add(self._norm(path))

    def read(self, relative: str) -> str:
        """Read a file relative to the mock root."""
        return self.read_text(os.path.join(self.root, relative))


def react_native_project(react_native="0.74.0", cli_android=None, files=None):
    """Return the file map of a minimal test app project."""
    project = {
        "react-native.config.js": "module.exports = {};\n",
        "package.json": json.dumps({"name": "example"}),
    }
    if react_native is not None:
        project["node_modules/react-native/package.json"] = json.dumps(
            {"name": "react-native", "version": react_native}
        )
    if cli_android is not None:
        project["node_modules/@react-native-community/cli-platform-android/package.json"] = json.dumps(
            {"name": "@react-native-community/cli-platform-android", "version": cli_android}
        )
    project.update(files or {})
    return project
