"""Patching of ``package.json`` with generated scripts, dependencies and files."""

from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional, Union

from common.fs import FileSystem, DEFAULT_FS, read_json_file
from constants import Constants

logger = logging.getLogger(__name__)

FileContent = Union[str, List[str]]


@dataclass
class ManifestPatch:
    """Changes to apply to a package manifest and its directory."""

    scripts: Dict[str, str] = field(default_factory=dict)
    dependencies: Dict[str, str] = field(default_factory=dict)
    files: Dict[str, FileContent] = field(default_factory=dict)
    old_files: List[str] = field(default_factory=list)

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "ManifestPatch":
        """Build a patch from a mapping using the camelCase ``oldFiles`` key."""
        return cls(
            scripts=dict(data.get("scripts") or {}),
            dependencies=dict(data.get("dependencies") or {}),
            files=dict(data.get("files") or {}),
            old_files=list(data.get("oldFiles") or []),
        )


def _merge(existing: Any, updates: Mapping[str, str], overwrite: bool = True) -> Dict[str, Any]:
    """Merge ``updates`` into ``existing`` keeping the existing key order."""
    merged: Dict[str, Any] = dict(existing) if isinstance(existing, dict) else {}
    for key, value in updates.items():
        if overwrite or key not in merged:
            merged[key] = value
    return merged


def _sort_by_keys(mapping: Mapping[str, Any]) -> Dict[str, Any]:
    return {key: mapping[key] for key in sorted(mapping)}


def _render(content: FileContent) -> str:
    if isinstance(content, list):
        return "\n".join(content) + "\n"
    return content


def write_all_files(files: Mapping[str, FileContent], destination: str, fs: Optional[FileSystem] = None) -> None:
    """Write ``files`` (relative path -> content) under ``destination``."""
    fs = fs or DEFAULT_FS
    for relative, content in files.items():
        path = os.path.join(destination, relative)
        parent = os.path.dirname(path)
        if parent:
            fs.makedirs(parent)
        fs.write_text(path, _render(content))
        logger.debug("Wrote %s", path)


def remove_old_files(old_files: List[str], destination: str, fs: Optional[FileSystem] = None) -> None:
    """Delete ``old_files`` under ``destination``; missing files are ignored."""
    fs = fs or DEFAULT_FS
    for relative in old_files:
        path = os.path.join(destination, relative)
        if fs.exists(path):
            fs.remove(path)
            logger.info("Removed %s", path)


def update_package_manifest(
    manifest_path: str,
    patch: Union[ManifestPatch, Mapping[str, Any]],
    fs: Optional[FileSystem] = None,
) -> Dict[str, Any]:
    """Apply ``patch`` to the package manifest at ``manifest_path``.

    Fields already in the manifest keep their position; ``scripts``,
    ``dependencies`` and ``devDependencies`` are appended in that order when
    missing. Scripts and dependencies from the patch win over existing
    entries. The fixed dev dependencies are only added when absent. Applying
    the same patch again leaves the file byte-identical.

    Malformed JSON propagates as ``json.JSONDecodeError``.

    Args:
        manifest_path: Path to ``package.json``.
        patch: Patch to apply, as a ``ManifestPatch`` or a mapping.
        fs: Filesystem to use.

    Returns:
        The updated manifest.
    """
    fs = fs or DEFAULT_FS
    if not isinstance(patch, ManifestPatch):
        patch = ManifestPatch.from_mapping(patch)

    manifest = read_json_file(manifest_path, fs)
    if not isinstance(manifest, dict):
        raise ValueError(f"{manifest_path}: expected a JSON object")

    manifest["scripts"] = _merge(manifest.get("scripts"), patch.scripts)
    manifest["dependencies"] = _sort_by_keys(_merge(manifest.get("dependencies"), patch.dependencies))
    manifest["devDependencies"] = _sort_by_keys(
        _merge(manifest.get("devDependencies"), Constants.DEV_DEPENDENCIES, overwrite=False)
    )

    destination = os.path.dirname(manifest_path)
    write_all_files(patch.files, destination, fs)
    remove_old_files(patch.old_files, destination, fs)

    fs.write_text(manifest_path, json.dumps(manifest, indent=2, ensure_ascii=False) + "\n")
    logger.info("Updated %s", manifest_path)
    return manifest
