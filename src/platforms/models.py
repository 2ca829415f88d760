"""Per-platform configuration records.

``PlatformConfig`` is a closed union discriminated by ``platform``. Each
record is immutable and converts to the camelCase mapping consumed by the
native config generator via ``to_dict()``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Dict, Literal, Mapping, Optional, Union


@dataclass(frozen=True)
class AndroidConfig:
    """Resolved Android project parameters."""

    source_dir: str
    manifest_path: str
    package_name: Optional[str] = None
    platform: Literal["android"] = field(default="android", init=False)

    def to_dict(self) -> Dict[str, Any]:
        result: Dict[str, Any] = {
            "sourceDir": self.source_dir,
            "manifestPath": self.manifest_path,
        }
        if self.package_name is not None:
            result["packageName"] = self.package_name
        return result


@dataclass(frozen=True)
class IosConfig:
    """Caller-supplied iOS parameters, passed through untouched."""

    fields: Mapping[str, Any]
    platform: Literal["ios"] = field(default="ios", init=False)

    def __post_init__(self):
        object.__setattr__(self, "fields", MappingProxyType(dict(self.fields)))

    def to_dict(self) -> Dict[str, Any]:
        return dict(self.fields)


@dataclass(frozen=True)
class WindowsProject:
    """Project reference extracted from a solution file.

    ``project_file`` holds a diagnostic message when the solution could not
    be parsed.
    """

    project_file: str

    def to_dict(self) -> Dict[str, Any]:
        return {"projectFile": self.project_file}


@dataclass(frozen=True)
class WindowsConfig:
    """Resolved Windows project parameters."""

    source_dir: str
    solution_file: str
    project: WindowsProject
    platform: Literal["windows"] = field(default="windows", init=False)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "sourceDir": self.source_dir,
            "solutionFile": self.solution_file,
            "project": self.project.to_dict(),
        }


PlatformConfig = Union[AndroidConfig, IosConfig, WindowsConfig]
