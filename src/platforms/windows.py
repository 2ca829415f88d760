"""Windows project resolution."""

from __future__ import annotations

import logging
import os
import re
from typing import Any, Mapping, Optional

from common.fs import FileSystem, DEFAULT_FS
from platforms.models import WindowsConfig, WindowsProject

logger = logging.getLogger(__name__)

# Project generated by the Windows template, referenced from the solution
GENERATED_PROJECT = re.compile(r'([^"\n]*?node_modules[/\\]\.generated[/\\]windows[/\\].*?\.vcxproj)')


def windows_project_path(
    solution_file: str,
    fs: Optional[FileSystem] = None,
    display_path: Optional[str] = None,
) -> WindowsProject:
    """Extract the generated ``.vcxproj`` reference from a solution file.

    When no reference is found the project file is a diagnostic message
    naming the solution instead, as ``display_path`` when given.
    """
    fs = fs or DEFAULT_FS
    m = GENERATED_PROJECT.search(fs.read_text(solution_file))
    if not m:
        logger.debug("No generated project referenced in %s", solution_file)
        return WindowsProject(project_file=f"(Failed to parse '{display_path or solution_file}')")
    return WindowsProject(project_file=m.group(1))


def resolve_windows(
    config: Mapping[str, Any],
    project_root: str,
    fs: Optional[FileSystem] = None,
) -> Optional[WindowsConfig]:
    """Build the Windows config record.

    Returns None if the solution file does not exist; the platform is then
    left out of the result.
    """
    fs = fs or DEFAULT_FS
    source_dir = config["sourceDir"]
    solution_file = config.get("solutionFile")
    if not solution_file:
        return None

    resolved_solution = os.path.normpath(os.path.join(project_root, solution_file))
    if not fs.exists(resolved_solution):
        logger.debug("Solution file %s does not exist", resolved_solution)
        return None

    resolved_source_dir = os.path.normpath(os.path.join(project_root, source_dir))
    return WindowsConfig(
        source_dir=source_dir,
        solution_file=os.path.relpath(resolved_solution, resolved_source_dir),
        project=windows_project_path(resolved_solution, fs, display_path=solution_file),
    )
