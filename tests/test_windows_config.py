"""Tests for Windows project resolution."""

from platforms.windows import resolve_windows, windows_project_path
from fs_mock import MemoryFileSystem

SOLUTION = "\n".join([
    "Microsoft Visual Studio Solution File, Format Version 12.00",
    "# Visual Studio Version 17",
    'Project("{8BC9CEB8-8B4A-11D0-8D11-00A0C91BC942}") = "MyApp", '
    '"node_modules/.generated/windows/MyApp.vcxproj", "{B44CEAD7-FBFF-4A17-95EA-FF5434BBD196}"',
    "EndProject",
    "Global",
    "EndGlobal",
    "",
])

SOLUTION_BACKSLASHES = SOLUTION.replace("node_modules/.generated/windows/", "node_modules\\.generated\\windows\\")


def make_fs(solution=SOLUTION):
    return MemoryFileSystem({"react-native.config.js": "", "windows/MyApp.sln": solution})


def test_project_file_is_extracted():
    project = windows_project_path("/project/windows/MyApp.sln", make_fs())
    assert project.project_file == "node_modules/.generated/windows/MyApp.vcxproj"


def test_project_file_with_backslashes():
    project = windows_project_path("/project/windows/MyApp.sln", make_fs(SOLUTION_BACKSLASHES))
    assert project.project_file == "node_modules\\.generated\\windows\\MyApp.vcxproj"


def test_project_file_with_leading_path():
    solution = SOLUTION.replace('"node_modules/', '"..\\node_modules/')
    project = windows_project_path("/project/windows/MyApp.sln", make_fs(solution))
    assert project.project_file == "..\\node_modules/.generated/windows/MyApp.vcxproj"


def test_unparseable_solution_gives_diagnostic():
    fs = make_fs("Microsoft Visual Studio Solution File, Format Version 12.00\n")
    project = windows_project_path("/project/windows/MyApp.sln", fs)
    assert project.project_file == "(Failed to parse '/project/windows/MyApp.sln')"


def test_resolve_windows():
    config = resolve_windows(
        {"sourceDir": "windows", "solutionFile": "windows/MyApp.sln"},
        "/project",
        make_fs(),
    )
    assert config is not None
    assert config.platform == "windows"
    assert config.to_dict() == {
        "sourceDir": "windows",
        "solutionFile": "MyApp.sln",
        "project": {"projectFile": "node_modules/.generated/windows/MyApp.vcxproj"},
    }


def test_missing_solution_is_omitted():
    config = resolve_windows(
        {"sourceDir": "windows", "solutionFile": "windows/Missing.sln"},
        "/project",
        make_fs(),
    )
    assert config is None


def test_solution_is_never_modified():
    fs = make_fs()
    resolve_windows({"sourceDir": "windows", "solutionFile": "windows/MyApp.sln"}, "/project", fs)
    assert fs.read("windows/MyApp.sln") == SOLUTION


def test_diagnostic_names_requested_solution():
    fs = make_fs("Microsoft Visual Studio Solution File, Format Version 12.00\n")
    config = resolve_windows({"sourceDir": "windows", "solutionFile": "windows/MyApp.sln"}, "/project", fs)
    assert config.project.project_file == "(Failed to parse 'windows/MyApp.sln')"
