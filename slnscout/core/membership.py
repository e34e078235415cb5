"""
Project membership checks for solutions and solution filters.

Only the project list of a target is read: ``Project(...)`` lines of ``.sln``
files, ``<Project Path=...>`` elements of ``.slnx`` files and the
``solution.projects`` array of ``.slnf`` files. Project paths in all three
formats may use backslashes and are relative to the solution's directory.
"""

import json
import os
import re
import xml.etree.ElementTree as ET
from pathlib import Path
from typing import List

from slnscout.core.errors import MembershipCheckError
from slnscout.core.scanner import normalize_path

_SLN_PROJECT_LINE = re.compile(
    r'^\s*Project\("\{[^}]*\}"\)\s*=\s*"[^"]*"\s*,\s*"([^"]+)"', re.MULTILINE
)


def _read_text(target: Path) -> str:
    try:
        # utf-8-sig strips the BOM Visual Studio writes into .sln files
        return target.read_text(encoding="utf-8-sig")
    except (OSError, UnicodeDecodeError) as e:
        raise MembershipCheckError(target, str(e)) from e


def _to_native(relative: str, base: Path) -> Path:
    return normalize_path(base / relative.replace("\\", os.sep))


def _sln_projects(target: Path) -> List[Path]:
    text = _read_text(target)
    # Solution folders show up as Project lines too; they never match a project file
    return [_to_native(match, target.parent) for match in _SLN_PROJECT_LINE.findall(text)]


def _slnx_projects(target: Path) -> List[Path]:
    text = _read_text(target)
    try:
        root = ET.fromstring(text)
    except ET.ParseError as e:
        raise MembershipCheckError(target, f"invalid XML: {e}") from e
    return [
        _to_native(element.attrib["Path"], target.parent)
        for element in root.iter("Project")
        if "Path" in element.attrib
    ]


def _slnf_projects(target: Path) -> List[Path]:
    text = _read_text(target)
    try:
        data = json.loads(text)
        solution = data["solution"]
        solution_path = _to_native(solution["path"], target.parent)
        projects = solution.get("projects", [])
    except (json.JSONDecodeError, KeyError, TypeError) as e:
        raise MembershipCheckError(target, f"invalid solution filter: {e}") from e
    if not isinstance(projects, list):
        raise MembershipCheckError(target, "solution.projects is not a list")
    return [_to_native(str(p), solution_path.parent) for p in projects]


def list_target_projects(target: str | os.PathLike[str]) -> List[Path]:
    """All project paths referenced by a solution or solution filter.

    Raises:
        MembershipCheckError: If the target cannot be read or parsed, or is not
            a solution or solution filter.
    """
    path = normalize_path(target)
    if path.name.endswith(".slnf"):
        return _slnf_projects(path)
    if path.name.endswith(".slnx"):
        return _slnx_projects(path)
    if path.name.endswith(".sln"):
        return _sln_projects(path)
    raise MembershipCheckError(path, "not a solution or solution filter")


def exists_in_target(target: str | os.PathLike[str], project: str | os.PathLike[str]) -> bool:
    """True when ``project`` is part of the target's project graph.

    Raises:
        MembershipCheckError: If the target cannot be read or parsed.
    """
    wanted = os.path.normcase(normalize_path(project))
    return any(
        os.path.normcase(candidate) == wanted
        for candidate in list_target_projects(target)
    )
