"""
Shared fixtures for building source trees on disk.
"""

from pathlib import Path
from typing import Dict

import pytest


def write_tree(root: Path, files: Dict[str, str]) -> Path:
    """Create ``files`` (relative path -> content) below ``root``.

    Paths ending in "/" create empty directories.
    """
    for relative, content in files.items():
        path = root / relative
        if relative.endswith("/"):
            path.mkdir(parents=True, exist_ok=True)
            continue
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
    return root


def sln_content(*projects: str) -> str:
    """Minimal .sln text referencing ``projects`` (backslash separated, relative)."""
    lines = [
        "Microsoft Visual Studio Solution File, Format Version 12.00",
        "# Visual Studio Version 17",
    ]
    for index, project in enumerate(projects):
        name = project.replace("\\", "/").rsplit("/", 1)[-1].removesuffix(".csproj")
        lines.append(
            'Project("{FAE04EC0-301F-11D3-BF4B-00C04F79EFBC}") = '
            f'"{name}", "{project}", "{{00000000-0000-0000-0000-00000000000{index}}}"'
        )
        lines.append("EndProject")
    lines.append("Global")
    lines.append("EndGlobal")
    return "\n".join(lines) + "\n"


@pytest.fixture
def repo(tmp_path: Path) -> Path:
    """The canonical single-solution repository.

    repo/.git/, repo/App.sln (contains src/App.csproj), repo/src/App.csproj,
    repo/src/Foo.cs
    """
    root = tmp_path / "repo"
    return write_tree(
        root,
        {
            ".git/": "",
            "App.sln": sln_content("src\\App.csproj"),
            "src/App.csproj": "<Project Sdk=\"Microsoft.NET.Sdk\" />",
            "src/Foo.cs": "class Foo {}",
        },
    )
