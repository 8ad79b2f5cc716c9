"""
Workspace helper functions
"""

import os
import tomllib
from pathlib import Path
from typing import Optional

from ..errors import WorkspaceError


MANIFEST_NAME = "Cargo.toml"


def find_project_root(start: Optional[Path] = None, manifest_name: str = MANIFEST_NAME) -> Path:
    """
    Locate the workspace root

    Walks up from ``start`` (default: the current directory) to the first
    directory holding the manifest. Falls back to ``start`` itself.

    Args:
        start: Directory to start from
        manifest_name: Manifest file marking the root

    Returns:
        Path: Workspace root
    """
    start = Path(start or os.getcwd()).resolve()
    for directory in (start, *start.parents):
        if (directory / manifest_name).is_file():
            return directory
    return start


def rel_path(path: Path, root: Path) -> str:
    """Display ``path`` relative to ``root`` when it lies below it."""
    try:
        return str(Path(path).relative_to(root))
    except ValueError:
        return str(path)


def default_contest(cwd: Optional[Path] = None, fallback: str = "contest") -> str:
    """Contest id implied by the current directory name."""
    try:
        name = Path(cwd or os.getcwd()).name
    except OSError:
        return fallback
    return name or fallback


def package_name(root: Path, manifest_name: str = MANIFEST_NAME) -> str:
    """
    Read the package name from the workspace manifest

    Args:
        root: Workspace root
        manifest_name: Manifest file name

    Returns:
        str: Value of ``name`` in the ``[package]`` table

    Raises:
        WorkspaceError: If the manifest cannot be read or has no package name
    """
    manifest_path = Path(root) / manifest_name
    try:
        with open(manifest_path, "rb") as f:
            manifest = tomllib.load(f)
    except OSError as e:
        raise WorkspaceError(f"failed to read {manifest_path}: {e}", manifest_path) from e
    except tomllib.TOMLDecodeError as e:
        raise WorkspaceError(f"failed to parse {manifest_path}: {e}", manifest_path) from e

    name = manifest.get("package", {}).get("name")
    if not isinstance(name, str) or not name:
        raise WorkspaceError(f"package name not found in {manifest_name}", manifest_path)
    return name
