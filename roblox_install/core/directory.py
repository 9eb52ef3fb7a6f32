"""Directory interpreter — turn an installation folder into a RobloxStudio.

Windows installs come in two shapes:

* a version folder, holding ``RobloxStudioBeta.exe`` and ``content/``
  directly (what the registry's ``ContentFolder`` points into);
* the ``%LOCALAPPDATA%\\Roblox`` folder, whose ``Versions/`` directory keeps
  one sub-folder per installed version because Studio updates in place.

macOS ships a single application bundle with fixed offsets.
"""

from __future__ import annotations

import os
from enum import StrEnum
from pathlib import Path

from loguru import logger

from roblox_install.errors import NotInstalled
from roblox_install.models.studio import RobloxStudio

WINDOWS_EXECUTABLE = "RobloxStudioBeta.exe"
CONTENT_DIR = "content"
BUILT_IN_PLUGINS_DIR = "BuiltInPlugins"
VERSIONS_DIR = "Versions"


class VersionSelection(StrEnum):
    """How to choose between several folders under ``Versions/``."""

    FIRST = "first"  # directory enumeration order, not guaranteed stable
    NEWEST = "newest"  # most recently modified executable


def from_windows_directory(
    root: Path,
    plugins: Path,
    selection: VersionSelection = VersionSelection.FIRST,
) -> RobloxStudio:
    """Interpret ``root`` as a version folder or a ``Versions`` container."""
    content = root / CONTENT_DIR
    if _is_dir(content):
        logger.debug(f"Found direct installation at {root}")
        return _windows_installation(root, plugins)

    versions = root / VERSIONS_DIR
    if not _is_dir(versions):
        raise NotInstalled()

    try:
        candidates = _installed_versions(versions)
    except OSError as e:
        logger.debug(f"Cannot read versions directory {versions}: {e}")
        raise NotInstalled() from e

    if not candidates:
        raise NotInstalled()

    if selection == VersionSelection.NEWEST and len(candidates) > 1:
        version = max(candidates, key=_version_sort_key)
    else:
        version = candidates[0]
    logger.debug(f"Selected version folder {version.name} ({selection})")
    return _windows_installation(version, plugins)


def from_bundle(root: Path, plugins: Path) -> RobloxStudio:
    """Derive paths from a macOS ``RobloxStudio.app`` bundle."""
    contents = root / "Contents"
    resources = contents / "Resources"
    return RobloxStudio(
        root=root,
        application=contents / "MacOS" / "RobloxStudio",
        content=resources / CONTENT_DIR,
        built_in_plugins=resources / BUILT_IN_PLUGINS_DIR,
        plugins=plugins,
    )


def _windows_installation(root: Path, plugins: Path) -> RobloxStudio:
    return RobloxStudio(
        root=root,
        application=root / WINDOWS_EXECUTABLE,
        content=root / CONTENT_DIR,
        built_in_plugins=root / BUILT_IN_PLUGINS_DIR,
        plugins=plugins,
    )


def _installed_versions(versions: Path) -> list[Path]:
    """Version folders that contain the Studio executable, in scandir order."""
    found: list[Path] = []
    with os.scandir(versions) as entries:
        for entry in entries:
            version = Path(entry.path)
            if _is_file(version / WINDOWS_EXECUTABLE):
                found.append(version)
    return found


def _is_dir(path: Path) -> bool:
    # Path.is_dir() re-raises errors such as EACCES or ENAMETOOLONG
    try:
        return path.is_dir()
    except OSError as e:
        logger.debug(f"Cannot inspect {path}: {e}")
        return False


def _is_file(path: Path) -> bool:
    try:
        return path.is_file()
    except OSError as e:
        logger.debug(f"Cannot inspect {path}: {e}")
        return False


def _version_sort_key(version: Path) -> tuple[float, str]:
    try:
        mtime = (version / WINDOWS_EXECUTABLE).stat().st_mtime
    except OSError:
        mtime = 0.0
    return mtime, version.name
