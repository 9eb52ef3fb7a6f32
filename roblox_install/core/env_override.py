"""Explicit installation override through ``ROBLOX_STUDIO_PATH``."""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from typing import TYPE_CHECKING

from loguru import logger

from roblox_install.config import ROBLOX_STUDIO_PATH_VARIABLE
from roblox_install.errors import EnvironmentVariableError

if TYPE_CHECKING:
    from roblox_install.locators.base import InstallationLocator
    from roblox_install.models.studio import RobloxStudio


def locate_from_env(
    locator: InstallationLocator, environ: Mapping[str, str]
) -> RobloxStudio | None:
    """
    Resolve the installation named by the override variable.

    Returns None when the variable is unset. When it is set, the result of
    interpreting the directory is returned and any failure is raised; there
    is no fallback to native discovery.
    """
    value = environ.get(ROBLOX_STUDIO_PATH_VARIABLE)
    if value is None:
        return None

    root = _parse_path(value)
    logger.debug(f"Using {ROBLOX_STUDIO_PATH_VARIABLE}={root}")
    return locator.locate_from_directory(root)


def _parse_path(value: str) -> Path:
    reason = None
    if not value.strip():
        reason = "value is empty"
    elif "\0" in value:
        reason = "embedded null byte"

    if reason is None:
        try:
            return Path(value).expanduser()
        except (RuntimeError, ValueError) as e:
            reason = str(e)

    raise EnvironmentVariableError(
        f"could not convert environment variable `{ROBLOX_STUDIO_PATH_VARIABLE}` "
        f"to path ({reason})"
    )
