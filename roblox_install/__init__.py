"""Locate a Roblox Studio installation and its well-known paths."""

from __future__ import annotations

from loguru import logger

from roblox_install.config import ROBLOX_STUDIO_PATH_VARIABLE
from roblox_install.context import LocatorContext
from roblox_install.core.directory import VersionSelection
from roblox_install.core.resolver import locate
from roblox_install.errors import (
    DocumentsDirectoryNotFound,
    EnvironmentVariableError,
    MalformedRegistry,
    NotInstalled,
    PlatformNotSupported,
    PluginsDirectoryNotFound,
    RegistryError,
    RobloxInstallError,
    WSLDetectionError,
)
from roblox_install.models.studio import RobloxStudio

# Silent as a library; the run-studio launcher enables it
logger.disable("roblox_install")

__version__ = "0.3.0"

__all__ = [
    "ROBLOX_STUDIO_PATH_VARIABLE",
    "DocumentsDirectoryNotFound",
    "EnvironmentVariableError",
    "LocatorContext",
    "MalformedRegistry",
    "NotInstalled",
    "PlatformNotSupported",
    "PluginsDirectoryNotFound",
    "RegistryError",
    "RobloxInstallError",
    "RobloxStudio",
    "VersionSelection",
    "WSLDetectionError",
    "locate",
]
