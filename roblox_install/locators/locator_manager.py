"""Runtime selection of the locator for the host operating system."""

from __future__ import annotations

import platform

from loguru import logger

from roblox_install.context import LocatorContext
from roblox_install.locators.base import InstallationLocator
from roblox_install.locators.macos import MacOSLocator
from roblox_install.locators.unsupported import UnsupportedLocator
from roblox_install.locators.windows import WindowsLocator
from roblox_install.locators.wsl import WSLLocator

# Keyed by platform.system(); plain Linux gets the WSL locator, which
# reports PlatformNotSupported when the kernel is not a WSL one.
LOCATORS: dict[str, type[InstallationLocator]] = {
    "Windows": WindowsLocator,
    "Darwin": MacOSLocator,
    "Linux": WSLLocator,
}


def select_locator(
    context: LocatorContext, system: str | None = None
) -> InstallationLocator:
    """Instantiate the locator for ``system`` (defaults to the running OS)."""
    system = system or platform.system()
    cls = LOCATORS.get(system, UnsupportedLocator)
    locator = cls(context)
    logger.debug(f"Using {locator.name} locator for platform '{system}'")
    return locator
