"""Top-level resolution: explicit override first, then native discovery."""

from __future__ import annotations

from loguru import logger

from roblox_install.context import LocatorContext
from roblox_install.core.env_override import locate_from_env
from roblox_install.locators.base import InstallationLocator
from roblox_install.locators.locator_manager import select_locator
from roblox_install.models.studio import RobloxStudio


def locate(
    context: LocatorContext | None = None,
    locator: InstallationLocator | None = None,
) -> RobloxStudio:
    """
    Find the Roblox Studio installation.

    ``ROBLOX_STUDIO_PATH`` is consulted first. It may point at a specific
    version folder (holding the executable and ``content``) or at a folder
    with a ``Versions`` directory, in which case an installed version is
    picked from it. If the variable is set, its result or its error is final.
    Otherwise the platform's own discovery runs.
    """
    context = context or LocatorContext.default()
    locator = locator or select_locator(context)

    studio = locate_from_env(locator, context.environ)
    if studio is None:
        logger.debug(f"No override set, running {locator.name} discovery")
        studio = locator.locate()

    logger.info(f"Found Roblox Studio at {studio.application_path()}")
    return studio
