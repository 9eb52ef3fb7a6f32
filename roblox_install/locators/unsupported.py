"""Fallback for platforms without a known Studio layout."""

from __future__ import annotations

from pathlib import Path

from roblox_install.errors import PlatformNotSupported
from roblox_install.locators.base import InstallationLocator
from roblox_install.models.studio import RobloxStudio


class UnsupportedLocator(InstallationLocator):
    @property
    def name(self) -> str:
        return "unsupported"

    def locate(self) -> RobloxStudio:
        raise PlatformNotSupported()

    def locate_from_directory(self, root: Path) -> RobloxStudio:
        raise PlatformNotSupported()
