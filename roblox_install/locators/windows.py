"""Windows locator — reads the Studio content folder from the registry."""

from __future__ import annotations

from pathlib import Path

from loguru import logger

from roblox_install.core.directory import (
    BUILT_IN_PLUGINS_DIR,
    WINDOWS_EXECUTABLE,
    from_windows_directory,
)
from roblox_install.errors import MalformedRegistry, PluginsDirectoryNotFound, RegistryError
from roblox_install.locators.base import InstallationLocator
from roblox_install.models.studio import RobloxStudio

REGISTRY_KEY = r"Software\Roblox\RobloxStudio"
CONTENT_FOLDER_VALUE = "ContentFolder"


def windows_plugins_dir(profile: Path) -> Path:
    """User plugin folder inside a Windows profile directory."""
    return profile / "AppData" / "Local" / "Roblox" / "Plugins"


class WindowsLocator(InstallationLocator):
    @property
    def name(self) -> str:
        return "windows"

    def locate(self) -> RobloxStudio:
        try:
            content_value = self.context.registry_reader(REGISTRY_KEY, CONTENT_FOLDER_VALUE)
        except OSError as e:
            logger.debug(f"Registry lookup HKCU\\{REGISTRY_KEY} failed: {e}")
            raise RegistryError(e) from e

        content = Path(content_value)
        root = content.parent
        if not content_value.strip() or root == content:
            raise MalformedRegistry()

        plugins = self._plugins_dir()
        return RobloxStudio(
            root=root,
            application=root / WINDOWS_EXECUTABLE,
            content=content,
            built_in_plugins=root / BUILT_IN_PLUGINS_DIR,
            plugins=plugins,
        )

    def locate_from_directory(self, root: Path) -> RobloxStudio:
        return from_windows_directory(
            root, self._plugins_dir(), self.context.version_selection
        )

    def _plugins_dir(self) -> Path:
        home = self.context.home_dir()
        if home is None:
            raise PluginsDirectoryNotFound()
        return windows_plugins_dir(home)
