"""macOS locator — Studio lives in a fixed application bundle."""

from __future__ import annotations

from pathlib import Path

from roblox_install.core.directory import from_bundle
from roblox_install.errors import DocumentsDirectoryNotFound
from roblox_install.locators.base import InstallationLocator
from roblox_install.models.studio import RobloxStudio

APPLICATION_BUNDLE = Path("/Applications") / "RobloxStudio.app"


class MacOSLocator(InstallationLocator):
    @property
    def name(self) -> str:
        return "macos"

    def locate(self) -> RobloxStudio:
        return self.locate_from_directory(APPLICATION_BUNDLE)

    def locate_from_directory(self, root: Path) -> RobloxStudio:
        documents = self.context.documents_dir()
        if documents is None:
            raise DocumentsDirectoryNotFound()
        return from_bundle(root, documents / "Roblox" / "Plugins")
