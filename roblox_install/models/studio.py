"""Roblox Studio installation model."""

from __future__ import annotations

import warnings
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from roblox_install.context import LocatorContext
    from roblox_install.locators.base import InstallationLocator


@dataclass(frozen=True)
class RobloxStudio:
    """
    A resolved Roblox Studio installation.

    All paths come from the same root / version folder. ``plugins`` may not
    exist yet: Studio creates it the first time the user opens the
    ``Plugins Folder`` from inside Studio.
    """

    root: Path
    application: Path
    content: Path
    built_in_plugins: Path
    plugins: Path

    @classmethod
    def locate(
        cls,
        context: LocatorContext | None = None,
        locator: InstallationLocator | None = None,
    ) -> RobloxStudio:
        """Find the Roblox Studio installation for this machine."""
        from roblox_install.core.resolver import locate

        return locate(context, locator)

    # ── Accessors ──

    def application_path(self) -> Path:
        """Path to the Roblox Studio executable."""
        return self.application

    def content_path(self) -> Path:
        """Path to the content directory."""
        return self.content

    def built_in_plugins_path(self) -> Path:
        """Path to the built-in plugins directory."""
        return self.built_in_plugins

    def plugins_path(self) -> Path:
        """Path to the user's plugin directory (may not exist yet)."""
        return self.plugins

    # ── Legacy accessors ──

    def root_path(self) -> Path:
        """Deprecated: the root folder differs between platforms."""
        warnings.warn(
            "root_path() is deprecated: the contents of the studio directory are "
            "inconsistent across platforms. Use a dedicated accessor such as "
            "application_path().",
            DeprecationWarning,
            stacklevel=2,
        )
        return self.root

    def exe_path(self) -> Path:
        """Deprecated alias of :meth:`application_path`."""
        warnings.warn(
            "exe_path() is deprecated, use application_path() instead.",
            DeprecationWarning,
            stacklevel=2,
        )
        return self.application_path()
