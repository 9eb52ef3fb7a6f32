"""Locator base class — one implementation per host platform.

WindowsLocator      → registry lookup
MacOSLocator        → fixed application bundle
WSLLocator          → Windows install reached from inside WSL
UnsupportedLocator  → everything else
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from roblox_install.context import LocatorContext
    from roblox_install.models.studio import RobloxStudio


class InstallationLocator(ABC):
    """
    Abstract base for platform-native Studio discovery.

    Responsibilities:
      • Find the installation without any user configuration
      • Interpret a user-supplied directory using this platform's layout
    """

    def __init__(self, context: LocatorContext) -> None:
        self.context = context

    @property
    @abstractmethod
    def name(self) -> str:
        """Identifier for logs (e.g. 'windows', 'wsl')."""
        ...

    @abstractmethod
    def locate(self) -> RobloxStudio:
        """Find the installation using the platform's own conventions."""
        ...

    @abstractmethod
    def locate_from_directory(self, root: Path) -> RobloxStudio:
        """Build an installation from an explicitly given directory."""
        ...
