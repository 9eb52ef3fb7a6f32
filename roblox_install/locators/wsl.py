"""WSL locator — reach the Windows-side install through ``/mnt/c``.

Detection is best-effort: the kernel release string is checked for the
markers Microsoft's WSL kernels carry, and the Windows user name is asked
from ``cmd.exe``. Any probe failure is logged and reported as
:class:`WSLDetectionError`, which is a :class:`PlatformNotSupported`.
An explicit override only needs the kernel check; without a Windows user
name its plugins folder falls back to the Linux home.
"""

from __future__ import annotations

import subprocess
from pathlib import Path

from loguru import logger

from roblox_install.core.directory import from_windows_directory
from roblox_install.errors import (
    PlatformNotSupported,
    PluginsDirectoryNotFound,
    WSLDetectionError,
)
from roblox_install.locators.base import InstallationLocator
from roblox_install.locators.windows import windows_plugins_dir
from roblox_install.models.studio import RobloxStudio

WINDOWS_USERS_DIR = Path("/mnt/c/Users")
KERNEL_RELEASE_COMMAND = ["uname", "-r"]
WINDOWS_USERNAME_COMMAND = ["cmd.exe", "/C", "echo %USERNAME%"]
WSL_MARKERS = ("microsoft", "wsl")

_PROBE_ERRORS = (OSError, subprocess.SubprocessError, UnicodeDecodeError)


class WSLLocator(InstallationLocator):
    @property
    def name(self) -> str:
        return "wsl"

    def locate(self) -> RobloxStudio:
        self._require_wsl()
        profile = self._windows_profile()
        root = profile / "AppData" / "Local" / "Roblox"
        return from_windows_directory(
            root, windows_plugins_dir(profile), self.context.version_selection
        )

    def locate_from_directory(self, root: Path) -> RobloxStudio:
        self._require_wsl()
        return from_windows_directory(
            root, self._override_plugins_dir(), self.context.version_selection
        )

    # ── Probes ──

    def is_wsl(self) -> bool:
        """True when the kernel release names WSL. Raises WSLDetectionError if the probe fails."""
        try:
            release = self.context.command_runner.run(KERNEL_RELEASE_COMMAND)
        except _PROBE_ERRORS as e:
            logger.debug(f"WSL probe {' '.join(KERNEL_RELEASE_COMMAND)} failed: {e}")
            raise WSLDetectionError() from e
        release = release.lower()
        return any(marker in release for marker in WSL_MARKERS)

    def windows_username(self) -> str:
        try:
            output = self.context.command_runner.run(WINDOWS_USERNAME_COMMAND)
        except _PROBE_ERRORS as e:
            logger.debug(f"Windows user name probe failed: {e}")
            raise WSLDetectionError() from e
        username = output.strip()
        # cmd.exe echoes the literal text when the variable is undefined
        if not username or username == "%USERNAME%" or "/" in username or "\\" in username:
            logger.debug(f"Unusable Windows user name from cmd.exe: {output!r}")
            raise WSLDetectionError()
        return username

    def _require_wsl(self) -> None:
        if not self.is_wsl():
            logger.debug("Kernel release has no WSL marker")
            raise PlatformNotSupported()

    def _windows_profile(self) -> Path:
        return WINDOWS_USERS_DIR / self.windows_username()

    def _override_plugins_dir(self) -> Path:
        """Windows profile plugins, or the Linux home when cmd.exe is unavailable."""
        try:
            return windows_plugins_dir(self._windows_profile())
        except WSLDetectionError:
            home = self.context.home_dir()
            if home is None:
                raise PluginsDirectoryNotFound() from None
            logger.debug(f"Windows user name unknown, using plugins under {home}")
            return windows_plugins_dir(home)
