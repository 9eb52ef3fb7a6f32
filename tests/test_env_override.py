"""Tests for the ROBLOX_STUDIO_PATH override."""

from __future__ import annotations

from pathlib import Path

import pytest

from roblox_install.context import LocatorContext
from roblox_install.core.env_override import locate_from_env
from roblox_install.errors import EnvironmentVariableError, NotInstalled
from roblox_install.locators.windows import WindowsLocator

from conftest import make_version


@pytest.fixture
def locator(context: LocatorContext) -> WindowsLocator:
    return WindowsLocator(context)


class TestLocateFromEnv:
    def test_unset_means_no_override(self, locator: WindowsLocator) -> None:
        assert locate_from_env(locator, {}) is None

    def test_direct_installation(self, locator: WindowsLocator, tmp_path: Path) -> None:
        root = make_version(tmp_path / "fakestudio")
        studio = locate_from_env(locator, {"ROBLOX_STUDIO_PATH": str(root)})
        assert studio is not None
        assert studio.application_path() == root / "RobloxStudioBeta.exe"

    def test_failure_is_raised(self, locator: WindowsLocator, tmp_path: Path) -> None:
        with pytest.raises(NotInstalled):
            locate_from_env(locator, {"ROBLOX_STUDIO_PATH": str(tmp_path / "missing")})

    @pytest.mark.parametrize("value", ["", "   ", "C:\\Roblox\0Studio"])
    def test_unparsable_value(self, locator: WindowsLocator, value: str) -> None:
        with pytest.raises(EnvironmentVariableError) as excinfo:
            locate_from_env(locator, {"ROBLOX_STUDIO_PATH": value})
        assert "ROBLOX_STUDIO_PATH" in str(excinfo.value)
        assert str(excinfo.value).startswith("Environment variable misconfigured:")
