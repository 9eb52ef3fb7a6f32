"""Tests for the run-studio command."""

from __future__ import annotations

import importlib
import json
from pathlib import Path
from unittest.mock import MagicMock

import pytest
from loguru import logger

import roblox_install
from roblox_install import launcher
from roblox_install.config import reset_config
from roblox_install.context import LocatorContext
from roblox_install.errors import NotInstalled
from roblox_install.locators.locator_manager import select_locator
from roblox_install.models.studio import RobloxStudio


@pytest.fixture(autouse=True)
def _isolated(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("ROBLOX_INSTALL_CONFIG_DIR", str(tmp_path / "config"))
    monkeypatch.setattr(launcher, "setup_logger", lambda *args, **kwargs: None)
    reset_config()
    yield
    reset_config()


@pytest.fixture
def studio(tmp_path: Path) -> RobloxStudio:
    return RobloxStudio(
        root=tmp_path,
        application=tmp_path / "RobloxStudioBeta.exe",
        content=tmp_path / "content",
        built_in_plugins=tmp_path / "BuiltInPlugins",
        plugins=tmp_path / "Plugins",
    )


class TestMain:
    def test_launches_without_waiting(
        self, studio: RobloxStudio, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        popen = MagicMock()
        monkeypatch.setattr(launcher, "locate", lambda context: studio)
        monkeypatch.setattr(launcher.subprocess, "Popen", popen)
        assert launcher.main(["Place.rbxl"]) == 0
        popen.assert_called_once_with([str(studio.application_path()), "Place.rbxl"])
        popen.return_value.wait.assert_not_called()

    def test_locate_failure(
        self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
    ) -> None:
        def fail(context):
            raise NotInstalled()

        monkeypatch.setattr(launcher, "locate", fail)
        assert launcher.main(["Place.rbxl"]) == 1
        assert "Failed to locate Roblox Studio: Couldn't find Roblox Studio" in capsys.readouterr().err

    def test_spawn_failure(
        self,
        studio: RobloxStudio,
        monkeypatch: pytest.MonkeyPatch,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        monkeypatch.setattr(launcher, "locate", lambda context: studio)
        monkeypatch.setattr(
            launcher.subprocess, "Popen", MagicMock(side_effect=FileNotFoundError("no exe"))
        )
        assert launcher.main(["Place.rbxl"]) == 1
        assert "Failed to start Roblox Studio: no exe" in capsys.readouterr().err

    def test_print_paths(
        self,
        studio: RobloxStudio,
        monkeypatch: pytest.MonkeyPatch,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        monkeypatch.setattr(launcher, "locate", lambda context: studio)
        assert launcher.main(["--print"]) == 0
        assert str(studio.content_path()) in capsys.readouterr().out

    @pytest.mark.parametrize("argv", [[], ["a.rbxl", "b.rbxl"]])
    def test_usage_errors(self, argv: list[str]) -> None:
        with pytest.raises(SystemExit) as excinfo:
            launcher.main(argv)
        assert excinfo.value.code != 0


class TestLogging:
    def test_library_is_silent_until_launcher_runs(
        self,
        studio: RobloxStudio,
        context: LocatorContext,
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        messages: list[str] = []
        sink_id = logger.add(messages.append, level="DEBUG")
        try:
            importlib.reload(roblox_install)
            select_locator(context, "FreeBSD")
            assert messages == []

            monkeypatch.setattr(launcher, "locate", lambda context: studio)
            assert launcher.main(["--print"]) == 0
            select_locator(context, "FreeBSD")
            assert any("unsupported locator" in message for message in messages)
        finally:
            logger.remove(sink_id)
            logger.disable("roblox_install")

    def test_unknown_log_level_falls_back_to_info(
        self, studio: RobloxStudio, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        config_dir = tmp_path / "config"
        config_dir.mkdir()
        (config_dir / "config.json").write_text(json.dumps({"log_level": "loud"}), encoding="utf-8")
        setup = MagicMock()
        monkeypatch.setattr(launcher, "setup_logger", setup)
        monkeypatch.setattr(launcher, "locate", lambda context: studio)
        assert launcher.main(["--print"]) == 0
        setup.assert_called_once_with(None, "INFO")

    def test_known_log_level_is_kept(
        self, studio: RobloxStudio, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        config_dir = tmp_path / "config"
        config_dir.mkdir()
        (config_dir / "config.json").write_text(json.dumps({"log_level": "debug"}), encoding="utf-8")
        setup = MagicMock()
        monkeypatch.setattr(launcher, "setup_logger", setup)
        monkeypatch.setattr(launcher, "locate", lambda context: studio)
        assert launcher.main(["--print"]) == 0
        setup.assert_called_once_with(None, "DEBUG")
