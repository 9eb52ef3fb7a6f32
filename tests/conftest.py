"""Shared fixtures: fake probes and on-disk Studio layouts."""

from __future__ import annotations

from pathlib import Path

import pytest

from roblox_install.context import LocatorContext


class FakeRunner:
    """CommandRunner returning canned output per command line."""

    def __init__(self, outputs: dict[tuple[str, ...], str | BaseException] | None = None) -> None:
        self.outputs = outputs or {}
        self.calls: list[list[str]] = []

    def run(self, args: list[str]) -> str:
        self.calls.append(list(args))
        result = self.outputs.get(tuple(args))
        if result is None:
            raise FileNotFoundError(args[0])
        if isinstance(result, BaseException):
            raise result
        return result


def missing_registry(key_path: str, value_name: str) -> str:
    raise FileNotFoundError(2, "The system cannot find the file specified")


def make_version(folder: Path, with_content: bool = True) -> Path:
    """Create a Windows version folder containing the executable."""
    folder.mkdir(parents=True, exist_ok=True)
    (folder / "RobloxStudioBeta.exe").write_bytes(b"MZ")
    if with_content:
        (folder / "content").mkdir(exist_ok=True)
    return folder


@pytest.fixture
def home(tmp_path: Path) -> Path:
    path = tmp_path / "home"
    path.mkdir()
    return path


@pytest.fixture
def context(home: Path) -> LocatorContext:
    return LocatorContext(
        environ={},
        command_runner=FakeRunner(),
        registry_reader=missing_registry,
        home_dir=lambda: home,
        documents_dir=lambda: home / "Documents",
    )
