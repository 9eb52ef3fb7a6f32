"""Locator context — the capabilities a resolution depends on."""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING, Callable

from loguru import logger

from roblox_install.core.commands import CommandRunner, SubprocessRunner
from roblox_install.core.directory import VersionSelection
from roblox_install.core import paths
from roblox_install.core.registry import RegistryReader, read_current_user_value

if TYPE_CHECKING:
    from roblox_install.config import Config


@dataclass
class LocatorContext:
    """
    Everything a locator reads from the outside world.

    Tests build one with fake runners, registry readers and directories;
    production code uses :meth:`default`.
    """

    environ: Mapping[str, str] = field(default_factory=lambda: os.environ)
    command_runner: CommandRunner = field(default_factory=SubprocessRunner)
    registry_reader: RegistryReader = read_current_user_value
    home_dir: Callable[[], Path | None] = paths.home_dir
    documents_dir: Callable[[], Path | None] = paths.documents_dir
    version_selection: VersionSelection = VersionSelection.FIRST

    @classmethod
    def default(cls, config: Config | None = None) -> LocatorContext:
        """Context wired to the real environment, honouring ``config``."""
        if config is None:
            return cls()
        try:
            selection = VersionSelection(config.version_selection)
        except ValueError:
            logger.warning(
                f"Unknown version_selection '{config.version_selection}', using 'first'"
            )
            selection = VersionSelection.FIRST
        return cls(version_selection=selection)
