"""Command-line launcher — open a place file in Roblox Studio.

Usage:
    run-studio <place.(rbxl|rbxlx)>
    run-studio --print

Studio is started in the background; the launcher does not wait for it.
"""

from __future__ import annotations

import argparse
import subprocess
import sys

from loguru import logger

from roblox_install.config import get_config
from roblox_install.context import LocatorContext
from roblox_install.core.resolver import locate
from roblox_install.errors import RobloxInstallError
from roblox_install.logger import setup_logger
from roblox_install.models.studio import RobloxStudio


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="run-studio",
        description="Open a Roblox place file with the installed Roblox Studio.",
    )
    parser.add_argument(
        "place_file",
        nargs="?",
        help="Path to the place file (.rbxl or .rbxlx)",
    )
    parser.add_argument(
        "--print",
        dest="print_paths",
        action="store_true",
        help="Print the resolved installation paths instead of launching",
    )
    return parser


def print_installation(studio: RobloxStudio) -> None:
    print(f"application:      {studio.application_path()}")
    print(f"content:          {studio.content_path()}")
    print(f"built-in plugins: {studio.built_in_plugins_path()}")
    print(f"plugins:          {studio.plugins_path()}")


def launch(studio: RobloxStudio, place_file: str) -> subprocess.Popen:
    """Start Studio with ``place_file`` and return without waiting."""
    logger.debug(f"Launching {studio.application_path()} {place_file}")
    return subprocess.Popen([str(studio.application_path()), place_file])  # noqa: S603


def _log_level(name: str) -> str:
    try:
        logger.level(name)
    except ValueError:
        logger.warning(f"Unknown log_level '{name}', using 'INFO'")
        return "INFO"
    return name


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if not args.print_paths and args.place_file is None:
        parser.error("a place file is required")

    config = get_config()
    logger.enable("roblox_install")
    setup_logger(config.log_dir, _log_level(config.log_level))

    try:
        studio = locate(LocatorContext.default(config))
    except RobloxInstallError as e:
        print(f"Failed to locate Roblox Studio: {e}", file=sys.stderr)
        return 1

    if args.print_paths:
        print_installation(studio)
        return 0

    try:
        launch(studio, args.place_file)
    except OSError as e:
        print(f"Failed to start Roblox Studio: {e}", file=sys.stderr)
        return 1
    return 0
