"""Launcher configuration — JSON-based, read-only, merged over defaults."""

from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any

from loguru import logger

ROBLOX_STUDIO_PATH_VARIABLE = "ROBLOX_STUDIO_PATH"
CONFIG_DIR_VARIABLE = "ROBLOX_INSTALL_CONFIG_DIR"

_instance: "Config | None" = None


def _default_config_dir() -> Path:
    override = os.environ.get(CONFIG_DIR_VARIABLE)
    if override:
        return Path(override).expanduser()
    return Path.home() / ".roblox-install"


def get_config() -> Config:
    """Module-level factory — single global Config instance."""
    global _instance
    if _instance is None:
        _instance = Config()
    return _instance


def reset_config() -> None:
    """Reset the global config instance (for testing)."""
    global _instance
    _instance = None


class Config:
    """JSON configuration. Never written by the library, only read."""

    _DEFAULTS: dict[str, Any] = {
        "log_level": "INFO",
        "log_dir": "",
        "version_selection": "first",
    }

    def __init__(self, config_dir: Path | None = None) -> None:
        self._data: dict[str, Any] = {}
        self._dir = config_dir or _default_config_dir()
        self._path = self._dir / "config.json"
        self._load()

    def _load(self) -> None:
        """Load config from disk, merging with defaults."""
        self._data = json.loads(json.dumps(self._DEFAULTS))  # deep copy defaults
        if not self._path.exists():
            return
        try:
            with open(self._path, encoding="utf-8") as f:
                user_data = json.load(f)
        except (json.JSONDecodeError, OSError) as e:
            logger.warning(f"Failed to load config, using defaults: {e}")
            return
        if not isinstance(user_data, dict):
            logger.warning(f"Ignoring config {self._path}: top level is not an object")
            return
        self._deep_merge(self._data, user_data)

    def _deep_merge(self, base: dict, override: dict) -> None:
        """Recursively merge override into base."""
        for key, value in override.items():
            if key in base and isinstance(base[key], dict) and isinstance(value, dict):
                self._deep_merge(base[key], value)
            else:
                base[key] = value

    # ── Generic access ──

    def get(self, key: str, default: Any = None) -> Any:
        """Get a config value by dot-separated key path."""
        parts = key.split(".")
        node = self._data
        for part in parts:
            if isinstance(node, dict) and part in node:
                node = node[part]
            else:
                return default
        return node

    # ── Typed properties ──

    @property
    def config_dir(self) -> Path:
        return self._dir

    @property
    def path(self) -> Path:
        return self._path

    @property
    def log_level(self) -> str:
        return str(self._data.get("log_level", "INFO")).upper()

    @property
    def log_dir(self) -> Path | None:
        raw = self._data.get("log_dir", "")
        return Path(raw).expanduser() if raw else None

    @property
    def version_selection(self) -> str:
        return str(self._data.get("version_selection", "first")).lower()
