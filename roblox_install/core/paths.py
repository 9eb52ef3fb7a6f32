"""User directory lookup — home and Documents folders."""

from __future__ import annotations

import platform
from pathlib import Path

from loguru import logger


def home_dir() -> Path | None:
    """Return the current user's home directory, or None if it cannot be determined."""
    try:
        return Path.home()
    except (RuntimeError, KeyError) as e:
        logger.debug(f"Home directory lookup failed: {e}")
        return None


def documents_dir() -> Path | None:
    """Get the real Documents path (handles relocated folders on Windows)."""
    if platform.system() == "Windows":
        try:
            import ctypes.wintypes

            buf = ctypes.create_unicode_buffer(ctypes.wintypes.MAX_PATH)
            # CSIDL_PERSONAL = 0x0005
            ctypes.windll.shell32.SHGetFolderPathW(None, 0x0005, None, 0, buf)  # type: ignore[attr-defined]
            if buf.value:
                return Path(buf.value)
        except (ImportError, AttributeError, OSError) as e:
            logger.debug(f"Known-folder lookup for Documents failed: {e}")
    home = home_dir()
    if home is None:
        return None
    return home / "Documents"
