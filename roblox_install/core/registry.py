"""Windows registry access for the current user hive."""

from __future__ import annotations

from typing import Callable

RegistryReader = Callable[[str, str], str]


def read_current_user_value(key_path: str, value_name: str) -> str:
    """Read a string value from ``HKEY_CURRENT_USER\\<key_path>``.

    Raises ``OSError`` when the key or value is missing, or when the registry
    is not available on this platform.
    """
    try:
        import winreg
    except ImportError as e:
        raise OSError(f"Windows registry is not available: {e}") from e

    with winreg.OpenKey(winreg.HKEY_CURRENT_USER, key_path) as key:
        value, value_type = winreg.QueryValueEx(key, value_name)
    if value_type not in (winreg.REG_SZ, winreg.REG_EXPAND_SZ):
        raise OSError(f"Registry value '{value_name}' is not a string")
    return value
